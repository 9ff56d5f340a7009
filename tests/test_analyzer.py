from fnspan.analyzer import analyze
from fnspan.checks.function_length import FunctionLengthCheck, FunctionLengthConfig
from fnspan.languages.javascript import JavaScriptLanguage
from fnspan.models import FileResult, StaleEntry, Violation


class FakeCheck:
    """Check that flags a pre-defined number of lines per file."""

    name = "fake-check"
    max_lines = 10
    preferred_lines = 5

    def __init__(self, lengths: dict[str, list[int]], stale: list[StaleEntry] | None = None):
        self._lengths = lengths
        self._stale = stale or []
        self.inspected: list[str] = []

    def inspect(self, path: str, source: str) -> FileResult:
        self.inspected.append(path)
        violations = [
            Violation(file=path, name=f"fn{i}", start_line=i + 1, line_count=n)
            for i, n in enumerate(self._lengths[path])
        ]
        return FileResult(file=path, functions=len(violations) + 1, violations=violations)

    def stale_entries(self, sources: list[tuple[str, str]]) -> list[StaleEntry]:
        return self._stale


def make_function(name: str, body_lines: int) -> str:
    return "\n".join([f"function {name}() {{", *["  doWork();"] * body_lines, "}"])


class TestAnalyze:
    def test_inspects_every_file(self):
        check = FakeCheck({"a.js": [], "b.js": [12]})
        analyze(check, [("a.js", ""), ("b.js", "")], workers=2)
        assert sorted(check.inspected) == ["a.js", "b.js"]

    def test_files_keep_input_order(self):
        paths = [f"f{i}.js" for i in range(8)]
        check = FakeCheck({p: [] for p in paths})
        result = analyze(check, [(p, "") for p in paths], workers=4)
        assert [f.file for f in result.files] == paths

    def test_violations_sorted_longest_first(self):
        check = FakeCheck({"a.js": [12, 40], "b.js": [25]})
        result = analyze(check, [("a.js", ""), ("b.js", "")])
        assert [v.line_count for v in result.violations] == [40, 25, 12]

    def test_counts(self):
        check = FakeCheck({"a.js": [12, 40], "b.js": []})
        result = analyze(check, [("a.js", ""), ("b.js", "")])
        assert result.check == "fake-check"
        assert result.files_scanned == 2
        assert result.functions_scanned == 4
        assert result.max_lines == 10
        assert result.preferred_lines == 5

    def test_passed(self):
        check = FakeCheck({"a.js": []})
        assert analyze(check, [("a.js", "")]).passed

    def test_violations_fail(self):
        check = FakeCheck({"a.js": [11]})
        assert not analyze(check, [("a.js", "")]).passed

    def test_stale_entries_fail(self):
        stale = [StaleEntry(entry="gone", reason="Function is not defined in any file")]
        check = FakeCheck({"a.js": []}, stale=stale)
        result = analyze(check, [("a.js", "")])
        assert result.stale == stale
        assert not result.passed

    def test_callback_called_per_file(self):
        check = FakeCheck({"a.js": [], "b.js": [], "c.js": []})
        calls: list[tuple[str, int, int]] = []

        def on_file(file_result, completed, total):
            calls.append((file_result.file, completed, total))

        analyze(check, [("a.js", ""), ("b.js", ""), ("c.js", "")], on_file=on_file)
        assert sorted(c[0] for c in calls) == ["a.js", "b.js", "c.js"]
        assert sorted(c[1] for c in calls) == [1, 2, 3]
        assert all(c[2] == 3 for c in calls)

    def test_empty_sources(self):
        result = analyze(FakeCheck({}), [])
        assert result.files_scanned == 0
        assert result.passed


class TestAnalyzeFunctionLength:
    def test_allowed_functions_split_out(self):
        config = FunctionLengthConfig(
            max_lines=5, preferred_lines=3, ignored_functions=frozenset({"legacy"}),
        )
        check = FunctionLengthCheck(JavaScriptLanguage(), config)
        sources = [
            ("a.js", make_function("legacy", 10)),
            ("b.js", make_function("fresh", 6) + "\n" + make_function("tiny", 1)),
        ]
        result = analyze(check, sources)
        assert [v.name for v in result.violations] == ["fresh"]
        assert [v.name for v in result.allowed] == ["legacy"]
        assert result.functions_scanned == 3
        assert result.stale == []
        assert not result.passed
