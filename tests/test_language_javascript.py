"""Tests for the JavaScript language plugin."""

from fnspan.languages.javascript import JavaScriptLanguage


class TestJavaScriptLanguage:
    def setup_method(self):
        self.lang = JavaScriptLanguage()

    def test_name(self):
        assert self.lang.name == "javascript"

    def test_suffixes(self):
        assert ".js" in self.lang.suffixes
        assert ".mjs" in self.lang.suffixes

    def test_ignore_dirs(self):
        assert "node_modules" in self.lang.ignore_dirs
        assert "_site" in self.lang.ignore_dirs

    def test_ignore_prefixes(self):
        assert ".cache".startswith(self.lang.ignore_prefixes)
        assert "temp-build".startswith(self.lang.ignore_prefixes)

    def test_extract_functions(self):
        source = "function foo() {\n  return 1;\n}\nconst bar = () => {\n  return 2;\n};\n"
        funcs = self.lang.extract_functions(source)
        names = [f.name for f in funcs]
        assert names == ["foo", "bar"]

    def test_defines_function(self):
        source = "export const helper = (x) => x;\nfunction build() {}\n"
        assert self.lang.defines_function("helper", source)
        assert self.lang.defines_function("build", source)
        assert not self.lang.defines_function("missing", source)
