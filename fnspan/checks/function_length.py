"""Check: does any function grow past the line limit?"""

from dataclasses import dataclass, field

from fnspan.languages import Language
from fnspan.models import (
    FileResult,
    FunctionLength,
    FunctionSpan,
    StaleEntry,
    Violation,
)

DEFAULT_MAX_LINES = 30
DEFAULT_PREFERRED_LINES = 20


@dataclass
class FunctionLengthConfig:
    """Thresholds and exceptions for the function-length check."""
    max_lines: int = DEFAULT_MAX_LINES
    preferred_lines: int = DEFAULT_PREFERRED_LINES
    ignored_functions: frozenset[str] = field(default_factory=frozenset)


def measure_own_lines(spans: list[FunctionSpan]) -> list[FunctionLength]:
    """Subtract the lines of strictly nested functions from each span.

    A callback defined inside a long function is measured on its own and
    does not count against the function that contains it.
    """
    measured = []
    for span in spans:
        nested = sum(
            other.line_count
            for other in spans
            if other is not span
            and other.start_line > span.start_line
            and other.end_line < span.end_line
        )
        measured.append(FunctionLength(span=span, own_lines=span.line_count - nested))
    return measured


class FunctionLengthCheck:
    """Flag functions whose own body exceeds `max_lines`."""

    name = "function-length"

    def __init__(self, language: Language, config: FunctionLengthConfig | None = None):
        config = config or FunctionLengthConfig()
        if config.max_lines < 1:
            raise ValueError(f"max_lines must be positive, got {config.max_lines}.")
        if not 0 < config.preferred_lines <= config.max_lines:
            raise ValueError(
                f"preferred_lines must be between 1 and max_lines ({config.max_lines}),"
                f" got {config.preferred_lines}."
            )
        self._language = language
        self._config = config

    @property
    def max_lines(self) -> int:
        return self._config.max_lines

    @property
    def preferred_lines(self) -> int:
        return self._config.preferred_lines

    def measure(self, source: str) -> list[FunctionLength]:
        return measure_own_lines(self._language.extract_functions(source))

    def inspect(self, path: str, source: str) -> FileResult:
        """Measure every function in a file and collect the ones over the limit.

        Functions named in the allow-list are still reported, flagged as
        allowed, so callers can show what is being excused.
        """
        measured = self.measure(source)
        violations = [
            Violation(
                file=path,
                name=fn.name,
                start_line=fn.span.start_line,
                line_count=fn.own_lines,
                allowed=fn.name in self._config.ignored_functions,
            )
            for fn in measured
            if fn.own_lines > self._config.max_lines
        ]
        return FileResult(file=path, functions=len(measured), violations=violations)

    def stale_entries(self, sources: list[tuple[str, str]]) -> list[StaleEntry]:
        return find_stale_allowlist(
            self._language, self._config.ignored_functions, sources,
        )


def find_stale_allowlist(
    language: Language,
    ignored_functions: frozenset[str],
    sources: list[tuple[str, str]],
) -> list[StaleEntry]:
    """Return allow-listed function names that no source file defines."""
    combined = "\n".join(text for _, text in sources)
    return [
        StaleEntry(entry=name, reason="Function is not defined in any file")
        for name in sorted(ignored_functions)
        if not language.defines_function(name, combined)
    ]
