from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class FunctionSpan:
    """A function-like definition located by its first and last line."""
    name: str
    start_line: int
    end_line: int
    line_count: int


@dataclass
class OpenContext:
    """A matched signature whose closing brace has not been seen yet."""
    name: str
    start_line: int
    open_brace_depth: int | None = None


class LexicalMode(Enum):
    PLAIN = "plain"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    TEMPLATE = "template"


@dataclass
class ScanState:
    """Everything the character scanner carries from one character to the next."""
    depth: int = 0
    mode: LexicalMode = LexicalMode.PLAIN
    skip_next: bool = False
    stack: list[OpenContext] = field(default_factory=list)
    spans: list[FunctionSpan] = field(default_factory=list)


@dataclass(frozen=True)
class FunctionLength:
    """A span together with the lines that belong to it and not to nested functions."""
    span: FunctionSpan
    own_lines: int

    @property
    def name(self) -> str:
        return self.span.name


@dataclass
class Violation:
    """A function longer than the configured limit."""
    file: str
    name: str
    start_line: int
    line_count: int
    allowed: bool = False

    @property
    def location(self) -> str:
        return f"{self.file}:{self.start_line}"


@dataclass
class StaleEntry:
    """An allow-list entry that no longer refers to anything."""
    entry: str
    reason: str


@dataclass
class FileResult:
    """Outcome of checking a single file."""
    file: str
    functions: int
    violations: list[Violation] = field(default_factory=list)


@dataclass
class CheckResult:
    """Complete result of a function-length run."""
    check: str
    max_lines: int
    preferred_lines: int
    files_scanned: int = 0
    functions_scanned: int = 0
    violations: list[Violation] = field(default_factory=list)
    allowed: list[Violation] = field(default_factory=list)
    stale: list[StaleEntry] = field(default_factory=list)
    files: list[FileResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations and not self.stale
