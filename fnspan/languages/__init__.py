"""Language protocol — all language-specific behavior in one place."""

from typing import Protocol

from fnspan.models import FunctionSpan


class Language(Protocol):
    """Everything a check needs to know about a programming language.

    Implement this to add support for a new language.
    """

    name: str
    suffixes: list[str]
    ignore_dirs: set[str]
    ignore_prefixes: tuple[str, ...]

    def extract_functions(self, source: str) -> list[FunctionSpan]:
        """Locate function definitions in source code.
        Used by the function-length check."""
        ...

    def defines_function(self, name: str, source: str) -> bool:
        """Whether `name` is defined in source code.
        Used to find stale allow-list entries."""
        ...
