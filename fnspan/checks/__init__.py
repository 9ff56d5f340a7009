"""Check protocol — what to flag."""

from typing import Protocol

from fnspan.models import FileResult, StaleEntry


class Check(Protocol):
    """A code-quality check run independently over each source file."""

    name: str
    max_lines: int
    preferred_lines: int

    def inspect(self, path: str, source: str) -> FileResult:
        """Inspect one file and report what it found there."""
        ...

    def stale_entries(self, sources: list[tuple[str, str]]) -> list[StaleEntry]:
        """Allow-list entries that no longer match anything in `sources`."""
        ...
