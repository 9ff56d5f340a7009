from typing import Protocol

from fnspan.models import FunctionSpan


class Parser(Protocol):
    """Locates function-like definitions in source code."""

    def extract_functions(self, source: str) -> list[FunctionSpan]:
        """Scan source code and return one span per closed function.

        Spans come back in the order their closing braces were seen, so an
        inner function is listed before the function that contains it.
        Parsers never raise on malformed input; they report fewer spans.
        """
        ...
