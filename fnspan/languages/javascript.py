"""JavaScript language plugin."""

from fnspan.models import FunctionSpan
from fnspan.parsers.javascript import JavaScriptParser, is_function_defined


class JavaScriptLanguage:
    """JavaScript support for all checks."""

    name = "javascript"
    suffixes = [".js", ".mjs", ".cjs", ".jsx"]
    # Build output, dependencies and version control
    ignore_dirs = {"node_modules", ".git", "_site", ".test-sites", "result"}
    ignore_prefixes = (".", "temp-")

    def __init__(self):
        self._parser = JavaScriptParser()

    def extract_functions(self, source: str) -> list[FunctionSpan]:
        return self._parser.extract_functions(source)

    def defines_function(self, name: str, source: str) -> bool:
        return is_function_defined(name, source)
