"""Brace-counting function locator for JavaScript-like sources.

Lines are matched against a handful of signature patterns; a single pass over
the characters then tracks comments, strings and template literals so that
only braces in plain code move the depth counter.
"""

import re
from enum import Enum
from typing import NamedTuple

from fnspan.models import FunctionSpan, LexicalMode, OpenContext, ScanState

_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"


class MatchKind(Enum):
    NONE = "none"
    DECLARATION = "declaration"
    ARROW_ASSIGNMENT = "arrow_assignment"
    METHOD_SHORTHAND = "method_shorthand"
    OBJECT_METHOD = "object_method"


class LineMatch(NamedTuple):
    kind: MatchKind
    name: str | None = None


NO_MATCH = LineMatch(MatchKind.NONE)

# Tried in order; the first pattern that matches names the function.
_SIGNATURES: list[tuple[MatchKind, re.Pattern[str]]] = [
    (MatchKind.DECLARATION, re.compile(
        rf"^\s*(?:async\s+)?function\s+({_IDENT})\s*\("
    )),
    (MatchKind.ARROW_ASSIGNMENT, re.compile(
        rf"^\s*(?:export\s+)?(?:const|let|var)\s+({_IDENT})\s*=\s*"
        rf"(?:async\s+)?(?:\([^)]*\)|{_IDENT})\s*=>\s*\{{"
    )),
    (MatchKind.METHOD_SHORTHAND, re.compile(
        rf"^\s*(?:async\s+)?(?!function\s)({_IDENT})\s*\([^)]*\)\s*\{{"
    )),
    (MatchKind.OBJECT_METHOD, re.compile(
        rf"^\s*({_IDENT})\s*:\s*(?:async\s+)?(?:function\s*)?\("
    )),
]

# Statements that read like `name(...) {` but never start a method body
_CONTROL_KEYWORDS = frozenset({
    "if", "for", "while", "switch", "catch", "with", "return",
    "function", "do", "else", "try", "finally", "typeof", "await",
})

_QUOTE_MODES = {
    "'": LexicalMode.SINGLE_QUOTE,
    '"': LexicalMode.DOUBLE_QUOTE,
}

_LITERAL_MODES = frozenset({
    LexicalMode.SINGLE_QUOTE,
    LexicalMode.DOUBLE_QUOTE,
    LexicalMode.TEMPLATE,
})


def match_function_start(line: str) -> LineMatch:
    """Decide whether a single line opens a function and return its name."""
    for kind, pattern in _SIGNATURES:
        m = pattern.match(line)
        if not m:
            continue
        name = m.group(1)
        if kind is MatchKind.METHOD_SHORTHAND and name in _CONTROL_KEYWORDS:
            return NO_MATCH
        return LineMatch(kind, name)
    return NO_MATCH


def _open_brace(state: ScanState) -> None:
    state.depth += 1
    for context in state.stack:
        if context.open_brace_depth is None:
            context.open_brace_depth = state.depth


def _close_brace(state: ScanState, line_num: int) -> None:
    """Close the most recently pushed context pinned at the current depth."""
    for index in range(len(state.stack) - 1, -1, -1):
        context = state.stack[index]
        if context.open_brace_depth == state.depth:
            del state.stack[index]
            state.spans.append(FunctionSpan(
                name=context.name,
                start_line=context.start_line,
                end_line=line_num,
                line_count=line_num - context.start_line + 1,
            ))
            break
    state.depth -= 1


def _scan_line(state: ScanState, line: str, line_num: int) -> None:
    if state.mode is LexicalMode.LINE_COMMENT:
        state.mode = LexicalMode.PLAIN

    for index, char in enumerate(line):
        if state.skip_next:
            state.skip_next = False
            continue
        if state.mode is LexicalMode.LINE_COMMENT:
            break

        prev_char = line[index - 1] if index > 0 else ""
        next_char = line[index + 1] if index < len(line) - 1 else ""

        if state.mode not in _LITERAL_MODES:
            in_block = state.mode is LexicalMode.BLOCK_COMMENT
            if char == "/" and next_char == "/" and not in_block:
                state.mode = LexicalMode.LINE_COMMENT
                continue
            if char == "/" and next_char == "*" and not in_block:
                state.mode = LexicalMode.BLOCK_COMMENT
                state.skip_next = True
                continue
            if char == "*" and next_char == "/" and in_block:
                state.mode = LexicalMode.PLAIN
                state.skip_next = True
                continue

        if state.mode is LexicalMode.BLOCK_COMMENT:
            continue

        escaped = prev_char == "\\"

        if char in _QUOTE_MODES and not escaped and state.mode is not LexicalMode.TEMPLATE:
            if state.mode is LexicalMode.PLAIN:
                state.mode = _QUOTE_MODES[char]
            elif state.mode is _QUOTE_MODES[char]:
                state.mode = LexicalMode.PLAIN
            continue

        if char == "`" and not escaped:
            if state.mode is LexicalMode.PLAIN:
                state.mode = LexicalMode.TEMPLATE
                continue
            if state.mode is LexicalMode.TEMPLATE:
                state.mode = LexicalMode.PLAIN
                continue

        # Template bodies are opaque, `${ ... }` included.
        if state.mode in _LITERAL_MODES:
            continue

        if char == "{":
            _open_brace(state)
        elif char == "}":
            _close_brace(state, line_num)


def extract_functions(source: str) -> list[FunctionSpan]:
    """Return the span of every function-like definition in `source`.

    Spans are listed in closing order. Functions still open at the end of
    the input are dropped rather than reported.
    """
    state = ScanState()
    for line_num, line in enumerate(source.split("\n"), start=1):
        match = match_function_start(line)
        if match.kind is not MatchKind.NONE:
            state.stack.append(OpenContext(name=match.name, start_line=line_num))
        _scan_line(state, line, line_num)
    return state.spans


_DEFINITION_PATTERNS = (
    lambda name: rf"\bconst\s+{name}\s*=",
    lambda name: rf"\blet\s+{name}\s*=",
    lambda name: rf"\bvar\s+{name}\s*=",
    lambda name: rf"\bfunction\s+{name}\s*\(",
    lambda name: rf":\s*{name}\s*[,}})]",  # destructuring
)


def is_function_defined(name: str, source: str) -> bool:
    """Check whether `name` is bound anywhere in `source`."""
    escaped = re.escape(name)
    return any(
        re.search(make_pattern(escaped), source)
        for make_pattern in _DEFINITION_PATTERNS
    )


class JavaScriptParser:
    """Extracts function spans from JavaScript and TypeScript source code."""

    def extract_functions(self, source: str) -> list[FunctionSpan]:
        return extract_functions(source)
