"""Convenience formatters for CheckResult.

These are optional — consumers can format results however they want.
"""

import json
from dataclasses import asdict

from fnspan.models import CheckResult, FunctionSpan

_FIX_HINT = "Consider refactoring long functions into smaller, focused units."


def format_text_report(result: CheckResult, limit: int | None = None) -> str:
    """Format a CheckResult as a human-readable text report.

    Args:
        result: The result to format.
        limit: Show at most this many violations (all when None).
    """
    lines: list[str] = []

    if not result.violations:
        lines.append("No function length violations found.")
    else:
        shown = result.violations if limit is None else result.violations[:limit]
        lines.append(
            f"Found {len(result.violations)} function(s) exceeding"
            f" {result.max_lines} lines:\n"
        )
        for v in shown:
            lines.append(f"  {v.name} ({v.line_count} lines)")
            lines.append(f"    └─ {v.location}")
        hidden = len(result.violations) - len(shown)
        if hidden > 0:
            lines.append(f"  ... and {hidden} more")
        lines.append("")
        lines.append(f"Preferred maximum: {result.preferred_lines} lines")
        lines.append(f"Hard limit: {result.max_lines} lines")
        lines.append("")
        lines.append(_FIX_HINT)

    if result.allowed:
        lines.append("")
        lines.append(f"Allowed over the limit ({len(result.allowed)}):")
        for v in result.allowed:
            lines.append(f"  {v.name} ({v.line_count} lines)  {v.location}")

    if result.stale:
        lines.append("")
        lines.append("Stale allow-list entries:")
        for s in result.stale:
            lines.append(f"  - {s.entry}: {s.reason}")

    lines.append("")
    lines.append(
        f"Scanned {result.functions_scanned} functions"
        f" in {result.files_scanned} files."
    )
    return "\n".join(lines)


def format_span_listing(path: str, spans: list[FunctionSpan]) -> str:
    """List every span found in one file, in source order."""
    lines = [path]
    if not spans:
        lines.append("  (no functions)")
        return "\n".join(lines)

    name_w = min(max(len(s.name) for s in spans), 40)
    for s in sorted(spans, key=lambda s: (s.start_line, s.end_line)):
        name = s.name if len(s.name) <= name_w else s.name[:name_w - 3] + "..."
        lines.append(
            f"  {name:<{name_w}}  {s.start_line:>5}-{s.end_line:<5}"
            f"  {s.line_count:>4} lines"
        )
    return "\n".join(lines)


def format_json(result: CheckResult) -> str:
    """Format a CheckResult as JSON."""
    data = asdict(result)
    data["passed"] = result.passed
    return json.dumps(data, indent=2)


def format_spans_json(spans_by_file: list[tuple[str, list[FunctionSpan]]]) -> str:
    """Format extracted spans for several files as JSON."""
    output = [
        {"file": path, "functions": [asdict(s) for s in spans]}
        for path, spans in spans_by_file
    ]
    return json.dumps(output, indent=2)
