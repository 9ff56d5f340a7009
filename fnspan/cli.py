"""CLI for fnspan — thin consumer of the library."""

import argparse
import logging
import sys
from pathlib import Path

from fnspan.analyzer import analyze
from fnspan.checks.function_length import (
    DEFAULT_MAX_LINES,
    DEFAULT_PREFERRED_LINES,
    FunctionLengthCheck,
    FunctionLengthConfig,
)
from fnspan.languages import Language
from fnspan.models import FileResult
from fnspan.reporting import (
    format_json,
    format_span_listing,
    format_spans_json,
    format_text_report,
)

logger = logging.getLogger(__name__)


def _make_language(name: str) -> Language:
    if name == "javascript":
        from fnspan.languages.javascript import JavaScriptLanguage
        return JavaScriptLanguage()
    else:
        print(f"Unknown language: {name}", file=sys.stderr)
        sys.exit(1)


def _is_ignored(name: str, language: Language) -> bool:
    return name in language.ignore_dirs or name.startswith(language.ignore_prefixes)


def _walk(directory: Path, language: Language) -> list[Path]:
    """Recursively list source files, pruning ignored directories."""
    files: list[Path] = []
    for entry in sorted(directory.iterdir()):
        if _is_ignored(entry.name, language):
            continue
        if entry.is_dir():
            files.extend(_walk(entry, language))
        elif entry.is_file() and entry.suffix in language.suffixes:
            files.append(entry)
    return files


def _collect_source_files(
    paths: list[str],
    language: Language,
    exclude: list[str] | None = None,
) -> list[Path]:
    """Resolve paths to a flat list of source files for the given language.

    Excluded entries match either the path as discovered or the path
    relative to the directory being walked.
    """
    excluded = {Path(e).as_posix() for e in exclude or []}
    files: list[Path] = []
    for p in paths:
        path = Path(p)
        if path.is_file() and path.suffix in language.suffixes:
            if path.as_posix() not in excluded:
                files.append(path)
        elif path.is_dir():
            for f in _walk(path, language):
                rel = f.relative_to(path).as_posix()
                if rel in excluded or f.as_posix() in excluded:
                    logger.debug("Excluding %s", f)
                    continue
                files.append(f)
        else:
            logger.warning("Skipping %s (not a source file or directory)", p)
    return files


def _read_sources(files: list[Path]) -> list[tuple[str, str]]:
    """Read each file, skipping the ones that cannot be decoded."""
    sources: list[tuple[str, str]] = []
    for f in files:
        try:
            sources.append((str(f), f.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError):
            logger.warning("Cannot read %s, skipping", f)
    return sources


def _verbose_callback(result: FileResult, completed: int, total: int):
    icon = "✗" if result.violations else "✓"
    print(
        f"  [{completed}/{total}] {icon}  {result.file}  "
        f"functions={result.functions}  "
        f"over={len(result.violations)}"
    )


def _setup_logging(verbose: bool, debug: bool):
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fnspan",
        description="Locate function definitions and flag the ones that are too long.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to analyze (default: current directory)",
    )
    parser.add_argument(
        "--language",
        choices=["javascript"],
        default="javascript",
        help="Source language (default: javascript)",
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=DEFAULT_MAX_LINES,
        help=f"Hard limit on a function's own lines (default: {DEFAULT_MAX_LINES})",
    )
    parser.add_argument(
        "--preferred-lines",
        type=int,
        default=DEFAULT_PREFERRED_LINES,
        help=f"Preferred maximum shown in the report (default: {DEFAULT_PREFERRED_LINES})",
    )
    parser.add_argument(
        "--ignore-function",
        action="append",
        default=[],
        metavar="NAME",
        dest="ignored_functions",
        help="Allow a function to exceed the limit (repeatable)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATH",
        help="Skip a file, relative to the directory being scanned (repeatable)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_spans",
        help="List every function found instead of checking lengths",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="output_json",
        help="Output results as JSON",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        metavar="N",
        help="Show at most N violations in the text report (default: all)",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=10,
        help="Number of files scanned in parallel (default: 10)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print each file as it is scanned",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, args.debug)

    language = _make_language(args.language)

    files = _collect_source_files(args.paths, language, args.exclude)
    sources = _read_sources(files)
    if not sources:
        print("No source files found.", file=sys.stderr)
        return 1

    if args.list_spans:
        spans_by_file = [
            (path, language.extract_functions(text)) for path, text in sources
        ]
        if args.output_json:
            print(format_spans_json(spans_by_file))
        else:
            print("\n".join(format_span_listing(p, s) for p, s in spans_by_file))
        return 0

    config = FunctionLengthConfig(
        max_lines=args.max_lines,
        preferred_lines=args.preferred_lines,
        ignored_functions=frozenset(args.ignored_functions),
    )
    try:
        check = FunctionLengthCheck(language, config)
    except ValueError as e:
        parser.error(str(e))

    result = analyze(
        check,
        sources,
        workers=args.workers,
        on_file=_verbose_callback if args.verbose else None,
    )

    if args.output_json:
        print(format_json(result))
    else:
        print(format_text_report(result, limit=args.limit))

    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
