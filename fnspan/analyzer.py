import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

from fnspan.checks import Check
from fnspan.models import CheckResult, FileResult

logger = logging.getLogger(__name__)


def analyze(
    check: Check,
    sources: list[tuple[str, str]],
    workers: int = 10,
    on_file: Callable[[FileResult, int, int], None] | None = None,
) -> CheckResult:
    """Run a check over many source files.

    Args:
        check: Defines what to flag in each file.
        sources: (path, text) pairs to inspect.
        workers: Number of files inspected in parallel.
        on_file: Optional callback invoked after each file with
                 (file_result, completed_count, total_count).

    Returns:
        CheckResult with violations sorted longest first. Files are listed
        in the same order as `sources`.
    """
    total = len(sources)
    files: list[FileResult] = [None] * total  # type: ignore[list-item]
    completed = 0

    def _inspect_one(index: int, path: str, text: str) -> tuple[int, FileResult]:
        return index, check.inspect(path, text)

    with ThreadPoolExecutor(max_workers=max(workers, 1)) as pool:
        futures = {
            pool.submit(_inspect_one, i, path, text): path
            for i, (path, text) in enumerate(sources)
        }
        for future in as_completed(futures):
            idx, file_result = future.result()
            files[idx] = file_result
            completed += 1
            logger.debug(
                "Scanned %s: %d functions, %d over limit",
                file_result.file, file_result.functions, len(file_result.violations),
            )
            if on_file:
                on_file(file_result, completed, total)

    return _build_result(check, files, sources)


def _build_result(
    check: Check,
    files: list[FileResult],
    sources: list[tuple[str, str]],
) -> CheckResult:
    """Aggregate per-file results into a CheckResult."""
    flagged = [v for f in files for v in f.violations]
    flagged.sort(key=lambda v: v.line_count, reverse=True)

    stale = check.stale_entries(sources)
    for entry in stale:
        logger.info("Stale allow-list entry %s: %s", entry.entry, entry.reason)

    return CheckResult(
        check=check.name,
        max_lines=check.max_lines,
        preferred_lines=check.preferred_lines,
        files_scanned=len(files),
        functions_scanned=sum(f.functions for f in files),
        violations=[v for v in flagged if not v.allowed],
        allowed=[v for v in flagged if v.allowed],
        stale=stale,
        files=files,
    )
