"""Per-file diff acquisition for pickdiff."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONTEXT_LINES, ComparisonRequest
from .diffpack import (
    DiffLine,
    DiffResult,
    no_changes_lines,
    parse_diff_with_line_numbers,
    synthesize_added_lines,
)
from .vcs import RevisionQuery

logger = logging.getLogger(__name__)

# (path, lines) where lines is None for a file missing at the end revision
FileOutcome = Tuple[str, Optional[List[DiffLine]]]


class DiffCollector:
    """Builds a DiffResult for a comparison request."""

    def __init__(self, repository: RevisionQuery, max_workers: int = 1):
        """Initialize with the repository to query."""
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.repository = repository
        self.max_workers = max_workers

    def collect(self, request: ComparisonRequest) -> DiffResult:
        """Collect diffs for every requested file, in request order.

        Any query failure other than a file missing at the end revision
        propagates and aborts the whole request.
        """
        logger.info(
            "Collecting diffs",
            extra={
                "start": request.start_commit,
                "end": request.end_commit,
                "files": len(request.files),
                "context_lines": request.context_lines,
            },
        )

        if self.max_workers == 1 or len(request.files) == 1:
            outcomes = [self._collect_file(request, path) for path in request.files]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() yields in submission order
                outcomes = list(
                    executor.map(lambda path: self._collect_file(request, path), request.files)
                )

        diffs = {}
        excluded_files = []
        for path, lines in outcomes:
            if lines is None:
                excluded_files.append(path)
            else:
                diffs[path] = lines

        logger.info(
            "Diff collection complete",
            extra={"files_returned": len(diffs), "excluded": len(excluded_files)},
        )
        return DiffResult(diffs=diffs, excluded_files=excluded_files)

    def _collect_file(self, request: ComparisonRequest, path: str) -> FileOutcome:
        """Acquire one file's diff lines."""
        if not self.repository.file_exists_at(request.end_commit, path):
            logger.debug("Excluding file missing at end revision", extra={"path": path})
            return path, None

        raw_diff = self.repository.diff_between(
            request.start_commit, request.end_commit, path, request.context_lines
        )
        if raw_diff:
            return path, parse_diff_with_line_numbers(raw_diff)

        if self.repository.file_exists_at(request.start_commit, path):
            logger.debug("File unchanged", extra={"path": path})
            return path, no_changes_lines()

        logger.debug("File added in end revision", extra={"path": path})
        content = self.repository.full_content_at(request.end_commit, path)
        return path, synthesize_added_lines(content)


def generate_diffs(
    repository: RevisionQuery,
    start_commit: str,
    end_commit: str,
    files: Sequence[str],
    context_lines: Any = DEFAULT_CONTEXT_LINES,
    max_workers: int = 1,
) -> DiffResult:
    """Collect diffs for ``files`` between two revisions."""
    request = ComparisonRequest(
        start_commit=start_commit,
        end_commit=end_commit,
        files=files,
        context_lines=context_lines,
    )
    return DiffCollector(repository, max_workers=max_workers).collect(request)
