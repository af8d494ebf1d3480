"""Service layer for pickdiff API."""

import logging
from typing import Any, Dict, List, Tuple

from ...collector import DiffCollector
from ...config import ComparisonRequest
from ...diffpack import DiffResult
from ...htmlview import render_diff_result
from ...markdown import MarkdownExport, generate_markdown
from ...serialize import DiffSerializer
from ...unified import format_stdout_diff
from ...vcs import Repository
from ..models import DiffRequest, MarkdownRequest

logger = logging.getLogger(__name__)


class DiffService:
    """Runs diff requests against one repository and renders the results."""

    def __init__(self, repository: Repository, max_workers: int = 1):
        """Initialize with the repository all requests are answered from."""
        self.repository = repository
        self.max_workers = max_workers

    @property
    def repo_path(self) -> str:
        return self.repository.repo_path

    def list_files(self) -> List[str]:
        """Tracked files available for comparison."""
        files = self.repository.list_files()
        logger.info("Listed tracked files", extra={"repo": self.repo_path, "count": len(files)})
        return files

    def collect(self, request: DiffRequest) -> Tuple[ComparisonRequest, DiffResult]:
        """Collect diffs for an API request.

        Returns the normalized ComparisonRequest with its DiffResult. Query
        failures propagate to the caller unchanged.
        """
        comparison = ComparisonRequest(
            start_commit=request.start_commit,
            end_commit=request.end_commit,
            files=request.files,
            context_lines=request.context_lines,
        )
        logger.info(
            "Processing diff request",
            extra={
                "repo": self.repo_path,
                "start": comparison.start_commit,
                "end": comparison.end_commit,
                "files": len(comparison.files),
            },
        )
        collector = DiffCollector(self.repository, max_workers=self.max_workers)
        result = collector.collect(comparison)
        logger.info(
            "Diff processing succeeded",
            extra={
                "repo": self.repo_path,
                "files": result.changed_files_count,
                "excluded": len(result.excluded_files),
            },
        )
        return comparison, result

    def process_diff_request(self, request: DiffRequest) -> Dict[str, Any]:
        """Collect diffs and wrap the serialized result in a success envelope."""
        comparison, result = self.collect(request)
        serializer = DiffSerializer(comparison)
        return serializer.create_success_envelope(serializer.serialize_result(result))

    def render_unified(self, request: DiffRequest) -> str:
        _, result = self.collect(request)
        return format_stdout_diff(result)

    def render_markdown(self, request: MarkdownRequest) -> str:
        comparison, result = self.collect(request)
        return generate_markdown(
            MarkdownExport(
                repo_path=self.repo_path,
                start_commit=comparison.start_commit,
                end_commit=comparison.end_commit,
                context_lines=comparison.context_lines,
                result=result,
                language_fences=request.language_fences,
            )
        )

    def render_html(self, request: DiffRequest) -> str:
        _, result = self.collect(request)
        return render_diff_result(result)
