"""Markdown document rendering for pickdiff."""

import logging
from dataclasses import dataclass
from typing import List

from .diffpack import DiffResult, is_no_changes
from .languages import FALLBACK_FENCE_LANGUAGE, fence_language_for_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkdownExport:
    """A DiffResult plus the request metadata shown in the document header."""

    repo_path: str
    start_commit: str
    end_commit: str
    context_lines: int
    result: DiffResult

    # Tag fences with the file's language instead of "diff"
    language_fences: bool = False


def generate_markdown(export: MarkdownExport) -> str:
    """Render a Markdown summary with metadata and one section per file.

    Fences default to the ``diff`` language so the +/- markers keep their
    coloring in Markdown viewers.
    """
    result = export.result
    lines: List[str] = []

    lines.append("# Diff Summary")
    lines.append("")

    lines.append("## Metadata")
    lines.append("")
    lines.append(f"- **Repository:** `{export.repo_path}`")
    lines.append(f"- **Start Commit:** `{export.start_commit}`")
    lines.append(f"- **End Commit:** `{export.end_commit}`")
    lines.append(f"- **Context Lines:** {export.context_lines}")
    lines.append(f"- **Files Changed:** {result.changed_files_count}")
    lines.append("")

    if result.excluded_files:
        lines.append("## Excluded Files")
        lines.append("")
        lines.append(
            "The following files were excluded because they do not exist in the end commit:"
        )
        lines.append("")
        for path in result.excluded_files:
            lines.append(f"- `{path}`")
        lines.append("")

    lines.append("## File Changes")
    lines.append("")

    for path, diff_lines in result.diffs.items():
        lines.append(f"### `{path}`")
        lines.append("")

        if is_no_changes(diff_lines):
            lines.append("*No changes*")
            lines.append("")
            continue

        fence = (
            fence_language_for_path(path)
            if export.language_fences
            else FALLBACK_FENCE_LANGUAGE
        )
        lines.append(f"```{fence}")
        lines.extend(diff_line.content for diff_line in diff_lines)
        lines.append("```")
        lines.append("")

    logger.debug(
        "Rendered markdown",
        extra={"files": result.changed_files_count, "excluded": len(result.excluded_files)},
    )
    return "\n".join(lines)
