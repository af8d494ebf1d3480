"""Plain unified-diff text rendering for pickdiff."""

from typing import List

from .diffpack import DiffResult, is_no_changes

NO_CHANGES_MARKER = "(no changes)"
EXCLUDED_FILES_HEADER = "# Excluded files (not found in end commit):"


def format_stdout_diff(result: DiffResult) -> str:
    """Render a DiffResult as unified-diff-like text."""
    lines: List[str] = []

    for path, diff_lines in result.diffs.items():
        lines.append(f"--- a/{path}")
        lines.append(f"+++ b/{path}")

        if is_no_changes(diff_lines):
            lines.append(NO_CHANGES_MARKER)
        else:
            lines.extend(diff_line.content for diff_line in diff_lines)
        lines.append("")

    if result.excluded_files:
        lines.append("")
        lines.append(EXCLUDED_FILES_HEADER)
        lines.extend(f"#   {path}" for path in result.excluded_files)

    return "\n".join(lines)
