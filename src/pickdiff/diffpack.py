"""Diff line model and unified-diff parsing for pickdiff."""

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

NO_CHANGES = "NO_CHANGES"

HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

# Extended header lines git writes between "diff --git" and the first hunk
_GIT_HEADER_PREFIXES = (
    "diff ",
    "index ",
    "old mode ",
    "new mode ",
    "deleted file mode ",
    "new file mode ",
    "similarity index ",
    "dissimilarity index ",
    "rename from ",
    "rename to ",
    "copy from ",
    "copy to ",
    "Binary files ",
)


class LineKind(str, enum.Enum):
    """Classification of a diff line by its leading marker."""

    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"
    NO_CHANGES = "no_changes"


def classify(content: str) -> LineKind:
    """Classify a line's content; shared by every renderer."""
    if content == NO_CHANGES:
        return LineKind.NO_CHANGES
    if content.startswith("+"):
        return LineKind.ADDITION
    if content.startswith("-"):
        return LineKind.DELETION
    return LineKind.CONTEXT


@dataclass(frozen=True)
class DiffLine:
    """One rendered row of a file's diff."""

    content: str
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None

    @property
    def kind(self) -> LineKind:
        return classify(self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire shape, omitting absent numbers."""
        data: Dict[str, Any] = {"content": self.content}
        if self.old_line_number is not None:
            data["oldLineNumber"] = self.old_line_number
        if self.new_line_number is not None:
            data["newLineNumber"] = self.new_line_number
        return data


@dataclass(frozen=True)
class DiffResult:
    """Per-file diff lines plus the requested files missing at the end revision."""

    diffs: Dict[str, List[DiffLine]] = field(default_factory=dict)
    excluded_files: List[str] = field(default_factory=list)

    @property
    def changed_files_count(self) -> int:
        return len(self.diffs)

    def is_unchanged(self, path: str) -> bool:
        return is_no_changes(self.diffs.get(path, []))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diffs": {
                path: [line.to_dict() for line in lines]
                for path, lines in self.diffs.items()
            },
            "excludedFiles": list(self.excluded_files),
        }


def no_changes_lines() -> List[DiffLine]:
    """Line sequence for a file that is identical at both revisions."""
    return [DiffLine(content=NO_CHANGES)]


def is_no_changes(lines: List[DiffLine]) -> bool:
    return len(lines) == 1 and lines[0].content == NO_CHANGES


def _split_lines(text: str) -> List[str]:
    """Split on newlines; a single trailing newline ends the last line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def synthesize_added_lines(content: str) -> List[DiffLine]:
    """Render the full text of a newly added file as all-addition lines."""
    return [
        DiffLine(content=f"+{line}", new_line_number=number)
        for number, line in enumerate(_split_lines(content), start=1)
    ]


def parse_diff_with_line_numbers(diff: str) -> List[DiffLine]:
    """Parse one file's unified diff into numbered lines.

    Everything before the first hunk header is ignored. Each hunk header
    resets the running old/new counters; a header that does not match the
    ``@@ -a[,b] +c[,d] @@`` pattern is logged and leaves them unchanged.
    """
    diff_lines: List[DiffLine] = []
    old_line_number = 0
    new_line_number = 0
    in_content = False

    for line in _split_lines(diff):
        if line.startswith("@@ "):
            in_content = True
            match = HUNK_HEADER_PATTERN.match(line)
            if match:
                old_line_number = int(match.group(1))
                new_line_number = int(match.group(3))
            else:
                logger.warning("Failed to parse hunk header: %s", line)
            continue

        if not in_content:
            continue

        # "\ No newline at end of file" annotates the previous line
        if line.startswith("\\"):
            continue

        if line.startswith("+"):
            diff_lines.append(DiffLine(content=line, new_line_number=new_line_number))
            new_line_number += 1
        elif line.startswith("-"):
            diff_lines.append(DiffLine(content=line, old_line_number=old_line_number))
            old_line_number += 1
        else:
            diff_lines.append(
                DiffLine(
                    content=line,
                    old_line_number=old_line_number,
                    new_line_number=new_line_number,
                )
            )
            old_line_number += 1
            new_line_number += 1

    logger.debug("Parsed unified diff into %s lines", len(diff_lines))
    return diff_lines


def _is_file_header(lines: List[str], index: int) -> bool:
    """Check whether ``lines[index]`` belongs to a git file header block."""
    line = lines[index]
    if line.startswith(_GIT_HEADER_PREFIXES):
        return True
    # "---"/"+++" only count as headers when they appear as a pair
    if line.startswith("--- "):
        return index + 1 < len(lines) and lines[index + 1].startswith("+++ ")
    if line.startswith("+++ "):
        return index > 0 and lines[index - 1].startswith("--- ")
    return False


def _strip_header_block(diff: str, lines: List[str]) -> str:
    """Drop a leading git header block from text that has no hunks.

    Text that does not open with a git header line is returned as is, so
    already-stripped content is never mistaken for headers.
    """
    first = next((line for line in lines if line), "")
    if not first.startswith(_GIT_HEADER_PREFIXES):
        return diff

    index = 0
    while index < len(lines) and (not lines[index] or _is_file_header(lines, index)):
        index += 1
    return "\n".join(lines[index:])


def strip_diff_headers(diff: str) -> str:
    """Remove file and hunk headers, keeping content lines in order.

    Stripping the result again returns it unchanged.
    """
    lines = diff.split("\n")
    if not any(line.startswith("@@ ") for line in lines):
        return _strip_header_block(diff, lines)

    content_lines: List[str] = []
    in_content = False
    for line in lines:
        if line.startswith("@@ "):
            in_content = True
            continue
        if in_content:
            content_lines.append(line)

    return "\n".join(content_lines)
