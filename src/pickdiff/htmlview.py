"""Syntax-highlighted, line-numbered HTML rendering for pickdiff."""

import html
import logging
from functools import lru_cache
from typing import List, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .diffpack import DiffLine, DiffResult, LineKind, is_no_changes
from .languages import language_for_path

logger = logging.getLogger(__name__)

GUTTER_WIDTH = 4
DIFF_MARKERS = ("+", "-", " ")

_LINE_CLASSES = {
    LineKind.ADDITION: "addition",
    LineKind.DELETION: "deletion",
}

_FORMATTER = HtmlFormatter(nowrap=True)


def escape_html(unsafe: str) -> str:
    """Escape text for safe inclusion in HTML content and attributes."""
    return html.escape(unsafe, quote=True)


@lru_cache(maxsize=64)
def _get_lexer(language: str) -> Optional[Lexer]:
    try:
        return get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.debug("No highlighter for language", extra={"language": language})
        return None


def highlight_code(code: str, language: Optional[str]) -> str:
    """Highlight bare code, or escape it when the language is unknown."""
    lexer = _get_lexer(language) if language else None
    if lexer is None:
        return escape_html(code)
    highlighted = highlight(code, lexer, _FORMATTER)
    if highlighted.endswith("\n") and not code.endswith("\n"):
        highlighted = highlighted[:-1]
    return highlighted


def highlight_line(line: str, language: Optional[str]) -> str:
    """Highlight one diff line, keeping its leading marker outside the markup."""
    if not line:
        return line

    marker = ""
    code = line
    if line.startswith(DIFF_MARKERS):
        marker = line[0]
        code = line[1:]

    return marker + highlight_code(code, language)


def _gutter(number: Optional[int]) -> str:
    if number is None:
        return " " * GUTTER_WIDTH
    return str(number).rjust(GUTTER_WIDTH)


def format_diff_line(diff_line: DiffLine, language: Optional[str]) -> str:
    """Render one line with its old/new number gutter and diff class."""
    highlighted = highlight_line(diff_line.content, language)
    line_numbers = (
        '<span class="line-number">'
        f"{escape_html(_gutter(diff_line.old_line_number))} "
        f"{escape_html(_gutter(diff_line.new_line_number))}"
        "</span>"
    )

    css_class = _LINE_CLASSES.get(diff_line.kind)
    if css_class:
        return f'{line_numbers}<span class="{css_class}">{highlighted}</span>'
    return f"{line_numbers}{highlighted}"


def format_diff(diff_lines: List[DiffLine], filename: str) -> str:
    """Render a file's diff lines, highlighted by the file's extension."""
    language = language_for_path(filename)
    return "\n".join(format_diff_line(diff_line, language) for diff_line in diff_lines)


def render_excluded_warning(excluded_files: List[str]) -> str:
    items = "".join(f"<li>{escape_html(path)}</li>" for path in excluded_files)
    return (
        '<div class="alert alert-warning">'
        "<strong>Warning:</strong> The following file(s) were excluded from the diff "
        "because they do not exist in the end commit:"
        f'<ul class="mb-0 mt-2">{items}</ul>'
        "</div>"
    )


def render_file(path: str, diff_lines: List[DiffLine]) -> str:
    """Render one file's container: a header and its diff content."""
    header = f'<div class="diff-header">{escape_html(path)}</div>'
    if is_no_changes(diff_lines):
        content = (
            '<div class="diff-content no-changes">'
            '<p class="text-muted mb-0"><em>No changes</em></p>'
            "</div>"
        )
    else:
        content = f'<div class="diff-content">{format_diff(diff_lines, path)}</div>'
    return f'<div class="diff-container">{header}{content}</div>'


def render_diff_result(result: DiffResult) -> str:
    """Render a whole DiffResult as an HTML fragment."""
    parts: List[str] = []
    if result.excluded_files:
        parts.append(render_excluded_warning(result.excluded_files))
    for path, diff_lines in result.diffs.items():
        parts.append(render_file(path, diff_lines))

    logger.debug("Rendered HTML fragment", extra={"files": result.changed_files_count})
    return "\n".join(parts)


def stylesheet(selector: str = ".diff-content") -> str:
    """CSS rules for the token classes emitted by the highlighter."""
    return _FORMATTER.get_style_defs(selector)


_PAGE_CSS = """
.diff-container { margin-bottom: 1.5em; font-family: monospace; }
.diff-header { font-weight: bold; padding: 0.3em 0.5em; background: #f0f0f0; }
.diff-content { white-space: pre; overflow-x: auto; }
.line-number { color: #999; padding-right: 1em; user-select: none; }
.addition { background: #e6ffed; }
.deletion { background: #ffeef0; }
"""


def render_html_document(result: DiffResult, title: str = "Diff Summary") -> str:
    """Wrap the rendered fragment in a standalone HTML page."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape_html(title)}</title>\n"
        f"<style>{_PAGE_CSS}{stylesheet()}</style>\n"
        "</head>\n<body>\n"
        f"<h1>{escape_html(title)}</h1>\n"
        f"{render_diff_result(result)}\n"
        "</body>\n</html>\n"
    )
