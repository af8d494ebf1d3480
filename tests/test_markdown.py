"""Tests for Markdown export."""

from pickdiff.diffpack import DiffLine, DiffResult, no_changes_lines
from pickdiff.markdown import MarkdownExport, generate_markdown


def make_export(result, **overrides):
    values = {
        "repo_path": "/work/project",
        "start_commit": "abc123",
        "end_commit": "def456",
        "context_lines": 3,
        "result": result,
    }
    values.update(overrides)
    return MarkdownExport(**values)


CHANGED = [
    DiffLine(" keep", old_line_number=1, new_line_number=1),
    DiffLine("-old", old_line_number=2),
    DiffLine("+new", new_line_number=2),
]


class TestGenerateMarkdown:
    """Test generate_markdown."""

    def test_full_document(self):
        """Test the complete document for one changed and one unchanged file."""
        result = DiffResult(diffs={"src/app.py": CHANGED, "README.md": no_changes_lines()})

        markdown = generate_markdown(make_export(result))

        assert markdown == "\n".join(
            [
                "# Diff Summary",
                "",
                "## Metadata",
                "",
                "- **Repository:** `/work/project`",
                "- **Start Commit:** `abc123`",
                "- **End Commit:** `def456`",
                "- **Context Lines:** 3",
                "- **Files Changed:** 2",
                "",
                "## File Changes",
                "",
                "### `src/app.py`",
                "",
                "```diff",
                " keep",
                "-old",
                "+new",
                "```",
                "",
                "### `README.md`",
                "",
                "*No changes*",
                "",
            ]
        )

    def test_excluded_files_section(self):
        """Test that excluded files are listed but get no file section."""
        result = DiffResult(diffs={"a.ts": no_changes_lines()}, excluded_files=["b.ts"])

        markdown = generate_markdown(make_export(result))

        assert "## Excluded Files" in markdown
        assert "- `b.ts`" in markdown
        assert "### `b.ts`" not in markdown
        assert "### `a.ts`" in markdown
        assert "- **Files Changed:** 1" in markdown
        assert markdown.index("## Excluded Files") < markdown.index("## File Changes")

    def test_no_excluded_section_when_empty(self):
        """Test that the section is omitted without exclusions."""
        markdown = generate_markdown(make_export(DiffResult(diffs={"a.ts": CHANGED})))
        assert "Excluded Files" not in markdown

    def test_language_fences(self):
        """Test tagging fences with the file language."""
        result = DiffResult(diffs={"src/index.ts": CHANGED, "Makefile": CHANGED})

        markdown = generate_markdown(make_export(result, language_fences=True))

        assert "```typescript\n" in markdown
        assert "```diff\n" in markdown

    def test_context_lines_shown_as_given(self):
        """Test the metadata context width."""
        markdown = generate_markdown(make_export(DiffResult(), context_lines=10))
        assert "- **Context Lines:** 10" in markdown
        assert "- **Files Changed:** 0" in markdown
