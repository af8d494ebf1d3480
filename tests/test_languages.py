"""Tests for extension to language lookup."""

import pytest

from pickdiff.languages import (
    EXTENSION_LANGUAGES,
    file_extension,
    fence_language_for_path,
    language_for_path,
)


class TestLanguageLookup:
    """Test language_for_path and friends."""

    @pytest.mark.parametrize(
        "path,language",
        [
            ("src/index.ts", "typescript"),
            ("component.tsx", "typescript"),
            ("app.js", "javascript"),
            ("tool.py", "python"),
            ("lib/core.rs", "rust"),
            ("include/api.hpp", "cpp"),
            ("View.m", "objectivec"),
            ("config.yml", "yaml"),
            ("README.md", "markdown"),
            ("script.zsh", "bash"),
        ],
    )
    def test_known_extensions(self, path, language):
        """Test mapped extensions."""
        assert language_for_path(path) == language

    def test_case_insensitive(self):
        """Test that extensions match regardless of case."""
        assert language_for_path("MAIN.PY") == "python"
        assert language_for_path("Query.SQL") == "sql"

    @pytest.mark.parametrize("path", ["Makefile", "archive.tar.zst", "notes.txt", "dir.d/file", "trailing."])
    def test_unknown_extensions(self, path):
        """Test that unmapped paths have no language."""
        assert language_for_path(path) is None

    def test_last_dot_wins(self):
        """Test multi-dot names."""
        assert file_extension("bundle.min.js") == "js"
        assert language_for_path("types.d.ts") == "typescript"

    def test_fence_fallback(self):
        """Test the code fence tag."""
        assert fence_language_for_path("main.go") == "go"
        assert fence_language_for_path("Dockerfile") == "diff"

    def test_table_is_read_only(self):
        """Test that the lookup table cannot be mutated."""
        with pytest.raises(TypeError):
            EXTENSION_LANGUAGES["txt"] = "text"
