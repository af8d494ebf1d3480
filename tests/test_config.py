"""Tests for configuration module."""

import pytest

from pickdiff.config import (
    DEFAULT_CONTEXT_LINES,
    ComparisonRequest,
    RepoConfig,
    normalize_context_lines,
)


class TestNormalizeContextLines:
    """Test context width normalization."""

    @pytest.mark.parametrize("value", [1, 3, 10, 999_999])
    def test_valid_values_kept(self, value):
        """Test that in-range integers pass through."""
        assert normalize_context_lines(value) == value

    @pytest.mark.parametrize(
        "value", [0, -5, 1_000_000, "5", "invalid", 2.5, None, True, False, [3]]
    )
    def test_invalid_values_default(self, value):
        """Test that anything else becomes the default."""
        assert normalize_context_lines(value) == DEFAULT_CONTEXT_LINES == 3


class TestRepoConfig:
    """Test RepoConfig class."""

    def test_defaults(self):
        """Test default configuration values."""
        config = RepoConfig(repo_path="/tmp/repo")

        assert config.repo_path == "/tmp/repo"
        assert config.git_timeout == 60

    def test_invalid_timeout(self):
        """Test that non-positive timeouts are rejected."""
        with pytest.raises(ValueError, match="git_timeout must be positive"):
            RepoConfig(repo_path="/tmp/repo", git_timeout=0)

    def test_git_env(self):
        """Test deterministic git environment."""
        env = RepoConfig(repo_path="/tmp/repo").git_env

        assert env["LC_ALL"] == "C"
        assert env["GIT_TERMINAL_PROMPT"] == "0"
        assert "GIT_CONFIG_GLOBAL" in env

    def test_frozen(self):
        """Test that configuration is immutable."""
        config = RepoConfig(repo_path="/tmp/repo")
        with pytest.raises(AttributeError):
            config.repo_path = "/elsewhere"


class TestComparisonRequest:
    """Test ComparisonRequest validation."""

    def test_valid_request(self):
        """Test a well-formed request."""
        request = ComparisonRequest("HEAD~5", "HEAD", ["b.py", "a.py"], 5)

        assert request.start_commit == "HEAD~5"
        assert request.end_commit == "HEAD"
        assert request.files == ("b.py", "a.py")
        assert request.context_lines == 5

    def test_context_lines_normalized(self):
        """Test that bad context widths are replaced at construction."""
        assert ComparisonRequest("a", "b", ["f"], -5).context_lines == 3
        assert ComparisonRequest("a", "b", ["f"], "invalid").context_lines == 3
        assert ComparisonRequest("a", "b", ["f"]).context_lines == 3

    def test_files_copied(self):
        """Test that later changes to the caller's list do not leak in."""
        files = ["a.py"]
        request = ComparisonRequest("a", "b", files)
        files.append("b.py")

        assert request.files == ("a.py",)

    @pytest.mark.parametrize(
        "start,end,message",
        [
            ("", "HEAD", "start_commit cannot be empty"),
            ("   ", "HEAD", "start_commit cannot be empty"),
            ("HEAD~1", "", "end_commit cannot be empty"),
        ],
    )
    def test_empty_commits_rejected(self, start, end, message):
        """Test that revisions must be present."""
        with pytest.raises(ValueError, match=message):
            ComparisonRequest(start, end, ["a.py"])

    def test_empty_files_rejected(self):
        """Test that at least one file is required."""
        with pytest.raises(ValueError, match="files cannot be empty"):
            ComparisonRequest("a", "b", [])
