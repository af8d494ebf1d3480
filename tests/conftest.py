"""Pytest configuration and fixtures for pickdiff tests."""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional, Tuple

import pytest

from pickdiff.config import RepoConfig
from pickdiff.errors import RevisionQueryError
from pickdiff.vcs import GitRepository


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="pickdiff_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


class GitRepoHelper:
    """Helper class for git repository operations in tests."""

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path
        self.env = os.environ.copy()
        self.env.update({
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        })

    def run_git(self, args: list[str]) -> subprocess.CompletedProcess:
        """Run git command in the repository."""
        return subprocess.run(
            ["git"] + args,
            cwd=self.repo_path,
            env=self.env,
            check=True,
            capture_output=True,
            text=True,
        )

    def create_file(self, path: str, content: str) -> None:
        """Create a file with content."""
        file_path = self.repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)

    def modify_file(self, path: str, content: str) -> None:
        """Modify an existing file."""
        self.create_file(path, content)

    def delete_file(self, path: str) -> None:
        """Delete a file."""
        file_path = self.repo_path / path
        if file_path.exists():
            file_path.unlink()

    def add_and_commit(self, message: str, files: list[str] = None) -> str:
        """Add files and create a commit, return commit SHA."""
        if files:
            for file in files:
                self.run_git(["add", file])
        else:
            self.run_git(["add", "-A"])

        self.run_git(["commit", "-m", message])
        return self.get_current_sha()

    def get_current_sha(self) -> str:
        """Get current commit SHA."""
        result = self.run_git(["rev-parse", "HEAD"])
        return result.stdout.strip()


@pytest.fixture
def git_repo(temp_dir: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository with one commit."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    helper = GitRepoHelper(repo_path)
    helper.run_git(["init"])
    helper.run_git(["config", "user.name", "Test User"])
    helper.run_git(["config", "user.email", "test@example.com"])

    helper.create_file("README.md", "# Test Repository\n")
    helper.add_and_commit("Initial commit", ["README.md"])

    yield repo_path


@pytest.fixture
def git_helper(git_repo: Path) -> GitRepoHelper:
    """Create a git repository helper."""
    return GitRepoHelper(git_repo)


@pytest.fixture
def repository(git_repo: Path) -> GitRepository:
    """GitRepository bound to the temporary repository."""
    return GitRepository(RepoConfig(repo_path=str(git_repo)))


class FakeRepository:
    """In-memory stand-in for GitRepository.

    ``files`` maps revision -> {path: content}; ``diffs`` maps
    (start, end, path) -> raw unified diff text.
    """

    def __init__(
        self,
        files: Optional[Dict[str, Dict[str, str]]] = None,
        diffs: Optional[Dict[Tuple[str, str, str], str]] = None,
        repo_path: str = "/test/repo",
    ):
        self.files = files or {}
        self.diffs = diffs or {}
        self.repo_path = repo_path
        self.calls: List[tuple] = []
        self.fail_on: Dict[str, str] = {}
        self.tracked: List[str] = []

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise RevisionQueryError(operation, self.fail_on[operation])

    def file_exists_at(self, revision: str, path: str) -> bool:
        self.calls.append(("file_exists_at", revision, path))
        self._maybe_fail("cat-file")
        return path in self.files.get(revision, {})

    def diff_between(self, start_revision, end_revision, path, context_lines) -> str:
        self.calls.append(("diff_between", start_revision, end_revision, path, context_lines))
        self._maybe_fail("diff")
        return self.diffs.get((start_revision, end_revision, path), "")

    def full_content_at(self, revision: str, path: str) -> str:
        self.calls.append(("full_content_at", revision, path))
        self._maybe_fail("show")
        return self.files[revision][path]

    def list_files(self) -> List[str]:
        self._maybe_fail("ls-files")
        return list(self.tracked)

    def is_repository(self) -> bool:
        return True

    def get_git_version(self) -> Optional[str]:
        return "2.40.0"


@pytest.fixture
def fake_repository() -> FakeRepository:
    """An empty in-memory repository."""
    return FakeRepository()
