"""Version control system operations for pickdiff."""

import logging
import re
import subprocess
from typing import List, Optional, Protocol, runtime_checkable

from .config import RepoConfig
from .errors import GitTimeoutError, RevisionQueryError

logger = logging.getLogger(__name__)


class RevisionQuery(Protocol):
    """The git queries diff collection depends on."""

    def file_exists_at(self, revision: str, path: str) -> bool:
        ...

    def diff_between(
        self, start_revision: str, end_revision: str, path: str, context_lines: int
    ) -> str:
        ...

    def full_content_at(self, revision: str, path: str) -> str:
        ...


@runtime_checkable
class Repository(RevisionQuery, Protocol):
    """Revision queries plus the repository facts the API reports."""

    @property
    def repo_path(self) -> str:
        ...

    def list_files(self) -> List[str]:
        ...

    def is_repository(self) -> bool:
        ...

    def get_git_version(self) -> Optional[str]:
        ...


class GitRepository:
    """Git queries against one local repository."""

    def __init__(self, config: RepoConfig):
        """Initialize with configuration."""
        self.config = config
        self._git_version: Optional[str] = None

    @property
    def repo_path(self) -> str:
        return self.config.repo_path

    def _run_git(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run git command with proper environment and error handling."""
        # Enforce deterministic git behavior across platforms
        cmd = [
            "git",
            "-c",
            "core.autocrlf=false",
            "-c",
            "color.ui=false",
            "-c",
            "core.quotepath=false",
        ] + args
        logger.debug("Running git", extra={"git_args": args, "repo": self.repo_path})
        try:
            return subprocess.run(
                cmd,
                cwd=self.repo_path,
                env=self.config.git_env,
                timeout=self.config.git_timeout,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.TimeoutExpired as e:
            raise GitTimeoutError(f"git {args[0]}", self.config.git_timeout) from e
        except OSError as e:
            raise RevisionQueryError(f"git {args[0]}", str(e)) from e

    def _query(self, operation: str, args: List[str]) -> str:
        """Run a git query whose failure aborts the whole request."""
        try:
            return self._run_git(args).stdout
        except subprocess.CalledProcessError as e:
            logger.warning(
                "Git query failed",
                extra={"operation": operation, "returncode": e.returncode},
            )
            raise RevisionQueryError(operation, e.stderr) from e

    def file_exists_at(self, revision: str, path: str) -> bool:
        """Check whether ``path`` exists in ``revision``.

        ``git cat-file -e`` exits non-zero when the object is missing; only
        for this probe is that failure read as "absent".
        """
        try:
            self._run_git(["cat-file", "-e", f"{revision}:{path}"])
        except subprocess.CalledProcessError:
            logger.debug("File absent at revision", extra={"revision": revision, "path": path})
            return False
        return True

    def diff_between(
        self, start_revision: str, end_revision: str, path: str, context_lines: int
    ) -> str:
        """Unified diff of ``path`` between two revisions; empty when identical."""
        return self._query(
            "diff",
            [
                "diff",
                "--no-color",
                f"-U{context_lines}",
                f"{start_revision}..{end_revision}",
                "--",
                path,
            ],
        )

    def full_content_at(self, revision: str, path: str) -> str:
        """Full text of ``path`` as of ``revision``."""
        return self._query("show", ["show", f"{revision}:{path}"])

    def list_files(self) -> List[str]:
        """Tracked files of the working tree, in git's order."""
        output = self._query("ls-files", ["ls-files"])
        return [line for line in output.split("\n") if line]

    def is_repository(self) -> bool:
        """Check whether the configured path is inside a git work tree."""
        try:
            result = self._run_git(["rev-parse", "--is-inside-work-tree"])
        except (subprocess.CalledProcessError, RevisionQueryError):
            return False
        return result.stdout.strip() == "true"

    def get_git_version(self) -> Optional[str]:
        """Return the installed git version, or None when git is unavailable."""
        if self._git_version:
            return self._git_version

        try:
            result = subprocess.run(
                ["git", "--version"],
                capture_output=True,
                text=True,
                check=True,
                timeout=10,
            )
        except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as exc:
            logger.debug("git --version check failed", exc_info=exc)
            return None

        # Extract version number from "git version 2.34.1"
        match = re.search(r"git version (\d+\.\d+(?:\.\d+)?)", result.stdout)
        if not match:
            return None

        self._git_version = match.group(1)
        return self._git_version
