"""Error definitions and handling for pickdiff."""

from typing import Any, Dict, Optional

GENERIC_QUERY_FAILURE = "Failed to query revision"


class PickDiffError(Exception):
    """Base exception for pickdiff errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class RevisionQueryError(PickDiffError):
    """A git query against the repository failed."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        reason = (reason or "").strip()
        super().__init__(
            code="REVISION_QUERY_FAILED",
            message=reason or GENERIC_QUERY_FAILURE,
            details={"operation": operation},
        )
        self.operation = operation


class GitTimeoutError(PickDiffError):
    """A git operation timed out."""

    def __init__(self, operation: str, timeout_seconds: int):
        super().__init__(
            code="GIT_TIMEOUT",
            message=f"Git timeout during {operation} after {timeout_seconds}s",
            details={"operation": operation, "timeout_seconds": timeout_seconds},
        )


class NotARepositoryError(PickDiffError):
    """The configured path is not inside a git work tree."""

    def __init__(self, repo_path: str):
        super().__init__(
            code="NOT_A_REPOSITORY",
            message=f"Not a git repository: {repo_path}",
            details={"repo_path": repo_path},
        )
