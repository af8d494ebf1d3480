"""Configuration management for pickdiff."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Sequence

DEFAULT_CONTEXT_LINES = 3
MAX_CONTEXT_LINES = 999_999


def normalize_context_lines(value: Any) -> int:
    """Return ``value`` if it is an int in [1, 999999], else the default of 3."""
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 < value <= MAX_CONTEXT_LINES
    ):
        return value
    return DEFAULT_CONTEXT_LINES


@dataclass(frozen=True)
class RepoConfig:
    """Where the repository lives and how git is invoked against it."""

    repo_path: str

    # Seconds allowed for a single git invocation
    git_timeout: int = 60

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.git_timeout <= 0:
            raise ValueError("git_timeout must be positive")

    @property
    def git_env(self) -> Dict[str, str]:
        """Get Git environment variables for deterministic output."""
        env = os.environ.copy()

        # Use platform-appropriate null device
        null_device = "NUL" if os.name == "nt" else "/dev/null"

        env.update(
            {
                "LC_ALL": "C",
                "GIT_CONFIG_GLOBAL": null_device,
                "GIT_CONFIG_SYSTEM": null_device,
                "GIT_TERMINAL_PROMPT": "0",
                "GIT_ASKPASS": "echo",
                "SSH_ASKPASS": "echo",
                "GCM_INTERACTIVE": "never",
            }
        )
        return env


@dataclass(frozen=True)
class ComparisonRequest:
    """Two revisions and the files to compare between them."""

    start_commit: str
    end_commit: str
    files: Sequence[str]
    context_lines: Any = DEFAULT_CONTEXT_LINES

    def __post_init__(self) -> None:
        """Normalize and validate the request after initialization."""
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(
            self, "context_lines", normalize_context_lines(self.context_lines)
        )

        if not self.start_commit or not self.start_commit.strip():
            raise ValueError("start_commit cannot be empty")
        if not self.end_commit or not self.end_commit.strip():
            raise ValueError("end_commit cannot be empty")
        if not self.files:
            raise ValueError("files cannot be empty")
