"""Pydantic models for pickdiff API requests and responses."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiffRequest(BaseModel):
    """Request model for the diff endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    start_commit: str = Field(
        ...,
        alias="startCommit",
        description="Start revision (hash, branch or relative ref)",
        examples=["HEAD~5"],
    )
    end_commit: str = Field(
        ...,
        alias="endCommit",
        description="End revision (hash, branch or relative ref)",
        examples=["HEAD"],
    )
    files: List[str] = Field(
        ...,
        description="Repository-relative paths to diff, in display order",
        examples=[["src/index.ts", "README.md"]],
    )
    # Any value is accepted; out-of-range or non-integer input becomes 3
    context_lines: Any = Field(
        3,
        alias="contextLines",
        description="Context lines around each change (1-999999)",
    )

    @field_validator("start_commit", "end_commit")
    @classmethod
    def commit_must_not_be_empty(cls, v):
        """Revisions are opaque, but they must be present."""
        v = v.strip()
        if not v:
            raise ValueError("commit cannot be empty")
        return v

    @field_validator("files")
    @classmethod
    def files_must_not_be_empty(cls, v):
        """At least one file must be requested."""
        if not v:
            raise ValueError("files cannot be empty")
        return v


class MarkdownRequest(DiffRequest):
    """Request model for the Markdown export endpoint."""

    language_fences: bool = Field(
        False,
        alias="languageFences",
        description="Tag code fences with the file language instead of 'diff'",
    )


class RepoPathResponse(BaseModel):
    """Response model for the repository path endpoint."""

    path: str = Field(..., examples=["/home/user/project"])


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])
    git_available: bool = Field(..., examples=[True])
    git_version: Optional[str] = Field(None, examples=["2.34.1"])
    repository_valid: bool = Field(..., examples=[True])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    git_version: Optional[str] = Field(None, examples=["2.34.1"])
    supported_formats: list = Field(
        default_factory=lambda: [
            "json",
            "unified",
            "markdown",
            "html",
        ]
    )
