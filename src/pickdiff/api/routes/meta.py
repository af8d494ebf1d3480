"""Meta and repository endpoints for pickdiff API."""

import logging
from typing import List

from fastapi import APIRouter, Depends

from .. import __version__
from ..dependencies import get_diff_service
from ..models import HealthResponse, RepoPathResponse, VersionResponse
from ..services import DiffService

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check(service: DiffService = Depends(get_diff_service)) -> HealthResponse:
    """Health check endpoint."""
    git_version = service.repository.get_git_version()
    repository_valid = git_version is not None and service.repository.is_repository()
    logger.info(
        "Health check invoked",
        extra={"git_available": git_version is not None, "git_version": git_version},
    )
    return HealthResponse(
        status="healthy",
        version=__version__,
        git_available=git_version is not None,
        git_version=git_version,
        repository_valid=repository_valid,
    )


@router.get("/version", response_model=VersionResponse)
def version_info(service: DiffService = Depends(get_diff_service)) -> VersionResponse:
    """Version information endpoint."""
    git_version = service.repository.get_git_version()
    logger.info("Version endpoint invoked", extra={"git_version": git_version})
    return VersionResponse(
        version=__version__,
        api_version="v1",
        git_version=git_version,
    )


@router.get("/api/repo-path", response_model=RepoPathResponse)
def repo_path(service: DiffService = Depends(get_diff_service)) -> RepoPathResponse:
    """Path of the repository this server compares revisions in."""
    return RepoPathResponse(path=service.repo_path)


@router.get("/api/files")
def list_files(service: DiffService = Depends(get_diff_service)) -> List[str]:
    """All tracked files, for picking what to compare."""
    return service.list_files()


@router.get("/", include_in_schema=False)
def root() -> dict:
    """Root endpoint providing basic API metadata."""
    logger.debug("Root endpoint served")
    return {
        "name": "pickdiff API",
        "version": __version__,
        "description": "Line-numbered diffs between two git revisions for chosen files",
        "endpoints": {
            "files": "GET /api/files - Tracked files",
            "repo_path": "GET /api/repo-path - Repository path",
            "diff": "POST /api/diff - Structured diff as JSON",
            "unified": "POST /api/diff/unified - Unified diff text",
            "markdown": "POST /api/diff/markdown - Markdown export",
            "html": "POST /api/diff/html - Highlighted HTML fragment",
            "health": "GET /health - Health check",
            "version": "GET /version - Version information",
            "docs": "GET /docs - API documentation",
        },
    }
