"""FastAPI application for the pickdiff API."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import RepoConfig
from ..errors import PickDiffError
from ..logging_utils import configure_logging
from ..serialize import DiffSerializer
from ..settings import get_max_workers, get_repo_path
from ..vcs import GitRepository, Repository
from . import __version__
from .routes import router as api_router
from .services import DiffService

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[Repository] = None, max_workers: Optional[int] = None
) -> FastAPI:
    """Build the API bound to one repository.

    Without an explicit repository the path comes from ``PICKDIFF_REPO_PATH``
    (or the working directory).
    """
    configure_logging()

    if repository is None:
        repository = GitRepository(RepoConfig(repo_path=get_repo_path()))
    if max_workers is None:
        max_workers = get_max_workers()

    app = FastAPI(
        title="pickdiff API",
        description="Line-numbered diffs between two git revisions for chosen files",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.diff_service = DiffService(repository, max_workers=max_workers)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.exception_handler(PickDiffError)
    async def pickdiff_error_handler(request: Request, exc: PickDiffError):
        """Return the error envelope for failed git queries."""
        logger.warning(
            "Request failed",
            extra={"code": exc.code, "path": str(request.url.path)},
        )
        envelope = DiffSerializer().create_error_envelope(exc.code, exc.message, exc.details)
        return JSONResponse(status_code=500, content=envelope)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Return a consistent error envelope for uncaught exceptions."""
        logger.exception("Unhandled API error", extra={"path": str(request.url.path)})
        return JSONResponse(
            status_code=500,
            content={
                "ok": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": f"Internal server error: {str(exc) or 'Unknown error'}",
                    "details": {
                        "exception_type": type(exc).__name__,
                        "path": str(request.url.path),
                    },
                },
            },
        )

    logger.info("API created", extra={"repo": repository.repo_path})
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
