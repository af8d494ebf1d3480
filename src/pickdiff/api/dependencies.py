"""Request-scoped dependencies for pickdiff API routes."""

from fastapi import Request

from .services import DiffService


def get_diff_service(request: Request) -> DiffService:
    """The DiffService bound to the running application."""
    return request.app.state.diff_service
