"""Diff routes for pickdiff API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from ..dependencies import get_diff_service
from ..models import DiffRequest, MarkdownRequest
from ..services import DiffService

router = APIRouter(prefix="/api", tags=["diff"])

logger = logging.getLogger(__name__)


@router.post("/diff")
def create_diff(
    request: DiffRequest, service: DiffService = Depends(get_diff_service)
) -> Dict[str, Any]:
    """Line-numbered diffs for the requested files between two revisions."""
    logger.info(
        "Received diff request",
        extra={"start": request.start_commit, "end": request.end_commit},
    )
    return service.process_diff_request(request)


@router.post("/diff/unified", response_class=PlainTextResponse)
def create_unified_diff(
    request: DiffRequest, service: DiffService = Depends(get_diff_service)
) -> str:
    """The same diffs as unified text."""
    return service.render_unified(request)


@router.post("/diff/markdown", response_class=PlainTextResponse)
def export_markdown(
    request: MarkdownRequest, service: DiffService = Depends(get_diff_service)
) -> PlainTextResponse:
    """The same diffs as a Markdown document."""
    markdown = service.render_markdown(request)
    return PlainTextResponse(markdown, media_type="text/markdown; charset=utf-8")


@router.post("/diff/html", response_class=HTMLResponse)
def render_html(
    request: DiffRequest, service: DiffService = Depends(get_diff_service)
) -> str:
    """The same diffs as a highlighted HTML fragment."""
    return service.render_html(request)
