"""JSON serialization for pickdiff."""

import json
import logging
from typing import Any, Dict, Optional

from .config import ComparisonRequest
from .diffpack import DiffResult

logger = logging.getLogger(__name__)


class DiffSerializer:
    """Serializes DiffResults to JSON-ready dictionaries.

    File order in ``diffs`` and ``excludedFiles`` is the request order and is
    never re-sorted.
    """

    def __init__(self, request: Optional[ComparisonRequest] = None):
        """Initialize with the request the result answers, if known."""
        self.request = request

    def serialize_result(self, result: DiffResult) -> Dict[str, Any]:
        """Serialize a DiffResult, with request metadata when available."""
        logger.debug(
            "Serializing result",
            extra={
                "files": result.changed_files_count,
                "excluded": len(result.excluded_files),
            },
        )
        payload = result.to_dict()
        if self.request is not None:
            payload["request"] = {
                "startCommit": self.request.start_commit,
                "endCommit": self.request.end_commit,
                "contextLines": self.request.context_lines,
                "files": list(self.request.files),
            }
        return payload

    def to_json_string(self, payload: Dict[str, Any]) -> str:
        """Convert payload to pretty-printed JSON string."""
        logger.debug("Rendering payload to JSON string")
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        logger.debug("Creating success envelope")
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
