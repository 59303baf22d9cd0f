"""
Response builders shared by the triage and plan endpoints.

Every response carries the permissive CORS headers and, when the request had
one, the correlation id as `x-request-id`.
"""

import json
from typing import Any, Dict, Optional

from fastapi import Response

from .models.common import ErrorResponse
from ..pipeline.plan.errors import PipelineError

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "content-type",
    "access-control-allow-methods": "POST, OPTIONS",
}
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def _headers(request_id: Optional[str]) -> Dict[str, str]:
    headers = dict(CORS_HEADERS)
    if request_id:
        headers["x-request-id"] = request_id
    return headers


def json_response(status_code: int, body: Any, request_id: Optional[str] = None) -> Response:
    headers = _headers(request_id)
    headers["content-type"] = JSON_CONTENT_TYPE
    return Response(
        content=json.dumps(body, ensure_ascii=False),
        status_code=status_code,
        headers=headers,
    )


def preflight_response(request_id: Optional[str] = None) -> Response:
    return Response(status_code=204, headers=_headers(request_id))


def error_response(error: PipelineError, request_id: Optional[str], debug: bool = False) -> Response:
    envelope = ErrorResponse(
        error=error.message,
        requestId=request_id,
        details=error.details if debug else None,
        model_output=error.model_output if debug else None,
    )
    return json_response(error.status_code, envelope.to_body(), request_id)
