"""
Shared HTTP adapter for the plan pipeline.

Both endpoints funnel through `handle_plan_request`; they differ only in the
PlanVariant they pass. No exception escapes to the transport: pipeline
failures become their mapped error envelope and anything unexpected becomes
a 502.
"""

import logging
from typing import Mapping

from fastapi import Request, Response
from fastapi.concurrency import run_in_threadpool

from ..models.manager import ModelManager
from ..settings import Settings
from ..pipeline.plan.types import PlanVariant, RequestEnvelope
from ..pipeline.plan.normalizer import check_method, MAX_BODY_BYTES
from ..pipeline.plan.pipeline import PlanPipeline
from ..pipeline.plan.errors import PipelineError, ProviderFailure
from .responses import json_response, preflight_response, error_response

logger = logging.getLogger(__name__)

# POST is routed separately; the rest still need the 405 envelope
OTHER_METHODS = ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]
BASE64_HEADERS = ("content-transfer-encoding", "x-body-encoding")


def declares_base64(headers: Mapping[str, str]) -> bool:
    return any((headers.get(name) or "").strip().lower() == "base64" for name in BASE64_HEADERS)


async def read_capped_body(request: Request, limit: int = MAX_BODY_BYTES) -> bytes:
    """Read at most limit + 1 bytes; anything longer is rejected downstream as too large."""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            break
    return bytes(body[:limit + 1])


async def build_envelope(request: Request) -> RequestEnvelope:
    body = await read_capped_body(request)
    headers = dict(request.headers)
    return RequestEnvelope(
        method=request.method,
        headers=headers,
        body=body,
        is_base64_encoded=declares_base64(headers),
    )


async def handle_plan_request(request: Request, variant: PlanVariant, model_manager: ModelManager, settings: Settings) -> Response:
    envelope = await build_envelope(request)
    request_id = envelope.request_id

    try:
        if check_method(envelope.method):
            return preflight_response(request_id)

        pipeline = PlanPipeline(model_manager, settings, variant)
        # the provider SDK is synchronous
        result = await run_in_threadpool(pipeline.process, envelope)
    except PipelineError as e:
        logger.info(f"[{request_id}] {variant.name}: {e.status_code} {e.message}")
        return error_response(e, request_id, debug=settings.debug_errors)
    except Exception as e:
        logger.exception(f"[{request_id}] {variant.name}: unexpected failure")
        failure = ProviderFailure("LLM request failed.", details=str(e) or type(e).__name__)
        return error_response(failure, request_id, debug=settings.debug_errors)

    return json_response(200, result, request_id)
