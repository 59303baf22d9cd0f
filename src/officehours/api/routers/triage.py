"""
Ticket triage endpoint.

Accepts `{"userMessage": "..."}` and returns the six-field triage result.
Next steps must open with one of the approved action verbs.
"""

from fastapi import APIRouter, Depends, Request

from ..handler import handle_plan_request, OTHER_METHODS
from ..models.common import ErrorResponse
from ..models.plan import TriageRequest, PlanResult
from ..dependencies.services import get_model_manager, get_settings
from ...models.manager import ModelManager
from ...settings import Settings
from ...pipeline.plan.variants import TRIAGE

router = APIRouter()

@router.post(
    "",
    responses={
        200: {"model": PlanResult, "description": "Validated triage result"},
        400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 413: {"model": ErrorResponse},
        429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse},
    },
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": TriageRequest.model_json_schema()}}}},
)
@router.api_route("", methods=OTHER_METHODS, include_in_schema=False)
async def triage(
    request: Request,
    model_manager: ModelManager = Depends(get_model_manager),
    settings: Settings = Depends(get_settings)
):
    """Triage a free-text ticket into problem statement, questions, approach, tools, risks and next steps."""
    return await handle_plan_request(request, TRIAGE, model_manager, settings)
