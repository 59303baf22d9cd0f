"""
Workflow plan endpoint.

Accepts `{"input": "..."}` and returns the six-field office-hours plan.
Next steps may carry a numbering or bullet prefix before the leading verb.
"""

from fastapi import APIRouter, Depends, Request

from ..handler import handle_plan_request, OTHER_METHODS
from ..models.common import ErrorResponse
from ..models.plan import PlanRequest, PlanResult
from ..dependencies.services import get_model_manager, get_settings
from ...models.manager import ModelManager
from ...settings import Settings
from ...pipeline.plan.variants import GENERATE_PLAN

router = APIRouter()

@router.post(
    "",
    responses={
        200: {"model": PlanResult, "description": "Validated workflow plan"},
        400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 413: {"model": ErrorResponse},
        429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse},
    },
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": PlanRequest.model_json_schema()}}}},
)
@router.api_route("", methods=OTHER_METHODS, include_in_schema=False)
async def generate_plan(
    request: Request,
    model_manager: ModelManager = Depends(get_model_manager),
    settings: Settings = Depends(get_settings)
):
    """Generate a practical remediation plan for a described workflow problem."""
    return await handle_plan_request(request, GENERATE_PLAN, model_manager, settings)
