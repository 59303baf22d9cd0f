"""
Health check endpoints for monitoring and diagnostics.

These endpoints report whether the service is configured to reach the
completion provider; they never call the provider themselves.
"""

import time
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from ..models.common import HealthStatus
from ..dependencies.services import get_model_manager, get_settings
from ...models.manager import ModelManager
from ...settings import Settings
from ... import __version__

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()

@router.get("/", response_model=HealthStatus)
async def health_check(
    settings: Settings = Depends(get_settings),
    model_manager: ModelManager = Depends(get_model_manager)
):
    """
    Basic health check endpoint.

    Returns the status of the API and its dependencies.
    Useful for load balancers and monitoring systems.
    """

    uptime = time.time() - _server_start_time

    dependencies = {}
    dependencies["openai_credentials"] = "configured" if settings.has_credentials else "missing OPENAI_API_KEY"

    try:
        tasks = model_manager.config.get("tasks", {})
        models = sorted({model_manager.task_config(name).model for name in tasks})
        dependencies["model_tasks"] = f"{len(tasks)} tasks ({', '.join(models)})"
    except Exception as e:
        dependencies["model_tasks"] = f"error: {e}"

    return HealthStatus(
        status="healthy" if settings.has_credentials else "degraded",
        version=__version__,
        uptime=uptime,
        dependencies=dependencies
    )

@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness probe for container deployments.

    Requests fail with 500 until the provider credential is configured, so
    the service is not ready without it.
    """
    if not settings.has_credentials:
        return JSONResponse(
            status_code=503,
            content={"ready": False, "reason": "OPENAI_API_KEY not configured"}
        )

    return {"ready": True, "timestamp": datetime.now(timezone.utc).isoformat()}
