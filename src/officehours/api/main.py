"""
FastAPI application entry point.

This is the main FastAPI application that wires the triage and plan routers
to the shared pipeline services.
"""

import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from .routers import health, triage, plan
from ..models.manager import ModelManager
from ..settings import Settings
from ..utils.log import setup_logging
from .. import __version__

logger = logging.getLogger(__name__)

# Global application state
app_state = {}

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Settings and the model manager are built once at startup; a missing
    OPENAI_API_KEY is reported here and on every request, not raised.
    """
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger.info("Starting Office Hours Helper API server")

    app_state["settings"] = settings
    app_state["model_manager"] = ModelManager(config_path=settings.config_path, settings=settings)

    if not settings.has_credentials:
        logger.error("OPENAI_API_KEY is not set; plan requests will fail with 500")
    if settings.debug_errors:
        logger.warning("DEBUG_ERRORS is enabled; error responses include model output")
    logger.info("API server ready to accept requests")

    yield  # Server runs here

    logger.info("Shutting down Office Hours Helper API server")
    app_state.clear()

def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    CORS headers are written by the plan endpoints themselves: the preflight
    must answer 204 with a fixed header set, which CORSMiddleware does not.
    """

    app = FastAPI(
        title="Office Hours Helper API",
        description="Turns a free-text workflow problem into a validated, structured remediation plan",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(triage.router, prefix="/api/v1/triage", tags=["triage"])
    app.include_router(plan.router, prefix="/api/v1/generatePlan", tags=["plan"])

    # paths the existing frontend calls
    app.include_router(triage.router, prefix="/.netlify/functions/triage", include_in_schema=False)
    app.include_router(plan.router, prefix="/.netlify/functions/generatePlan", include_in_schema=False)

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": "Office Hours Helper API",
            "version": __version__,
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "triage": "/api/v1/triage",
                "generatePlan": "/api/v1/generatePlan",
                "docs": "/docs",
                "redoc": "/redoc"
            }
        }

    return app

# Create the FastAPI app instance
app = create_app()
