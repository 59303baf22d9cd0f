"""
Shared service dependencies.

The settings and model manager are created once in the application lifespan
and handed to endpoints through these functions.
"""

from ...models.manager import ModelManager
from ...settings import Settings


def get_settings() -> Settings:
    """FastAPI dependency to get the runtime settings from app state."""
    from ..main import app_state
    return app_state["settings"]

def get_model_manager() -> ModelManager:
    """FastAPI dependency to get the model manager from app state."""
    from ..main import app_state
    return app_state["model_manager"]
