"""
Common API models used across different endpoints.

These models represent shared concepts like the error envelope and health status.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

class ErrorResponse(BaseModel):
    """Standard error response format.

    `details` and `model_output` are populated only in debug mode and are
    omitted from the serialized body otherwise; `requestId` is always present.
    """
    error: str = Field(..., description="Human-readable error message")
    requestId: Optional[str] = Field(None, description="Correlation id echoed from the request headers")
    details: Optional[str] = Field(None, description="Diagnostic detail (debug mode only)")
    model_output: Optional[str] = Field(None, description="Raw model output, truncated (debug mode only)")

    def to_body(self) -> Dict[str, Any]:
        optional = {name for name in ("details", "model_output") if getattr(self, name) is None}
        return self.model_dump(exclude=optional)

class HealthStatus(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    uptime: float = Field(..., description="Uptime in seconds")
    dependencies: Dict[str, str] = Field(..., description="Status of external dependencies")
