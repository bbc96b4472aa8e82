"""
Health check endpoint schemas.

The health endpoint is PUBLIC and returns a simple status indicator.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health endpoint.

    Used by load balancers, monitoring systems, and deployment checks.
    The Gemini key is reported as a boolean only.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "gemini_configured": True
            }
        }
    )

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    gemini_configured: bool = Field(
        ...,
        description="Whether a Gemini API key is configured",
        examples=[True]
    )
