"""
Health check route for the AI Attraction Finder backend.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification.
"""

from fastapi import APIRouter

from attraction_finder.config import settings
from attraction_finder.schemas.health import HealthResponse
from attraction_finder.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. Returns a simple status indicator "
        "and whether the Gemini key is configured."
    ),
    tags=["system"],
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "gemini_configured": true
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", gemini_configured=bool(settings.GEMINI_API_KEY))
