"""
Geolocation options route.

The browser performs the one-shot position query itself. This endpoint
publishes the options it must use (high accuracy, 10 s timeout, no cached
positions) and the message to show for each failure code, so the client
and server share one definition.
"""

from fastapi import APIRouter

from attraction_finder.schemas.geolocation import GeolocationOptionsResponse
from attraction_finder.services.geolocation_service import (
    POSITION_OPTIONS,
    error_message_table,
)
from attraction_finder.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/geolocation",
    tags=["geolocation"]
)


@router.get(
    "/options",
    response_model=GeolocationOptionsResponse,
    summary="Geolocation request options",
    status_code=200,
)
async def geolocation_options() -> GeolocationOptionsResponse:
    logger.debug("Geolocation options requested")

    return GeolocationOptionsResponse(
        enable_high_accuracy=POSITION_OPTIONS.enable_high_accuracy,
        timeout_ms=POSITION_OPTIONS.timeout_ms,
        maximum_age_ms=POSITION_OPTIONS.maximum_age_ms,
        error_messages=error_message_table(),
    )
