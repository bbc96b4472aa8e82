"""
FastAPI routes for the attraction recommendation endpoints.

This module exposes the two request flows of the recommendation system:
- POST /attractions/query: nearby attractions for coordinates + filters
- POST /attractions/details: detail content for one attraction

Both endpoints are public (the browser client has no user accounts). The
front end owns all displayed state and discards stale responses itself.
"""

from fastapi import APIRouter, HTTPException, status

from attraction_finder.errors import (
    AttractionFinderError,
    AuthError,
    BackendError,
    ConfigurationError,
    DetailDecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
)
from attraction_finder.schemas.attractions import (
    AttractionDetailRequest,
    AttractionDetailResponse,
    AttractionQueryRequest,
    AttractionQueryResponse,
    AttractionQueryResponseEmpty,
    AttractionQueryResponseOK,
    ErrorResponse,
)
from attraction_finder.services.recommendation_service import (
    fetch_attraction_detail,
    fetch_attractions,
)
from attraction_finder.utils.logging import get_logger

logger = get_logger(__name__)

EMPTY_RESULT_REASON = "AI 回應的格式不正確，無法解析景點。請稍後重新尋找景點。"

# Most specific class first
ERROR_STATUS_CODES = (
    (ConfigurationError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (RateLimitError, status.HTTP_429_TOO_MANY_REQUESTS),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BackendError, status.HTTP_502_BAD_GATEWAY),
    (DetailDecodeError, status.HTTP_502_BAD_GATEWAY),
)

ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in sorted({code for _, code in ERROR_STATUS_CODES})
}

# Create router
router = APIRouter(
    prefix="/attractions",
    tags=["attractions"]
)


def to_http_exception(error: AttractionFinderError) -> HTTPException:
    """Translate a service error into the API's error response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_class, code in ERROR_STATUS_CODES:
        if isinstance(error, error_class):
            status_code = code
            break

    return HTTPException(
        status_code=status_code,
        detail={
            "error": error.error,
            "details": error.user_message
        }
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/query",
    response_model=AttractionQueryResponse,
    status_code=200,
    responses=ERROR_RESPONSES,
    summary="Query nearby attractions",
    description="""
    Recommends 5 attractions near the given coordinates, filtered by
    category and distance.

    **Frontend Flow:**
    1. User picks a category and a distance
    2. Browser acquires coordinates (options from GET /geolocation/options)
    3. POST /attractions/query with coordinates and selections
    4. Receive one of two responses:
       - OK: attractions (+ grounding references) to render as cards
       - NO_ATTRACTIONS: the AI reply could not be parsed (offer retry)

    **Errors:** 503 when the Gemini key is not configured; 401/403/429/404/502
    for classified Gemini faults. Nothing is retried server-side.
    """
)
async def query_attractions_endpoint(
    request: AttractionQueryRequest,
) -> AttractionQueryResponse:
    """
    List flow endpoint.

    - Parse/Validate: Handled by Pydantic AttractionQueryRequest
    - Call Gemini: Single grounded call via service layer
    - Map output: empty parse -> NO_ATTRACTIONS, otherwise OK
    """
    logger.info(
        f"POST /attractions/query called: category={request.category.value}, "
        f"distance={request.distance.value}"
    )

    try:
        result = await fetch_attractions(
            coordinates=request.to_coordinates(),
            category=request.category,
            distance=request.distance,
        )
    except AttractionFinderError as e:
        logger.warning(f"Attraction query failed: error={e.error}")
        raise to_http_exception(e)

    if not result.attractions:
        logger.info("Returning response with status=NO_ATTRACTIONS")
        return AttractionQueryResponseEmpty(reason=EMPTY_RESULT_REASON)

    logger.info(f"Returning {len(result.attractions)} attractions with status=OK")
    return AttractionQueryResponseOK(
        attractions=result.attractions,
        grounding_references=result.grounding_references,
        dropped_line_count=result.dropped_line_count,
    )


@router.post(
    "/details",
    response_model=AttractionDetailResponse,
    status_code=200,
    responses=ERROR_RESPONSES,
    summary="Get attraction details",
    description="""
    Returns a detailed description, transit information and reviews for one
    attraction. Every call queries Gemini again; results are not cached.

    **Errors:** 503 when the Gemini key is not configured; 401/403/429/404/502
    for classified Gemini faults; 502 with error=detail_decode_error when the
    reply did not match the detail schema.
    """
)
async def attraction_details_endpoint(
    request: AttractionDetailRequest,
) -> AttractionDetailResponse:
    """Detail flow endpoint."""
    logger.info("POST /attractions/details called")

    try:
        detail = await fetch_attraction_detail(request.name)
    except AttractionFinderError as e:
        logger.warning(f"Attraction detail failed: error={e.error}")
        raise to_http_exception(e)

    logger.info(f"Returning detail with {len(detail.reviews)} reviews")
    return AttractionDetailResponse(name=request.name, detail=detail)
