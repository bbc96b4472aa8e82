"""
Recommendation Service - Gemini with Google Maps Grounding

This service implements nearby attraction recommendations using Google's
Gemini model with the Google Maps grounding tool, plus a per-attraction
detail lookup with schema-constrained JSON output.

Architecture:
- Pattern: Grounded LLM (single API call per flow)
- Model: Gemini 2.5 Flash (settings.GEMINI_MODEL)
- Location data: Google Maps tool, retrieval biased to the user's lat/lng
- API: Google Gen AI Python SDK (google-genai), async client (client.aio)

Flows:
- List flow (fetch_attractions): prompt -> Gemini + Maps -> reply text and
  grounding references -> List-Response Parser
- Detail flow (fetch_attraction_detail): prompt -> Gemini with
  response_schema -> Detail-Response Decoder

IMPORTANT: Google Maps grounding doesn't support response_schema, so the
list reply is free text in a line grammar described by the prompt.

The service keeps no per-request state. One Gemini client is created
lazily from the configured key and reused; replies are never cached and
calls are never retried.
"""

import logging
from typing import List

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from attraction_finder.agents.attractions.prompts import (
    build_attraction_detail_prompt,
    build_attractions_prompt,
)
from attraction_finder.config import settings
from attraction_finder.errors import (
    AuthError,
    BackendError,
    ConfigurationError,
    DetailDecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    UnknownBackendError,
)
from attraction_finder.schemas.attractions import (
    AttractionDetail,
    AttractionList,
    CategoryOption,
    Coordinates,
    DistanceOption,
    GroundingReference,
)
from attraction_finder.services.attraction_parser import parse_attraction_lines
from attraction_finder.services.detail_decoder import decode_attraction_detail

logger = logging.getLogger(__name__)

# Lazily created, rebuilt if the configured key changes
_gemini_client = None
_gemini_client_key = None


# =============================================================================
# FAULT CLASSIFICATION
# =============================================================================
# Gemini faults arrive as opaque exceptions. The mapping below sniffs the
# message (and the HTTP code/status of APIError when available). Keep all
# of it in this one function; unmatched faults fall through to
# UnknownBackendError.
# =============================================================================

AUTH_MARKERS = ("API_KEY", "api key not valid", "UNAUTHENTICATED")
FORBIDDEN_MARKERS = ("403", "PERMISSION_DENIED")
RATE_LIMIT_MARKERS = ("429", "RESOURCE_EXHAUSTED", "quota")
NOT_FOUND_MARKERS = ("not found", "NOT_FOUND", "404")


def _contains_any(message: str, markers) -> bool:
    lowered = message.lower()
    for marker in markers:
        # Upper-case markers are API enum names and are matched exactly
        if marker.isupper():
            if marker in message:
                return True
        elif marker.lower() in lowered:
            return True
    return False


def classify_backend_error(error: BaseException) -> BackendError:
    """
    Map a Gemini/network fault onto the BackendError hierarchy.

    This is best-effort: it depends on the wording of Google's error
    messages. It never raises.

    Args:
        error: Exception raised by the Gemini client

    Returns:
        AuthError, ForbiddenError, RateLimitError, NotFoundError, or
        UnknownBackendError carrying the raw message
    """
    message = str(error) or error.__class__.__name__

    code = None
    if isinstance(error, genai_errors.APIError):
        code = error.code
        if error.status:
            message = f"{message} {error.status}"

    if code == 401 or _contains_any(message, AUTH_MARKERS):
        return AuthError(error)
    if code == 403 or _contains_any(message, FORBIDDEN_MARKERS):
        return ForbiddenError(error)
    if code == 429 or _contains_any(message, RATE_LIMIT_MARKERS):
        return RateLimitError(error)
    if code == 404 or _contains_any(message, NOT_FOUND_MARKERS):
        return NotFoundError(error)
    return UnknownBackendError(error, raw_message=str(error) or error.__class__.__name__)


# =============================================================================
# GEMINI HELPERS
# =============================================================================

def _get_gemini_client() -> genai.Client:
    """
    Lazy initialization of the Gemini client.

    The client (and its connection pools) is shared by all requests.

    Raises:
        ConfigurationError: If no key is configured (before any network call)
    """
    global _gemini_client, _gemini_client_key

    if not settings.GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY not configured")
        raise ConfigurationError()

    if _gemini_client is not None and _gemini_client_key == settings.GEMINI_API_KEY:
        return _gemini_client

    _gemini_client = genai.Client(api_key=settings.GEMINI_API_KEY)
    _gemini_client_key = settings.GEMINI_API_KEY
    logger.info("Gemini client initialized successfully")
    return _gemini_client


def _extract_reply_text(response) -> str:
    """
    Get the reply text from a Gemini response.

    Text parts of the first candidate are joined; falls back to
    response.text, and to "" when the model returned nothing.
    """
    if response.candidates:
        candidate = response.candidates[0]
        if candidate.content and candidate.content.parts:
            texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
            if texts:
                return "".join(texts)

    return response.text or ""


def _extract_grounding_references(response) -> List[GroundingReference]:
    """
    Collect Google Maps grounding references from the first candidate.

    Chunks without a maps entry or with an empty uri are skipped; the
    remaining references keep their order.
    """
    references: List[GroundingReference] = []

    if not response.candidates:
        return references

    metadata = getattr(response.candidates[0], "grounding_metadata", None)
    if not metadata or not metadata.grounding_chunks:
        return references

    for chunk in metadata.grounding_chunks:
        maps = getattr(chunk, "maps", None)
        if not maps or not getattr(maps, "uri", None):
            continue
        references.append(GroundingReference(uri=maps.uri, title=getattr(maps, "title", None) or ""))

    return references


def _build_attractions_config(coordinates: Coordinates) -> types.GenerateContentConfig:
    """Maps tool with retrieval biased to the user's position."""
    return types.GenerateContentConfig(
        tools=[types.Tool(google_maps=types.GoogleMaps())],
        tool_config=types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(
                    latitude=coordinates.latitude,
                    longitude=coordinates.longitude,
                )
            )
        ),
    )


def _build_detail_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=AttractionDetail,
    )


# =============================================================================
# FLOWS
# =============================================================================

async def fetch_attractions(
    coordinates: Coordinates,
    category: CategoryOption,
    distance: DistanceOption,
) -> AttractionList:
    """
    List flow: ask Gemini for nearby attractions and parse the reply.

    This function:
    1. Checks the Gemini key (ConfigurationError before any network call)
    2. Builds the list prompt from coordinates, category and distance
    3. Calls Gemini with the Google Maps tool biased to the coordinates
    4. Extracts the reply text and the grounding references
    5. Parses the reply text with the line grammar

    Args:
        coordinates: User's current position
        category: Selected category
        distance: Selected search radius

    Returns:
        AttractionList. An empty attractions list is a valid outcome (the
        reply didn't follow the grammar), not an error.

    Raises:
        ConfigurationError: No Gemini key configured
        BackendError: Gemini/network fault (classified subclass)
    """
    logger.info(
        f"fetch_attractions called: category={category.value}, distance={distance.value}"
    )

    client = _get_gemini_client()
    prompt = build_attractions_prompt(coordinates, category, distance)

    try:
        logger.info("Calling Gemini API with Google Maps grounding...")
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=prompt,
            config=_build_attractions_config(coordinates),
        )
    except Exception as e:
        backend_error = classify_backend_error(e)
        logger.error(
            f"Error calling Gemini API: classification={backend_error.classification.value}, error={e}"
        )
        raise backend_error from e

    grounding_references = _extract_grounding_references(response)
    reply_text = _extract_reply_text(response)
    logger.debug(f"Raw attractions reply: {reply_text}")

    parsed = parse_attraction_lines(reply_text)

    if parsed.dropped_lines:
        logger.warning(
            f"Dropped {len(parsed.dropped_lines)} reply line(s) not matching the line format"
        )
    if not parsed.attractions:
        logger.warning("No attractions could be parsed from the Gemini reply")

    logger.info(
        f"Returning {len(parsed.attractions)} attractions, "
        f"{len(grounding_references)} grounding references"
    )

    return AttractionList(
        attractions=parsed.attractions,
        grounding_references=grounding_references,
        dropped_line_count=len(parsed.dropped_lines),
    )


async def fetch_attraction_detail(name: str) -> AttractionDetail:
    """
    Detail flow: ask Gemini for description, traffic and reviews of one
    attraction as schema-constrained JSON.

    Always makes a fresh backend call; nothing is cached per name.

    Args:
        name: Attraction name from a previous list result

    Returns:
        AttractionDetail

    Raises:
        ConfigurationError: No Gemini key configured
        BackendError: Gemini/network fault (classified subclass)
        DetailDecodeError: Reply was not valid JSON for the detail schema
    """
    logger.info("fetch_attraction_detail called")

    client = _get_gemini_client()
    prompt = build_attraction_detail_prompt(name)

    try:
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=prompt,
            config=_build_detail_config(),
        )
    except Exception as e:
        backend_error = classify_backend_error(e)
        logger.error(
            f"Error calling Gemini API for details: "
            f"classification={backend_error.classification.value}, error={e}"
        )
        raise backend_error from e

    reply_text = _extract_reply_text(response)
    logger.debug(f"Raw detail reply: {reply_text}")

    if not reply_text.strip():
        logger.error("Empty text in Gemini detail response")
        raise DetailDecodeError(raw_text=reply_text, reason="empty reply")

    return decode_attraction_detail(reply_text)
