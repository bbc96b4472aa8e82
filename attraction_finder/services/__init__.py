"""
Service layer for the AI Attraction Finder backend.

Contains the core logic that:
- Builds prompts and calls Gemini for the list and detail flows
- Parses the list reply and decodes the detail reply
- Classifies Gemini faults into the error taxonomy
- Acquires geolocation from a position source

Services act as the glue between routes (HTTP layer) and Gemini.
"""

from .attraction_parser import (
    parse_attraction_line,
    parse_attraction_lines,
    parse_attractions,
)
from .detail_decoder import decode_attraction_detail
from .geolocation_service import (
    POSITION_OPTIONS,
    PositionError,
    PositionOptions,
    acquire_coordinates,
    geolocation_error_from_code,
)
from .recommendation_service import (
    classify_backend_error,
    fetch_attraction_detail,
    fetch_attractions,
)

__all__ = [
    # Parsing
    "parse_attraction_line",
    "parse_attraction_lines",
    "parse_attractions",
    "decode_attraction_detail",
    # Geolocation
    "POSITION_OPTIONS",
    "PositionError",
    "PositionOptions",
    "acquire_coordinates",
    "geolocation_error_from_code",
    # Gemini flows
    "classify_backend_error",
    "fetch_attraction_detail",
    "fetch_attractions",
]
