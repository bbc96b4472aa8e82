"""
Geolocation Acquirer

Wraps a one-shot position source and turns its outcome into Coordinates
or a classified GeolocationError.

In production the browser performs the actual position query; it reads
POSITION_OPTIONS and the message table from GET /geolocation/options and
sends the resulting coordinates to /attractions/query. acquire_coordinates
applies the same contract to any async source (a device, a test double).
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from attraction_finder.errors import (
    GEOLOCATION_ERROR_MESSAGES,
    GeolocationError,
    GeolocationErrorKind,
)
from attraction_finder.schemas.attractions import Coordinates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionOptions:
    """Options for a one-shot position request."""
    enable_high_accuracy: bool
    timeout_ms: int
    maximum_age_ms: int

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


# Always a fresh, high-accuracy fix; give up after 10 seconds
POSITION_OPTIONS = PositionOptions(
    enable_high_accuracy=True,
    timeout_ms=10000,
    maximum_age_ms=0,
)


class PositionError(Exception):
    """Raised by a position source with a GeolocationPositionError code."""

    def __init__(self, code: int, message: str = ""):
        self.code = code
        super().__init__(message or f"position error code {code}")


class PositionSource(Protocol):
    async def get_current_position(self, options: PositionOptions) -> Coordinates:
        ...


def geolocation_error_from_code(code: int) -> GeolocationError:
    """
    Map a GeolocationPositionError code to a GeolocationError.

    Unknown codes are reported as POSITION_UNAVAILABLE.
    """
    try:
        kind = GeolocationErrorKind(code)
    except ValueError:
        logger.warning(f"Unknown geolocation error code: {code}")
        kind = GeolocationErrorKind.POSITION_UNAVAILABLE
    return GeolocationError(kind)


async def acquire_coordinates(
    source: Optional[PositionSource],
    options: PositionOptions = POSITION_OPTIONS,
) -> Coordinates:
    """
    Request the current position once.

    Args:
        source: Position source, or None when the platform has no geolocation
        options: Position options; the timeout is enforced here as well

    Returns:
        Coordinates of the current position

    Raises:
        GeolocationError: UNSUPPORTED, PERMISSION_DENIED,
            POSITION_UNAVAILABLE or TIMEOUT
    """
    if source is None:
        logger.warning("Geolocation requested but no position source is available")
        raise GeolocationError(GeolocationErrorKind.UNSUPPORTED)

    try:
        coordinates = await asyncio.wait_for(
            source.get_current_position(options),
            timeout=options.timeout_seconds,
        )
    except asyncio.TimeoutError as e:
        logger.warning(f"Geolocation timed out after {options.timeout_ms} ms")
        raise GeolocationError(GeolocationErrorKind.TIMEOUT) from e
    except PositionError as e:
        error = geolocation_error_from_code(e.code)
        logger.warning(f"Geolocation failed: kind={error.kind.name}")
        raise error from e
    except Exception as e:
        logger.error(f"Position source failed unexpectedly: {e}")
        raise GeolocationError(GeolocationErrorKind.POSITION_UNAVAILABLE) from e

    logger.debug("Geolocation acquired")
    return coordinates


def error_message_table() -> dict:
    """User-facing message per error code, for the front end."""
    return {kind.value: message for kind, message in GEOLOCATION_ERROR_MESSAGES.items()}
