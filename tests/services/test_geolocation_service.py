"""
Tests for the Geolocation Acquirer.
"""

import asyncio

import pytest

from attraction_finder.errors import (
    GEOLOCATION_ERROR_MESSAGES,
    GeolocationError,
    GeolocationErrorKind,
)
from attraction_finder.schemas.attractions import Coordinates
from attraction_finder.services.geolocation_service import (
    POSITION_OPTIONS,
    PositionError,
    PositionOptions,
    acquire_coordinates,
    error_message_table,
    geolocation_error_from_code,
)


class FixedPositionSource:
    """Position source that returns a fixed fix and records the options."""

    def __init__(self, coordinates):
        self.coordinates = coordinates
        self.received_options = None

    async def get_current_position(self, options):
        self.received_options = options
        return self.coordinates


class FailingPositionSource:
    def __init__(self, code):
        self.code = code

    async def get_current_position(self, options):
        raise PositionError(self.code)


class BrokenPositionSource:
    async def get_current_position(self, options):
        raise OSError("location service crashed")


class HangingPositionSource:
    async def get_current_position(self, options):
        await asyncio.sleep(60)


class TestPositionOptions:

    def test_defaults(self):
        assert POSITION_OPTIONS.enable_high_accuracy is True
        assert POSITION_OPTIONS.timeout_ms == 10000
        assert POSITION_OPTIONS.maximum_age_ms == 0
        assert POSITION_OPTIONS.timeout_seconds == 10


class TestAcquireCoordinates:

    @pytest.mark.asyncio
    async def test_success(self):
        source = FixedPositionSource(Coordinates(latitude=25.033, longitude=121.5654))

        coordinates = await acquire_coordinates(source)

        assert coordinates == Coordinates(latitude=25.033, longitude=121.5654)
        assert source.received_options is POSITION_OPTIONS

    @pytest.mark.asyncio
    async def test_no_source_is_unsupported(self):
        with pytest.raises(GeolocationError) as exc_info:
            await acquire_coordinates(None)

        assert exc_info.value.kind == GeolocationErrorKind.UNSUPPORTED
        assert exc_info.value.user_message == "您的瀏覽器不支援地理位置功能。"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code,kind", [
        (1, GeolocationErrorKind.PERMISSION_DENIED),
        (2, GeolocationErrorKind.POSITION_UNAVAILABLE),
        (3, GeolocationErrorKind.TIMEOUT),
    ])
    async def test_source_failures_are_classified(self, code, kind):
        with pytest.raises(GeolocationError) as exc_info:
            await acquire_coordinates(FailingPositionSource(code))

        assert exc_info.value.kind == kind
        assert exc_info.value.user_message == GEOLOCATION_ERROR_MESSAGES[kind]

    @pytest.mark.asyncio
    async def test_unexpected_source_failure_is_unavailable(self):
        with pytest.raises(GeolocationError) as exc_info:
            await acquire_coordinates(BrokenPositionSource())

        assert exc_info.value.kind == GeolocationErrorKind.POSITION_UNAVAILABLE
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_timeout_is_enforced(self):
        options = PositionOptions(enable_high_accuracy=True, timeout_ms=10, maximum_age_ms=0)

        with pytest.raises(GeolocationError) as exc_info:
            await acquire_coordinates(HangingPositionSource(), options)

        assert exc_info.value.kind == GeolocationErrorKind.TIMEOUT


class TestErrorCodes:

    def test_unknown_code_maps_to_unavailable(self):
        assert geolocation_error_from_code(99).kind == GeolocationErrorKind.POSITION_UNAVAILABLE

    def test_every_kind_has_message(self):
        for kind in GeolocationErrorKind:
            assert GEOLOCATION_ERROR_MESSAGES[kind]

    def test_message_table_keyed_by_code(self):
        table = error_message_table()

        assert set(table) == {0, 1, 2, 3}
        assert table[3] == "取得位置資訊超時。"
