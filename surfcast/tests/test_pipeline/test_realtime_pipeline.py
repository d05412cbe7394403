"""Tests for realtime assembly and the primary/fallback state machine."""

import asyncio
from datetime import UTC, datetime

import httpx
import pytest
import respx

from surfcast.config.schema import SpotConfig
from surfcast.errors import StaleData, UpstreamUnavailable
from surfcast.ingest.buoy_parser import parse_report
from surfcast.ingest.noaa_client import NoaaClient
from surfcast.models.common import Location, Orientation
from surfcast.models.quality import Quality
from surfcast.pipeline.realtime_pipeline import (
    FetchState,
    RealtimePipeline,
    build_reading,
    fallback_path,
    next_state,
)

BUOY_URL = "https://test-ndbc.example.com/data/realtime2/45013.txt"
STATION_URL = "https://test-ndbc.example.com/data/realtime2/MLWW3.txt"

FRESH = datetime(2024, 9, 6, 13, 0, tzinfo=UTC)
LATER = datetime(2024, 9, 8, 13, 0, tzinfo=UTC)


@pytest.fixture
def lonely_buoy() -> SpotConfig:
    """A buoy spot with nothing to fall back to."""
    return SpotConfig(
        name="Lonely",
        location=Location.ATWATER,
        forecast_path="/gridpoints/MKX/90,67",
        realtime_path="/data/realtime2/45013.txt",
        orientation=Orientation.SOUTH,
    )


def _run(noaa: NoaaClient, spot: SpotConfig, now: datetime):
    return asyncio.run(RealtimePipeline(noaa).run(spot, now))


class TestNextState:
    def test_fresh_primary_succeeds(self):
        assert next_state(FetchState.TRY_PRIMARY, True, False, True) == FetchState.SUCCESS

    def test_stale_primary_goes_to_fallback(self):
        state = next_state(FetchState.TRY_PRIMARY, True, True, True)
        assert state == FetchState.STALE_RETRY_FALLBACK
        assert next_state(state, False, False, True) == FetchState.TRY_FALLBACK

    def test_stale_primary_without_fallback_succeeds(self):
        assert next_state(FetchState.TRY_PRIMARY, True, True, False) == FetchState.SUCCESS

    def test_failed_primary_goes_to_fallback(self):
        state = next_state(FetchState.TRY_PRIMARY, False, False, True)
        assert state == FetchState.FAIL_RETRY_FALLBACK
        assert next_state(state, False, False, True) == FetchState.TRY_FALLBACK

    def test_failed_primary_without_fallback_fails(self):
        assert next_state(FetchState.TRY_PRIMARY, False, False, False) == FetchState.FAIL

    def test_fallback_outcomes(self):
        assert next_state(FetchState.TRY_FALLBACK, True, True, True) == FetchState.SUCCESS
        assert next_state(FetchState.TRY_FALLBACK, False, False, True) == FetchState.FAIL

    def test_terminal_states_stay(self):
        assert next_state(FetchState.SUCCESS, False, False, False) == FetchState.SUCCESS
        assert next_state(FetchState.FAIL, True, False, True) == FetchState.FAIL


class TestFallbackPath:
    def test_configured_fallback(self, atwater: SpotConfig):
        assert fallback_path(atwater) == "/data/realtime2/MLWW3.txt"

    def test_station_spot_is_its_own_fallback(self, bradford: SpotConfig):
        assert fallback_path(bradford) == bradford.realtime_path

    def test_buoy_without_fallback(self, lonely_buoy: SpotConfig):
        assert fallback_path(lonely_buoy) is None


class TestBuildReading:
    def test_converts_buoy_observation(self, buoy_text: str, atwater: SpotConfig):
        reading = build_reading(parse_report(buoy_text), atwater, 22.0, False)
        assert reading.as_of == "Fri, 06 Sep 2024 07:50:00"
        assert reading.wind_direction == 250
        assert reading.wind_speed == "11"
        assert reading.gusts == "16"
        assert reading.wave_height == "1.97"
        assert reading.wave_period == 5
        assert reading.air_temp == "70"
        assert reading.water_temp == "72"
        assert reading.quality == Quality.GOOD

    def test_wave_direction_shifted(self, buoy_text: str, atwater: SpotConfig):
        reading = build_reading(parse_report(buoy_text), atwater, 22.0, False)
        # 200 from two rows back, pointed the way the waves travel
        assert reading.wave_direction == 380

    def test_missing_waves_never_flat(self, station_text: str, atwater: SpotConfig):
        reading = build_reading(parse_report(station_text), atwater, 22.0, True)
        assert reading.wave_height is None
        assert reading.wave_direction is None
        assert reading.quality == Quality.POOR

    def test_orientation_changes_rating(self, station_text: str, atwater: SpotConfig):
        north_facing = atwater.model_copy(update={"orientation": Orientation.NORTH})
        reading = build_reading(parse_report(station_text), north_facing, 22.0, True)
        assert reading.quality == Quality.GOOD

    def test_to_dict(self, buoy_text: str, atwater: SpotConfig):
        data = build_reading(parse_report(buoy_text), atwater, 22.0, False).to_dict()
        assert data["quality_text"] == "Good"
        assert data["quality_color"] == "#0bd674"
        assert data["loaded_from_fallback"] is False


class TestRealtimePipeline:
    @respx.mock
    def test_fresh_buoy(self, noaa: NoaaClient, atwater: SpotConfig, buoy_text: str):
        buoy = respx.get(BUOY_URL).mock(return_value=httpx.Response(200, text=buoy_text))
        station = respx.get(STATION_URL).mock(return_value=httpx.Response(200))

        reading = _run(noaa, atwater, FRESH)
        assert reading.loaded_from_fallback is False
        assert reading.wave_height == "1.97"
        assert buoy.call_count == 1
        assert not station.called

    @respx.mock
    def test_stale_buoy_uses_station(
        self, noaa: NoaaClient, atwater: SpotConfig, buoy_text: str, station_text: str
    ):
        buoy = respx.get(BUOY_URL).mock(return_value=httpx.Response(200, text=buoy_text))
        respx.get(STATION_URL).mock(return_value=httpx.Response(200, text=station_text))

        reading = _run(noaa, atwater, LATER)
        assert reading.loaded_from_fallback is True
        assert reading.wave_height is None
        assert reading.wind_speed == "20"
        assert reading.gusts == "27"
        # Station has no water temperature; read from the secondary buoy.
        assert reading.water_temp == "72"
        assert buoy.call_count == 2

    @respx.mock
    def test_stale_buoy_and_station_down(
        self, noaa: NoaaClient, atwater: SpotConfig, buoy_text: str
    ):
        respx.get(BUOY_URL).mock(return_value=httpx.Response(200, text=buoy_text))
        station = respx.get(STATION_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(StaleData):
            _run(noaa, atwater, LATER)
        assert station.call_count == 2

    @respx.mock
    def test_buoy_down_uses_station(
        self, noaa: NoaaClient, atwater: SpotConfig, buoy_text: str, station_text: str
    ):
        buoy = respx.get(BUOY_URL).mock(
            side_effect=[
                httpx.Response(500),
                httpx.Response(500),
                httpx.Response(200, text=buoy_text),
            ]
        )
        respx.get(STATION_URL).mock(return_value=httpx.Response(200, text=station_text))

        reading = _run(noaa, atwater, FRESH)
        assert reading.loaded_from_fallback is True
        # Two failed attempts, then the water temperature lookup
        assert buoy.call_count == 3

    @respx.mock
    def test_everything_down(self, noaa: NoaaClient, atwater: SpotConfig):
        respx.get(BUOY_URL).mock(return_value=httpx.Response(500))
        respx.get(STATION_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(UpstreamUnavailable):
            _run(noaa, atwater, FRESH)

    @respx.mock
    def test_retry_once_then_fail_without_fallback(
        self, noaa: NoaaClient, lonely_buoy: SpotConfig
    ):
        buoy = respx.get(BUOY_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(UpstreamUnavailable, match="Non 200 response from NOAA realtime"):
            _run(noaa, lonely_buoy, FRESH)
        assert buoy.call_count == 2

    @respx.mock
    def test_stale_without_fallback_is_returned(
        self, noaa: NoaaClient, lonely_buoy: SpotConfig, buoy_text: str
    ):
        respx.get(BUOY_URL).mock(return_value=httpx.Response(200, text=buoy_text))

        reading = _run(noaa, lonely_buoy, LATER)
        assert reading.loaded_from_fallback is False
        assert reading.wave_height == "1.97"

    @respx.mock
    def test_station_spot_always_fallback(
        self, noaa: NoaaClient, bradford: SpotConfig, station_text: str, buoy_text: str
    ):
        station = respx.get(STATION_URL).mock(
            return_value=httpx.Response(200, text=station_text)
        )
        respx.get(BUOY_URL).mock(return_value=httpx.Response(200, text=buoy_text))

        reading = _run(noaa, bradford, FRESH)
        assert reading.loaded_from_fallback is True
        assert station.call_count == 1

    @respx.mock
    def test_station_spot_not_refetched_when_stale(
        self, noaa: NoaaClient, bradford: SpotConfig, station_text: str, buoy_text: str
    ):
        station = respx.get(STATION_URL).mock(
            return_value=httpx.Response(200, text=station_text)
        )
        respx.get(BUOY_URL).mock(return_value=httpx.Response(200, text=buoy_text))

        reading = _run(noaa, bradford, LATER)
        assert reading.loaded_from_fallback is True
        assert station.call_count == 1

    @respx.mock
    def test_water_temp_lookup_failure(
        self, noaa: NoaaClient, bradford: SpotConfig, station_text: str
    ):
        respx.get(STATION_URL).mock(return_value=httpx.Response(200, text=station_text))
        respx.get(BUOY_URL).mock(return_value=httpx.Response(404))

        with pytest.raises(UpstreamUnavailable):
            _run(noaa, bradford, FRESH)
