"""Realtime pipeline: buoy fetch with staleness fallback, parse, convert, classify.

Fetching runs as a small state machine::

    TRY_PRIMARY -> SUCCESS
                -> STALE_RETRY_FALLBACK -> TRY_FALLBACK
                -> FAIL_RETRY_FALLBACK  -> TRY_FALLBACK
                -> FAIL
    TRY_FALLBACK -> SUCCESS | FAIL

Spots without a buoy start at TRY_FALLBACK: their shore station is the
fallback source and is never checked for staleness.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from surfcast.config.schema import RealtimeConfig, SpotConfig
from surfcast.errors import StaleData, UpstreamUnavailable
from surfcast.ingest.buoy_parser import parse_report, parse_water_temp
from surfcast.ingest.noaa_client import NoaaClient
from surfcast.ingest.staleness import is_reading_stale, reading_age_hours
from surfcast.models.realtime import BuoyObservation, RealtimeReading
from surfcast.transform.quality import classify
from surfcast.transform.timeline import format_local_timestamp
from surfcast.transform.units import celsius_to_fahrenheit, meters_to_feet, ms_to_mph

logger = logging.getLogger(__name__)

# Stand-in height when the source has no wave sensor; keeps the rating off "Flat".
MISSING_WAVE_HEIGHT_FT = 99.0


class FetchState(StrEnum):
    TRY_PRIMARY = "try_primary"
    STALE_RETRY_FALLBACK = "stale_retry_fallback"
    FAIL_RETRY_FALLBACK = "fail_retry_fallback"
    TRY_FALLBACK = "try_fallback"
    SUCCESS = "success"
    FAIL = "fail"


def next_state(
    state: FetchState, fetched: bool, stale: bool, has_fallback: bool
) -> FetchState:
    """Transition after one fetch attempt (or automatically out of a retry state)."""
    if state == FetchState.TRY_PRIMARY:
        if not fetched:
            return FetchState.FAIL_RETRY_FALLBACK if has_fallback else FetchState.FAIL
        if stale and has_fallback:
            return FetchState.STALE_RETRY_FALLBACK
        return FetchState.SUCCESS
    if state in (FetchState.STALE_RETRY_FALLBACK, FetchState.FAIL_RETRY_FALLBACK):
        return FetchState.TRY_FALLBACK
    if state == FetchState.TRY_FALLBACK:
        return FetchState.SUCCESS if fetched else FetchState.FAIL
    return state


def fallback_path(spot: SpotConfig) -> str | None:
    if spot.fallback_realtime_path:
        return spot.fallback_realtime_path
    if not spot.has_buoy:
        return spot.realtime_path
    return None


@dataclass(frozen=True)
class FetchResult:
    observation: BuoyObservation
    loaded_from_fallback: bool
    path: str


class RealtimePipeline:
    def __init__(self, noaa_client: NoaaClient, config: RealtimeConfig | None = None):
        self.noaa = noaa_client
        self.config = config or RealtimeConfig()

    async def run(self, spot: SpotConfig, now: datetime | None = None) -> RealtimeReading:
        result = await self.fetch_observation(spot, now)
        obs = result.observation
        water_temp_c = obs.water_temp_c
        if water_temp_c is None:
            water_temp_c = await self.fetch_water_temp()
        reading = build_reading(obs, spot, water_temp_c, result.loaded_from_fallback)
        logger.info(
            "Realtime for %s from %s: %s (%s)",
            spot.name, result.path, reading.quality.value, reading.as_of,
        )
        return reading

    async def _fetch(self, path: str) -> BuoyObservation | None:
        try:
            text = await self.noaa.get_buoy_text(path, retries=self.config.buoy_retries)
        except UpstreamUnavailable:
            return None
        return parse_report(text)

    async def fetch_observation(
        self, spot: SpotConfig, now: datetime | None = None
    ) -> FetchResult:
        """Run the primary/fallback state machine until SUCCESS or FAIL."""
        alternate = fallback_path(spot)
        state = FetchState.TRY_PRIMARY if spot.has_buoy else FetchState.TRY_FALLBACK
        came_from = state
        observation: BuoyObservation | None = None
        path = spot.realtime_path

        while state not in (FetchState.SUCCESS, FetchState.FAIL):
            if state == FetchState.TRY_PRIMARY:
                path = spot.realtime_path
                observation = await self._fetch(path)
                stale = False
                if observation is not None and is_reading_stale(
                    observation.as_of, self.config.max_age_hours, now
                ):
                    stale = True
                    logger.warning(
                        "Realtime data for %s is %.1fh old",
                        spot.name, reading_age_hours(observation.as_of, now),
                    )
                state = next_state(state, observation is not None, stale, alternate is not None)
            elif state == FetchState.TRY_FALLBACK:
                assert alternate is not None
                path = alternate
                observation = await self._fetch(path)
                state = next_state(state, observation is not None, False, True)
            else:
                logger.warning("Realtime %s for %s, trying %s", state.value, spot.name, alternate)
                came_from = state
                state = next_state(state, False, False, True)

        if state == FetchState.FAIL or observation is None:
            if came_from == FetchState.STALE_RETRY_FALLBACK:
                raise StaleData(f"Realtime data for {spot.name} is stale and fallback failed")
            raise UpstreamUnavailable("Non 200 response from NOAA realtime")

        return FetchResult(
            observation=observation,
            loaded_from_fallback=path != spot.realtime_path or not spot.has_buoy,
            path=path,
        )

    async def fetch_water_temp(self) -> float:
        """Water temperature from the secondary buoy when the main source lacks it."""
        path = self.config.water_temp_fallback_path
        logger.info("Water temperature missing, reading %s", path)
        text = await self.noaa.get_buoy_text(path, retries=self.config.buoy_retries)
        return parse_water_temp(text)


def build_reading(
    obs: BuoyObservation,
    spot: SpotConfig,
    water_temp_c: float,
    loaded_from_fallback: bool,
) -> RealtimeReading:
    """Convert a metric observation to display units and rate it."""
    wind_speed = f"{ms_to_mph(obs.wind_speed_ms):.0f}"
    wave_height = (
        f"{meters_to_feet(obs.wave_height_m):.2f}" if obs.wave_height_m is not None else None
    )
    quality = classify(
        float(wave_height) if wave_height is not None else MISSING_WAVE_HEIGHT_FT,
        float(wind_speed),
        obs.wind_direction_deg,
        spot.orientation,
        spot.high_wind_mph,
    )
    return RealtimeReading(
        as_of=format_local_timestamp(obs.as_of),
        wind_direction=obs.wind_direction_deg,
        wind_speed=wind_speed,
        gusts=f"{ms_to_mph(obs.gust_ms):.0f}",
        wave_height=wave_height,
        wave_period=obs.wave_period_s,
        wave_direction=(
            obs.wave_direction_deg + 180 if obs.wave_direction_deg is not None else None
        ),
        air_temp=f"{celsius_to_fahrenheit(obs.air_temp_c):.0f}",
        water_temp=f"{celsius_to_fahrenheit(water_temp_c):.0f}",
        quality=quality,
        loaded_from_fallback=loaded_from_fallback,
    )
