"""Forecast pipeline: fetch, expand, align, smooth, summarize, classify."""

import logging
from datetime import datetime

from surfcast.config.schema import SpotConfig
from surfcast.errors import MalformedPayload
from surfcast.ingest.forecast_parser import GridpointData, parse_gridpoint
from surfcast.ingest.noaa_client import NoaaClient
from surfcast.models.common import utc_now
from surfcast.models.forecast import Forecast
from surfcast.transform.quality import classify
from surfcast.transform.series import (
    align_channels,
    current_index,
    smooth_wave_heights,
    summarize_current,
)
from surfcast.transform.timeline import format_local_timestamp
from surfcast.transform.units import (
    celsius_to_fahrenheit,
    kmh_to_mph,
    meters_to_feet,
    truncate2,
)

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(self, noaa_client: NoaaClient):
        self.noaa = noaa_client

    async def run(
        self,
        spot: SpotConfig,
        now: datetime | None = None,
        index_override: int | None = None,
    ) -> Forecast:
        raw = await self.noaa.get_gridpoint(spot.forecast_path)
        forecast = build_forecast(parse_gridpoint(raw), spot, now, index_override)
        logger.info(
            "Built %d-hour forecast for %s (current %s)",
            len(forecast.labels), spot.name, forecast.current.wave_height,
        )
        return forecast


def build_forecast(
    data: GridpointData,
    spot: SpotConfig,
    now: datetime | None = None,
    index_override: int | None = None,
) -> Forecast:
    """Turn parsed gridpoint channels into the display forecast.

    ``index_override`` pins the "current hour" instead of deriving it from
    ``now``.
    """
    channels = align_channels(data.channels)
    waves = channels["wave_height"]
    if not waves:
        raise MalformedPayload(f"Forecast for {spot.name} has no overlapping hours")

    values = {name: [s.value for s in channel] for name, channel in channels.items()}
    heights_ft = [meters_to_feet(v) for v in values["wave_height"]]
    smoothed = smooth_wave_heights(heights_ft)
    wind_mph = [truncate2(kmh_to_mph(v)) for v in values["wind_speed"]]

    if index_override is not None:
        index = index_override
    else:
        index = current_index(waves[0].valid_time, now or utc_now())
    current = summarize_current(
        smoothed, values["wave_period"], values["wave_direction"], index
    )

    quality = [
        classify(height, speed, direction, spot.orientation, spot.high_wind_mph)
        for height, speed, direction in zip(smoothed, wind_mph, values["wind_direction"])
    ]

    return Forecast(
        spot=spot.name,
        last_updated=format_local_timestamp(data.updated_at),
        starting_at=waves[0].valid_time.isoformat(),
        labels=[s.display_label or "" for s in waves],
        wave_height=smoothed,
        wave_period=values["wave_period"],
        wave_direction=values["wave_direction"],
        wind_speed=wind_mph,
        wind_gust=[truncate2(kmh_to_mph(v)) for v in values["wind_gust"]],
        # Arrow rotation points where the wind is headed.
        wind_direction=[truncate2(v) + 180.0 for v in values["wind_direction"]],
        temperature=[truncate2(celsius_to_fahrenheit(v)) for v in values["temperature"]],
        probability_of_precipitation=values["probability_of_precipitation"],
        dewpoint=[truncate2(celsius_to_fahrenheit(v)) for v in values["dewpoint"]],
        cloud_cover=values["cloud_cover"],
        probability_of_thunder=values["probability_of_thunder"],
        quality=quality,
        current=current,
        graph_max=max(int(h) for h in heights_ft) + 2,
        valid_times=data.valid_times,
    )
