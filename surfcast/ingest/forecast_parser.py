"""Parse NWS gridpoint JSON into expanded hourly channels."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from surfcast.errors import MalformedPayload
from surfcast.models.forecast import Channel
from surfcast.transform.timeline import expand, parse_timed_sample, parse_timestamp

logger = logging.getLogger(__name__)

# Output channel name -> NWS gridpoint property
CHANNEL_PROPERTIES: dict[str, str] = {
    "wave_height": "waveHeight",
    "wave_period": "wavePeriod",
    "wave_direction": "waveDirection",
    "wind_speed": "windSpeed",
    "wind_gust": "windGust",
    "wind_direction": "windDirection",
    "temperature": "temperature",
    "probability_of_precipitation": "probabilityOfPrecipitation",
    "dewpoint": "dewpoint",
    "cloud_cover": "skyCover",
    "probability_of_thunder": "probabilityOfThunder",
}

UTC_SUFFIX = "+00:00"


@dataclass(frozen=True)
class GridpointData:
    updated_at: datetime
    valid_times: str | None
    channels: dict[str, Channel]


def parse_forecast_value(entry: Any) -> tuple[float, str] | None:
    """Pull ``(value, validTime)`` out of one raw entry.

    Entries with a null or non-numeric value are skipped (returns None);
    the feed emits nulls for hours it has no data for.
    """
    if not isinstance(entry, dict):
        return None
    value = entry.get("value")
    valid_time = entry.get("validTime")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not isinstance(valid_time, str):
        return None
    return float(value), valid_time


def parse_channel(properties: dict, key: str) -> Channel:
    """Expand one gridpoint property into an hourly channel."""
    prop = properties.get(key)
    if not isinstance(prop, dict):
        raise MalformedPayload(f"no {key} found!")
    values = prop.get("values")
    if not isinstance(values, list):
        raise MalformedPayload(f"no values found for {key}!")

    channel: Channel = []
    skipped = 0
    for entry in values:
        parsed = parse_forecast_value(entry)
        if parsed is None:
            skipped += 1
            continue
        channel.extend(expand(parse_timed_sample(*parsed)))
    if skipped:
        logger.debug("Skipped %d empty %s entries", skipped, key)
    return channel


def parse_update_time(properties: dict) -> datetime:
    raw = properties.get("updateTime")
    if not isinstance(raw, str):
        raise MalformedPayload("no updateTime found")
    if not raw.endswith(UTC_SUFFIX):
        raise MalformedPayload(f"Unidentified updateTime suffix: {raw!r}")
    return parse_timestamp(raw)


def parse_gridpoint(raw: dict) -> GridpointData:
    """Parse every required channel. Any missing piece fails the whole forecast."""
    properties = raw.get("properties")
    if not isinstance(properties, dict):
        raise MalformedPayload("no properties found!")

    channels = {
        name: parse_channel(properties, key) for name, key in CHANNEL_PROPERTIES.items()
    }
    valid_times = properties.get("validTimes")
    return GridpointData(
        updated_at=parse_update_time(properties),
        valid_times=valid_times if isinstance(valid_times, str) else None,
        channels=channels,
    )
