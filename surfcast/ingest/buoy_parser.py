"""Parse NDBC realtime2 standard meteorological text reports.

Reports have two header lines followed by data rows, newest first::

    #YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP ...
    #yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC ...
    2024 09 06 12 50 250  5.0  7.0   0.6     5   3.9 200 1015.2  21.3  22.1 ...

Missing values are written as ``MM``.
"""

import logging
from datetime import UTC, datetime

from surfcast.errors import MalformedPayload
from surfcast.models.realtime import BuoyObservation

logger = logging.getLogger(__name__)

MISSING = "MM"
HEADER_LINES = 2
TIMESTAMP_WIDTH = 16

# Column offsets after the timestamp field
WIND_DIRECTION = 0
WIND_SPEED = 1
GUST = 2
WAVE_HEIGHT = 3
DOMINANT_PERIOD = 4
WAVE_DIRECTION = 6
AIR_TEMP = 8
WATER_TEMP = 9

# Water temperature counted from the start of the row (timestamp included)
WATER_TEMP_COLUMN = 14

# Rows past the latest to search for a wave direction
WAVE_DIRECTION_LOOKBACK = 2


def _data_rows(text: str) -> list[str]:
    rows = [line for line in text.splitlines()[HEADER_LINES:] if line.strip()]
    if not rows:
        raise MalformedPayload("Realtime report has no data rows")
    return rows


def _measurements(row: str) -> list[str]:
    return row[TIMESTAMP_WIDTH:].split()


def _column(columns: list[str], index: int) -> str:
    return columns[index] if index < len(columns) else MISSING


def _to_float(raw: str) -> float | None:
    if raw == MISSING:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _to_int(raw: str) -> int | None:
    value = _to_float(raw)
    return int(value) if value is not None else None


def parse_as_of(field: str) -> datetime:
    """Parse the leading ``YYYY MM DD HH MM`` field as UTC."""
    parts = field.split()
    if len(parts) != 5:
        raise MalformedPayload(f"Unparsable report timestamp: {field!r}")
    try:
        year, month, day, hour, minute = (int(p) for p in parts)
        return datetime(year, month, day, hour, minute, tzinfo=UTC)
    except ValueError:
        raise MalformedPayload(f"Unparsable report timestamp: {field!r}") from None


def _wave_direction(rows: list[str]) -> int | None:
    """Latest wave direction, looking back a couple of rows when it's missing."""
    for offset, row in enumerate(rows[: WAVE_DIRECTION_LOOKBACK + 1]):
        direction = _to_int(_column(_measurements(row), WAVE_DIRECTION))
        if direction is not None:
            if offset:
                logger.debug("Wave direction taken from %d rows back", offset)
            return direction
    return None


def parse_report(text: str) -> BuoyObservation:
    """Parse the latest row of a realtime report."""
    rows = _data_rows(text)
    latest = rows[0]
    as_of = parse_as_of(latest[:TIMESTAMP_WIDTH])
    columns = _measurements(latest)

    return BuoyObservation(
        as_of=as_of,
        wind_direction_deg=_to_int(_column(columns, WIND_DIRECTION)) or 0,
        wind_speed_ms=_to_float(_column(columns, WIND_SPEED)) or 0.0,
        gust_ms=_to_float(_column(columns, GUST)) or 0.0,
        wave_height_m=_to_float(_column(columns, WAVE_HEIGHT)),
        wave_period_s=_to_int(_column(columns, DOMINANT_PERIOD)),
        wave_direction_deg=_wave_direction(rows),
        air_temp_c=_to_float(_column(columns, AIR_TEMP)) or 0.0,
        water_temp_c=_to_float(_column(columns, WATER_TEMP)),
    )


def parse_water_temp(text: str) -> float:
    """First numeric water temperature in a report, newest row first."""
    for row in _data_rows(text):
        fields = row.split()
        if len(fields) <= WATER_TEMP_COLUMN:
            continue
        value = _to_float(fields[WATER_TEMP_COLUMN])
        if value is not None:
            return value
    raise MalformedPayload("No water temperature found in fallback report")
