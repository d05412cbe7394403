"""Channel alignment, wave smoothing and current-conditions summaries."""

import math
from datetime import datetime

from surfcast.errors import IndexOutOfRange
from surfcast.models.forecast import Channel, CurrentConditions
from surfcast.transform.units import truncate2

# Shared with the quality classifier so "Flat" means the same thing everywhere.
FLAT_THRESHOLD_FT = 0.98


def align_channels(channels: dict[str, Channel]) -> dict[str, Channel]:
    """Cut every channel down to the shortest one's length.

    The tail past the common prefix is discarded, not interpolated. After
    this, index ``i`` is the same forecast hour in every channel.
    """
    if not channels:
        return {}
    shortest = min(len(c) for c in channels.values())
    return {name: list(c[:shortest]) for name, c in channels.items()}


def smooth_wave_heights(heights: list[float]) -> list[float]:
    """Three-point centered moving average, truncated to 2 decimals.

    The first and last samples only average with their single neighbor.
    """
    if len(heights) <= 1:
        return list(heights)
    out: list[float] = []
    last = len(heights) - 1
    for i in range(len(heights)):
        window = heights[max(i - 1, 0):min(i + 1, last) + 1]
        out.append(truncate2(sum(window) / len(window)))
    return out


def current_index(series_start: datetime, now: datetime) -> int:
    """Index of the current hour: the sample after the one ``now`` falls in."""
    hours = (now - series_start).total_seconds() / 3600
    return max(math.floor(hours) + 1, 0)


def format_wave_range(heights: list[float], index: int) -> str:
    """Describe the height at ``index`` relative to the hour before it.

    ``"2-3+"`` when building, ``"2-3"`` when dropping, ``"2"`` when steady.
    """
    height = heights[index]
    if height < FLAT_THRESHOLD_FT:
        return "Flat"
    current = int(height)
    if index == 0:
        return str(current)
    previous = int(heights[index - 1])
    if current < previous:
        return f"{current}-{previous}"
    if current > previous:
        return f"{previous}-{current}+"
    return str(current)


def summarize_current(
    heights: list[float],
    periods: list[float],
    directions: list[float],
    index: int,
) -> CurrentConditions:
    """Build the "right now" summary from aligned, smoothed channels."""
    shortest = min(len(heights), len(periods), len(directions))
    if index < 0 or index >= shortest:
        raise IndexOutOfRange(
            f"Current hour index {index} is outside a {shortest}-hour forecast"
        )
    period = periods[index]
    return CurrentConditions(
        wave_height=format_wave_range(heights, index),
        wave_period=f"{period:g}",
        # Feed reports where waves come from; display points where they go.
        wave_direction=int(directions[index]) + 180,
    )
