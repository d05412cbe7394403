"""Surf quality rating from wave height, wind and shoreline orientation.

Offshore wind grooms the faces and gets the best rating; onshore wind chops
them up, worse the harder it blows. Each beach carries its own calibrated
high-wind threshold. Sectors are half-open ``[low, high)`` and are checked in
order, so the first match wins where two sectors meet.
"""

from surfcast.models.common import Orientation
from surfcast.models.quality import Quality
from surfcast.transform.series import FLAT_THRESHOLD_FT

CALM_WIND_MPH = 5.0
DEFAULT_HIGH_WIND_MPH = 25.0


def _by_speed(wind_speed: float, high_wind: float, calm: Quality, windy: Quality) -> Quality:
    return calm if wind_speed <= high_wind else windy


def _south(wind_speed: float, direction: float, high_wind: float) -> Quality:
    # Essentially offshore
    if 240.0 <= direction < 310.0:
        return Quality.GOOD
    if 120.0 <= direction < 330.0:
        return _by_speed(wind_speed, high_wind, Quality.GOOD, Quality.FAIR_TO_GOOD)
    if direction >= 330.0:
        return _by_speed(wind_speed, high_wind, Quality.POOR, Quality.VERY_POOR)
    if 80.0 <= direction < 120.0:
        return _by_speed(wind_speed, high_wind, Quality.FAIR_TO_GOOD, Quality.POOR)
    if 0.0 <= direction < 80.0:
        return _by_speed(wind_speed, high_wind, Quality.POOR, Quality.VERY_POOR)
    return Quality.POOR


def _north(wind_speed: float, direction: float, high_wind: float) -> Quality:
    # Essentially offshore
    if 300.0 <= direction < 340.0:
        return Quality.GOOD
    if 0.0 <= direction < 70.0 or 270.0 <= direction < 360.0:
        return _by_speed(wind_speed, high_wind, Quality.GOOD, Quality.FAIR_TO_GOOD)
    if 70.0 <= direction < 120.0 or 230.0 <= direction < 270.0:
        return _by_speed(wind_speed, high_wind, Quality.FAIR_TO_GOOD, Quality.POOR)
    if 120.0 <= direction < 230.0:
        return _by_speed(wind_speed, high_wind, Quality.POOR, Quality.VERY_POOR)
    return Quality.POOR


def is_flat(wave_height_ft: float) -> bool:
    return wave_height_ft < FLAT_THRESHOLD_FT


def classify(
    wave_height_ft: float,
    wind_speed_mph: float,
    wind_direction_deg: float,
    orientation: Orientation,
    high_wind_mph: float = DEFAULT_HIGH_WIND_MPH,
) -> Quality:
    """Rate surf quality. ``wind_direction_deg`` is where the wind blows from."""
    if is_flat(wave_height_ft):
        return Quality.FLAT
    if wind_speed_mph < CALM_WIND_MPH:
        return Quality.GOOD

    # 360 and 0 are the same heading.
    direction = wind_direction_deg % 360.0 if wind_direction_deg >= 360.0 else wind_direction_deg
    if orientation == Orientation.SOUTH:
        return _south(wind_speed_mph, direction, high_wind_mph)
    return _north(wind_speed_mph, direction, high_wind_mph)
