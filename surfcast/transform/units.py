"""Unit conversions for feed values."""

import math

METERS_TO_FEET = 3.281
KMH_TO_MPH = 0.621371
MS_TO_MPH = 2.2369


def meters_to_feet(value: float) -> float:
    return value * METERS_TO_FEET


def kmh_to_mph(value: float) -> float:
    return value * KMH_TO_MPH


def ms_to_mph(value: float) -> float:
    return value * MS_TO_MPH


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def truncate2(value: float) -> float:
    """Drop everything past the second decimal place (no rounding)."""
    return math.trunc(round(value * 100.0, 9)) / 100.0
