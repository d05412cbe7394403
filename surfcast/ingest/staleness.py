"""Staleness checks for realtime observations."""

from datetime import datetime

from surfcast.models.common import utc_now


def reading_age_hours(as_of: datetime, now: datetime | None = None) -> float:
    """Age of an observation in hours."""
    if now is None:
        now = utc_now()
    return (now - as_of).total_seconds() / 3600


def is_reading_stale(
    as_of: datetime, max_age_hours: float, now: datetime | None = None
) -> bool:
    """An observation older than ``max_age_hours`` is stale (exactly at the limit is not)."""
    return reading_age_hours(as_of, now) > max_age_hours
