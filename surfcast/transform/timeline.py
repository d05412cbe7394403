"""Hourly timeline helpers: period expansion and display labels.

NWS gridpoint values are tagged with an ISO-8601 interval such as
``2024-09-06T11:00:00+00:00/PT3H`` meaning the value holds for three hours.
These helpers unroll such entries into one sample per hour.
"""

from datetime import UTC, datetime, timedelta

from surfcast.errors import MalformedPayload
from surfcast.models.common import LOCAL_TZ
from surfcast.models.forecast import HourlySample, TimedSample

PERIOD_MARKER = "/P"
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp, assuming UTC when no offset is present."""
    try:
        dt = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        raise MalformedPayload(f"Unparsable timestamp: {value!r}") from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _parse_hours(s: str) -> int:
    """Read the ``T<n>H`` part of a period. Anything unparsable counts as 0."""
    _, sep, rest = s.partition("T")
    if not sep or not rest.endswith("H"):
        return 0
    try:
        return int(rest[:-1])
    except ValueError:
        return 0


def period_hours(period: str) -> int:
    """Total hours in a period body (the text after ``/P``).

    >>> period_hours("T2H"), period_hours(""), period_hours("2DT10H")
    (2, 0, 58)
    """
    days, sep, rest = period.partition("D")
    if not sep:
        return _parse_hours(period)
    try:
        total = int(days) * 24
    except ValueError:
        raise MalformedPayload(f"Unparsable day count in period: {period!r}") from None
    return total + _parse_hours(rest)


def parse_timed_sample(value: float, valid_time: str) -> TimedSample:
    """Split ``<timestamp>/P<period>`` into a TimedSample."""
    start, sep, period = valid_time.partition(PERIOD_MARKER)
    if not sep:
        raise MalformedPayload(f"Unknown period found in {valid_time!r}")
    return TimedSample(
        value=value,
        valid_from=parse_timestamp(start),
        period_hours=period_hours(period),
    )


def display_label(base: datetime, offset_hours: int = 0) -> tuple[str, datetime]:
    """Shift ``base`` by whole hours and label it in the local zone.

    Returns ``("Fri 08 AM", <absolute timestamp>)``.
    """
    when = base + timedelta(hours=offset_hours)
    local = when.astimezone(LOCAL_TZ)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{WEEKDAYS[local.weekday()]} {hour:02d} {meridiem}", when


def expand(sample: TimedSample) -> list[HourlySample]:
    """Unroll one interval-tagged sample into ``period_hours`` hourly samples."""
    out: list[HourlySample] = []
    for i in range(sample.period_hours):
        label, when = display_label(sample.valid_from, i)
        out.append(HourlySample(value=sample.value, valid_time=when, display_label=label))
    return out


def format_local_timestamp(dt: datetime) -> str:
    """Render a timestamp as ``Fri, 06 Sep 2024 05:54:57`` in the local zone."""
    local = dt.astimezone(LOCAL_TZ)
    return (
        f"{WEEKDAYS[local.weekday()]}, {local.day:02d} {MONTHS[local.month - 1]} "
        f"{local.year} {local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    )
