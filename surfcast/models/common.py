"""Common types and helpers shared across models."""

from datetime import UTC, datetime, timedelta, timezone
from enum import StrEnum

# Display zone for every label and timestamp. No DST handling.
LOCAL_TZ = timezone(timedelta(hours=-5), "CDT")


class Location(StrEnum):
    ATWATER = "Atwater"
    BRADFORD = "Bradford"
    SHEBOYGAN_NORTH = "Sheboygan - North"
    SHEBOYGAN_SOUTH = "Sheboygan - South"
    PORT_WASHINGTON = "Port Washington"
    RACINE = "Racine"


class Orientation(StrEnum):
    NORTH = "north"
    SOUTH = "south"


def utc_now() -> datetime:
    return datetime.now(UTC)
