"""Surf quality ratings and their display colors."""

from enum import StrEnum


class Quality(StrEnum):
    GOOD = "Good"
    FAIR_TO_GOOD = "Fair to Good"
    POOR = "Poor"
    VERY_POOR = "Very Poor"
    FLAT = "Flat"

    @property
    def color(self) -> str:
        return QUALITY_COLORS[self]


QUALITY_COLORS: dict[Quality, str] = {
    Quality.GOOD: "#0bd674",
    Quality.FAIR_TO_GOOD: "#ffcd1e",
    Quality.POOR: "#ff9500",
    Quality.VERY_POOR: "#f4496d",
    Quality.FLAT: "#a8a29e",
}
