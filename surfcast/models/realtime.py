"""Buoy and shore station observation models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from surfcast.models.quality import Quality


@dataclass(frozen=True)
class BuoyObservation:
    """One parsed row of a realtime report, in the feed's metric units."""

    as_of: datetime
    wind_direction_deg: int
    wind_speed_ms: float
    gust_ms: float
    wave_height_m: float | None
    wave_period_s: int | None
    wave_direction_deg: int | None
    air_temp_c: float
    water_temp_c: float | None


@dataclass(frozen=True)
class RealtimeReading:
    as_of: str
    wind_direction: int
    wind_speed: str
    gusts: str
    wave_height: str | None
    wave_period: int | None
    wave_direction: int | None
    air_temp: str
    water_temp: str
    quality: Quality
    loaded_from_fallback: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "as_of": self.as_of,
            "wind_direction": self.wind_direction,
            "wind_speed": self.wind_speed,
            "gusts": self.gusts,
            "wave_height": self.wave_height,
            "wave_period": self.wave_period,
            "wave_direction": self.wave_direction,
            "air_temp": self.air_temp,
            "water_temp": self.water_temp,
            "quality_text": self.quality.value,
            "quality_color": self.quality.color,
            "loaded_from_fallback": self.loaded_from_fallback,
        }
