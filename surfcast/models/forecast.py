"""Gridded forecast data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeAlias

from surfcast.models.quality import Quality


@dataclass(frozen=True)
class TimedSample:
    """A raw forecast entry: one value held for ``period_hours`` from ``valid_from``."""

    value: float
    valid_from: datetime
    period_hours: int


@dataclass(frozen=True)
class HourlySample:
    value: float
    valid_time: datetime
    display_label: str | None = None


Channel: TypeAlias = list[HourlySample]


@dataclass(frozen=True)
class CurrentConditions:
    wave_height: str
    wave_period: str
    wave_direction: int


@dataclass(frozen=True)
class Forecast:
    spot: str
    last_updated: str
    starting_at: str
    labels: list[str]
    wave_height: list[float]
    wave_period: list[float]
    wave_direction: list[float]
    wind_speed: list[float]
    wind_gust: list[float]
    wind_direction: list[float]
    temperature: list[float]
    probability_of_precipitation: list[float]
    dewpoint: list[float]
    cloud_cover: list[float]
    probability_of_thunder: list[float]
    quality: list[Quality]
    current: CurrentConditions
    graph_max: int
    # Gridpoint coverage as "<start>/P<period>", when the feed reports it
    valid_times: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "spot": self.spot,
            "last_updated": self.last_updated,
            "starting_at": self.starting_at,
            "valid_times": self.valid_times,
            "wave_height_labels": self.labels,
            "wave_height": self.wave_height,
            "wave_period": self.wave_period,
            "wave_direction": self.wave_direction,
            "wind_speed": self.wind_speed,
            "wind_gust": self.wind_gust,
            "wind_direction": self.wind_direction,
            "temperature": self.temperature,
            "probability_of_precipitation": self.probability_of_precipitation,
            "dewpoint": self.dewpoint,
            "cloud_cover": self.cloud_cover,
            "probability_of_thunder": self.probability_of_thunder,
            "quality": [q.value for q in self.quality],
            "quality_colors": [q.color for q in self.quality],
            "current_wave_height": self.current.wave_height,
            "current_wave_period": self.current.wave_period,
            "current_wave_direction": self.current.wave_direction,
            "graph_max": self.graph_max,
        }
