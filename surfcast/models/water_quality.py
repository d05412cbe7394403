"""Beach water quality status."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WaterQuality:
    # "Open", "Closed", "Advisory" or "Closed for season"
    status: str
    status_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "water_quality": self.status,
            "water_quality_text": self.status_text,
        }
