"""Spot lookup by display name with a fixed home spot."""

import logging

from surfcast.config.schema import SpotConfig, SurfConfig

logger = logging.getLogger(__name__)


class SpotRegistry:
    def __init__(self, spots: list[SpotConfig], default: str):
        if not spots:
            raise ValueError("Spot registry needs at least one spot")
        self._spots = {s.name.lower(): s for s in spots}
        self._order = [s.name for s in spots]
        try:
            self._default = self._spots[default.lower()]
        except KeyError:
            raise ValueError(f"Default spot {default!r} is not registered") from None

    @classmethod
    def from_config(cls, config: SurfConfig) -> "SpotRegistry":
        return cls(config.spots, config.default_spot)

    @property
    def default(self) -> SpotConfig:
        return self._default

    def get(self, name: str | None) -> SpotConfig:
        """Look up a spot case-insensitively, falling back to the home spot."""
        if not name:
            return self._default
        spot = self._spots.get(name.strip().lower())
        if spot is None:
            logger.info("Unknown spot %r, using %s", name, self._default.name)
            return self._default
        return spot

    def names(self) -> list[str]:
        return list(self._order)
