"""Service facade: spot lookup, caching and concurrent page sections."""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from surfcast.config.registry import SpotRegistry
from surfcast.config.schema import SpotConfig, SurfConfig
from surfcast.errors import SurfcastError
from surfcast.ingest.noaa_client import NoaaClient
from surfcast.ingest.water_quality_client import WaterQualityClient
from surfcast.models.forecast import Forecast
from surfcast.models.realtime import RealtimeReading
from surfcast.models.water_quality import WaterQuality
from surfcast.pipeline.forecast_pipeline import ForecastPipeline
from surfcast.pipeline.realtime_pipeline import RealtimePipeline
from surfcast.pipeline.water_quality_pipeline import WaterQualityPipeline, has_water_quality
from surfcast.storage.cache import CacheStore, MemoryCache, cache_key

logger = logging.getLogger(__name__)


class SurfService:
    def __init__(
        self,
        config: SurfConfig,
        noaa_client: NoaaClient | None = None,
        cache: CacheStore | None = None,
        water_quality_client: WaterQualityClient | None = None,
    ):
        self.config = config
        self.registry = SpotRegistry.from_config(config)
        self.noaa = noaa_client or NoaaClient.from_config(config.api)
        self.cache = cache if cache is not None else MemoryCache()
        self.forecasts = ForecastPipeline(self.noaa)
        self.realtime = RealtimePipeline(self.noaa, config.realtime)
        if water_quality_client is None and config.api.water_quality_base_url:
            water_quality_client = WaterQualityClient.from_config(config.api)
        self.water_quality = (
            WaterQualityPipeline(water_quality_client) if water_quality_client else None
        )

    def serves_water_quality(self, spot: SpotConfig) -> bool:
        return self.water_quality is not None and has_water_quality(spot)

    async def get_forecast(self, spot_name: str | None = None) -> Forecast:
        return await self.forecasts.run(self.registry.get(spot_name))

    async def get_realtime(self, spot_name: str | None = None) -> RealtimeReading:
        return await self.realtime.run(self.registry.get(spot_name))

    async def get_water_quality(self, spot_name: str | None = None) -> WaterQuality:
        spot = self.registry.get(spot_name)
        if self.water_quality is None:
            raise SurfcastError("Water quality service is not configured")
        return await self.water_quality.run(spot)

    async def get_forecast_json(self, spot_name: str | None = None) -> str:
        spot = self.registry.get(spot_name)

        async def compute() -> str:
            forecast = await self.forecasts.run(spot)
            return json.dumps(forecast.to_dict())

        return await self._cached(
            cache_key("forecast", spot.name), self.config.cache.forecast_ttl_seconds, compute
        )

    async def get_realtime_json(self, spot_name: str | None = None) -> str:
        spot = self.registry.get(spot_name)

        async def compute() -> str:
            reading = await self.realtime.run(spot)
            return json.dumps(reading.to_dict())

        return await self._cached(
            cache_key("realtime", spot.name), self.config.cache.realtime_ttl_seconds, compute
        )

    async def get_water_quality_json(self, spot_name: str | None = None) -> str:
        spot = self.registry.get(spot_name)

        async def compute() -> str:
            reading = await self.get_water_quality(spot.name)
            return json.dumps(reading.to_dict())

        return await self._cached(
            cache_key("water-quality", spot.name),
            self.config.cache.water_quality_ttl_seconds,
            compute,
        )

    async def get_conditions(self, spot_name: str | None = None) -> dict[str, Any]:
        """Fetch the page sections side by side.

        Each section is either ``{"data": ...}`` or ``{"error": message}``;
        one failing does not hold up or discard the others. Spots without a
        water quality source get ``"water_quality": None``.
        """
        spot = self.registry.get(spot_name)
        sections: dict[str, Awaitable[str]] = {
            "forecast": self.get_forecast_json(spot.name),
            "realtime": self.get_realtime_json(spot.name),
        }
        if self.serves_water_quality(spot):
            sections["water_quality"] = self.get_water_quality_json(spot.name)

        results = await asyncio.gather(*sections.values(), return_exceptions=True)
        out: dict[str, Any] = {
            "spot": spot.name,
            "live_feed_url": spot.live_feed_url,
            "water_quality": None,
        }
        for section, result in zip(sections, results):
            if isinstance(result, SurfcastError):
                logger.error("%s failed for %s: %s", section, spot.name, result)
                out[section] = {"error": f"Something went wrong: {result}"}
            elif isinstance(result, BaseException):
                raise result
            else:
                out[section] = {"data": json.loads(result)}
        return out

    async def _cached(
        self, key: str, ttl_seconds: int, compute: Callable[[], Awaitable[str]]
    ) -> str:
        hit = self.cache.get(key)
        if hit is not None:
            logger.info("cache hit for %s", key)
            return hit
        value = await compute()
        self.cache.set(key, value, ttl_seconds)
        return value
