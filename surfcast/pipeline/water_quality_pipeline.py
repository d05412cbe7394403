"""Water quality pipeline: status and advisory queries, fetched side by side."""

import asyncio
import logging

from surfcast.config.schema import SpotConfig
from surfcast.errors import SurfcastError
from surfcast.ingest.water_quality_client import WaterQualityClient
from surfcast.ingest.water_quality_parser import parse_water_quality
from surfcast.models.water_quality import WaterQuality

logger = logging.getLogger(__name__)


def has_water_quality(spot: SpotConfig) -> bool:
    return bool(spot.quality_query and spot.status_query)


class WaterQualityPipeline:
    def __init__(self, client: WaterQualityClient):
        self.client = client

    async def run(self, spot: SpotConfig) -> WaterQuality:
        if not has_water_quality(spot):
            raise SurfcastError(f"No water quality source for {spot.name}")
        status_doc, quality_doc = await asyncio.gather(
            self.client.query(spot.status_query),
            self.client.query(spot.quality_query),
        )
        reading = parse_water_quality(status_doc, quality_doc)
        logger.info("Water quality for %s: %s", spot.name, reading.status)
        return reading
