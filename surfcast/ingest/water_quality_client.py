"""Async client for the beach-monitoring feature service."""

import logging

import httpx

from surfcast.config.schema import ApiConfig
from surfcast.errors import MalformedPayload, UpstreamUnavailable

logger = logging.getLogger(__name__)


class WaterQualityClient:
    def __init__(self, base_url: str, user_agent: str, timeout: float = 10.0):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    @classmethod
    def from_config(cls, api: ApiConfig) -> "WaterQualityClient":
        if not api.water_quality_base_url:
            raise ValueError("api.water_quality_base_url is not set")
        return cls(
            base_url=api.water_quality_base_url,
            user_agent=api.user_agent,
            timeout=api.water_quality_timeout,
        )

    async def query(self, query: str) -> dict:
        """Run one feature query and return the decoded JSON document."""
        url = f"{self.base_url}{query}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                resp = await client.get(url, headers=headers)
            except httpx.RequestError as e:
                logger.error("Water quality request failed for %s: %s", url, e)
                raise UpstreamUnavailable(
                    f"Water quality request failed: {e}", url=url
                ) from e

        if resp.status_code != 200:
            logger.error("Water quality %s returned %d", url, resp.status_code)
            raise UpstreamUnavailable(
                "Non 200 response from water quality service",
                status_code=resp.status_code,
                url=url,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedPayload(f"Water quality body is not JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedPayload("Water quality body is not a JSON object")
        return data
