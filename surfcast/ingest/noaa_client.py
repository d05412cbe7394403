"""Async NOAA client for NWS gridpoint forecasts and NDBC realtime reports."""

import asyncio
import logging

import httpx

from surfcast.config.schema import ApiConfig
from surfcast.errors import MalformedPayload, UpstreamUnavailable

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
NDBC_BASE_URL = "https://www.ndbc.noaa.gov"
DEFAULT_USER_AGENT = "surfcast/0.1.0"


class NoaaClient:
    def __init__(
        self,
        forecast_base_url: str = NWS_BASE_URL,
        realtime_base_url: str = NDBC_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        forecast_timeout: float = 10.0,
        realtime_timeout: float = 10.0,
        max_retries: int = 1,
        retry_base_delay: float = 1.0,
    ):
        self.forecast_base_url = forecast_base_url
        self.realtime_base_url = realtime_base_url
        self.user_agent = user_agent
        self.forecast_timeout = forecast_timeout
        self.realtime_timeout = realtime_timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, api: ApiConfig) -> "NoaaClient":
        return cls(
            forecast_base_url=api.forecast_base_url,
            realtime_base_url=api.realtime_base_url,
            user_agent=api.user_agent,
            forecast_timeout=api.forecast_timeout,
            realtime_timeout=api.realtime_timeout,
            max_retries=api.forecast_max_retries,
            retry_base_delay=api.retry_base_delay,
        )

    async def get_gridpoint(self, path: str) -> dict:
        """Fetch raw gridpoint forecast data.

        Retries on 503/429 and transport errors with exponential backoff.
        Any other non-200 status fails right away.
        """
        url = f"{self.forecast_base_url}{path}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

        async with httpx.AsyncClient(timeout=self.forecast_timeout) as client:
            for attempt in range(self.max_retries + 1):
                last = attempt >= self.max_retries
                try:
                    resp = await client.get(url, headers=headers)
                except httpx.RequestError as e:
                    if last:
                        logger.error("NOAA forecast request failed for %s: %s", url, e)
                        raise UpstreamUnavailable(
                            f"Forecast request failed: {e}", url=url
                        ) from e
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning("NOAA request error, retrying in %.1fs: %s", delay, e)
                    await asyncio.sleep(delay)
                    continue

                if resp.status_code in (503, 429) and not last:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "NOAA %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        url, resp.status_code, delay, attempt + 1, self.max_retries,
                    )
                    await asyncio.sleep(delay)
                    continue
                if resp.status_code != 200:
                    logger.error("NOAA forecast %s returned %d", url, resp.status_code)
                    raise UpstreamUnavailable(
                        "Non 200 response from NOAA", status_code=resp.status_code, url=url
                    )
                try:
                    data = resp.json()
                except ValueError as e:
                    raise MalformedPayload(f"Forecast body is not JSON: {e}") from e
                if not isinstance(data, dict):
                    raise MalformedPayload("Forecast body is not a JSON object")
                logger.info("NOAA forecast 200 success for %s", path)
                return data

        raise UpstreamUnavailable("Forecast retries exhausted", url=url)

    async def get_buoy_text(self, path: str, retries: int = 1) -> str:
        """Fetch a realtime text report, retrying immediately on failure.

        Attempts run one after another; the last failure raises.
        """
        url = f"{self.realtime_base_url}{path}"
        headers = {"User-Agent": self.user_agent}
        status_code: int | None = None

        async with httpx.AsyncClient(timeout=self.realtime_timeout) as client:
            for attempt in range(retries + 1):
                try:
                    resp = await client.get(url, headers=headers)
                except httpx.RequestError as e:
                    logger.warning(
                        "NOAA realtime request error for %s (attempt %d/%d): %s",
                        path, attempt + 1, retries + 1, e,
                    )
                    continue
                if resp.status_code == 200:
                    logger.info("NOAA realtime 200 success for %s", path)
                    return resp.text
                status_code = resp.status_code
                logger.warning(
                    "NOAA realtime %s returned %d (attempt %d/%d)",
                    path, resp.status_code, attempt + 1, retries + 1,
                )

        logger.error("Non 200 response from NOAA realtime for %s", path)
        raise UpstreamUnavailable(
            "Non 200 response from NOAA realtime", status_code=status_code, url=url
        )
