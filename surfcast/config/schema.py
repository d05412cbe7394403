"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from surfcast.models.common import Location, Orientation


class SpotConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    name: str
    location: Location
    forecast_path: str
    realtime_path: str
    fallback_realtime_path: str | None = None
    orientation: Orientation
    has_buoy: bool = True
    high_wind_mph: float = Field(default=25.0, gt=0.0)
    live_feed_url: str | None = None
    # Beach-monitoring feature-service queries, appended to the water quality URL
    quality_query: str | None = None
    status_query: str | None = None


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_base_url: str = "https://api.weather.gov"
    realtime_base_url: str = "https://www.ndbc.noaa.gov"
    user_agent: str = "surfcast/0.1.0"
    forecast_timeout: float = Field(default=10.0, gt=0.0)
    realtime_timeout: float = Field(default=10.0, gt=0.0)
    forecast_max_retries: int = Field(default=1, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)
    water_quality_base_url: str | None = None
    water_quality_timeout: float = Field(default=10.0, gt=0.0)


class RealtimeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_age_hours: float = Field(default=24.0, gt=0.0)
    buoy_retries: int = Field(default=1, ge=0)
    water_temp_fallback_path: str = "/data/realtime2/45013.txt"


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_ttl_seconds: int = Field(default=300, ge=0)
    realtime_ttl_seconds: int = Field(default=120, ge=0)
    water_quality_ttl_seconds: int = Field(default=300, ge=0)


class SurfConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    realtime: RealtimeConfig = RealtimeConfig()
    cache: CacheConfig = CacheConfig()
    default_spot: str = Location.ATWATER.value
    spots: list[SpotConfig] = []
