"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from surfcast.config.defaults import DEFAULT_SPOTS
from surfcast.config.schema import SpotConfig, SurfConfig
from surfcast.ingest.noaa_client import NoaaClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"

NWS_TEST_URL = "https://test-nws.example.com"
NDBC_TEST_URL = "https://test-ndbc.example.com"
WQ_TEST_URL = "https://test-wq.example.com/beaches"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def default_config() -> SurfConfig:
    """Return default SurfConfig with the built-in spots."""
    return SurfConfig(spots=DEFAULT_SPOTS)


@pytest.fixture
def test_config() -> SurfConfig:
    """Default spots pointed at mock hosts, with instant retries."""
    return SurfConfig(
        api={
            "forecast_base_url": NWS_TEST_URL,
            "realtime_base_url": NDBC_TEST_URL,
            "retry_base_delay": 0.0,
        },
        spots=DEFAULT_SPOTS,
    )


@pytest.fixture
def noaa() -> NoaaClient:
    return NoaaClient(
        forecast_base_url=NWS_TEST_URL,
        realtime_base_url=NDBC_TEST_URL,
        max_retries=1,
        retry_base_delay=0.0,
    )


@pytest.fixture
def atwater() -> SpotConfig:
    return DEFAULT_SPOTS[0]


@pytest.fixture
def bradford() -> SpotConfig:
    return DEFAULT_SPOTS[1]


@pytest.fixture
def gridpoint() -> dict:
    with open(FIXTURE_DIR / "gridpoint_atwater.json") as f:
        return json.load(f)


@pytest.fixture
def buoy_text() -> str:
    return (FIXTURE_DIR / "buoy_45013.txt").read_text()


@pytest.fixture
def station_text() -> str:
    return (FIXTURE_DIR / "station_mlww3.txt").read_text()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"forecast_timeout": 5.0},
        "realtime": {"max_age_hours": 12},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path



@pytest.fixture
def wq_config() -> SurfConfig:
    """Mock hosts with a water quality service and queries for Atwater only."""
    atwater = DEFAULT_SPOTS[0].model_copy(
        update={
            "status_query": "/atwater/status",
            "quality_query": "/atwater/advisory",
        }
    )
    return SurfConfig(
        api={
            "forecast_base_url": NWS_TEST_URL,
            "realtime_base_url": NDBC_TEST_URL,
            "water_quality_base_url": WQ_TEST_URL,
            "retry_base_delay": 0.0,
        },
        spots=[atwater, *DEFAULT_SPOTS[1:]],
    )


@pytest.fixture
def status_doc() -> dict:
    return {"features": [{"attributes": {"BEACH": "Atwater", "MAP_STATUS": "Open"}}]}


@pytest.fixture
def advisory_doc() -> dict:
    return {
        "features": [
            {"attributes": {"STATUS": "No advisory. E. coli below 235 CFU/100 mL."}},
            {"attributes": {"STATUS": "older sample"}},
        ]
    }
