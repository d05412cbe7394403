"""Pull status strings out of feature-service query results.

Both queries answer with ``{"features": [{"attributes": {...}}, ...]}``; only
the first feature is read.
"""

from typing import Any

from surfcast.errors import MalformedPayload
from surfcast.models.water_quality import WaterQuality

MAP_STATUS = "MAP_STATUS"
STATUS = "STATUS"


def first_attribute(raw: Any, key: str) -> str:
    if not isinstance(raw, dict) or "features" not in raw:
        raise MalformedPayload("no features found.")
    features = raw["features"]
    if not isinstance(features, list):
        raise MalformedPayload("features is not an array.")
    if not features:
        raise MalformedPayload("empty array of features.")
    attributes = features[0].get("attributes") if isinstance(features[0], dict) else None
    if not isinstance(attributes, dict):
        raise MalformedPayload("no attributes found.")
    value = attributes.get(key)
    if value is None:
        raise MalformedPayload(f"no {key} found.")
    if not isinstance(value, str):
        raise MalformedPayload(f"{key} is not a string.")
    return value


def parse_water_quality(status_doc: Any, quality_doc: Any) -> WaterQuality:
    """Combine the map status and the advisory text into one reading."""
    return WaterQuality(
        status=first_attribute(status_doc, MAP_STATUS),
        status_text=first_attribute(quality_doc, STATUS),
    )
