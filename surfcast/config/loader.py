"""YAML config loader and dotted-key access."""

from pathlib import Path
from typing import Any

import yaml

from surfcast.config.defaults import DEFAULT_SPOTS
from surfcast.config.schema import SurfConfig


def load_config(path: str | Path | None = None) -> SurfConfig:
    """Load and validate config from a YAML file.

    With no path, returns the defaults. If no spots are specified in the YAML,
    injects DEFAULT_SPOTS.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if "spots" not in raw or not raw["spots"]:
        raw["spots"] = [s.model_dump() for s in DEFAULT_SPOTS]

    return SurfConfig(**raw)


def get_config_value(config: SurfConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.forecast_timeout'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
