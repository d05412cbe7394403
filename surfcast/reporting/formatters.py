"""Output formatters for forecasts and realtime readings."""

import json

from surfcast.models.forecast import Forecast
from surfcast.models.realtime import RealtimeReading
from surfcast.models.water_quality import WaterQuality


def format_wind(speed: str, gusts: str) -> str:
    """``"12"`` when gusts match or are zero, else ``"12-18"``."""
    if speed == gusts or gusts == "0":
        return speed
    return f"{speed}-{gusts}"


def format_forecast_text(f: Forecast, hours: int = 12) -> str:
    """Plain text forecast: current summary then the next ``hours`` rows."""
    lines = [
        f"=== {f.spot} forecast | updated {f.last_updated} ===",
        f"Now: {f.current.wave_height} ft @ {f.current.wave_period}s, "
        f"heading {f.current.wave_direction}°",
        f"{'Hour':<10} {'Waves':>6} {'Wind':>6} {'Gust':>6} {'Temp':>6}  Quality",
    ]
    for i in range(min(hours, len(f.labels))):
        lines.append(
            f"{f.labels[i]:<10} {f.wave_height[i]:>6.2f} {f.wind_speed[i]:>6.1f} "
            f"{f.wind_gust[i]:>6.1f} {f.temperature[i]:>6.0f}  {f.quality[i].value}"
        )
    return "\n".join(lines)


def format_realtime_text(r: RealtimeReading) -> str:
    lines = [f"=== As of {r.as_of} ==="]
    if r.loaded_from_fallback:
        lines[0] += " (shore station)"
    if r.wave_height is not None:
        lines.append(
            f"Waves: {r.wave_height} ft @ {r.wave_period}s, heading {r.wave_direction}°"
        )
    lines.append(f"Wind: {format_wind(r.wind_speed, r.gusts)} mph from {r.wind_direction}°")
    lines.append(f"Air: {r.air_temp}°F | Water: {r.water_temp}°F")
    lines.append(f"Quality: {r.quality.value}")
    return "\n".join(lines)


def format_json(data: Forecast | RealtimeReading | WaterQuality) -> str:
    return json.dumps(data.to_dict(), indent=2)


def format_water_quality_text(w: WaterQuality) -> str:
    return f"Water quality: {w.status.upper()} | {w.status_text}"
