"""Surf JSON API: FastAPI backend serving forecast and buoy data per spot."""

import os
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from surfcast.config.loader import load_config
from surfcast.errors import SurfcastError, UpstreamUnavailable
from surfcast.pipeline.service import SurfService

CONFIG_ENV = "SURFCAST_CONFIG"


def create_app(service: SurfService | None = None) -> FastAPI:
    if service is None:
        service = SurfService(load_config(os.environ.get(CONFIG_ENV)))

    app = FastAPI(title="Surfcast", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.service = service

    @app.get("/api/spots")
    def get_spots():
        """Known spots in config order."""
        registry = service.registry
        return [
            {
                "name": spot.name,
                "orientation": spot.orientation.value,
                "has_buoy": spot.has_buoy,
                "live_feed_url": spot.live_feed_url,
                "water_quality": service.serves_water_quality(spot),
                "default": spot is registry.default,
            }
            for spot in (registry.get(name) for name in registry.names())
        ]

    @app.get("/api/forecast")
    async def get_forecast(spot: str | None = None):
        try:
            payload = await service.get_forecast_json(spot)
        except SurfcastError as e:
            raise _http_error(e) from e
        return Response(content=payload, media_type="application/json")

    @app.get("/api/realtime")
    async def get_realtime(spot: str | None = None):
        try:
            payload = await service.get_realtime_json(spot)
        except SurfcastError as e:
            raise _http_error(e) from e
        return Response(content=payload, media_type="application/json")

    @app.get("/api/water-quality")
    async def get_water_quality(spot: str | None = None):
        try:
            payload = await service.get_water_quality_json(spot)
        except SurfcastError as e:
            raise _http_error(e) from e
        return Response(content=payload, media_type="application/json")

    @app.get("/api/conditions")
    async def get_conditions(spot: str | None = None):
        """Page sections; each carries data or its own error."""
        return await service.get_conditions(spot)

    @app.get("/api/health")
    def get_health():
        return {
            "default_spot": service.registry.default.name,
            "spots": len(service.registry.names()),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


def _http_error(e: SurfcastError) -> HTTPException:
    status = 502 if isinstance(e, UpstreamUnavailable) else 503
    return HTTPException(status, f"Something went wrong: {e}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8777)
