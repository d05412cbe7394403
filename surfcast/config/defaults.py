"""Built-in spot table with forecast grid paths and buoy/station feeds."""

from surfcast.config.schema import SpotConfig
from surfcast.models.common import Location, Orientation

# Shore stations (no wave sensors) used when a buoy is stale or missing.
MILWAUKEE_STATION = "/data/realtime2/MLWW3.txt"
PORT_WASHINGTON_STATION = "/data/realtime2/PWAW3.txt"
SHEBOYGAN_STATION = "/data/realtime2/SGNW3.txt"
KENOSHA_STATION = "/data/realtime2/KNSW3.txt"

DEFAULT_SPOTS: list[SpotConfig] = [
    SpotConfig(
        name="Atwater",
        location=Location.ATWATER,
        forecast_path="/gridpoints/MKX/90,67",
        realtime_path="/data/realtime2/45013.txt",
        fallback_realtime_path=MILWAUKEE_STATION,
        orientation=Orientation.SOUTH,
    ),
    SpotConfig(
        name="Bradford",
        location=Location.BRADFORD,
        forecast_path="/gridpoints/MKX/90,66",
        realtime_path=MILWAUKEE_STATION,
        orientation=Orientation.SOUTH,
        has_buoy=False,
    ),
    SpotConfig(
        name="Sheboygan - North",
        location=Location.SHEBOYGAN_NORTH,
        forecast_path="/gridpoints/MKX/94,99",
        realtime_path="/data/realtime2/45218.txt",
        fallback_realtime_path=SHEBOYGAN_STATION,
        orientation=Orientation.SOUTH,
        live_feed_url="https://www.youtube-nocookie.com/embed/p780CkCgNVE?controls=0",
    ),
    SpotConfig(
        name="Sheboygan - South",
        location=Location.SHEBOYGAN_SOUTH,
        forecast_path="/gridpoints/MKX/94,98",
        realtime_path="/data/realtime2/45218.txt",
        fallback_realtime_path=SHEBOYGAN_STATION,
        orientation=Orientation.NORTH,
        live_feed_url="https://www.youtube.com/embed/M0Ion4MpsgU?controls=0",
    ),
    SpotConfig(
        name="Port Washington",
        location=Location.PORT_WASHINGTON,
        forecast_path="/gridpoints/MKX/91,80",
        realtime_path=PORT_WASHINGTON_STATION,
        orientation=Orientation.NORTH,
        has_buoy=False,
    ),
    SpotConfig(
        name="Racine",
        location=Location.RACINE,
        forecast_path="/gridpoints/MKX/94,52",
        realtime_path="/data/realtime2/45199.txt",
        fallback_realtime_path=KENOSHA_STATION,
        orientation=Orientation.NORTH,
    ),
]
