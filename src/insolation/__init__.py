"""insolation public API.

Keep this surface small: users should mostly interact with functions re-exported here.
Latitudes are radians throughout; converting from degrees is the caller's job.
"""

from .api import (
    daily_solar_at,
    daily_solar_series,
    daily_solar_rows,
)
from .reference.time_scales import centuries_since_epoch
from .reference.astro_args import (
    obliquity,
    mean_anomaly,
    eccentricity,
    mean_longitude,
    ascending_node_longitude,
)
from .reference.solar import (
    equation_of_center,
    sun_earth_distance_ratio,
    apparent_longitude,
    declination,
    sunrise_hour_angle,
    insolation,
    max_sun_elevation_cosine,
    daily_solar,
    solar_state,
)
from .core.types import DailySolar, SolarState
from .core.errors import InsolationError

__all__ = [
    "daily_solar_at",
    "daily_solar_series",
    "daily_solar_rows",
    "centuries_since_epoch",
    "obliquity",
    "mean_anomaly",
    "eccentricity",
    "mean_longitude",
    "ascending_node_longitude",
    "equation_of_center",
    "sun_earth_distance_ratio",
    "apparent_longitude",
    "declination",
    "sunrise_hour_angle",
    "insolation",
    "max_sun_elevation_cosine",
    "daily_solar",
    "solar_state",
    "DailySolar",
    "SolarState",
    "InsolationError",
]
