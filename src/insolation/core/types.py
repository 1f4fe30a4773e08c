from __future__ import annotations
from dataclasses import dataclass
import math

@dataclass(frozen=True)
class DailySolar:
    """Daily top-of-atmosphere insolation and cosine of the noon elevation angle."""
    insolation_kwh_m2: float
    max_elevation_cos: float

@dataclass(frozen=True)
class SolarState:
    """Snapshot of every intermediate quantity at one (T, latitude); radians unless noted."""
    T: float
    latitude: float
    obliquity: float
    mean_anomaly: float
    eccentricity: float
    equation_of_center: float
    distance_ratio: float
    mean_longitude: float
    node_longitude: float
    apparent_longitude: float
    declination: float
    sunrise_hour_angle: float
    insolation_kwh_m2: float
    max_elevation_cos: float

    @property
    def day_length_hours(self) -> float:
        return 24.0 * self.sunrise_hour_angle / math.pi
