# reference/solar.py

from __future__ import annotations

import math

from . import astro_args as aa
from ..core.types import DailySolar, SolarState


# Solar constant folded together with the kWh/m^2/day unit conversion.
INSOLATION_SCALE = 10.4033856721


def equation_of_center(T: float) -> float:
    """
    Equation of center of the Sun (radians), three-harmonic series in M:
      C = (1.914602 - 0.004817 T - 0.000014 T^2) sin M
        + (0.019993 - 0.000101 T) sin 2M
        + 0.000289 sin 3M            [degrees]
    """
    M = aa.mean_anomaly(T)
    C_deg = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M)
        + 0.000289 * math.sin(3.0 * M)
    )
    return math.radians(C_deg)


def sun_earth_distance_ratio(T: float) -> float:
    """Radius vector of the Sun, in units of the semi-major axis."""
    e = aa.eccentricity(T)
    nu = equation_of_center(T) + aa.mean_anomaly(T)  # true anomaly
    return 1.000001018 * (1.0 - e * e) / (1.0 + e * math.cos(nu))


def apparent_longitude(T: float) -> float:
    """
    Apparent longitude of the Sun (radians): true longitude corrected for
    aberration and the leading nutation term. Both constants are radians.
    """
    Omega = aa.ascending_node_longitude(T)
    return aa.mean_longitude(T) + equation_of_center(T) - 0.00569 - 0.00478 * math.sin(Omega)


def _sin_declination(T: float) -> float:
    """sin(delta) = sin(eps) sin(lambda), unclamped."""
    return math.sin(aa.obliquity(T)) * math.sin(apparent_longitude(T))


def declination(T: float) -> float:
    """Solar declination (radians)."""
    return aa.safe_asin(_sin_declination(T))


def sunrise_hour_angle(T: float, latitude: float) -> float:
    """
    Hour angle of sunrise (radians, in [0, pi]) for a geometric horizon.
    0 means the sun never rises (polar night), pi that it never sets (polar day).
    """
    x = math.tan(declination(T)) * math.tan(latitude)
    if x < -1.0:
        return 0.0
    if x > 1.0:
        return math.pi
    return math.acos(-x)


def insolation(T: float, latitude: float) -> float:
    """
    Daily top-of-atmosphere insolation on a horizontal surface (kWh/m^2/day):
      Q = k rho^2 (h0 sin(phi) sin(delta) + cos(phi) cos(delta) sin(h0))
    """
    rho = sun_earth_distance_ratio(T)
    h0 = sunrise_hour_angle(T, latitude)
    x = aa.clamp_unit(_sin_declination(T))
    q = INSOLATION_SCALE * rho * rho * (
        h0 * math.sin(latitude) * x
        + math.cos(latitude) * math.cos(aa.safe_asin(x)) * math.sin(h0)
    )
    # sin(h0) - h0 cos(h0) ~ h0^3/3 near polar night; rounding can dip below zero
    return q if q > 0.0 else 0.0


def max_sun_elevation_cosine(T: float, latitude: float) -> float:
    """Cosine of the sun's elevation at local noon, cos(phi - delta)."""
    return math.cos(latitude - declination(T))


def daily_solar(T: float, latitude: float) -> DailySolar:
    return DailySolar(
        insolation_kwh_m2=insolation(T, latitude),
        max_elevation_cos=max_sun_elevation_cosine(T, latitude),
    )


def solar_state(T: float, latitude: float) -> SolarState:
    """All intermediate quantities at (T, latitude), for reporting."""
    return SolarState(
        T=T,
        latitude=latitude,
        obliquity=aa.obliquity(T),
        mean_anomaly=aa.mean_anomaly(T),
        eccentricity=aa.eccentricity(T),
        equation_of_center=equation_of_center(T),
        distance_ratio=sun_earth_distance_ratio(T),
        mean_longitude=aa.mean_longitude(T),
        node_longitude=aa.ascending_node_longitude(T),
        apparent_longitude=apparent_longitude(T),
        declination=declination(T),
        sunrise_hour_angle=sunrise_hour_angle(T, latitude),
        insolation_kwh_m2=insolation(T, latitude),
        max_elevation_cos=max_sun_elevation_cosine(T, latitude),
    )
