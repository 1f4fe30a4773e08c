from __future__ import annotations

import math
from math import fmod


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 6.283185307179586  # 2*pi

def clamp_unit(x: float) -> float:
    """Clamp to [-1, 1], the domain of asin/acos."""
    if x > 1.0:
        return 1.0
    if x < -1.0:
        return -1.0
    return x

def safe_asin(x: float) -> float:
    return math.asin(clamp_unit(x))

def safe_acos(x: float) -> float:
    return math.acos(clamp_unit(x))

def wrap_rad(x_rad: float) -> float:
    """Wrap radians to [0, 2*pi). Only used for reporting; the series accept unwrapped angles."""
    y = fmod(x_rad, TAU)
    if y < 0:
        y += TAU
    return y


# ------------------------------------------------------------
# Mean obliquity of the ecliptic
# ------------------------------------------------------------

def obliquity(T: float) -> float:
    """
    Mean obliquity of the ecliptic (radians).

    IAU 1980 (Lieske) cubic, expressed in degrees:
      eps = 23.4392911111 - 0.0130041666667 T - 1.63888888889e-7 T^2 + 5.03611111111e-7 T^3
    i.e. 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3.
    """
    T2 = T * T
    T3 = T2 * T
    eps_deg = (
        23.4392911111
        - 0.0130041666667 * T
        - 1.63888888889e-7 * T2
        + 5.03611111111e-7 * T3
    )
    return math.radians(eps_deg)


# ------------------------------------------------------------
# Sun mean elements (Meeus-style, degrees -> radians, unwrapped)
# ------------------------------------------------------------

def mean_anomaly(T: float) -> float:
    """
    Mean anomaly of the Sun (radians):
      M = 357.52910 + 35999.05030 T - 0.0001559 T^2 - 0.00000048 T^3
    """
    T2 = T * T
    T3 = T2 * T
    M = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T3
    return math.radians(M)


def eccentricity(T: float) -> float:
    """Eccentricity of the Earth's orbit (dimensionless)."""
    return 0.016708617 - 0.000042037 * T - 0.0000001236 * (T * T)


def mean_longitude(T: float) -> float:
    """
    Geometric mean longitude of the Sun (radians):
      L0 = 280.46645 + 36000.76983 T + 0.0003032 T^2
    """
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * (T * T)
    return math.radians(L0)


def ascending_node_longitude(T: float) -> float:
    """
    Longitude of the Moon's mean ascending node (radians):
      Omega = 125.04452 - 1934.136261 T + 0.0020708 T^2 + T^3/450000
    """
    T2 = T * T
    T3 = T2 * T
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + (T3 / 450000.0)
    return math.radians(Omega)
