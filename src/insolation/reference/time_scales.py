from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from numbers import Real
from typing import Union

from ..core.errors import InstantTypeError, NaiveDatetimeError


Instant = Union[datetime, date, Real, Decimal]


# ============================================================
# Epoch constants
# ============================================================

_UNIX_J2000 = 946728000.0         # 2000-01-01 12:00:00 UTC as Unix seconds
_SECONDS_PER_CENTURY = 3155760000.0  # 36525 days * 86400 s
_JD_UNIX_EPOCH = 2440587.5        # JD at 1970-01-01 00:00:00 UTC


# ============================================================
# Instant -> Unix seconds
# ============================================================

def unix_seconds(instant: Instant) -> float:
    """
    Seconds since the Unix epoch (UTC) for any supported instant.

    - aware datetime: converted to UTC
    - date: midnight UTC of that civil date
    - real number (int, float, Fraction, Decimal, numpy scalars): Unix seconds
    """
    # datetime is a subclass of date, so test it first
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            raise NaiveDatetimeError("datetime must be timezone-aware (UTC)")
        return instant.astimezone(timezone.utc).timestamp()
    if isinstance(instant, date):
        return datetime(instant.year, instant.month, instant.day, tzinfo=timezone.utc).timestamp()
    if isinstance(instant, bool):
        raise InstantTypeError("bool is not an instant")
    if isinstance(instant, (Real, Decimal)):
        return float(instant)
    raise InstantTypeError(f"Unsupported instant type: {type(instant).__name__}")


# ============================================================
# Julian centuries from J2000.0 (civil/UTC scale)
# ============================================================

def T_from_unix(seconds: float) -> float:
    """
    T = (unix - 946728000) / 3155760000
    Julian centuries since 2000-01-01 12:00 UTC.
    """
    return (seconds - _UNIX_J2000) / _SECONDS_PER_CENTURY


def unix_from_T(T: float) -> float:
    return _UNIX_J2000 + _SECONDS_PER_CENTURY * T


def centuries_since_epoch(instant: Instant) -> float:
    """Julian centuries elapsed since 2000-01-01T12:00 UTC (signed)."""
    return T_from_unix(unix_seconds(instant))


def T_from_jd_utc(jd_utc: float) -> float:
    """
    Same scale from a Julian Date (UTC):
      T = (JD - 2451545.0) / 36525
    """
    return T_from_unix((jd_utc - _JD_UNIX_EPOCH) * 86400.0)


def datetime_from_T(T: float) -> datetime:
    """T -> timezone-aware datetime in UTC."""
    return datetime.fromtimestamp(unix_from_T(T), tz=timezone.utc)
