from __future__ import annotations

from typing import Iterable, List, Tuple

from .core.types import DailySolar
from .reference import solar
from .reference.time_scales import Instant, centuries_since_epoch


def daily_solar_at(instant: Instant, latitude: float) -> DailySolar:
    """Insolation and max-elevation cosine for an instant and a latitude in radians."""
    return solar.daily_solar(centuries_since_epoch(instant), latitude)

def daily_solar_series(instants: Iterable[Instant], latitude: float) -> List[DailySolar]:
    """One result per instant at a fixed latitude (radians)."""
    return [daily_solar_at(t, latitude) for t in instants]

def daily_solar_rows(rows: Iterable[Tuple[Instant, float]]) -> List[DailySolar]:
    """One result per (instant, latitude_rad) pair, e.g. per (station, date) row."""
    return [daily_solar_at(t, lat) for t, lat in rows]
