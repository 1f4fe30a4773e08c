#!/usr/bin/env python3
"""
Append daily insolation columns to a per-station daily table (CSV).

Each kept row gets `insolation_kwh_m2` and `max_elevation_cos`. Rows with a
missing or unparsable date, or a missing, unparsable or out-of-range latitude,
are dropped and counted.
"""
from __future__ import annotations

import argparse
import csv
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from .core.errors import LatitudeRangeError
from .reference import solar
from .reference.time_scales import centuries_since_epoch


OUT_COLUMNS = ("insolation_kwh_m2", "max_elevation_cos")
_MISSING = {"", "na", "nan", "null", "none"}


@dataclass(frozen=True)
class AugmentSummary:
    rows_in: int
    rows_out: int
    rows_skipped: int


def parse_instant(s: str) -> datetime:
    """
    ISO date or datetime -> aware UTC datetime.
    Bare dates are midnight UTC; naive datetimes are taken as UTC.
    """
    s = s.strip()
    if len(s) == 10:
        d = date.fromisoformat(s)
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def latitude_radians(lat_deg: float) -> float:
    """Degrees -> radians, rejecting values outside [-90, 90]."""
    if not (-90.0 <= lat_deg <= 90.0):
        raise LatitudeRangeError(f"Latitude {lat_deg} outside [-90, 90] degrees")
    return math.radians(lat_deg)


def _parse_date(raw: Optional[str]) -> Optional[datetime]:
    if raw is None or raw.strip().lower() in _MISSING:
        return None
    try:
        return parse_instant(raw)
    except ValueError:
        return None


def _parse_latitude(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip().lower() in _MISSING:
        return None
    try:
        lat_deg = float(raw)
    except ValueError:
        return None
    try:
        return latitude_radians(lat_deg)
    except LatitudeRangeError:
        return None


def augment_rows(
    rows: Iterable[Dict[str, str]],
    *,
    date_col: str = "date",
    lat_col: str = "latitude",
    digits: int = 6,
) -> Iterator[Dict[str, str]]:
    """Yield rows (copies) with the two solar columns appended; rows with an invalid date or latitude are skipped."""
    for row in rows:
        lat = _parse_latitude(row.get(lat_col))
        dt = _parse_date(row.get(date_col))
        if lat is None or dt is None:
            continue
        T = centuries_since_epoch(dt)
        # cells beyond the header land under the None key
        out = {k: v for k, v in row.items() if k is not None}
        out["insolation_kwh_m2"] = f"{solar.insolation(T, lat):.{digits}f}"
        out["max_elevation_cos"] = f"{solar.max_sun_elevation_cosine(T, lat):.{digits}f}"
        yield out


def augment_csv(
    src: TextIO,
    dst: TextIO,
    *,
    date_col: str = "date",
    lat_col: str = "latitude",
    digits: int = 6,
) -> AugmentSummary:
    reader = csv.DictReader(src)
    if reader.fieldnames is None:
        raise ValueError("Input CSV has no header row")
    for col in (date_col, lat_col):
        if col not in reader.fieldnames:
            raise KeyError(f"Column '{col}' not found. Available: {list(reader.fieldnames)}")

    fields: List[str] = list(reader.fieldnames) + [c for c in OUT_COLUMNS if c not in reader.fieldnames]
    writer = csv.DictWriter(dst, fieldnames=fields, lineterminator="\n")
    writer.writeheader()

    n_in = 0
    n_out = 0

    def counted(it):
        nonlocal n_in
        for r in it:
            n_in += 1
            yield r

    for out in augment_rows(counted(reader), date_col=date_col, lat_col=lat_col, digits=digits):
        writer.writerow(out)
        n_out += 1

    return AugmentSummary(rows_in=n_in, rows_out=n_out, rows_skipped=n_in - n_out)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="insolation augment", description="Append daily insolation columns to a CSV table.")
    p.add_argument("src", help="input CSV (with header)")
    p.add_argument("dst", help="output CSV")
    p.add_argument("--date-col", default="date", help="column holding an ISO date/datetime (default: date)")
    p.add_argument("--lat-col", default="latitude", help="column holding latitude in degrees (default: latitude)")
    p.add_argument("--digits", type=int, default=6, help="decimal places written (default: 6)")
    args = p.parse_args(argv)

    with open(args.src, newline="", encoding="utf-8") as fin, open(args.dst, "w", newline="", encoding="utf-8") as fout:
        summary = augment_csv(fin, fout, date_col=args.date_col, lat_col=args.lat_col, digits=args.digits)

    print(f"Rows read    : {summary.rows_in}")
    print(f"Rows written : {summary.rows_out}")
    print(f"Rows skipped : {summary.rows_skipped} (missing or invalid date or latitude)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
