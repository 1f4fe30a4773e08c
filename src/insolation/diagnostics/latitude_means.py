#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import datetime, timezone
from typing import Sequence, Tuple

from insolation.core.errors import OptionalDependencyError
from insolation.reference import solar
from insolation.reference.time_scales import centuries_since_epoch
from insolation.diagnostics.annual_cycle import build_cycle


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise OptionalDependencyError('Need numpy. Install: pip install "insolation[diagnostics]"') from e


def _need_trapezoid():
    try:
        from scipy.integrate import trapezoid
        return trapezoid
    except ImportError as e:
        raise OptionalDependencyError('Need scipy. Install: pip install "insolation[diagnostics]"') from e


def annual_means(np, trapezoid, year: int, lats_deg: Sequence[float]) -> "np.ndarray":
    """Time-averaged daily insolation over the year, one value per latitude."""
    doy, q = build_cycle(np, year, lats_deg)
    span = float(doy[-1] - doy[0])
    return np.array([trapezoid(row, doy) / span for row in q], dtype=float)


def equinox_values(year: int, lats_deg: Sequence[float]) -> Tuple[list, list]:
    """Insolation at 12:00 UTC on Mar 20 and Sep 22."""
    T_mar = centuries_since_epoch(datetime(year, 3, 20, 12, tzinfo=timezone.utc))
    T_sep = centuries_since_epoch(datetime(year, 9, 22, 12, tzinfo=timezone.utc))
    mar = [solar.insolation(T_mar, math.radians(lat)) for lat in lats_deg]
    sep = [solar.insolation(T_sep, math.radians(lat)) for lat in lats_deg]
    return mar, sep


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Annual mean top-of-atmosphere insolation per latitude band.")
    p.add_argument("--year", type=int, default=2001)
    p.add_argument("--step", type=float, default=10.0, help="latitude step in degrees")
    args = p.parse_args(argv)

    if not (0.0 < args.step <= 90.0):
        raise SystemExit("--step must be in (0, 90]")

    np = _need_numpy()
    trapezoid = _need_trapezoid()

    lats = [float(x) for x in np.arange(-90.0, 90.0 + 1e-9, args.step)]
    means = annual_means(np, trapezoid, args.year, lats)
    mar, sep = equinox_values(args.year, lats)

    print(f"Annual mean insolation, {args.year} (kWh/m^2/day)")
    print(f"{'lat':>6} {'mean':>8} {'Mar20':>8} {'Sep22':>8} {'Mar/mean':>9}")
    for lat, m, a, b in zip(lats, means, mar, sep):
        ratio = a / m if m > 0 else float("nan")
        print(f"{lat:6.1f} {m:8.3f} {a:8.3f} {b:8.3f} {ratio:9.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
