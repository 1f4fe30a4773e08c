#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import datetime, timedelta, timezone
from typing import List, Sequence, Tuple

from insolation.core.errors import OptionalDependencyError
from insolation.reference import solar
from insolation.reference.time_scales import centuries_since_epoch


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise OptionalDependencyError('Need numpy. Install: pip install "insolation[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise OptionalDependencyError('Need matplotlib. Install: pip install "insolation[diagnostics]"') from e


def year_noons(year: int) -> List[datetime]:
    """12:00 UTC of every day of the given year."""
    t = datetime(year, 1, 1, 12, tzinfo=timezone.utc)
    out = []
    while t.year == year:
        out.append(t)
        t += timedelta(days=1)
    return out


def build_cycle(np, year: int, lats_deg: Sequence[float]) -> Tuple["np.ndarray", "np.ndarray"]:
    """
    Returns (day_of_year[N], insolation[len(lats), N]) in kWh/m^2/day.
    """
    days = year_noons(year)
    Ts = [centuries_since_epoch(d) for d in days]
    doy = np.arange(1, len(days) + 1, dtype=int)
    q = np.empty((len(lats_deg), len(days)), dtype=float)
    for i, lat in enumerate(lats_deg):
        phi = math.radians(lat)
        q[i] = [solar.insolation(T, phi) for T in Ts]
    return doy, q


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot daily top-of-atmosphere insolation over one year.")
    p.add_argument("--year", type=int, default=2001)
    p.add_argument("--lat", type=float, action="append", default=[], help="latitude in degrees (repeatable)")
    p.add_argument("--out", default="annual_cycle.png", help="output image filename")
    args = p.parse_args(argv)

    lats = args.lat or [-90.0, -60.0, -30.0, 0.0, 30.0, 60.0, 90.0]
    for lat in lats:
        if not (-90.0 <= lat <= 90.0):
            raise SystemExit(f"--lat {lat} outside [-90, 90]")

    np = _need_numpy()
    plt = _need_matplotlib()

    doy, q = build_cycle(np, args.year, lats)

    fig, ax = plt.subplots(figsize=(10, 5))
    for lat, row in zip(lats, q):
        ax.plot(doy, row, linewidth=1.5, label=f"{lat:+.0f}°")
    ax.set_title(f"Daily insolation at top of atmosphere, {args.year}")
    ax.set_xlabel("Day of year")
    ax.set_ylabel("kWh / m² / day")
    ax.grid(True, alpha=0.3)
    ax.legend(title="Latitude", fontsize=8)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Wrote {args.out}")

    print()
    print(f"{'lat':>6} {'min':>8} {'mean':>8} {'max':>8}")
    for lat, row in zip(lats, q):
        print(f"{lat:6.1f} {row.min():8.3f} {row.mean():8.3f} {row.max():8.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
