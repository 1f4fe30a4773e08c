#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from insolation.core.errors import OptionalDependencyError
from insolation.reference import solar
from insolation.reference.time_scales import centuries_since_epoch
from insolation.ephemeris.de421 import DE421Sun


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


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate analytical declination and Sun-Earth distance against DE421.")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=int, default=7)
    p.add_argument("--ephem-dir", default=".", help="directory holding (or receiving) de421.bsp")
    p.add_argument("--out-png", default=None, help="optional error plot")
    args = p.parse_args(argv)

    # DE421 covers 1899-07-29 .. 2053-10-09
    if args.year_start < 1900 or args.year_end > 2052 or args.year_end < args.year_start:
        raise SystemExit("Year range must lie within [1900, 2052] for DE421")

    np = _need_numpy()

    print("Loading DE421 Ephemeris...")
    eph = DE421Sun.load(args.ephem_dir)

    t = datetime(args.year_start, 1, 1, 12, tzinfo=timezone.utc)
    t_end = datetime(args.year_end, 12, 31, 12, tzinfo=timezone.utc)
    step = timedelta(days=args.step_days)

    times = []
    d_dec = []
    d_rho = []
    while t <= t_end:
        T = centuries_since_epoch(t)
        dec_ref, rho_ref = eph.declination_distance(t)
        times.append(args.year_start + (t - datetime(args.year_start, 1, 1, tzinfo=timezone.utc)).days / 365.25)
        d_dec.append(math.degrees(solar.declination(T) - dec_ref))
        d_rho.append(solar.sun_earth_distance_ratio(T) - rho_ref)
        t += step

    times = np.array(times)
    d_dec = np.array(d_dec)
    d_rho = np.array(d_rho)

    print(f"Samples: {len(times)}  ({args.year_start}..{args.year_end}, every {args.step_days} d)")
    print()
    print("Declination error (deg):")
    print(f"  max |err| = {np.max(np.abs(d_dec)):.5f}")
    print(f"  rms       = {np.sqrt(np.mean(d_dec ** 2)):.5f}")
    print(f"  mean      = {np.mean(d_dec):+.5f}")
    print()
    print("Distance ratio error (au):")
    print(f"  max |err| = {np.max(np.abs(d_rho)):.3e}")
    print(f"  rms       = {np.sqrt(np.mean(d_rho ** 2)):.3e}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
        ax1.plot(times, d_dec, linewidth=0.8)
        ax1.set_ylabel("δ - δ_DE421 (deg)")
        ax1.grid(True, alpha=0.3)
        ax2.plot(times, d_rho, linewidth=0.8, color="tab:orange")
        ax2.set_ylabel("ρ - ρ_DE421 (au)")
        ax2.set_xlabel("Year")
        ax2.grid(True, alpha=0.3)
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=150)
        print(f"\nWrote {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
