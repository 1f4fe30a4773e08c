from __future__ import annotations

import argparse
import sys
import importlib
import inspect
import math


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fmt_angle(x_rad: float) -> str:
    return f"{math.degrees(x_rad):14.8f} deg  ({x_rad:.10f} rad)"


def cmd_solar(argv: list[str]) -> int:
    from insolation.augment import parse_instant, latitude_radians
    from insolation.core.errors import LatitudeRangeError
    from insolation.reference import solar
    from insolation.reference.astro_args import wrap_rad
    from insolation.reference.time_scales import centuries_since_epoch

    p = argparse.ArgumentParser(prog="insolation solar", description="Daily insolation and noon elevation at a date and latitude.")
    p.add_argument("--date", default="2000-01-01T12:00:00", help="ISO date or datetime, UTC if no offset (default: J2000.0)")
    p.add_argument("--lat", type=float, default=0.0, help="Latitude in degrees (positive North)")
    args = p.parse_args(argv)

    try:
        phi = latitude_radians(args.lat)
    except LatitudeRangeError as e:
        p.error(str(e))

    try:
        dt = parse_instant(args.date)
    except ValueError as e:
        p.error(f"invalid --date {args.date!r}: {e}")
    T = centuries_since_epoch(dt)
    st = solar.solar_state(T, phi)

    print(f"Time Input:")
    print(f"  UTC = {dt.isoformat()}")
    print(f"  T (Julian centuries from J2000.0) = {T:.12f}")
    print(f"  Latitude = {args.lat:.6f} deg")
    print()
    print("Mean elements:")
    print(f"  Obliquity          (eps)   = {_fmt_angle(st.obliquity)}")
    print(f"  Mean anomaly       (M)     = {_fmt_angle(wrap_rad(st.mean_anomaly))}")
    print(f"  Eccentricity       (e)     = {st.eccentricity:.10f}")
    print(f"  Mean longitude     (L0)    = {_fmt_angle(wrap_rad(st.mean_longitude))}")
    print(f"  Node longitude     (Omega) = {_fmt_angle(wrap_rad(st.node_longitude))}")
    print()
    print("Solar position:")
    print(f"  Equation of center (C)     = {_fmt_angle(st.equation_of_center)}")
    print(f"  Apparent longitude (L_app) = {_fmt_angle(wrap_rad(st.apparent_longitude))}")
    print(f"  Declination        (delta) = {_fmt_angle(st.declination)}")
    print(f"  Distance ratio     (rho)   = {st.distance_ratio:.10f}")
    print()
    print("Day:")
    print(f"  Sunrise hour angle (h0)    = {_fmt_angle(st.sunrise_hour_angle)}")
    if st.sunrise_hour_angle == 0.0:
        print("  Polar night: sun does not rise.")
    elif st.sunrise_hour_angle == math.pi:
        print("  Polar day: sun does not set.")
    else:
        print(f"  Day length                 = {st.day_length_hours:.4f} h")
    print(f"  Insolation                 = {st.insolation_kwh_m2:.6f} kWh/m^2/day")
    print(f"  cos(max elevation)         = {st.max_elevation_cos:.8f}")
    return 0


def cmd_args(argv: list[str]) -> int:
    from insolation.augment import parse_instant
    from insolation.reference import astro_args as aa
    from insolation.reference.time_scales import centuries_since_epoch, datetime_from_T

    p = argparse.ArgumentParser(prog="insolation args", description="Print solar mean elements at a given T or date.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--T", type=float, default=None, help="Julian centuries from J2000.0 (default: 0)")
    g.add_argument("--date", default=None, help="ISO date or datetime, UTC if no offset")
    args = p.parse_args(argv)

    if args.date is not None:
        try:
            dt = parse_instant(args.date)
        except ValueError as e:
            p.error(f"invalid --date {args.date!r}: {e}")
        T = centuries_since_epoch(dt)
    else:
        T = args.T if args.T is not None else 0.0

    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print(f"UTC = {datetime_from_T(T).isoformat()}")
    print()
    print("Solar mean elements (degrees, wrapped to [0,360))")
    print(f"  eps    = {math.degrees(aa.obliquity(T)):.10f}")
    print(f"  M      = {math.degrees(aa.wrap_rad(aa.mean_anomaly(T))):.10f}")
    print(f"  L0     = {math.degrees(aa.wrap_rad(aa.mean_longitude(T))):.10f}")
    print(f"  Omega  = {math.degrees(aa.wrap_rad(aa.ascending_node_longitude(T))):.10f}")
    print(f"  e      = {aa.eccentricity(T):.10f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="insolation", description="Daily top-of-atmosphere insolation toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("solar", help="Daily insolation and noon elevation at a date and latitude.")
    sub.add_parser("args", help="Print solar mean elements at a given T or date.")
    sub.add_parser("augment", help="Append insolation columns to a CSV of dated, located rows.")

    # diagnostics (needs numpy/matplotlib/scipy)
    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["annual-cycle", "latitude-means"],
        help="Which diagnostic to run",
    )

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument(
        "tool",
        choices=["validate"],
        help="Which ephemeris diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "args":
        return cmd_args(rest)

    if args.cmd == "augment":
        return _run_module_main("insolation.augment", rest)

    if args.cmd == "diag":
        tool_map = {
            "annual-cycle": "insolation.diagnostics.annual_cycle",
            "latitude-means": "insolation.diagnostics.latitude_means",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate": "insolation.diagnostics.ephem.validate_declination",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
