#ephemeris/de421.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from . import require_ephemeris


@dataclass
class DE421Sun:
    """
    Apparent geocentric Sun from JPL DE421 via skyfield.

    The kernel (~17 MB) is downloaded once into `directory` by skyfield's loader.
    Requires optional deps:
      pip install "insolation[ephemeris]"
    """
    ts: object
    earth: object
    sun: object

    @classmethod
    def load(cls, directory: str = ".") -> "DE421Sun":
        require_ephemeris()
        from skyfield.api import Loader

        load = Loader(directory)
        eph = load("de421.bsp")
        return cls(ts=load.timescale(), earth=eph["earth"], sun=eph["sun"])

    def declination_distance(self, dt_utc: datetime) -> Tuple[float, float]:
        """
        (declination of date in radians, distance in au) at an aware UTC datetime.
        """
        t = self.ts.from_datetime(dt_utc)
        app = self.earth.at(t).observe(self.sun).apparent()
        _, dec, dist = app.radec(epoch="date")
        return float(dec.radians), float(dist.au)
