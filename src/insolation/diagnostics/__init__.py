"""Diagnostics package.

- diagnostics: plots and tables over the calculator (needs the diagnostics extras)
- diagnostics.ephem: optional (requires ephemeris extras + DE421 download)
"""

__all__ = ["annual_cycle", "latitude_means"]
