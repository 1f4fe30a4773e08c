"""Ephemeris adapters/providers (optional).

This package provides thin wrappers around external ephemeris libraries.
Install with:
  pip install "insolation[ephemeris]"
"""

from ..core.errors import OptionalDependencyError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise OptionalDependencyError('Ephemeris support requires: pip install "insolation[ephemeris]"') from e
