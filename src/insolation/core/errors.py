class InsolationError(Exception):
    """Base error."""

class NaiveDatetimeError(InsolationError, ValueError):
    """Raised when a datetime without tzinfo is passed as an instant."""

class InstantTypeError(InsolationError, TypeError):
    """Raised when an instant is neither a datetime, a date, nor Unix seconds."""

class LatitudeRangeError(InsolationError, ValueError):
    """Raised by degree-based front ends for latitudes outside [-90, 90]."""

class OptionalDependencyError(InsolationError, RuntimeError):
    """Raised when an optional extra (diagnostics, ephemeris) is not installed."""
