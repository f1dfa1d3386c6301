"""
Error taxonomy for heatgrid.

Every error derives from HeatGridError and also from the built-in exception
that best describes it, so callers may catch either.
"""


class HeatGridError(Exception):
    """Base class for all heatgrid errors."""


class InvalidArgument(HeatGridError, ValueError):
    """An argument has an unusable value (bad color, bad step count, too few stops)."""


class DimensionMismatch(HeatGridError, ValueError):
    """rows * cols does not match the length of the data series."""


class InvalidTarget(HeatGridError, TypeError):
    """The drawing target does not expose the surface interface."""


class ValueOutOfRange(HeatGridError, ValueError):
    """A data value lies outside [0, 1) under the RAISE policy."""


__all__ = [
    "HeatGridError",
    "InvalidArgument",
    "DimensionMismatch",
    "InvalidTarget",
    "ValueOutOfRange",
]
