from __future__ import annotations

import math
import numbers
import warnings
from typing import Optional, Sequence

import numpy as np

from ..errors import InvalidArgument
from ..types.color_types import ColorLike, NUM_CHANNELS, as_color, as_color_stops
from ..utils.list_mismatch import handle_row_count_mismatch
from .table import GradientTable


def _validate_steps(steps) -> int:
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise InvalidArgument(f"steps must be an integer, got {steps!r}")
    steps = int(steps)
    if steps < 0:
        raise InvalidArgument(f"steps must be >= 0, got {steps}")
    return steps


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _linear_colors(low: np.ndarray, high: np.ndarray, steps: int) -> np.ndarray:
    # u never reaches 1.0, the last entry stops one step short of `high`
    u = np.arange(steps, dtype=np.float64) / steps if steps else np.empty(0)
    return low + u[:, None] * (high - low)


def build_linear_gradient(
    color_low: ColorLike,
    color_high: ColorLike,
    steps: int,
    name: Optional[str] = None,
) -> GradientTable:
    """
    Create a gradient table by linear interpolation between two colors.

    Entry i is ``low + (i / steps) * (high - low)`` per channel. The first
    entry equals ``color_low`` exactly and the high color itself is never
    reached, which keeps the joints of multi-stop gradients free of
    duplicated colors.

    Args:
        color_low: Color for the bottom of the gradient
        color_high: Color for the top of the gradient
        steps: Number of entries in the table. 0 gives an empty table.
        name: Optional label for the table

    Returns:
        GradientTable with ``steps`` float colors
    """
    low = as_color(color_low)
    high = as_color(color_high)
    steps = _validate_steps(steps)
    if steps == 0:
        warnings.warn("build_linear_gradient called with steps=0, returning an empty table",
                      RuntimeWarning, stacklevel=2)
    return GradientTable(_linear_colors(low, high, steps), name=name)


def build_multi_stop_gradient(
    colors: Sequence[ColorLike],
    steps: int,
    name: Optional[str] = None,
) -> GradientTable:
    """
    Create a gradient table from an ordered list of stop colors.

    The table is split into ``len(colors) - 1`` equal sections, each a linear
    gradient of ``round(steps / sections)`` entries between two consecutive
    stops. When rounding leaves the table short, the remaining slots repeat
    the last stop color; when it overshoots, the table is cut at ``steps``.

    Args:
        colors: Two or more stop colors, index 0 is the lowest
        steps: Total number of entries in the table
        name: Optional label for the table

    Returns:
        GradientTable with exactly ``steps`` colors

    Raises:
        InvalidArgument: If fewer than 2 colors are given
    """
    if isinstance(colors, (str, bytes)) or not hasattr(colors, "__len__"):
        raise InvalidArgument("colors must be a sequence of stop colors")
    num_sections = len(colors) - 1
    if num_sections <= 0:
        raise InvalidArgument("At least 2 colors are required for a multi-stop gradient")
    stops = as_color_stops(colors)
    steps = _validate_steps(steps)

    section_steps = round_half_up(steps / num_sections)
    if section_steps == 0:
        sections = [np.empty((0, NUM_CHANNELS))]
    else:
        sections = [
            _linear_colors(stops[k], stops[k + 1], section_steps)
            for k in range(num_sections)
        ]
    gradient = np.concatenate(sections, axis=0)
    gradient = handle_row_count_mismatch(gradient, steps, fill_value=stops[-1])
    return GradientTable(gradient, name=name)


__all__ = ["build_linear_gradient", "build_multi_stop_gradient", "round_half_up"]
