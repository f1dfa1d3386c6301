from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

from ..errors import InvalidArgument

Scalar = int | float
Color = Tuple[Scalar, Scalar, Scalar]
ColorLike = Union[Color, Sequence[Scalar], ndarray]

NUM_CHANNELS = 3


def as_color(value: ColorLike) -> np.ndarray:
    """
    Convert an RGB color to a float64 array of shape (3,).

    Channels are kept as given; nothing is rounded or clipped so that
    interpolation keeps its precision.

    Args:
        value: Tuple, list or ndarray with exactly three numeric channels

    Returns:
        numpy array representation

    Raises:
        InvalidArgument: If the value is not three real numbers
    """
    if isinstance(value, (str, bytes)):
        raise InvalidArgument(f"Color must be a sequence of 3 numbers, got {value!r}")
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Color must be a sequence of 3 numbers, got {value!r}") from e
    if arr.shape != (NUM_CHANNELS,):
        raise InvalidArgument(
            f"Color must have exactly {NUM_CHANNELS} channels, got shape {arr.shape}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument(f"Color channels must be finite, got {value!r}")
    return arr


def as_color_stops(colors: Sequence[ColorLike]) -> np.ndarray:
    """Convert a sequence of stop colors to an (n, 3) float64 array."""
    if isinstance(colors, ndarray):
        colors = list(colors)
    return np.array([as_color(c) for c in colors], dtype=np.float64).reshape(-1, NUM_CHANNELS)
