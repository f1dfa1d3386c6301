"""
Gradient Table
==============

Immutable, fixed-length table of RGB colors approximating a color ramp.
Index 0 is the low end of the data domain, the last index the high end.

Colors are stored as float64 so that values produced by interpolation are
only truncated when written into a pixel buffer.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union
import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidArgument
from ..types.color_types import NUM_CHANNELS


class GradientTable:
    """
    Read-only sequence of RGB colors.

    Supports len(), integer and slice indexing, iteration and the numpy
    array interface. The backing array has its write flag cleared, so a
    table can be shared across any number of rasterization calls.
    """

    __slots__ = ("_colors", "_name")

    def __init__(self, colors: Union[NDArray, list, tuple], name: Optional[str] = None) -> None:
        """
        Args:
            colors: Array-like of shape (steps, 3). An empty sequence gives an
                    empty table.
            name: Optional label, used by the presets.
        """
        arr = np.array(colors, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, NUM_CHANNELS)
        if arr.ndim != 2 or arr.shape[1] != NUM_CHANNELS:
            raise InvalidArgument(
                f"GradientTable requires an array of shape (steps, {NUM_CHANNELS}), got {arr.shape}"
            )
        arr.setflags(write=False)
        self._colors = arr
        self._name = name

    @property
    def colors(self) -> NDArray:
        """The (steps, 3) float64 backing array (read-only)."""
        return self._colors

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def steps(self) -> int:
        return self._colors.shape[0]

    def __len__(self) -> int:
        return self._colors.shape[0]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return GradientTable(self._colors[index])
        return self._colors[index]

    def __iter__(self) -> Iterator[NDArray]:
        return iter(self._colors)

    def __array__(self, dtype=None, copy=None) -> NDArray:
        needs_cast = dtype is not None and np.dtype(dtype) != self._colors.dtype
        if copy is False and needs_cast:
            raise ValueError(
                f"Cannot convert GradientTable to {np.dtype(dtype)} without a copy"
            )
        if copy or needs_cast:
            return self._colors.astype(dtype if dtype is not None else self._colors.dtype)
        # A view of the read-only table cannot be made writable again
        return self._colors.view()

    def __eq__(self, other) -> bool:
        if not isinstance(other, GradientTable):
            return NotImplemented
        return np.array_equal(self._colors, other._colors)

    __hash__ = None

    def __repr__(self) -> str:
        label = f" {self._name!r}" if self._name else ""
        return f"<GradientTable{label} steps={len(self)}>"
