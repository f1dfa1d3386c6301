"""
Grid Rasterizer
===============

Paints a row-major data series onto an RGBA pixel buffer, one solid block
of ``cell_width x cell_height`` pixels per data value.

Each value picks its color from a gradient table at index
``floor(value * (len(table) - 1))``. Values are expected in [0, 1); what
happens to other values is controlled by an OutOfRangePolicy.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.np_functions import clamp

from ..errors import DimensionMismatch, InvalidArgument, ValueOutOfRange
from ..gradients.presets import DEFAULT_GRADIENT
from ..gradients.table import GradientTable
from ..types.bound_type import OutOfRangePolicy
from .buffer import BYTES_PER_PIXEL, PixelBuffer
from .geometry import GridGeometry

DataSeries = Union[Sequence[float], NDArray]

OPAQUE = 255


def as_data_series(data: DataSeries) -> NDArray:
    """
    Validate a data series and return it as a flat float64 array.

    Lists, tuples and numpy arrays are accepted; arrays of any shape are
    flattened in row-major order.

    Raises:
        TypeError: If ``data`` is not one of the accepted sequence types or
                   holds non-numeric values
    """
    if isinstance(data, np.ndarray):
        arr = data
    elif isinstance(data, (list, tuple)):
        try:
            arr = np.asarray(data)
        except (TypeError, ValueError) as e:
            raise TypeError(f"data must be a flat sequence of numbers: {e}") from e
    else:
        raise TypeError(
            f"data must be a list, tuple or numpy array, got {type(data).__name__}"
        )
    if arr.size and arr.dtype.kind not in "iuf":
        raise TypeError(f"data must contain only real numbers, got dtype {arr.dtype}")
    return arr.astype(np.float64).ravel()


def color_indices(
    values: NDArray,
    table_length: int,
    policy: OutOfRangePolicy = OutOfRangePolicy.CLAMP,
) -> NDArray:
    """
    Map normalized values to gradient table indices.

    Args:
        values: Flat float array of data values
        table_length: Number of entries in the gradient table
        policy: CLAMP pins indices to the table bounds (NaN maps to 0),
                RAISE rejects any value outside [0, 1)

    Returns:
        Integer index array with the same shape as ``values``
    """
    if table_length <= 0:
        raise InvalidArgument("Cannot index an empty gradient table")
    policy = OutOfRangePolicy(policy)
    if policy == OutOfRangePolicy.RAISE:
        outside = ~((values >= 0.0) & (values < 1.0))
        if np.any(outside):
            first = int(np.argmax(outside))
            raise ValueOutOfRange(
                f"data[{first}] = {values[first]!r} is outside [0, 1)"
            )
    top = table_length - 1
    with np.errstate(invalid="ignore"):
        scaled = np.floor(values * top)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=float(top), neginf=0.0)
    return np.asarray(clamp(scaled, 0, top)).astype(np.intp)


def rasterize(
    data: DataSeries,
    geometry: GridGeometry,
    gradient: Optional[GradientTable] = None,
    *,
    out_of_range: OutOfRangePolicy = OutOfRangePolicy.CLAMP,
) -> PixelBuffer:
    """
    Render a data series as a heat grid.

    All validation happens before the buffer is allocated, so a failing call
    never produces a partial image.

    Args:
        data: Row-major values, ``geometry.size`` of them
        geometry: Grid layout
        gradient: Color table, defaults to the heat preset
        out_of_range: Policy for values outside [0, 1)

    Returns:
        PixelBuffer of ``geometry.width x geometry.height`` opaque pixels

    Raises:
        TypeError: ``data`` is not a sequence of numbers
        DimensionMismatch: ``len(data) != rows * cols``
        InvalidArgument: the gradient table is empty
        ValueOutOfRange: a value is outside [0, 1) under the RAISE policy
    """
    values = as_data_series(data)
    if values.shape[0] != geometry.size:
        raise DimensionMismatch(
            f"rows * cols ({geometry.rows} * {geometry.cols} = {geometry.size}) "
            f"must equal the data length ({values.shape[0]})"
        )
    if gradient is None:
        gradient = DEFAULT_GRADIENT
    elif not isinstance(gradient, GradientTable):
        gradient = GradientTable(gradient)
    colors = gradient.colors
    indices = color_indices(values, colors.shape[0], out_of_range)

    # Truncate toward zero once, at write time
    cell_rgb = np.asarray(clamp(colors[indices], 0, 255)).astype(np.uint8)
    cell_rgb = cell_rgb.reshape(geometry.rows, geometry.cols, 3)

    buffer = PixelBuffer.zeros(geometry.width, geometry.height)
    pixels = buffer.as_array()
    pixels[..., :3] = np.repeat(
        np.repeat(cell_rgb, geometry.cell_height, axis=0),
        geometry.cell_width,
        axis=1,
    )
    pixels[..., BYTES_PER_PIXEL - 1] = OPAQUE
    return buffer


__all__ = ["DataSeries", "as_data_series", "color_indices", "rasterize"]
