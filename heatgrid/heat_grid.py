"""
Heat grid drawing entry point.

Example
-------
>>> from heatgrid import ImageSurface, GRADIENT_HEAT, HeatGridOptions, draw
>>> surface = ImageSurface()
>>> draw(surface, values, HeatGridOptions(
...     rows=40, cols=35, cell_width=10, cell_height=10,
...     gradient=GRADIENT_HEAT,
... ))
>>> surface.save("grid.png")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .errors import InvalidArgument, InvalidTarget
from .gradients.presets import get_preset
from .gradients.table import GradientTable
from .raster.buffer import PixelBuffer
from .raster.geometry import GridGeometry
from .raster.rasterizer import DataSeries, as_data_series, rasterize
from .surface import DrawableSurface, is_drawable
from .types.bound_type import OutOfRangePolicy

# Older option names, kept so existing option dicts keep working
_LEGACY_KEYS = {
    "swidth": "cell_width",
    "sheight": "cell_height",
    "cellWidth": "cell_width",
    "cellHeight": "cell_height",
}


@dataclass(frozen=True)
class HeatGridOptions:
    """
    Options for ``draw``.

    Attributes:
        rows: Number of grid rows
        cols: Number of grid columns
        cell_width: Width in pixels of each cell
        cell_height: Height in pixels of each cell
        gradient: Gradient table, None for the heat preset
        out_of_range: What to do with values outside [0, 1)
    """

    rows: int
    cols: int
    cell_width: int
    cell_height: int
    gradient: Optional[GradientTable] = None
    out_of_range: OutOfRangePolicy = OutOfRangePolicy.CLAMP

    def __post_init__(self) -> None:
        if isinstance(self.gradient, str):
            object.__setattr__(self, "gradient", get_preset(self.gradient))
        try:
            object.__setattr__(self, "out_of_range", OutOfRangePolicy(self.out_of_range))
        except ValueError as e:
            raise InvalidArgument(str(e)) from e

    @property
    def geometry(self) -> GridGeometry:
        return GridGeometry(self.rows, self.cols, self.cell_width, self.cell_height)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "HeatGridOptions":
        """
        Build options from a plain mapping.

        Accepts ``swidth``/``sheight`` as aliases for the cell size and a
        preset name for ``gradient``.
        """
        normalized = {_LEGACY_KEYS.get(key, key): value for key, value in options.items()}
        missing = [k for k in ("rows", "cols", "cell_width", "cell_height") if k not in normalized]
        if missing:
            raise InvalidArgument(f"Missing required heat grid options: {', '.join(missing)}")
        unknown = set(normalized) - {"rows", "cols", "cell_width", "cell_height",
                                     "gradient", "out_of_range"}
        if unknown:
            raise InvalidArgument(f"Unknown heat grid options: {', '.join(sorted(unknown))}")
        return cls(**normalized)


def draw(
    target: DrawableSurface,
    data: DataSeries,
    options: Union[HeatGridOptions, Mapping[str, Any]],
) -> PixelBuffer:
    """
    Draw a heat grid onto a surface.

    The surface is resized to ``cols * cell_width`` by ``rows * cell_height``
    and the rendered buffer is committed at (0, 0).

    Args:
        target: Surface exposing ``resize`` and ``put_pixels``
        data: Row-major values, normally in [0, 1)
        options: HeatGridOptions or a mapping accepted by
                 ``HeatGridOptions.from_mapping``

    Returns:
        The PixelBuffer that was committed to the surface

    Raises:
        TypeError: ``data`` is not a list, tuple or numpy array of numbers
        InvalidTarget: ``target`` is not a drawable surface
        DimensionMismatch: ``rows * cols`` does not match the data length
    """
    values = as_data_series(data)
    if not is_drawable(target):
        raise InvalidTarget(
            f"must provide a drawable surface, got {type(target).__name__}"
        )
    if isinstance(options, Mapping):
        options = HeatGridOptions.from_mapping(options)
    elif not isinstance(options, HeatGridOptions):
        raise InvalidArgument(
            f"options must be HeatGridOptions or a mapping, got {type(options).__name__}"
        )

    geometry = options.geometry
    buffer = rasterize(values, geometry, options.gradient, out_of_range=options.out_of_range)
    target.resize(geometry.width, geometry.height)
    target.put_pixels(buffer, 0, 0)
    return buffer


__all__ = ["HeatGridOptions", "draw"]
