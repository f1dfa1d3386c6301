"""
HeatGrid - Heat Map Grid Rendering
==================================

Renders a 2D scalar field as a grid of solid colored cells, mapping
normalized values to colors through precomputed gradient tables.

Quick Start
-----------
>>> from heatgrid import ImageSurface, HeatGridOptions, GRADIENT_RAINBOW, draw
>>>
>>> surface = ImageSurface()
>>> draw(surface, [0.1, 0.5, 0.9, 0.3], HeatGridOptions(
...     rows=2, cols=2, cell_width=20, cell_height=20,
...     gradient=GRADIENT_RAINBOW,
... ))
>>> surface.save("grid.png")

Modules
-------
- gradients: gradient table construction and the preset tables
- raster: grid geometry, pixel buffers and the rasterizer
- surface: drawable surfaces (Pillow backed ImageSurface)
- heat_grid: the ``draw`` entry point and its options
"""

from .errors import (
    HeatGridError,
    InvalidArgument,
    DimensionMismatch,
    InvalidTarget,
    ValueOutOfRange,
)
from .types import OutOfRangePolicy, Color, ColorLike
from .gradients import (
    GradientTable,
    build_linear_gradient,
    build_multi_stop_gradient,
    DEFAULT_STEPS,
    DEFAULT_GRADIENT,
    GRADIENT_MAROON_TO_GOLD,
    GRADIENT_BLUE_TO_RED,
    GRADIENT_BLACK_TO_WHITE,
    GRADIENT_RED_TO_GREEN,
    GRADIENT_GREEN_YELLOW_ORANGE_RED,
    GRADIENT_RAINBOW,
    GRADIENT_HOT,
    GRADIENT_HEAT,
    GRADIENT_ROY,
    PRESETS,
    get_preset,
)
from .raster import GridGeometry, PixelBuffer, rasterize
from .surface import DrawableSurface, ImageSurface
from .heat_grid import HeatGridOptions, draw

__version__ = "1.0.0"

__all__ = [
    # errors
    "HeatGridError",
    "InvalidArgument",
    "DimensionMismatch",
    "InvalidTarget",
    "ValueOutOfRange",
    # types
    "OutOfRangePolicy",
    "Color",
    "ColorLike",
    # gradients
    "GradientTable",
    "build_linear_gradient",
    "build_multi_stop_gradient",
    "DEFAULT_STEPS",
    "DEFAULT_GRADIENT",
    "GRADIENT_MAROON_TO_GOLD",
    "GRADIENT_BLUE_TO_RED",
    "GRADIENT_BLACK_TO_WHITE",
    "GRADIENT_RED_TO_GREEN",
    "GRADIENT_GREEN_YELLOW_ORANGE_RED",
    "GRADIENT_RAINBOW",
    "GRADIENT_HOT",
    "GRADIENT_HEAT",
    "GRADIENT_ROY",
    "PRESETS",
    "get_preset",
    # rasterization
    "GridGeometry",
    "PixelBuffer",
    "rasterize",
    # drawing
    "DrawableSurface",
    "ImageSurface",
    "HeatGridOptions",
    "draw",
    # version
    "__version__",
]
