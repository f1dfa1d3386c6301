from .geometry import GridGeometry
from .buffer import PixelBuffer
from .rasterizer import DataSeries, as_data_series, color_indices, rasterize

__all__ = [
    "GridGeometry",
    "PixelBuffer",
    "DataSeries",
    "as_data_series",
    "color_indices",
    "rasterize",
]
