from .bound_type import OutOfRangePolicy
from .color_types import Color, ColorLike, as_color, as_color_stops

__all__ = ["OutOfRangePolicy", "Color", "ColorLike", "as_color", "as_color_stops"]
