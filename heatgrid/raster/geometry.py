from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Tuple

from ..errors import InvalidArgument


@dataclass(frozen=True)
class GridGeometry:
    """
    Layout of a heat grid: ``rows x cols`` cells of ``cell_width x cell_height`` pixels.

    Data indices run in row-major order, so index ``i`` sits at row
    ``i // cols`` and column ``i % cols``.
    """

    rows: int
    cols: int
    cell_width: int
    cell_height: int

    def __post_init__(self) -> None:
        for field_name in ("rows", "cols", "cell_width", "cell_height"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidArgument(f"{field_name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidArgument(f"{field_name} must be > 0, got {value}")
            object.__setattr__(self, field_name, int(value))

    @property
    def size(self) -> int:
        """Number of cells, which is also the expected data length."""
        return self.rows * self.cols

    @property
    def width(self) -> int:
        return self.cols * self.cell_width

    @property
    def height(self) -> int:
        return self.rows * self.cell_height

    @property
    def shape(self) -> Tuple[int, int]:
        """Raster shape as (height, width)."""
        return self.height, self.width

    def cell_origin(self, index: int) -> Tuple[int, int]:
        """Pixel offset (x, y) of the top-left corner of the cell for data ``index``."""
        if not 0 <= index < self.size:
            raise IndexError(f"cell index {index} out of range for {self.size} cells")
        row, col = divmod(index, self.cols)
        return col * self.cell_width, row * self.cell_height
