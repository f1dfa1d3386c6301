from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

BYTES_PER_PIXEL = 4


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    Flat RGBA pixel buffer, 4 bytes per pixel in row-major order.

    ``data`` is a 1D uint8 array of length ``width * height * 4``.
    """

    width: int
    height: int
    data: NDArray

    def __post_init__(self) -> None:
        expected = self.width * self.height * BYTES_PER_PIXEL
        if self.data.dtype != np.uint8 or self.data.shape != (expected,):
            raise ValueError(
                f"PixelBuffer data must be a uint8 array of length {expected}, "
                f"got {self.data.dtype} {self.data.shape}"
            )

    @classmethod
    def zeros(cls, width: int, height: int) -> "PixelBuffer":
        return cls(width, height, np.zeros(width * height * BYTES_PER_PIXEL, dtype=np.uint8))

    def __len__(self) -> int:
        return self.data.shape[0]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self.data, other.data)

    def as_array(self) -> NDArray:
        """View of the buffer as (height, width, 4)."""
        return self.data.reshape(self.height, self.width, BYTES_PER_PIXEL)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.as_array()[y, x]
        return int(r), int(g), int(b), int(a)

    def tobytes(self) -> bytes:
        return self.data.tobytes()

    def to_image(self):
        """Return the buffer as a Pillow RGBA image."""
        from PIL import Image

        return Image.fromarray(self.as_array())
