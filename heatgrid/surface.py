"""
Drawable surfaces.

A surface is anything that can be resized to the raster size and accept an
RGBA PixelBuffer at a pixel offset. ImageSurface implements this on top of a
Pillow image so heat grids can be saved or shown without a UI toolkit.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, runtime_checkable

from PIL import Image

from .raster.buffer import PixelBuffer


@runtime_checkable
class DrawableSurface(Protocol):
    def resize(self, width: int, height: int) -> None:
        ...

    def put_pixels(self, buffer: PixelBuffer, x: int = 0, y: int = 0) -> None:
        ...


def is_drawable(target) -> bool:
    """Return True if ``target`` exposes callable ``resize`` and ``put_pixels``."""
    return (
        target is not None
        and callable(getattr(target, "resize", None))
        and callable(getattr(target, "put_pixels", None))
    )


class ImageSurface:
    """RGBA surface backed by a Pillow image."""

    def __init__(self, width: int = 1, height: int = 1,
                 background: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> None:
        self._background = background
        self._image = Image.new("RGBA", (width, height), background)

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    def resize(self, width: int, height: int) -> None:
        # Like a canvas, resizing discards the previous content
        self._image = Image.new("RGBA", (width, height), self._background)

    def put_pixels(self, buffer: PixelBuffer, x: int = 0, y: int = 0) -> None:
        self._image.paste(buffer.to_image(), (x, y))

    def save(self, path, format: Optional[str] = None) -> None:
        self._image.save(path, format=format)

    def show(self) -> None:
        self._image.show()


__all__ = ["DrawableSurface", "ImageSurface", "is_drawable"]
