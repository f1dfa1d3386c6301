"""Basic heatgrid usage examples.

Run directly with:
    python examples/basic_usage.py [output_dir]
"""
import sys
from pathlib import Path

import numpy as np

from heatgrid import (
    PRESETS,
    HeatGridOptions,
    ImageSurface,
    build_multi_stop_gradient,
    draw,
)


def wave_field(rows: int, cols: int) -> np.ndarray:
    # Smooth 2D field scaled into [0, 1)
    y, x = np.mgrid[0:rows, 0:cols]
    field = np.sin(x / cols * 2 * np.pi) * np.cos(y / rows * np.pi)
    return (field - field.min()) / (field.max() - field.min()) * 0.999


def demonstrate_presets(output_dir: Path) -> None:
    # One image per preset gradient.
    data = wave_field(40, 35)
    for name, gradient in PRESETS.items():
        surface = ImageSurface()
        draw(surface, data, HeatGridOptions(
            rows=40, cols=35, cell_width=10, cell_height=10, gradient=gradient,
        ))
        surface.save(output_dir / f"heatgrid_{name}.png")
        print(f"Saved {name}: {surface.size}")


def demonstrate_custom_gradient(output_dir: Path) -> None:
    # Teal to purple through white, drawn from a legacy style option dict.
    gradient = build_multi_stop_gradient([(0, 128, 128), (255, 255, 255), (128, 0, 128)], 256)
    surface = ImageSurface()
    draw(surface, wave_field(20, 20).ravel().tolist(), {
        "gradient": gradient,
        "rows": 20,
        "cols": 20,
        "swidth": 8,
        "sheight": 8,
    })
    surface.save(output_dir / "heatgrid_custom.png")
    print("Saved custom:", surface.size)


if __name__ == "__main__":
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")
    out.mkdir(parents=True, exist_ok=True)
    demonstrate_presets(out)
    demonstrate_custom_gradient(out)
