import numpy as np


def block_pixels(buffer, geometry, index):
    """Return the (cell_height, cell_width, 4) pixel block painted for data ``index``."""
    x, y = geometry.cell_origin(index)
    return buffer.as_array()[y:y + geometry.cell_height, x:x + geometry.cell_width]


def assert_block_color(buffer, geometry, index, rgb):
    block = block_pixels(buffer, geometry, index)
    expected = np.array(list(rgb) + [255], dtype=np.uint8)
    assert np.all(block == expected), f"cell {index}: {block.reshape(-1, 4)[0]} != {expected}"
