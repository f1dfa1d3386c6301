from typing import Optional
import numpy as np


def handle_row_count_mismatch(
        rows: np.ndarray,
        target_size: int,
        fill_value: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Adjusts the number of rows of a 2D array to match target_size.

    Short arrays are extended by repeating ``fill_value``; long arrays are
    truncated.

    Args:
        rows (np.ndarray): Array of shape (n, channels).
        target_size (int): The desired number of rows.
        fill_value (np.ndarray): Row used to extend the array. Defaults to the
            last row.
    Returns:
        np.ndarray: New array with exactly target_size rows.
    """
    current_size = rows.shape[0]
    if fill_value is None and current_size > 0:
        fill_value = rows[-1]
    if current_size < target_size:
        if fill_value is None:
            raise ValueError("Cannot extend an empty array without a fill_value")
        padding = np.tile(np.asarray(fill_value, dtype=rows.dtype), (target_size - current_size, 1))
        return np.concatenate([rows, padding], axis=0)
    if current_size > target_size:
        return rows[:target_size].copy()
    return rows.copy()
