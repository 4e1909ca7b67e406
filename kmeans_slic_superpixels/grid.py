# Module: grid.py
import math
import numbers
from collections import namedtuple

import numpy as np

from .errors import InvalidInput

GridLayout = namedtuple("GridLayout", ["tile_size", "grid_rows", "grid_cols", "actual_cluster_count"])


def validate_superpixel_count(superpixel_count):
    if isinstance(superpixel_count, bool) or not isinstance(superpixel_count, numbers.Integral):
        raise InvalidInput(f"superpixel_count must be an integer, got {superpixel_count!r}")
    if superpixel_count <= 0:
        raise InvalidInput(f"superpixel_count must be positive, got {superpixel_count}")
    return int(superpixel_count)


def compute_grid_layout(rows, cols, superpixel_count):
    """
    Tile a rows x cols image into roughly square blocks.

    The tile side is floor(sqrt(rows*cols / superpixel_count)), at least 1.
    The number of clusters actually used is the number of tiles, which can
    differ from `superpixel_count` because of the rounding.
    """
    superpixel_count = validate_superpixel_count(superpixel_count)
    if rows <= 0 or cols <= 0:
        raise InvalidInput(f"Image is empty: {rows} x {cols}")

    # floor(sqrt(a / b)) == isqrt(a // b) for non-negative integers
    tile_size = max(1, math.isqrt(rows * cols // superpixel_count))
    grid_rows = -(-rows // tile_size)
    grid_cols = -(-cols // tile_size)
    return GridLayout(tile_size, grid_rows, grid_cols, grid_rows * grid_cols)


def grid_initial_labels(rows, cols, superpixel_count):
    """
    Assign every pixel the id of the tile containing it.

    Returns:
        labels : ndarray
            int64 array of shape (rows*cols,), row-major.
        layout : GridLayout
    """
    layout = compute_grid_layout(rows, cols, superpixel_count)
    s = layout.tile_size
    tile_rows = np.arange(rows, dtype=np.int64) // s
    tile_cols = np.arange(cols, dtype=np.int64) // s
    labels = tile_rows[:, None] * layout.grid_cols + tile_cols[None, :]
    return labels.ravel(), layout
