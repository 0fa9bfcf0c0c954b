"""
Grid helpers.

A grid is a dense (height, width, 3) float64 array addressed as grid[y, x].
Lookups outside the grid return None; there is no wraparound.
"""

import numpy as np

from .color import WHITE, random_color


def new_grid(width, height):
    """Zero (black) grid of the given size."""
    return np.zeros((height, width, 3), dtype=np.float64)


def grid_size(grid):
    """Return (width, height)."""
    return grid.shape[1], grid.shape[0]


def get_pixel_checked(grid, x, y):
    """Color at (x, y), or None when the coordinate lies outside the grid."""
    h, w = grid.shape[:2]
    if 0 <= x < w and 0 <= y < h:
        return grid[y, x]
    return None


def random_grid(width, height, rng=None, density=0.5):
    """Each cell independently gets a random color with probability density."""
    rng = rng if rng is not None else np.random.default_rng()
    colors = random_color(rng, (height, width))
    mask = rng.random((height, width)) < density
    grid = new_grid(width, height)
    grid[mask] = colors[mask]
    return grid


def blinker_grid(width, height):
    """Three white cells in a horizontal row at the grid center."""
    grid = new_grid(width, height)
    cy, cx = height // 2, width // 2
    for x in range(cx - 1, cx + 2):
        if 0 <= x < width:
            grid[cy, x] = WHITE
    return grid


def to_rgb8(grid):
    """(H, W, 3) float [0, 1] -> uint8, clipped and truncated."""
    return (np.asarray(grid) * 255).clip(0, 255).astype(np.uint8)


def from_rgb8(pixels):
    """uint8 RGB array -> float grid in [0, 1]."""
    return np.asarray(pixels, dtype=np.float64)[..., :3] / 255.0
