"""
Cell State Evaluator

For one coordinate, scans the 8-connected neighborhood of the previous
generation and derives:
  - alive:              the cell's own color is longer than ALIVE_THRESHOLD
  - neighborhood:       sum of similarities to every present neighbor,
                        rounded to 4 decimals
  - neighborhood_color: sum of neighbor colors with similarity at or above
                        SIMILARITY_THRESHOLD, divided by the neighborhood score
                        (zero color when the score is zero)

Neighbors outside the grid are skipped. evaluate_grid() computes the same
state for every cell at once over a zero-padded copy; a zero neighbor never
adds similarity or color, so the padding behaves exactly like skipping.
"""

from typing import NamedTuple

import numpy as np

from .color import length, similarity, safe_divide
from .grid import get_pixel_checked

ALIVE_THRESHOLD = 0.25
SIMILARITY_THRESHOLD = 0.25

# Moore neighborhood, center excluded
OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if dx or dy]


class CellState(NamedTuple):
    alive: bool
    neighborhood: float
    neighborhood_color: np.ndarray


def round4(value):
    """Round to 4 decimal places, halves away from zero."""
    value = np.asarray(value, dtype=np.float64)
    return np.sign(value) * np.floor(np.abs(value) * 10000.0 + 0.5) / 10000.0


def evaluate_cell(previous, x, y, color=None):
    """Cell state of (x, y) against the previous generation.

    Args:
        previous: (H, W, 3) grid of the previous generation (read only)
        x, y: cell coordinate
        color: color used for similarity direction; defaults to previous[y, x]
    """
    own = get_pixel_checked(previous, x, y)
    alive = own is not None and bool(length(own) > ALIVE_THRESHOLD)
    if color is None:
        color = own if own is not None else np.zeros(3)

    neighborhood = 0.0
    neighborhood_color = np.zeros(3)
    for dx, dy in OFFSETS:
        neighbor = get_pixel_checked(previous, x + dx, y + dy)
        if neighbor is None:
            continue
        sim = float(similarity(color, neighbor))
        neighborhood += sim
        if sim >= SIMILARITY_THRESHOLD:
            neighborhood_color = neighborhood_color + neighbor

    neighborhood = float(round4(neighborhood))
    return CellState(alive, neighborhood, safe_divide(neighborhood_color, neighborhood))


def evaluate_grid(previous):
    """Vectorized evaluate_cell over every coordinate.

    Returns:
        (alive, neighborhood, neighborhood_color) arrays of shapes
        (H, W), (H, W) and (H, W, 3). The previous grid is not modified.
    """
    h, w = previous.shape[:2]
    padded = np.zeros((h + 2, w + 2, 3), dtype=np.float64)
    padded[1:h + 1, 1:w + 1] = previous

    alive = length(previous) > ALIVE_THRESHOLD
    neighborhood = np.zeros((h, w), dtype=np.float64)
    color_sum = np.zeros((h, w, 3), dtype=np.float64)

    for dx, dy in OFFSETS:
        neighbor = padded[1 + dy:1 + dy + h, 1 + dx:1 + dx + w]
        sim = similarity(previous, neighbor)
        neighborhood += sim
        similar = sim >= SIMILARITY_THRESHOLD
        color_sum[similar] += neighbor[similar]

    neighborhood = round4(neighborhood)
    return alive, neighborhood, safe_divide(color_sum, neighborhood)
