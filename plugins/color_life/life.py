"""
Game of Life Engines - Continuous Color and Classic

ColorLife: every cell carries an RGB color. Neighbors are weighted by the
cosine similarity between their color and the cell's own color instead of
being counted as alive/dead:
  - stasis: an alive cell with 2.0 <= neighborhood <= 3.0 keeps its color
  - birth:  a dead cell with neighborhood == 3.0 takes the similarity-weighted
            average of its similar neighbors, clamped to [clamp_min, clamp_max]
  - anything else goes black

ClassicLife: B3/S23 on RGB frames. Any non-black cell is alive and survivors
and births are drawn white. Edges have fewer neighbors (no wraparound).
"""

from abc import abstractmethod

import numpy as np
from scipy.signal import convolve2d

from .color import clamp, length, WHITE
from .engine_base import CAEngine
from .evaluator import evaluate_grid
from .grid import blinker_grid, random_grid

# 8-neighbor (Moore) kernel without center
NEIGH = np.array([[1, 1, 1],
                  [1, 0, 1],
                  [1, 1, 1]], dtype=np.int32)


def step_generation(previous, clamp_min=0.0, clamp_max=1.0, out=None):
    """Compute the next color generation from previous.

    Args:
        previous: (H, W, 3) grid, only read
        clamp_min, clamp_max: bounds applied to newborn colors
        out: optional buffer to write into; must not overlap previous

    Returns:
        The next-generation grid (out, when given).
    """
    if out is None:
        out = np.zeros_like(previous, dtype=np.float64)
    else:
        if np.shares_memory(out, previous):
            raise ValueError("Output buffer must not alias the previous generation")
        out[:] = 0

    alive, neighborhood, neighborhood_color = evaluate_grid(previous)

    survive = alive & (neighborhood >= 2.0) & (neighborhood <= 3.0)
    born = ~alive & (neighborhood == 3.0)

    out[survive] = previous[survive]
    out[born] = clamp(neighborhood_color[born], clamp_min, clamp_max)
    return out


def step_classic(previous, out=None):
    """Binary B3/S23 step on an RGB grid, zero-filled boundary."""
    if out is None:
        out = np.zeros_like(previous, dtype=np.float64)
    else:
        if np.shares_memory(out, previous):
            raise ValueError("Output buffer must not alias the previous generation")
        out[:] = 0

    alive = length(previous) > 0
    neighbors = convolve2d(alive.astype(np.int32), NEIGH, mode="same",
                           boundary="fill", fillvalue=0)

    lit = (alive & ((neighbors == 2) | (neighbors == 3))) | (~alive & (neighbors == 3))
    out[lit] = WHITE
    return out


class _DoubleBufferedLife(CAEngine):
    """Shared seeding and buffer swapping for both Life variants."""

    def __init__(self, width=64, height=64, rng=None):
        super().__init__(width, height)
        self.rng = rng if rng is not None else np.random.default_rng()
        # Back buffer; swapped with world after every step
        self._next = np.zeros_like(self.world)

    @abstractmethod
    def _advance(self, previous, out):
        """Write the generation after previous into out."""

    def step(self):
        """Advance one generation."""
        self._advance(self.world, self._next)
        self.world, self._next = self._next, self.world
        self.generation += 1
        return self.world

    def seed(self, seed_type="random", **kwargs):
        density = kwargs.get("density", 0.5)
        if seed_type == "random":
            self.world = random_grid(self.width, self.height, self.rng, density)
        elif seed_type == "blinker":
            self.world = blinker_grid(self.width, self.height)
        elif seed_type == "clear":
            self.world[:] = 0
        else:
            raise ValueError(f"Unknown seed type: {seed_type!r}")
        self.generation = 0


class ColorLife(_DoubleBufferedLife):

    engine_name = "color"
    engine_label = "Color Life"

    def __init__(self, width=64, height=64, clamp_min=0.0, clamp_max=1.0, rng=None):
        """
        Args:
            width, height: Grid dimensions
            clamp_min, clamp_max: Per-channel bounds for newborn colors
            rng: numpy Generator used for seeding
        """
        super().__init__(width, height, rng)
        self.clamp_min = clamp_min
        self.clamp_max = clamp_max

    def _advance(self, previous, out):
        step_generation(previous, self.clamp_min, self.clamp_max, out=out)

    def get_params(self):
        return {
            "clamp_min": self.clamp_min,
            "clamp_max": self.clamp_max,
        }


class ClassicLife(_DoubleBufferedLife):

    engine_name = "classic"
    engine_label = "Game of Life"

    def _advance(self, previous, out):
        step_classic(previous, out=out)

    def get_params(self):
        return {"rule": "B3/S23"}


ENGINE_CLASSES = {
    "color": ColorLife,
    "classic": ClassicLife,
}
