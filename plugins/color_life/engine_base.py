"""
Abstract Base Class for Cellular Automaton Engines

Both engines (continuous-color Life and classic Life) implement this
interface so the simulator can drive either one interchangeably.
"""

from abc import ABC, abstractmethod
import numpy as np

from .color import length
from .grid import new_grid


class CAEngine(ABC):
    """Base class for cellular automaton engines on RGB grids."""

    engine_name = ""   # e.g. "color", "classic"
    engine_label = ""  # e.g. "Color Life", "Game of Life"

    def __init__(self, width=64, height=64):
        self.width = width
        self.height = height
        self.world = new_grid(width, height)
        self.generation = 0

    @abstractmethod
    def step(self):
        """Advance one generation. Returns the new world."""

    def step_n(self, n):
        """Advance n generations. Returns final state."""
        for _ in range(n):
            self.step()
        return self.world

    @abstractmethod
    def get_params(self):
        """Return dict of rule parameter values."""

    @abstractmethod
    def seed(self, seed_type="random", **kwargs):
        """Seed the world based on type string."""

    def load(self, grid):
        """Replace the world with a copy of grid (generation 0)."""
        grid = np.asarray(grid, dtype=np.float64)
        if grid.shape != (self.height, self.width, 3):
            raise ValueError(
                f"Grid shape {grid.shape} does not match engine size "
                f"{(self.height, self.width, 3)}"
            )
        self.world = grid.copy()
        self.generation = 0

    def clear(self):
        """Clear the world."""
        self.world[:] = 0
        self.generation = 0

    @property
    def stats(self):
        """Return current world statistics."""
        alive_count = int((length(self.world) > 0).sum())
        total = self.width * self.height
        return {
            "generation": self.generation,
            "alive": alive_count,
            "alive_pct": alive_count / total * 100,
            "mean": float(self.world.mean()),
        }
