"""
ColorLifeSimulator — generation loop and frame output

Seeds generation 0 (from a decoded image or a synthesized grid), then steps
the engine strictly in sequence, writing every generation as a numbered PNG
frame before it becomes the previous generation of the next step.

Usage:
    from color_life.config import load_config
    from color_life.simulator import ColorLifeSimulator
    sim = ColorLifeSimulator(load_config(generations=10, width=32, height=32))
    paths = sim.run()
"""

import time

import numpy as np

from .color import clamp, threshold
from .frames import load_grid, save_frame
from .grid import grid_size
from .life import ENGINE_CLASSES


class ColorLifeSimulator:
    """Owns the engine and the generation loop for one run.

    Args:
        config: SimulationConfig, fully validated
        initial: optional (H, W, 3) grid to use as generation 0 instead of
            decoding config.input or synthesizing a seed
    """

    def __init__(self, config, initial=None):
        self.config = config
        self.rng = np.random.default_rng(config.rng_seed)

        if initial is None and config.input is not None:
            initial = self.decode_input(config.input)

        if initial is not None:
            width, height = grid_size(initial)
        else:
            width, height = config.width, config.height

        self.engine = self._create_engine(width, height)
        if initial is not None:
            self.engine.load(initial)
        else:
            self.engine.seed(config.seed_type, density=config.density)

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    @property
    def width(self):
        return self.engine.width

    @property
    def height(self):
        return self.engine.height

    def decode_input(self, source):
        """Decoded image passed through threshold, then clamp."""
        grid = load_grid(source)
        grid = threshold(grid, self.config.threshold)
        return clamp(grid, self.config.clamp_min, self.config.clamp_max)

    def generations(self):
        """Yield each generation's grid in order, generation 0 first.

        The yielded array is the engine's live buffer and is reused two
        steps later; copy it to keep it.
        """
        yield self.engine.world
        for _ in range(1, self.config.generations):
            yield self.engine.step()

    def run(self):
        """Write every generation as a frame. Returns the list of paths."""
        cfg = self.config
        self._log(f"{self.engine.engine_label}: {self.width}x{self.height}, "
                  f"{cfg.generations} generations -> {cfg.output_prefix}")
        self._log(f"  params: {self.engine.get_params()}")

        start = time.perf_counter()
        paths = []
        for index, grid in enumerate(self.generations()):
            paths.append(save_frame(grid, cfg.output_prefix, index))
            stats = self.engine.stats
            self._log(f"  frame {index:04d}: alive {stats['alive']} "
                      f"({stats['alive_pct']:.1f}%)")

        elapsed = time.perf_counter() - start
        self._log(f"Done: {len(paths)} frames in {elapsed:.2f}s")
        return paths

    # -----------------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------------

    def _create_engine(self, width, height):
        cfg = self.config
        cls = ENGINE_CLASSES[cfg.engine]
        if cfg.engine == "color":
            return cls(width=width, height=height, clamp_min=cfg.clamp_min,
                       clamp_max=cfg.clamp_max, rng=self.rng)
        return cls(width=width, height=height, rng=self.rng)

    def _log(self, msg):
        if not self.config.quiet:
            print(f"[CL] {msg}", flush=True)


def run(config):
    """Run one simulation from config. Returns the written frame paths."""
    return ColorLifeSimulator(config).run()
