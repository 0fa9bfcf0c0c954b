"""Continuous-color Game of Life: RGB cells, cosine-similarity neighborhoods."""

from .config import SimulationConfig, load_config
from .errors import ColorLifeError, ConfigError, DecodeError, EncodeError
from .life import ColorLife, ClassicLife, step_generation
from .simulator import ColorLifeSimulator, run

__version__ = "0.1.0"
