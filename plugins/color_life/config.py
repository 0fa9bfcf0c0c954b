"""
Simulation configuration.

A single frozen pydantic model, built once before the run starts and passed
explicitly to the simulator. Field bounds reject malformed values up front.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigError


class SimulationConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    width: int = Field(default=64, ge=1, description="Seed grid width in cells")
    height: int = Field(default=64, ge=1, description="Seed grid height in cells")
    generations: int = Field(default=100, ge=1,
                             description="Number of frames to write, generation 0 included")
    clamp_min: float = Field(default=0.0, description="Lower channel bound")
    clamp_max: float = Field(default=1.0, description="Upper channel bound")
    threshold: float = Field(default=0.25, ge=0.0,
                             description="Input pixels shorter than this become black")
    density: float = Field(default=0.5, ge=0.0, le=1.0,
                           description="Probability of a random seed cell being lit")
    engine: Literal["color", "classic"] = "color"
    seed_type: Literal["random", "blinker"] = "random"
    input: Optional[str] = Field(default=None,
                                 description="Input image path, '-' for stdin, None to synthesize")
    output_prefix: str = Field(default="output/", min_length=1)
    rng_seed: Optional[int] = None
    quiet: bool = False

    @model_validator(mode="after")
    def _check_clamp_bounds(self):
        if self.clamp_min > self.clamp_max:
            raise ValueError(
                f"clamp_min ({self.clamp_min}) must not exceed clamp_max ({self.clamp_max})"
            )
        return self


def load_config(**values):
    """Build a SimulationConfig, turning validation failures into ConfigError."""
    try:
        return SimulationConfig(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
