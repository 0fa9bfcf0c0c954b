"""
Error types raised by the color life simulation.

Every failure is fatal for a run; the CLI is the only place that catches them.
"""


class ColorLifeError(Exception):
    """Base class for all simulation errors."""


class ConfigError(ColorLifeError, ValueError):
    """Malformed or missing configuration value."""


class DecodeError(ColorLifeError):
    """Input image could not be read or decoded."""


class EncodeError(ColorLifeError):
    """Output frame could not be written."""
