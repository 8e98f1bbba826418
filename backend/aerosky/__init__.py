"""AeroSky - quiz and practice test platform."""

__version__ = "0.1.0"
