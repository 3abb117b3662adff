"""T3 simulation data models."""

from . import game

__all__ = ["game"]
