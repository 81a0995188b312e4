"""Terrain, effects, mesh data and helpers for a two-player artillery game."""

__version__ = "0.1.0"
__all__ = ["__version__"]