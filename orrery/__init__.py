"""Orrery: rotating-ring solar system board core."""

__version__ = "0.1.0"
