"""Subsector generator: procedural star maps for science-fiction tabletop games."""

__version__ = "0.4.0"
