"""Stitch slippy-map tile pyramids into a single image."""

__version__ = "0.1.0"
