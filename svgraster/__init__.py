"""Rasterize a small subset of SVG to PNG images."""

__version__ = "0.1.0"