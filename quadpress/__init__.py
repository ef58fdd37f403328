"""Quadtree compression for binary PPM images: image I/O, tree building, binary codec and a command."""

__version__ = "0.1.0"

__all__ = ["cli", "codec", "image", "quadtree"]