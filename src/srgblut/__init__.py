"""srgblut: precomputed sRGB lookup tables for PyTorch."""

from . import (
    color,
    lookup_table,
)

__all__ = [
    "color",
    "lookup_table",
]

__version__ = "0.1.0"
