"""Testing utilities for srgblut."""

from . import strategies

__all__ = [
    "strategies",
]
