"""sRGB transfer functions."""

from srgblut.color._srgb_linear_to_srgb import (
    srgb_linear_to_srgb,
)
from srgblut.color._srgb_to_srgb_linear import (
    srgb_to_srgb_linear,
)

__all__ = [
    "srgb_linear_to_srgb",
    "srgb_to_srgb_linear",
]
