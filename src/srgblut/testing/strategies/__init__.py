"""Hypothesis strategies for lookup table testing."""

from ._linear_samples import linear_samples
from ._srgb_codes import srgb_codes
from ._unit_interval import unit_interval

__all__ = [
    "linear_samples",
    "srgb_codes",
    "unit_interval",
]
