"""Precomputed lookup tables between 8-bit sRGB and 16-bit linear light."""

from srgblut.lookup_table._exceptions import LookupTableError
from srgblut.lookup_table._linear_to_srgb_candidate import (
    linear_to_srgb_candidate,
)
from srgblut.lookup_table._linear_to_srgb_table import linear_to_srgb_table
from srgblut.lookup_table._lookup import (
    linear_to_srgb,
    linear_to_srgb_error,
    srgb_to_linear,
)
from srgblut.lookup_table._result import LinearToSrgbTable
from srgblut.lookup_table._srgb_to_linear_table import srgb_to_linear_table

__all__ = [
    "LinearToSrgbTable",
    "LookupTableError",
    "linear_to_srgb",
    "linear_to_srgb_candidate",
    "linear_to_srgb_error",
    "linear_to_srgb_table",
    "srgb_to_linear",
    "srgb_to_linear_table",
]
