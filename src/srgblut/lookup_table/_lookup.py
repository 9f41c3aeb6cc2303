"""Apply precomputed sRGB lookup tables."""

from typing import Optional

import torch
from torch import Tensor

from srgblut.lookup_table._linear_to_srgb_candidate import (
    SAMPLES,
    _encoded_samples,
)
from srgblut.lookup_table._result import LinearToSrgbTable
from srgblut.lookup_table._srgb_to_linear_table import srgb_to_linear_table


def _check_codes(name: str, input: Tensor, maximum: int) -> None:
    if (
        input.is_floating_point()
        or input.is_complex()
        or input.dtype == torch.bool
    ):
        raise TypeError(
            f"{name}: input must be an integer tensor, got {input.dtype}"
        )

    if input.numel() > 0 and (input.min() < 0 or input.max() > maximum):
        raise ValueError(f"{name}: input values must be in [0, {maximum}]")


def srgb_to_linear(input: Tensor, table: Optional[Tensor] = None) -> Tensor:
    """Convert 8-bit sRGB codes to 16-bit linear samples.

    Parameters
    ----------
    input : Tensor
        Integer sRGB codes in ``[0, 255]``. Any shape.
    table : Tensor, optional
        Forward table from :func:`srgb_to_linear_table`. Built on demand
        when omitted.

    Returns
    -------
    Tensor
        Linear samples in ``[0, 65535]``, same shape as ``input`` and the
        dtype of ``table``.
    """
    _check_codes("srgb_to_linear", input, 255)

    if table is None:
        table = srgb_to_linear_table(device=input.device)

    return table[input.long()]


def linear_to_srgb(input: Tensor, table: LinearToSrgbTable) -> Tensor:
    """Convert 16-bit linear samples to 8-bit sRGB codes.

    Parameters
    ----------
    input : Tensor
        Integer linear samples in ``[0, 65535]``. Any shape.
    table : LinearToSrgbTable
        Result of :func:`linear_to_srgb_table` or
        :func:`linear_to_srgb_candidate`.

    Returns
    -------
    Tensor
        ``uint8`` sRGB codes, same shape as ``input``.
    """
    _check_codes("linear_to_srgb", input, SAMPLES - 1)

    index = (input.long() + table.addend) >> table.shift

    return table.table.to(input.device)[index]


def linear_to_srgb_error(table: LinearToSrgbTable) -> Tensor:
    """Error of :func:`linear_to_srgb` against the exact encoding.

    Parameters
    ----------
    table : LinearToSrgbTable
        Table to check.

    Returns
    -------
    Tensor
        ``float64`` tensor of shape ``(65536,)``: for every linear sample
        ``l``, ``|linear_to_srgb(l) / 255 - encode(l / 65535)|``.
    """
    samples = torch.arange(SAMPLES)
    codes = linear_to_srgb(samples, table)

    return (codes.to(torch.float64) / 255 - _encoded_samples()).abs()
