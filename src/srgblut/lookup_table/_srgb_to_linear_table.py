from typing import Optional

import torch
from torch import Tensor

from srgblut.color import srgb_to_srgb_linear

_INTEGER_DTYPES = (torch.int32, torch.int64)


def srgb_to_linear_table(
    *,
    dtype: torch.dtype = torch.int32,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Exact 8-bit sRGB to 16-bit linear lookup table.

    .. math::
        T_i = \operatorname{round}\left(65535 \cdot
            \operatorname{decode}\left(\frac{i}{255}\right)\right),
        \quad i = 0, \ldots, 255

    The table is exact to rounding, so no search is needed. It is
    non-decreasing with ``T[0] == 0`` and ``T[255] == 65535``.

    Parameters
    ----------
    dtype : torch.dtype, optional
        Integer dtype of the result. Must hold ``65535``: ``torch.int32`` or
        ``torch.int64``. Default: ``torch.int32``.
    device : torch.device, optional
        Device of the result. Default: current default device.

    Returns
    -------
    Tensor
        Shape ``(256,)``.

    Examples
    --------
    >>> table = srgb_to_linear_table()
    >>> table[[0, 255]]
    tensor([    0, 65535], dtype=torch.int32)
    """
    if dtype not in _INTEGER_DTYPES:
        raise ValueError(
            f"srgb_to_linear_table: dtype must hold 16-bit unsigned values, got {dtype}"
        )

    codes = torch.arange(256, dtype=torch.float64, device=device)
    linear = srgb_to_srgb_linear(codes / 255)

    return torch.round(linear * 65535).to(dtype)
