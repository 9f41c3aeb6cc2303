"""Linear sRGB to sRGB (encoding transfer function)."""

import torch
from torch import Tensor


def srgb_linear_to_srgb(input: Tensor) -> Tensor:
    r"""Encode linear-light values with the sRGB transfer function.

    Mathematical Definition
    -----------------------
    .. math::
        C = \begin{cases}
            12.92 \, C_{\text{linear}}
                & \text{if } C_{\text{linear}} \leq 0.0031308 \\
            1.055 \, C_{\text{linear}}^{1/2.4} - 0.055 & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Linear-light values in :math:`[0, 1]`. Any shape, floating-point
        dtype.

    Returns
    -------
    Tensor
        Normalized sRGB values with the same shape and dtype as ``input``.

    Examples
    --------
    >>> srgb_linear_to_srgb(torch.tensor([0.0, 0.2140411, 1.0]))
    tensor([0.0000, 0.5000, 1.0000])

    See Also
    --------
    srgb_to_srgb_linear : Inverse (decoding) transfer function.
    """
    if not input.is_floating_point():
        raise TypeError(
            f"srgb_linear_to_srgb: input must be a floating-point tensor, got {input.dtype}"
        )

    return torch.where(
        input <= 0.0031308,
        input * 12.92,
        1.055 * input ** (1 / 2.4) - 0.055,
    )
