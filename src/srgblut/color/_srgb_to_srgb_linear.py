"""sRGB to linear sRGB (decoding transfer function)."""

import torch
from torch import Tensor


def srgb_to_srgb_linear(input: Tensor) -> Tensor:
    r"""Decode gamma-encoded sRGB values to linear light.

    Mathematical Definition
    -----------------------
    .. math::
        C_{\text{linear}} = \begin{cases}
            C / 12.92 & \text{if } C \leq 0.0405 \\
            \left(\frac{C + 0.055}{1.055}\right)^{2.4} & \text{otherwise}
        \end{cases}

    The function is continuous and monotonically increasing on
    :math:`[0, 1]`, with :math:`0 \mapsto 0` and :math:`1 \mapsto 1`.

    Parameters
    ----------
    input : Tensor
        Normalized sRGB values in :math:`[0, 1]`. Any shape, floating-point
        dtype.

    Returns
    -------
    Tensor
        Linear-light values with the same shape and dtype as ``input``.

    Examples
    --------
    >>> srgb_to_srgb_linear(torch.tensor([0.0, 0.5, 1.0]))
    tensor([0.0000, 0.2140, 1.0000])

    See Also
    --------
    srgb_linear_to_srgb : Inverse (encoding) transfer function.

    References
    ----------
    .. [1] IEC 61966-2-1:1999, "Multimedia systems and equipment - Colour
           measurement and management - Part 2-1: Colour management -
           Default RGB colour space - sRGB"
    """
    if not input.is_floating_point():
        raise TypeError(
            f"srgb_to_srgb_linear: input must be a floating-point tensor, got {input.dtype}"
        )

    return torch.where(
        input <= 0.0405,
        input / 12.92,
        ((input + 0.055) / 1.055) ** 2.4,
    )
