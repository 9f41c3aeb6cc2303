import logging
from typing import Optional, Tuple

import torch
from torch import Tensor

from srgblut.color import srgb_linear_to_srgb
from srgblut.lookup_table._result import LinearToSrgbTable

logger = logging.getLogger(__name__)

SAMPLES = 1 << 16


def _encoded_samples(device: Optional[torch.device] = None) -> Tensor:
    """Exact sRGB encoding of every 16-bit linear sample, in float64."""
    linear = torch.arange(SAMPLES, dtype=torch.float64, device=device)
    return srgb_linear_to_srgb(linear / (SAMPLES - 1))


def _bucket_extrema(
    srgb: Tensor, shift: int, addend: int
) -> Tuple[Tensor, Tensor]:
    """First and last encoded value of every bucket.

    ``srgb`` is non-decreasing in the sample, so these are the minimum and
    maximum of each bucket. Consecutive samples never skip an index, so no
    bucket is empty; with ``addend > 0`` the last sample lands one past the
    nominal table length and the result grows to hold it.
    """
    samples = torch.arange(srgb.numel(), device=srgb.device)
    index = (samples + addend) >> shift
    counts = torch.bincount(index)
    last = torch.cumsum(counts, dim=0) - 1
    first = last - counts + 1
    return srgb[first], srgb[last]


def _representatives(mins: Tensor, maxs: Tensor) -> Tuple[Tensor, Tensor]:
    """8-bit code minimizing the max error to ``mins`` and ``maxs``.

    Codes are scanned in ascending order over
    ``[floor(255 * mins) - 1, floor(255 * maxs) + 1]`` clamped to
    ``[0, 255]``; the first minimal code wins.
    """
    lower = torch.floor(mins * 255).to(torch.int64) - 1
    upper = torch.floor(maxs * 255).to(torch.int64) + 1
    width = int((upper - lower).max().item()) + 1

    codes = lower.unsqueeze(-1) + torch.arange(width, device=mins.device)
    valid = (codes >= 0) & (codes <= 255) & (codes <= upper.unsqueeze(-1))

    s = codes.to(torch.float64) / 255
    error = torch.maximum(
        (s - mins.unsqueeze(-1)).abs(),
        (s - maxs.unsqueeze(-1)).abs(),
    )
    error = error.masked_fill(~valid, float("inf"))

    # argmin returns the first minimal index
    choice = torch.argmin(error, dim=-1, keepdim=True)

    return (
        codes.gather(-1, choice).squeeze(-1),
        error.gather(-1, choice).squeeze(-1),
    )


def _build(
    srgb: Tensor, shift: int, addend: int, tolerance: float
) -> Optional[LinearToSrgbTable]:
    mins, maxs = _bucket_extrema(srgb, shift, addend)
    codes, error = _representatives(mins, maxs)

    max_error = error.max().item()
    if max_error > tolerance:
        logger.debug(
            "shift %d addend %d: entry error %g > acceptable error %g",
            shift,
            addend,
            max_error,
            tolerance,
        )
        return None

    mse = (error**2).mean().item()
    logger.debug("shift %d addend %d: MSE is %g", shift, addend, mse)

    return LinearToSrgbTable(
        shift=shift,
        addend=addend,
        table=codes.to(torch.uint8),
        mse=mse,
        max_error=max_error,
    )


def linear_to_srgb_candidate(
    shift: int,
    addend: int,
    *,
    tolerance: float = 1 / 256,
) -> Optional[LinearToSrgbTable]:
    r"""
    Build the linear-to-sRGB table for one ``(shift, addend)`` pair.

    Every 16-bit linear sample ``l`` is assigned to bucket
    ``(l + addend) >> shift``. Each bucket gets the 8-bit code ``b`` that
    minimizes

    .. math::

        \operatorname{err}(b) = \max\left(
            \left|\tfrac{b}{255} - s_{\min}\right|,
            \left|\tfrac{b}{255} - s_{\max}\right|\right)

    where :math:`s_{\min}` and :math:`s_{\max}` are the smallest and
    largest exact encodings in the bucket. Because the encoding is
    monotone, these two bound the error of every other sample in the
    bucket.

    Parameters
    ----------
    shift : int
        Right shift of the index function, in ``[0, 16]``.
    addend : int
        Offset of the index function, in ``[0, 2 ** shift)``.
    tolerance : float, optional
        Largest acceptable per-entry error in normalized sRGB units.
        Default: ``1 / 256``.

    Returns
    -------
    LinearToSrgbTable or None
        The table with its mean squared error, or ``None`` when some entry
        cannot be brought within ``tolerance``.

    Examples
    --------
    >>> candidate = linear_to_srgb_candidate(0, 0)
    >>> candidate.table.shape
    torch.Size([65536])
    >>> linear_to_srgb_candidate(5, 0, tolerance=1e-4) is None
    True

    See Also
    --------
    linear_to_srgb_table : Search over all ``(shift, addend)`` pairs.
    """
    if not 0 <= shift <= 16:
        raise ValueError(
            f"linear_to_srgb_candidate: shift must be in [0, 16], got {shift}"
        )

    if not 0 <= addend < 1 << shift:
        raise ValueError(
            f"linear_to_srgb_candidate: addend must be in [0, {1 << shift}), got {addend}"
        )

    if tolerance < 0:
        raise ValueError(
            f"linear_to_srgb_candidate: tolerance must be non-negative, got {tolerance}"
        )

    return _build(_encoded_samples(), shift, addend, tolerance)
