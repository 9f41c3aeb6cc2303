import logging
from typing import Optional

from srgblut.lookup_table._exceptions import LookupTableError
from srgblut.lookup_table._linear_to_srgb_candidate import (
    _build,
    _encoded_samples,
)
from srgblut.lookup_table._result import LinearToSrgbTable

logger = logging.getLogger(__name__)


def linear_to_srgb_table(
    *,
    tolerance: float = 1 / 256,
    max_shift: int = 5,
) -> LinearToSrgbTable:
    r"""
    Smallest linear-to-sRGB table within an error tolerance.

    Finds ``shift``, ``addend`` and ``table`` such that for every 16-bit
    linear sample ``l``

    .. math::

        \left|\frac{T[(l + a) \gg s]}{255}
            - \operatorname{encode}\left(\frac{l}{65535}\right)\right|
        \leq \varepsilon

    Shifts are tried from ``max_shift`` down to ``0``, so the first shift
    with any acceptable addend fixes the table size. Among the acceptable
    addends at that shift the one with the lowest mean squared error wins.
    Smaller shifts are never tried once a shift is accepted, even if they
    would have a lower error.

    Parameters
    ----------
    tolerance : float, optional
        Largest acceptable error in normalized sRGB units. Must be at least
        half an 8-bit step, ``0.5 / 255``, so that ``shift = 0`` is always
        acceptable. Default: ``1 / 256``.
    max_shift : int, optional
        Largest shift to consider, in ``[0, 16]``. Default: 5.

    Returns
    -------
    LinearToSrgbTable
        The winning ``shift``, ``addend``, ``table`` and its errors.

    Raises
    ------
    LookupTableError
        If no shift down to ``0`` is acceptable. Only reachable through
        floating-point rounding with ``tolerance`` exactly ``0.5 / 255``.

    Examples
    --------
    >>> result = linear_to_srgb_table()
    >>> result.table.numel() in (2 ** (16 - result.shift), 2 ** (16 - result.shift) + 1)
    True

    A looser tolerance admits the smallest table:

    >>> linear_to_srgb_table(tolerance=1 / 64).shift
    5

    See Also
    --------
    linear_to_srgb_candidate : Table for a single ``(shift, addend)`` pair.
    linear_to_srgb : Apply the table to 16-bit linear samples.
    """
    if tolerance < 0.5 / 255:
        raise ValueError(
            f"linear_to_srgb_table: tolerance must be at least 0.5 / 255, got {tolerance}"
        )

    if not 0 <= max_shift <= 16:
        raise ValueError(
            f"linear_to_srgb_table: max_shift must be in [0, 16], got {max_shift}"
        )

    srgb = _encoded_samples()

    best: Optional[LinearToSrgbTable] = None

    for shift in range(max_shift, -1, -1):
        for addend in range(1 << shift):
            logger.debug("considering shift %d addend %d", shift, addend)

            candidate = _build(srgb, shift, addend, tolerance)
            if candidate is None:
                continue

            if best is None or candidate.mse < best.mse:
                best = candidate

        # The first shift with an acceptable table is the best shift
        if best is not None:
            break

    if best is None:
        raise LookupTableError(
            f"linear_to_srgb_table: no table within tolerance {tolerance}"
        )

    logger.info(
        "best table is shift %d addend %d (%d entries, MSE %g)",
        best.shift,
        best.addend,
        best.table.numel(),
        best.mse,
    )

    return best
