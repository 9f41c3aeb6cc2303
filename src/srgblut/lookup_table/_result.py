from typing import NamedTuple

from torch import Tensor


class LinearToSrgbTable(NamedTuple):
    """Compressed linear-to-sRGB lookup table.

    A 16-bit linear sample ``l`` is encoded as
    ``table[(l + addend) >> shift]``.

    Parameters
    ----------
    shift : int
        Right shift applied to the offset sample. The table has
        ``2 ** (16 - shift)`` entries, plus one when ``addend > 0``.
    addend : int
        Offset added to the sample before shifting, in ``[0, 2 ** shift)``.
    table : Tensor
        ``uint8`` sRGB codes, one per bucket.
    mse : float
        Mean over all entries of the squared per-entry error.
    max_error : float
        Largest per-entry error, in normalized sRGB units.
    """

    shift: int
    addend: int
    table: Tensor
    mse: float
    max_error: float
