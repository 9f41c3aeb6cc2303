"""Exceptions for lookup table construction."""


class LookupTableError(Exception):
    """Raised when no candidate table satisfies the error tolerance."""

    pass
