"""Test fixtures for lookup_table tests."""

import pytest

from srgblut.lookup_table import linear_to_srgb_table


@pytest.fixture(scope="session")
def default_table():
    """Search result for the default tolerance and shift range."""
    return linear_to_srgb_table()
