"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pymatrix import matrix


@pytest.fixture
def wide():
    """2x3 matrix used by the end-to-end scenarios."""
    return matrix([[1, 2, 3], [2, 3, 4]])


@pytest.fixture
def square():
    """3x3 matrix with known wrapped-diagonal expansion."""
    return matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def sample_identity():
    """2x2 identity built from explicit rows."""
    return matrix([[1, 0], [0, 1]])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)
