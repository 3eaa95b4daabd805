"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def odd_sample():
    """Seven observations, unsorted."""
    return [1.4, 3.6, 6.5, 9.3, 10.2, 15.1, 2.2]


@pytest.fixture
def even_sample():
    """Eight observations, unsorted."""
    return [1.4, 3.6, 6.5, 9.3, 10.2, 15.1, 2.2, 0.5]
