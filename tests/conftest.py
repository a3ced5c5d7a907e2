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
def four_obs():
    """Observations with known sample/population summaries."""
    return [1.0, 5.5, 7.7, 8.9]


@pytest.fixture
def five_obs():
    return [1.0, 2.0, 3.0, 5.5, 7.7]
