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
def mixed_rows():
    """Small table with numeric, text-numeric, categorical and missing cells."""
    return [
        {'age': '21', 'city': 'Oslo', 'score': 1.5},
        {'age': 'n/a', 'city': 'Bergen', 'score': 2},
        {'age': 30, 'city': None, 'score': ''},
        {'age': 44, 'city': 'Oslo', 'score': 4.5},
    ]
