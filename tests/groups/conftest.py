"""
Shared fixtures for group comparison tests.
"""

import numpy as np
import pytest


@pytest.fixture
def separated_pair():
    """Two groups with near-total separation."""
    return {'A': [1, 2, 3], 'B': [10, 11, 12]}


@pytest.fixture
def three_groups():
    """3-group unbalanced design, clear group differences."""
    rng = np.random.default_rng(123)
    return {
        'low': list(rng.normal(10.0, 2.0, 5)),
        'mid': list(rng.normal(15.0, 2.0, 10)),
        'high': list(rng.normal(20.0, 2.0, 15)),
    }


@pytest.fixture
def group_rows():
    """Row table with a grouping column, missing cells and text outcomes."""
    return [
        {'dose': 'low', 'response': 1.0},
        {'dose': 'low', 'response': '2'},
        {'dose': 'low', 'response': 3},
        {'dose': 'high', 'response': 10},
        {'dose': 'high', 'response': 11.0},
        {'dose': 'high', 'response': 'n/a'},
        {'dose': None, 'response': 50},
        {'dose': '', 'response': 60},
        {'dose': 'high', 'response': 12},
    ]
