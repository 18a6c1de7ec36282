"""
Shared fixtures for correlation tests.
"""

import numpy as np
import pytest


@pytest.fixture
def perfect_rows():
    """b = 2a exactly."""
    return [{'a': 1, 'b': 2}, {'a': 2, 'b': 4}, {'a': 3, 'b': 6}]


@pytest.fixture
def random_rows():
    """60 rows, 4 correlated columns, a few missing and text cells."""
    rng = np.random.default_rng(42)
    n = 60
    x = rng.standard_normal(n)
    columns = {
        'x': x,
        'y': 0.8 * x + rng.standard_normal(n) * 0.5,
        'z': -0.3 * x + rng.standard_normal(n),
        'w': rng.standard_normal(n),
    }
    rows = [{name: float(col[i]) for name, col in columns.items()} for i in range(n)]
    rows[3]['x'] = None
    rows[7]['y'] = ''
    rows[11]['z'] = 'n/a'
    rows[20]['w'] = str(rows[20]['w'])
    return rows
