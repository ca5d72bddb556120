"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.matrix import DenseMatrix, PreciseMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[DenseMatrix, PreciseMatrix], ids=['dense', 'precise'])
def matrix_class(request):
    """Both concrete matrix containers."""
    return request.param


@pytest.fixture
def well_conditioned(rng):
    """Diagonally boosted 6x6 grid: safe for unpivoted elimination."""
    n = 6
    values = rng.uniform(-1.0, 1.0, size=(n, n))
    values[np.diag_indices(n)] += n * 20
    return values


@pytest.fixture
def dominant_system():
    """Strictly diagonally dominant 3x3 system with solution (1, -2, 3)."""
    A = np.array([
        [10.0, -1.0, 2.0],
        [-1.0, 11.0, -1.0],
        [2.0, -1.0, 10.0],
    ])
    x = np.array([1.0, -2.0, 3.0])
    return A, A @ x, x
