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
def well_conditioned_matrix(rng):
    """
    Strictly row and column diagonally dominant 4x4 matrix.

    Column dominance guarantees partial pivoting never exchanges rows, so
    unpivoted LU agrees with LAPACK.
    """
    n = 4
    A = rng.standard_normal((n, n))
    abs_a = np.abs(A)
    A += np.diag(abs_a.sum(axis=0) + abs_a.sum(axis=1) + 1.0)
    return A


@pytest.fixture
def spd_matrix(rng):
    """Symmetric positive definite 4x4 matrix."""
    n = 4
    X = rng.standard_normal((n, n))
    return X @ X.T + n * np.eye(n)
