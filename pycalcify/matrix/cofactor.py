"""
Determinant and inverse by cofactor expansion.

These are the textbook Laplace-expansion algorithms, not LAPACK. The
recursion visits every permutation, so cost grows as O(n!): fine for the
small matrices this module is meant for, unusable beyond roughly 10x10.
That cost is a documented limitation and determinant() warns when the
input is large enough for it to matter.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycalcify.core.constants import DETERMINANT_WARN_SIZE
from pycalcify.core.exceptions import SingularMatrixError
from pycalcify.matrix._validation import as_matrix, validate_square_matrix


def _minor(a: NDArray, row: int, col: int) -> NDArray:
    """Submatrix with ``row`` and ``col`` removed."""
    return np.delete(np.delete(a, row, axis=0), col, axis=1)


def _cofactor_determinant(a: NDArray) -> float:
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    det = 0.0
    for i in range(n):
        sign = 1.0 if i % 2 == 0 else -1.0
        det += sign * a[0, i] * _cofactor_determinant(_minor(a, 0, i))
    return float(det)


def _warn_if_expensive(n: int) -> None:
    if n > DETERMINANT_WARN_SIZE:
        warnings.warn(
            f"Cofactor expansion on a {n}x{n} matrix costs O(n!) "
            f"operations and may take very long"
        )


def determinant(matrix: ArrayLike) -> float:
    """
    Determinant by recursive cofactor expansion along the first row.

    1x1 returns the element, 2x2 returns ``ad - bc``; larger matrices
    accumulate ``(-1)^i * A[0][i] * det(minor(0, i))``.

    Parameters
    ----------
    matrix : array-like
        Square matrix.

    Returns
    -------
    float

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    a = as_matrix(matrix, 'matrix')
    validate_square_matrix(a)
    if a.shape[0] == 0:
        # empty product convention
        return 1.0
    _warn_if_expensive(a.shape[0])
    return _cofactor_determinant(a)


def inverse(matrix: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Inverse via the adjugate: ``adj(A) / det(A)``.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    SingularMatrixError
        If the determinant is exactly zero.
    """
    a = as_matrix(matrix, 'matrix')
    validate_square_matrix(a)
    n = a.shape[0]
    _warn_if_expensive(n)

    det = _cofactor_determinant(a) if n > 0 else 1.0
    if det == 0.0:
        raise SingularMatrixError(
            "matrix: determinant is zero, inverse does not exist",
            matrix_name='matrix',
            determinant=det,
        )

    if n == 1:
        return np.array([[1.0 / det]])

    cofactors = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            cofactors[i, j] = sign * _cofactor_determinant(_minor(a, i, j))

    return cofactors.T / det
