"""
Rank, LU and Cholesky by naive elimination.

None of these routines pivot by default. That keeps them identical to the
classical hand-worked algorithms but makes them fragile:

    - rank() can under-report when a zero sits at the natural pivot
      position while a later row holds a nonzero in that column.
      Pass pivoting=True for the partial-pivoting variant.
    - lu_decomposition() raises SingularMatrixError on a zero pivot.
    - cholesky_decomposition() does not check symmetry or definiteness.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycalcify.core.compute.tolerances import rank_tolerance
from pycalcify.core.exceptions import SingularMatrixError
from pycalcify.matrix._validation import as_matrix, validate_square_matrix


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        L: Lower triangular matrix with unit diagonal (n x n)
        U: Upper triangular matrix (n x n)

    Unpacks as ``L, U = lu_decomposition(A)``.
    """
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.L, self.U))


def rank(matrix: ArrayLike, *, pivoting: bool = False) -> int:
    """
    Rank by Gaussian elimination.

    Parameters
    ----------
    matrix : array-like
        Any rectangular matrix.
    pivoting : bool
        False (default) runs the unpivoted reduction: for each row the
        pivot is the entry in the column given by the rank found so far,
        and a zero there is skipped rather than swapped. This reproduces
        the classical no-pivot result, which is too low for inputs such
        as ``[[0, 1], [1, 0]]`` (reports 1). True searches each column
        for the largest remaining entry and returns the true rank.

    Returns
    -------
    int
    """
    m = as_matrix(matrix, 'matrix')
    if pivoting:
        return _rank_partial_pivot(m)

    n_rows, n_cols = m.shape
    r = 0
    for row in range(n_rows):
        if r >= n_cols:
            break
        pivot = m[row, r]
        if pivot != 0:
            for other in range(n_rows):
                if other != row:
                    multiplier = m[other, r] / pivot
                    m[other, :] -= multiplier * m[row, :]
            r += 1
    return r


def _rank_partial_pivot(m: NDArray) -> int:
    n_rows, n_cols = m.shape
    if m.size == 0:
        return 0
    tol = rank_tolerance(m.shape, float(np.max(np.abs(m))))

    r = 0
    for col in range(n_cols):
        if r >= n_rows:
            break
        pivot_row = r + int(np.argmax(np.abs(m[r:, col])))
        if abs(m[pivot_row, col]) <= tol:
            continue
        if pivot_row != r:
            m[[r, pivot_row]] = m[[pivot_row, r]]
        for other in range(r + 1, n_rows):
            m[other, :] -= (m[other, col] / m[r, col]) * m[r, :]
        r += 1
    return r


def lu_decomposition(matrix: ArrayLike) -> LUResult:
    """
    Doolittle LU decomposition without pivoting.

    Computes unit-lower-triangular L and upper-triangular U with A = LU:

        U[i][k] = A[i][k] - sum_{j<i} L[i][j] U[j][k]              (k >= i)
        L[k][i] = (A[k][i] - sum_{j<i} L[k][j] U[j][i]) / U[i][i]  (k > i)

    Parameters
    ----------
    matrix : array-like
        Square matrix.

    Returns
    -------
    LUResult

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    SingularMatrixError
        If a zero pivot U[i][i] has to be divided by. A zero in the last
        diagonal position is allowed; it never divides anything.
    """
    a = as_matrix(matrix, 'matrix')
    validate_square_matrix(a)
    n = a.shape[0]

    L = np.zeros((n, n), dtype=np.float64)
    U = np.zeros((n, n), dtype=np.float64)

    for i in range(n):
        for k in range(i, n):
            U[i, k] = a[i, k] - L[i, :i] @ U[:i, k]

        L[i, i] = 1.0
        if i < n - 1 and U[i, i] == 0:
            raise SingularMatrixError(
                f"matrix: zero pivot at U[{i}][{i}], LU without pivoting is undefined",
                matrix_name='matrix',
                pivot_index=i,
            )
        for k in range(i + 1, n):
            L[k, i] = (a[k, i] - L[k, :i] @ U[:i, i]) / U[i, i]

    return LUResult(L=L, U=U)


def cholesky_decomposition(matrix: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Cholesky factor L with A = L L^T.

    Valid for symmetric positive semi-definite input; neither property is
    checked. Diagonal entries use ``sqrt(max(A[i][i] - s, 0))`` so that
    rounding noise cannot produce a negative square root. A zero divisor
    L[j][j] in an off-diagonal entry is replaced by 1, which avoids the
    division error but leaves a meaningless entry; a warning is issued
    when that happens.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    a = as_matrix(matrix, 'matrix')
    validate_square_matrix(a)
    n = a.shape[0]

    L = np.zeros((n, n), dtype=np.float64)
    zero_divisors = 0

    for i in range(n):
        for j in range(i + 1):
            s = L[i, :j] @ L[j, :j]
            if i == j:
                L[i, j] = np.sqrt(max(a[i, i] - s, 0.0))
            else:
                divisor = L[j, j]
                if divisor == 0:
                    divisor = 1.0
                    zero_divisors += 1
                L[i, j] = (a[i, j] - s) / divisor

    if zero_divisors:
        warnings.warn(
            f"Cholesky: {zero_divisors} off-diagonal entries divided by a zero "
            f"diagonal; substituted 1. Input is not positive definite."
        )

    return L
