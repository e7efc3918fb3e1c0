"""
Elementwise and structural matrix operations.

All functions accept nested sequences or arrays, validate shapes up front
and return a new float64 ndarray. Inputs are never modified.
"""

from __future__ import annotations

import numbers
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycalcify.core.exceptions import InvalidArgumentError
from pycalcify.core.validation import check_real_number
from pycalcify.matrix._validation import (
    as_matrix,
    validate_multiplication_size,
    validate_same_size,
    validate_square_matrix,
)


def add(matrix_a: ArrayLike, matrix_b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Elementwise sum of two matrices of the same size.

    Raises
    ------
    DimensionError
        If the shapes differ.
    """
    a = as_matrix(matrix_a, 'matrix_a')
    b = as_matrix(matrix_b, 'matrix_b')
    validate_same_size(a, b, ('matrix_a', 'matrix_b'))
    return a + b


def subtract(matrix_a: ArrayLike, matrix_b: ArrayLike) -> NDArray[np.floating[Any]]:
    """Elementwise difference ``matrix_a - matrix_b``."""
    a = as_matrix(matrix_a, 'matrix_a')
    b = as_matrix(matrix_b, 'matrix_b')
    validate_same_size(a, b, ('matrix_a', 'matrix_b'))
    return a - b


def hadamard_product(matrix_a: ArrayLike, matrix_b: ArrayLike) -> NDArray[np.floating[Any]]:
    """Elementwise (Hadamard) product of two matrices of the same size."""
    a = as_matrix(matrix_a, 'matrix_a')
    b = as_matrix(matrix_b, 'matrix_b')
    validate_same_size(a, b, ('matrix_a', 'matrix_b'))
    return a * b


def multiply(matrix_a: ArrayLike, matrix_b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product ``Result[i][j] = sum_k A[i][k] * B[k][j]``.

    Raises
    ------
    DimensionError
        If the column count of ``matrix_a`` differs from the row count
        of ``matrix_b``.
    """
    a = as_matrix(matrix_a, 'matrix_a')
    b = as_matrix(matrix_b, 'matrix_b')
    validate_multiplication_size(a, b, ('matrix_a', 'matrix_b'))
    return a @ b


def transpose(matrix: ArrayLike) -> NDArray[np.floating[Any]]:
    """``Result[j][i] = A[i][j]``."""
    return np.ascontiguousarray(as_matrix(matrix, 'matrix').T)


def scalar_multiply(matrix: ArrayLike, scalar: float) -> NDArray[np.floating[Any]]:
    """
    Multiply every element by ``scalar``.

    Raises
    ------
    InvalidNumberError
        If ``scalar`` is not a real number.
    """
    a = as_matrix(matrix, 'matrix')
    s = check_real_number(scalar, 'scalar')
    return a * s


def kronecker_product(matrix_a: ArrayLike, matrix_b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Kronecker product.

    The result has shape ``(rows_a * rows_b, cols_a * cols_b)`` with
    ``R[i*rows_b + j][k*cols_b + l] = A[i][k] * B[j][l]``. Any two
    matrices are compatible.
    """
    a = as_matrix(matrix_a, 'matrix_a')
    b = as_matrix(matrix_b, 'matrix_b')
    return np.kron(a, b)


def trace(matrix: ArrayLike) -> float:
    """
    Sum of the diagonal of a square matrix.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    a = as_matrix(matrix, 'matrix')
    validate_square_matrix(a)
    return float(np.trace(a))


def frobenius_norm(matrix: ArrayLike) -> float:
    """Square root of the sum of squared elements."""
    a = as_matrix(matrix, 'matrix')
    return float(np.sqrt(np.sum(a * a)))


def identity(n: int) -> NDArray[np.floating[Any]]:
    """``n x n`` identity matrix."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise InvalidArgumentError(f"n: must be a positive integer, got {n!r}")
    return np.eye(int(n), dtype=np.float64)


def _format_value(value: float) -> str:
    return np.format_float_positional(value, trim='-')


def format_matrix(matrix: ArrayLike) -> str:
    """
    Human-readable rendering, one bracketed row per line.

    Values are comma-joined without padding in their shortest positional
    form::

        >>> print(format_matrix([[1, 2.5], [3, 4]]))
        [1,2.5]
        [3,4]
    """
    a = as_matrix(matrix, 'matrix')
    lines = []
    for row in a:
        lines.append('[' + ','.join(_format_value(v) for v in row) + ']')
    return '\n'.join(lines).rstrip()
