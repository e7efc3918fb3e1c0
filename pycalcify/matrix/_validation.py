"""
Shape validators for matrix operations.

Each validator raises before any computation starts, so no operation ever
returns a partially filled matrix.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycalcify.core.exceptions import DimensionError, NotSquareError
from pycalcify.core.validation import check_array, check_2d


def as_matrix(matrix: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert a nested sequence to a fresh 2D float64 array."""
    arr = check_array(matrix, name)
    check_2d(arr, name)
    return arr


def validate_same_size(
    a: NDArray, b: NDArray, names: tuple[str, str] = ('A', 'B')
) -> None:
    """Elementwise operations need identical shapes."""
    if a.shape != b.shape:
        raise DimensionError(
            f"Matrices must be of the same size: "
            f"{names[0]} is {a.shape[0]}x{a.shape[1]}, "
            f"{names[1]} is {b.shape[0]}x{b.shape[1]}"
        )


def validate_multiplication_size(
    a: NDArray, b: NDArray, names: tuple[str, str] = ('A', 'B')
) -> None:
    """Columns of the left operand must match rows of the right one."""
    if a.shape[1] != b.shape[0]:
        raise DimensionError(
            f"Number of columns in {names[0]} ({a.shape[1]}) must equal "
            f"the number of rows in {names[1]} ({b.shape[0]})"
        )


def validate_square_matrix(a: NDArray, name: str = 'matrix') -> None:
    if a.shape[0] != a.shape[1]:
        raise NotSquareError(
            f"{name}: must be square, got {a.shape[0]}x{a.shape[1]}",
            shape=a.shape,
        )
