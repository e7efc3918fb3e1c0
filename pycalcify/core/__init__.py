"""
Core infrastructure for PyCalcify.

This module provides shared abstractions and utilities used by all
domain-specific submodules (arithmetic, matrix, polynomial, descriptive).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    constants: Default configuration values
    compute: Timing and tolerance tiers
"""

from pycalcify.core.result import Result
from pycalcify.core.exceptions import (
    PyCalcifyError,
    ValidationError,
    InvalidNumberError,
    InvalidArgumentError,
    InvalidRoundingModeError,
    EmptyInputError,
    DimensionError,
    NotSquareError,
    NumericalError,
    DivisionByZeroError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyCalcifyError",
    "ValidationError",
    "InvalidNumberError",
    "InvalidArgumentError",
    "InvalidRoundingModeError",
    "EmptyInputError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "DivisionByZeroError",
    "SingularMatrixError",
]
