"""
Dense matrix operations.

Matrices are nested sequences (or 2D arrays) of numbers. Every function is
pure: inputs are validated, converted to float64 and never modified, and
results are new ndarrays (or floats/ints for scalar results).

Public API:
    add, subtract, hadamard_product  - elementwise, same shape
    multiply                         - matrix product
    transpose, scalar_multiply
    kronecker_product
    determinant, inverse             - cofactor expansion, O(n!)
    trace, frobenius_norm
    rank                             - Gaussian elimination
    lu_decomposition                 - Doolittle, no pivoting
    cholesky_decomposition
    identity, format_matrix
"""

from pycalcify.matrix.operations import (
    add,
    subtract,
    hadamard_product,
    multiply,
    transpose,
    scalar_multiply,
    kronecker_product,
    trace,
    frobenius_norm,
    identity,
    format_matrix,
)
from pycalcify.matrix.cofactor import determinant, inverse
from pycalcify.matrix.decomposition import (
    LUResult,
    rank,
    lu_decomposition,
    cholesky_decomposition,
)

__all__ = [
    "add",
    "subtract",
    "hadamard_product",
    "multiply",
    "transpose",
    "scalar_multiply",
    "kronecker_product",
    "trace",
    "frobenius_norm",
    "identity",
    "format_matrix",
    "determinant",
    "inverse",
    "rank",
    "lu_decomposition",
    "cholesky_decomposition",
    "LUResult",
]
