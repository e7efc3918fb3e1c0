"""
Tolerance tiers for numerical validation.

Defines precision expectations for the compute paths in PyCalcify:
- Direct FP64 (elementwise ops, moments): machine precision
- Recursive / decomposition FP64 (cofactor expansion, LU, Cholesky,
  adjugate inverse): error accumulates with the number of operations

Used by the test suite and by rank(pivoting=True) for its zero test.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Elementwise arithmetic and single-pass statistics
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision, direct computation',
)

# Cofactor recursion and unpivoted decompositions
CPU_FP64_DECOMPOSITION = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='cpu_fp64_decomposition',
    description='Double precision, recursive or decomposition algorithms',
)

# Ill-conditioned inputs (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(
    operation: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given operation."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    if operation in ('determinant', 'inverse', 'lu', 'cholesky', 'rank'):
        return CPU_FP64_DECOMPOSITION
    return CPU_FP64


def rank_tolerance(shape: tuple[int, ...], max_abs: float) -> float:
    """
    Zero threshold for pivots during rank reduction.

    Same scaling LAPACK-based rank estimates use: matrix size times
    machine epsilon times the largest magnitude entry.
    """
    return max(shape) * float(np.finfo(np.float64).eps) * max_abs
