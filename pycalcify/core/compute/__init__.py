"""
Shared compute infrastructure for PyCalcify.

IMPORTANT: This is NOT where domain code lives. Matrix, polynomial and
statistics code go in their own subpackages. This module contains shared
NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pycalcify.core.compute.timing import Timer
from pycalcify.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_DECOMPOSITION,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
    rank_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_DECOMPOSITION",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
    "rank_tolerance",
]
