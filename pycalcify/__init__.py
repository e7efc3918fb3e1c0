"""
PyCalcify: a small mathematics toolkit for Python.

Four independent utility groups built on NumPy:

Submodules:
    arithmetic: Fluent accumulator with configurable rounding
    matrix: Dense matrix operations and textbook decompositions
    polynomial: Immutable polynomial algebra
    descriptive: Descriptive statistics over 1D samples
"""

__version__ = "0.1.0"

from pycalcify import arithmetic
from pycalcify import matrix
from pycalcify import polynomial
from pycalcify import descriptive
from pycalcify.arithmetic import Arithmetic, calcify
from pycalcify.polynomial import Polynomial

__all__ = [
    "__version__",
    "arithmetic",
    "matrix",
    "polynomial",
    "descriptive",
    "Arithmetic",
    "calcify",
    "Polynomial",
]
