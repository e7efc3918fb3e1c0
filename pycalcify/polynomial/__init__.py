"""
Polynomial algebra.

Public API:
    Polynomial - immutable ascending-power coefficient polynomial
"""

from pycalcify.polynomial.polynomial import Polynomial

__all__ = [
    "Polynomial",
]
