"""
Scalar arithmetic with configurable rounding.

Public API:
    Arithmetic      - fluent accumulator (every operation returns self)
    calcify()       - fresh default-configured accumulator
    RoundingConfig  - immutable rounding policy
    parse_number()  - numeric text to float
"""

from pycalcify.arithmetic.rounding import RoundingConfig, round_half_away
from pycalcify.arithmetic.parsing import parse_number
from pycalcify.arithmetic.accumulator import Arithmetic, calcify

__all__ = [
    "Arithmetic",
    "calcify",
    "RoundingConfig",
    "round_half_away",
    "parse_number",
]
