"""
Rounding policy for the arithmetic accumulator.

Two behaviours, selected by ``enabled``:

    enabled=True   round to an integer with 'ceil', 'floor' or 'round'
                   (decimal_places is ignored)
    enabled=False  round to ``decimal_places`` digits, half away from zero

'round' is half-away-from-zero on the shortest decimal representation of
the float, so 2.5 -> 3 and 1.005 -> 1.01 (Python's built-in round() would
give 2 and 1.0).
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

import numpy as np

from pycalcify.core.constants import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_ROUNDED,
    DEFAULT_ROUNDING_MODE,
    ROUNDING_CEIL,
    ROUNDING_FLOOR,
    ROUNDING_MODES,
)
from pycalcify.core.exceptions import InvalidArgumentError, InvalidRoundingModeError


def round_half_away(value: float, decimal_places: int) -> float:
    """Round to ``decimal_places`` digits, ties away from zero."""
    # numpy scalars repr as 'np.float64(...)' under NumPy 2
    value = float(value)
    if not np.isfinite(value):
        return value

    d = Decimal(repr(value))
    if d.as_tuple().exponent >= -decimal_places:
        return value

    with localcontext() as ctx:
        # repr() keeps at most 17 significant digits
        ctx.prec = max(28, 20 + decimal_places)
        quantum = Decimal(1).scaleb(-decimal_places)
        return float(d.quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class RoundingConfig:
    """
    Immutable rounding configuration.

    Attributes:
        enabled: Round to an integer using ``mode``
        mode: One of 'ceil', 'floor', 'round'
        decimal_places: Digits kept when ``enabled`` is False

    Raises:
        InvalidRoundingModeError: If mode is not recognised
        InvalidArgumentError: If decimal_places is negative or not an integer
    """
    enabled: bool = DEFAULT_ROUNDED
    mode: str = DEFAULT_ROUNDING_MODE
    decimal_places: int = DEFAULT_DECIMAL_PLACES

    def __post_init__(self):
        if self.mode not in ROUNDING_MODES:
            raise InvalidRoundingModeError(
                f"Invalid rounding mode: {self.mode!r}. "
                f"Must be one of {', '.join(repr(m) for m in ROUNDING_MODES)}",
                mode=self.mode,
            )
        if (
            isinstance(self.decimal_places, bool)
            or not isinstance(self.decimal_places, numbers.Integral)
            or self.decimal_places < 0
        ):
            raise InvalidArgumentError(
                f"decimal_places: must be a non-negative integer, "
                f"got {self.decimal_places!r}"
            )

    def apply(self, value: float) -> float:
        """Round ``value`` according to this configuration."""
        if not self.enabled:
            return round_half_away(value, int(self.decimal_places))
        if self.mode == ROUNDING_CEIL:
            return float(np.ceil(value))
        if self.mode == ROUNDING_FLOOR:
            return float(np.floor(value))
        return round_half_away(value, 0)
