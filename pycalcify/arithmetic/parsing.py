"""
Explicit text-to-number conversion.

Accumulator methods only take real numbers. Numeric text such as
``"12.5"`` or ``" 1e3 "`` goes through parse_number() first, so a string
never slips into arithmetic by accident.
"""

from __future__ import annotations

import math

from pycalcify.core.exceptions import InvalidNumberError


def parse_number(text: str) -> float:
    """
    Parse numeric text into a finite float.

    Raises
    ------
    InvalidNumberError
        If ``text`` is not a string, is not numeric, or denotes NaN/inf.
    """
    if not isinstance(text, str):
        raise InvalidNumberError(
            f"text: expected str, got {type(text).__name__}", value=text
        )
    try:
        value = float(text.strip())
    except ValueError as e:
        raise InvalidNumberError(
            f"Value must be a number or numeric string, got {text!r}", value=text
        ) from e
    if not math.isfinite(value):
        raise InvalidNumberError(
            f"Value must be a finite number, got {text!r}", value=text
        )
    return value
