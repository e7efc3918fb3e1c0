"""
Fluent arithmetic accumulator.

An Arithmetic instance owns a single float register. Every operation
updates the register and returns the same instance, so calls chain:

    >>> Arithmetic(10).add(5).subtract(3).multiply(2).divide(4).get_result()
    6.0

Rounding is applied only when the result is read (get_result(),
get_formatted_result(), str(), calling the instance); the register itself
keeps full precision.

Transcendental operations follow IEEE-754: a value outside a function's
domain (log of a negative number, arcsine of 2, cotangent of 0) yields
NaN or an infinity rather than an exception. Division, modulo and root by
an exact zero raise DivisionByZeroError before the register is touched.
"""

from __future__ import annotations

import dataclasses
from typing import Callable

import numpy as np

from pycalcify.arithmetic.parsing import parse_number
from pycalcify.arithmetic.rounding import RoundingConfig
from pycalcify.core.constants import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_INITIAL_VALUE,
    DEFAULT_ROUNDED,
    DEFAULT_ROUNDING_MODE,
    FACTORIAL_OVERFLOW_AT,
    FORMAT_FLOAT,
    FORMAT_INT,
    FORMAT_STRING,
    PERCENTAGE_DIVISOR,
    RESULT_FORMATS,
)
from pycalcify.core.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
    NumericalError,
)
from pycalcify.core.validation import check_real_number


class Arithmetic:
    """
    Mutable single-value calculator with chainable operations.

    Parameters
    ----------
    initial_value : float
        Starting register value.
    is_rounded : bool
        Round results to an integer using ``rounding_mode``.
    rounding_mode : str
        'ceil', 'floor' or 'round'.
    decimal_places : int
        Digits kept when ``is_rounded`` is False.

    Raises
    ------
    InvalidNumberError
        If ``initial_value`` is not a real number.
    InvalidRoundingModeError, InvalidArgumentError
        If the rounding configuration is invalid.
    """

    def __init__(
        self,
        initial_value: float = DEFAULT_INITIAL_VALUE,
        is_rounded: bool = DEFAULT_ROUNDED,
        rounding_mode: str = DEFAULT_ROUNDING_MODE,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
    ):
        self._rounding = RoundingConfig(
            enabled=bool(is_rounded),
            mode=rounding_mode,
            decimal_places=decimal_places,
        )
        self._result = check_real_number(initial_value, 'initial_value')

    @classmethod
    def create(
        cls,
        initial_value: float = DEFAULT_INITIAL_VALUE,
        is_rounded: bool = DEFAULT_ROUNDED,
        rounding_mode: str = DEFAULT_ROUNDING_MODE,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
    ) -> Arithmetic:
        """Alternative constructor, convenient at the start of a chain."""
        return cls(initial_value, is_rounded, rounding_mode, decimal_places)

    @classmethod
    def from_text(
        cls,
        text: str,
        is_rounded: bool = DEFAULT_ROUNDED,
        rounding_mode: str = DEFAULT_ROUNDING_MODE,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
    ) -> Arithmetic:
        """Start from numeric text such as ``"12.5"``."""
        return cls(parse_number(text), is_rounded, rounding_mode, decimal_places)

    # --- Internals ---

    def _update(self, value) -> Arithmetic:
        self._result = float(value)
        return self

    def _unary(self, func: Callable[[np.float64], np.float64]) -> Arithmetic:
        with np.errstate(all='ignore'):
            return self._update(func(np.float64(self._result)))

    @staticmethod
    def _nonzero(value, name: str) -> float:
        v = check_real_number(value, name)
        if v == 0:
            raise DivisionByZeroError(f"{name}: division by zero")
        return v

    # --- Configuration ---

    @property
    def rounding(self) -> RoundingConfig:
        """Current rounding configuration."""
        return self._rounding

    @property
    def raw_result(self) -> float:
        """Register value without rounding."""
        return self._result

    def enable_rounding(self, rounding_mode: str) -> Arithmetic:
        """Round results to an integer with ``rounding_mode``."""
        self._rounding = dataclasses.replace(
            self._rounding, enabled=True, mode=rounding_mode
        )
        return self

    def disable_rounding(self, decimal_places: int) -> Arithmetic:
        """Round results to ``decimal_places`` digits instead."""
        self._rounding = dataclasses.replace(
            self._rounding, enabled=False, decimal_places=decimal_places
        )
        return self

    # --- Basic arithmetic ---

    def add(self, value: float) -> Arithmetic:
        return self._update(self._result + check_real_number(value, 'value'))

    def subtract(self, value: float) -> Arithmetic:
        return self._update(self._result - check_real_number(value, 'value'))

    def multiply(self, value: float) -> Arithmetic:
        v = check_real_number(value, 'value')
        with np.errstate(all='ignore'):
            return self._update(np.float64(self._result) * v)

    def divide(self, value: float) -> Arithmetic:
        """
        Divide the register by ``value``.

        Raises
        ------
        DivisionByZeroError
            If ``value`` is zero; the register is left unchanged.
        """
        v = self._nonzero(value, 'value')
        with np.errstate(all='ignore'):
            return self._update(np.float64(self._result) / v)

    def modulo(self, value: float) -> Arithmetic:
        """Floating remainder, sign follows the register (C fmod)."""
        v = self._nonzero(value, 'value')
        with np.errstate(all='ignore'):
            return self._update(np.fmod(self._result, v))

    def power(self, value: float) -> Arithmetic:
        v = check_real_number(value, 'value')
        with np.errstate(all='ignore'):
            return self._update(np.power(np.float64(self._result), v))

    def root(self, value: float) -> Arithmetic:
        """``value``-th root, computed as ``result ** (1 / value)``."""
        v = self._nonzero(value, 'value')
        with np.errstate(all='ignore'):
            return self._update(np.power(np.float64(self._result), 1.0 / v))

    # --- Logarithms and exponential ---

    def logarithm(self, base: float) -> Arithmetic:
        b = check_real_number(base, 'base')
        return self._unary(lambda x: np.log(x) / np.log(b))

    def natural_logarithm(self) -> Arithmetic:
        return self._unary(np.log)

    def common_logarithm(self) -> Arithmetic:
        return self._unary(np.log10)

    def exponential(self) -> Arithmetic:
        return self._unary(np.exp)

    # --- Trigonometric ---

    def sine(self) -> Arithmetic:
        return self._unary(np.sin)

    def cosine(self) -> Arithmetic:
        return self._unary(np.cos)

    def tangent(self) -> Arithmetic:
        return self._unary(np.tan)

    def cotangent(self) -> Arithmetic:
        return self._unary(lambda x: 1.0 / np.tan(x))

    def secant(self) -> Arithmetic:
        return self._unary(lambda x: 1.0 / np.cos(x))

    def cosecant(self) -> Arithmetic:
        return self._unary(lambda x: 1.0 / np.sin(x))

    def arcsine(self) -> Arithmetic:
        return self._unary(np.arcsin)

    def arccosine(self) -> Arithmetic:
        return self._unary(np.arccos)

    def arctangent(self) -> Arithmetic:
        return self._unary(np.arctan)

    def arccotangent(self) -> Arithmetic:
        return self._unary(lambda x: np.pi / 2 - np.arctan(x))

    def arcsecant(self) -> Arithmetic:
        return self._unary(lambda x: np.arccos(1.0 / x))

    def arccosecant(self) -> Arithmetic:
        return self._unary(lambda x: np.arcsin(1.0 / x))

    # --- Hyperbolic ---

    def hyperbolic_sine(self) -> Arithmetic:
        return self._unary(np.sinh)

    def hyperbolic_cosine(self) -> Arithmetic:
        return self._unary(np.cosh)

    def hyperbolic_tangent(self) -> Arithmetic:
        return self._unary(np.tanh)

    def hyperbolic_cotangent(self) -> Arithmetic:
        return self._unary(lambda x: 1.0 / np.tanh(x))

    def hyperbolic_secant(self) -> Arithmetic:
        return self._unary(lambda x: 1.0 / np.cosh(x))

    def hyperbolic_cosecant(self) -> Arithmetic:
        return self._unary(lambda x: 1.0 / np.sinh(x))

    def inverse_hyperbolic_sine(self) -> Arithmetic:
        return self._unary(np.arcsinh)

    def inverse_hyperbolic_cosine(self) -> Arithmetic:
        return self._unary(np.arccosh)

    def inverse_hyperbolic_tangent(self) -> Arithmetic:
        return self._unary(np.arctanh)

    def inverse_hyperbolic_cotangent(self) -> Arithmetic:
        return self._unary(lambda x: np.arctanh(1.0 / x))

    def inverse_hyperbolic_secant(self) -> Arithmetic:
        return self._unary(lambda x: np.arccosh(1.0 / x))

    def inverse_hyperbolic_cosecant(self) -> Arithmetic:
        return self._unary(lambda x: np.arcsinh(1.0 / x))

    # --- Miscellaneous ---

    def factorial(self) -> Arithmetic:
        """
        Product ``1 * 2 * ... * floor(result)``; 0 and values below 1 give 1.

        The float product is accumulated left to right, one factor at a
        time, so the last bit matches a plain multiplication loop. Overflows
        to inf past 170!.

        Raises
        ------
        InvalidArgumentError
            If the register is negative or NaN.
        """
        if np.isnan(self._result) or self._result < 0:
            raise InvalidArgumentError(
                f"Factorial is not defined for {self._result!r}"
            )
        if self._result >= FACTORIAL_OVERFLOW_AT:
            return self._update(np.inf)

        n = int(self._result)
        if n < 2:
            return self._update(1.0)
        return self._update(np.cumprod(np.arange(1.0, n + 1.0))[-1])

    def absolute(self) -> Arithmetic:
        return self._update(abs(self._result))

    def maximum(self, value: float) -> Arithmetic:
        return self._update(max(self._result, check_real_number(value, 'value')))

    def minimum(self, value: float) -> Arithmetic:
        return self._update(min(self._result, check_real_number(value, 'value')))

    # --- Percentages ---

    def percentage(self, percent: float) -> Arithmetic:
        """Replace the register with ``percent`` % of itself."""
        p = check_real_number(percent, 'percent')
        return self._update(self._result * p / PERCENTAGE_DIVISOR)

    def add_percentage(self, percent: float) -> Arithmetic:
        p = check_real_number(percent, 'percent')
        return self._update(self._result + self._result * p / PERCENTAGE_DIVISOR)

    def subtract_percentage(self, percent: float) -> Arithmetic:
        p = check_real_number(percent, 'percent')
        return self._update(self._result - self._result * p / PERCENTAGE_DIVISOR)

    def discount(self, percent: float) -> Arithmetic:
        return self.subtract_percentage(percent)

    def increase_by_percentage(self, percent: float) -> Arithmetic:
        return self.add_percentage(percent)

    def decrease_by_percentage(self, percent: float) -> Arithmetic:
        return self.subtract_percentage(percent)

    # --- Results ---

    def reset(self, value: float = DEFAULT_INITIAL_VALUE) -> Arithmetic:
        return self._update(check_real_number(value, 'value'))

    def get_result(self) -> float:
        """Register value with the rounding configuration applied."""
        return float(self._rounding.apply(self._result))

    def get_formatted_result(self, fmt: str = FORMAT_INT) -> int | float | str:
        """
        Rounded result as ``'int'``, ``'float'`` or ``'string'``.

        Strings use the shortest positional form: ``'6'``, ``'3.33'``.

        Raises
        ------
        InvalidArgumentError
            If ``fmt`` is unknown.
        NumericalError
            If an integer is requested for a NaN or infinite result.
        """
        if fmt not in RESULT_FORMATS:
            raise InvalidArgumentError(
                f"fmt: must be one of {', '.join(repr(f) for f in RESULT_FORMATS)}, got {fmt!r}"
            )
        result = self.get_result()
        if fmt == FORMAT_FLOAT:
            return result
        if fmt == FORMAT_STRING:
            return np.format_float_positional(result, trim='-')
        if not np.isfinite(result):
            raise NumericalError(f"Cannot convert {result!r} to int")
        return int(result)

    def __call__(self) -> float:
        return self.get_result()

    def __float__(self) -> float:
        return self.get_result()

    def __str__(self) -> str:
        return self.get_formatted_result(FORMAT_STRING)

    def __repr__(self) -> str:
        r = self._rounding
        if r.enabled:
            rounding = f"mode={r.mode!r}"
        else:
            rounding = f"decimal_places={r.decimal_places}"
        return f"Arithmetic(result={self._result!r}, {rounding})"


def calcify() -> Arithmetic:
    """Fresh accumulator with the default configuration."""
    return Arithmetic()
