"""
Immutable polynomial over real coefficients.

Coefficients are stored in ascending power order: ``[1, 2, 3]`` is
``1 + 2x + 3x^2``. Every operation returns a new Polynomial. Trailing zero
coefficients are kept, so ``degree()`` is always ``len(coefficients) - 1``.
"""

from __future__ import annotations

import numbers
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycalcify.core.exceptions import DivisionByZeroError, InvalidArgumentError
from pycalcify.core.validation import check_1d, check_array, check_finite, check_real_number


class Polynomial:
    """
    Polynomial with ascending-power coefficients.

    Parameters
    ----------
    coefficients : array-like
        1D finite numeric sequence; index i holds the coefficient of x^i.
        May be empty (degree -1, evaluates to 0).

    Raises
    ------
    ValidationError
        If coefficients are non-numeric or non-finite.
    DimensionError
        If coefficients are not 1D.
    """

    __slots__ = ('_coefficients',)

    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, coefficients: ArrayLike):
        arr = check_array(coefficients, 'coefficients')
        check_1d(arr, 'coefficients')
        check_finite(arr, 'coefficients')
        arr.setflags(write=False)
        self._coefficients = arr

    @classmethod
    def _wrap(cls, arr: NDArray) -> Polynomial:
        """Build from an array this module produced, skipping validation."""
        poly = cls.__new__(cls)
        arr = np.asarray(arr, dtype=np.float64)
        arr.setflags(write=False)
        poly._coefficients = arr
        return poly

    @staticmethod
    def _coerce(other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            return other
        return Polynomial([check_real_number(other, 'other')])

    # --- Accessors ---

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Copy of the coefficients, ascending powers."""
        return self._coefficients.copy()

    def get_coefficients(self) -> list[float]:
        return self._coefficients.tolist()

    def degree(self) -> int:
        return len(self._coefficients) - 1

    def leading_coefficient(self) -> float:
        """Coefficient of the highest stored power (0.0 when empty)."""
        if len(self._coefficients) == 0:
            return 0.0
        return float(self._coefficients[-1])

    def constant_term(self) -> float:
        if len(self._coefficients) == 0:
            return 0.0
        return float(self._coefficients[0])

    # --- Arithmetic ---

    def _padded(self, other: Polynomial) -> tuple[NDArray, NDArray]:
        n = max(len(self._coefficients), len(other._coefficients))
        a = np.zeros(n)
        b = np.zeros(n)
        a[:len(self._coefficients)] = self._coefficients
        b[:len(other._coefficients)] = other._coefficients
        return a, b

    def add(self, other: Polynomial | float) -> Polynomial:
        """Termwise sum. A real number is treated as a constant polynomial."""
        a, b = self._padded(self._coerce(other))
        return Polynomial._wrap(a + b)

    def subtract(self, other: Polynomial | float) -> Polynomial:
        a, b = self._padded(self._coerce(other))
        return Polynomial._wrap(a - b)

    def multiply(self, other: Polynomial | float) -> Polynomial:
        """Full convolution: ``result[i + j] += a[i] * b[j]``."""
        other = self._coerce(other)
        if len(self._coefficients) == 0 or len(other._coefficients) == 0:
            return Polynomial._wrap(np.zeros(0))
        return Polynomial._wrap(np.convolve(self._coefficients, other._coefficients))

    def divide(self, other: Polynomial | float) -> tuple[Polynomial, Polynomial]:
        """
        Polynomial long division.

        Returns
        -------
        (quotient, remainder)
            ``self == quotient * other + remainder``. The remainder has
            ``len(other) - 1`` coefficients, or equals ``self`` when
            ``self`` is shorter than ``other`` (quotient is then empty).

        Raises
        ------
        InvalidNumberError
            If ``other`` is neither a Polynomial nor a real number.
        InvalidArgumentError
            If ``other`` has no coefficients.
        DivisionByZeroError
            If the leading coefficient of ``other`` is zero.
        """
        divisor = self._coerce(other)._coefficients
        m = len(divisor)
        if m == 0:
            raise InvalidArgumentError("other: cannot divide by an empty polynomial")
        if divisor[-1] == 0:
            raise DivisionByZeroError(
                "other: leading coefficient is zero, long division is undefined"
            )

        remainder = self._coefficients.copy()
        quotient = np.zeros(max(len(remainder) - m + 1, 0))

        while len(remainder) >= m:
            lead = remainder[-1] / divisor[-1]
            shift = len(remainder) - m
            quotient[shift] = lead
            remainder[shift:shift + m] -= lead * divisor
            remainder = remainder[:-1]

        return Polynomial._wrap(quotient), Polynomial._wrap(remainder)

    def add_constant(self, constant: float) -> Polynomial:
        c = check_real_number(constant, 'constant')
        result = self._coefficients.copy() if len(self._coefficients) else np.zeros(1)
        result[0] += c
        return Polynomial._wrap(result)

    def subtract_constant(self, constant: float) -> Polynomial:
        return self.add_constant(-check_real_number(constant, 'constant'))

    def multiply_by_constant(self, constant: float) -> Polynomial:
        return Polynomial._wrap(self._coefficients * check_real_number(constant, 'constant'))

    def divide_by_constant(self, constant: float) -> Polynomial:
        c = check_real_number(constant, 'constant')
        if c == 0:
            raise DivisionByZeroError("constant: division by zero")
        return Polynomial._wrap(self._coefficients / c)

    # --- Calculus ---

    def evaluate(self, x: float) -> float:
        """Value at ``x`` (Horner's scheme)."""
        x = check_real_number(x, 'x')
        result = 0.0
        for c in self._coefficients[::-1]:
            result = result * x + c
        return float(result)

    def derivative(self) -> Polynomial:
        """Power rule per term. Constants (and the empty polynomial) give ``[0]``."""
        n = len(self._coefficients)
        if n <= 1:
            return Polynomial._wrap(np.zeros(1))
        return Polynomial._wrap(self._coefficients[1:] * np.arange(1, n))

    def integral(self, constant: float = 0.0) -> Polynomial:
        """Antiderivative ``[constant, a0/1, a1/2, ...]``."""
        c = check_real_number(constant, 'constant')
        n = len(self._coefficients)
        terms = self._coefficients / np.arange(1, n + 1)
        return Polynomial._wrap(np.concatenate(([c], terms)))

    def find_roots(self) -> tuple[float, ...]:
        """
        Real roots of a quadratic by the quadratic formula.

        Returns
        -------
        tuple of float
            ``((-b + sqrt(D)) / 2a, (-b - sqrt(D)) / 2a)``, or ``()`` when
            the discriminant is negative (complex roots are not modelled).

        Raises
        ------
        InvalidArgumentError
            If the degree is not 2 or the x^2 coefficient is zero.
        """
        if self.degree() != 2:
            raise InvalidArgumentError(
                f"find_roots only supports quadratic polynomials, got degree {self.degree()}"
            )
        c, b, a = (float(v) for v in self._coefficients)
        if a == 0:
            raise InvalidArgumentError("x^2 coefficient is zero, polynomial is not quadratic")

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return ()
        sqrt_d = float(np.sqrt(discriminant))
        return ((-b + sqrt_d) / (2 * a), (-b - sqrt_d) / (2 * a))

    # --- Predicates ---

    def is_zero(self) -> bool:
        return bool(np.all(self._coefficients == 0))

    def is_constant(self) -> bool:
        return len(self._coefficients) == 1

    def is_linear(self) -> bool:
        return len(self._coefficients) == 2

    def is_quadratic(self) -> bool:
        return len(self._coefficients) == 3

    # --- Python protocol ---

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def __len__(self) -> int:
        return len(self._coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coefficients, other._coefficients)

    __hash__ = None

    def __add__(self, other: Any) -> Polynomial:
        if not isinstance(other, (Polynomial, numbers.Real)):
            return NotImplemented
        return self.add(self._coerce(other))

    __radd__ = __add__

    def __sub__(self, other: Any) -> Polynomial:
        if not isinstance(other, (Polynomial, numbers.Real)):
            return NotImplemented
        return self.subtract(self._coerce(other))

    def __rsub__(self, other: Any) -> Polynomial:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self._coerce(other).subtract(self)

    def __mul__(self, other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.multiply_by_constant(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Polynomial:
        return Polynomial._wrap(-self._coefficients)

    def __divmod__(self, other: Any) -> tuple[Polynomial, Polynomial]:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other)

    def __str__(self) -> str:
        terms = [
            f"{np.format_float_positional(c, trim='-')}x^{power}"
            for power, c in enumerate(self._coefficients)
        ]
        return ' + '.join(terms)

    def __repr__(self) -> str:
        return f"Polynomial({self.get_coefficients()!r})"
