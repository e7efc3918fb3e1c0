"""
Tests for the fluent Arithmetic accumulator.
"""

import math

import numpy as np
import pytest

from pycalcify import calcify
from pycalcify.arithmetic import Arithmetic, RoundingConfig
from pycalcify.core.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidNumberError,
    InvalidRoundingModeError,
    NumericalError,
)


def raw(calc: Arithmetic) -> float:
    return calc.raw_result


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_defaults(self):
        calc = Arithmetic()
        assert calc.get_result() == 0.0
        assert calc.rounding == RoundingConfig()

    def test_factory_returns_fresh_instances(self):
        a = calcify()
        b = calcify()
        assert a is not b
        a.add(5)
        assert b.get_result() == 0.0

    def test_create(self):
        assert Arithmetic.create(3).get_result() == 3.0

    def test_from_text(self):
        assert Arithmetic.from_text(" 12.5 ").get_result() == 12.5

    def test_from_text_invalid(self):
        with pytest.raises(InvalidNumberError):
            Arithmetic.from_text("twelve")

    def test_text_initial_value_rejected(self):
        with pytest.raises(InvalidNumberError):
            Arithmetic("10")

    def test_invalid_rounding_mode(self):
        with pytest.raises(InvalidRoundingModeError):
            Arithmetic(1, is_rounded=True, rounding_mode="up")

    def test_negative_decimal_places(self):
        with pytest.raises(InvalidArgumentError):
            Arithmetic(1, decimal_places=-1)


# ═══════════════════════════════════════════════════════════════════════
# Chaining and basic arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestBasicArithmetic:

    def test_chain(self):
        result = Arithmetic(10).add(5).subtract(3).multiply(2).divide(4).get_result()
        assert result == 6.0

    def test_methods_return_same_instance(self):
        calc = Arithmetic(1)
        assert calc.add(1) is calc
        assert calc.sine() is calc
        assert calc.reset() is calc

    def test_numpy_scalars_accepted(self):
        assert Arithmetic(1).add(np.float64(2.5)).add(np.int64(1)).get_result() == 4.5

    @pytest.mark.parametrize("method", [
        "add", "subtract", "multiply", "divide", "modulo", "power", "root",
        "maximum", "minimum", "percentage", "add_percentage", "reset",
    ])
    @pytest.mark.parametrize("bad", ["5", None, [1], True])
    def test_non_numeric_rejected(self, method, bad):
        calc = Arithmetic(7)
        with pytest.raises(InvalidNumberError):
            getattr(calc, method)(bad)
        assert raw(calc) == 7.0

    def test_divide_by_zero_leaves_register(self):
        calc = Arithmetic(10).add(2)
        with pytest.raises(DivisionByZeroError):
            calc.divide(0)
        assert raw(calc) == 12.0

    def test_divide_by_negative_zero(self):
        calc = Arithmetic(10)
        with pytest.raises(DivisionByZeroError):
            calc.divide(-0.0)
        assert raw(calc) == 10.0

    def test_modulo(self):
        assert Arithmetic(10).modulo(3).get_result() == 1.0
        assert Arithmetic(-10).modulo(3).get_result() == -1.0
        assert Arithmetic(5.5).modulo(2).get_result() == 1.5

    def test_modulo_by_zero(self):
        calc = Arithmetic(10)
        with pytest.raises(DivisionByZeroError):
            calc.modulo(0)
        assert raw(calc) == 10.0

    def test_power_and_root(self):
        assert Arithmetic(2).power(10).get_result() == 1024.0
        assert Arithmetic(27).root(3).get_result() == 3.0

    def test_root_of_zero_degree(self):
        with pytest.raises(DivisionByZeroError):
            Arithmetic(4).root(0)

    def test_negative_base_fractional_power_is_nan(self):
        assert math.isnan(raw(Arithmetic(-8).power(0.5)))

    def test_maximum_minimum(self):
        assert Arithmetic(3).maximum(7).get_result() == 7.0
        assert Arithmetic(3).minimum(7).get_result() == 3.0

    def test_absolute(self):
        assert Arithmetic(-4.5).absolute().get_result() == 4.5

    def test_reset_default(self):
        assert Arithmetic(9).reset().get_result() == 0.0
        assert Arithmetic(9).reset(2).get_result() == 2.0


# ═══════════════════════════════════════════════════════════════════════
# Transcendental functions
# ═══════════════════════════════════════════════════════════════════════


class TestTranscendental:

    def test_logarithms(self):
        assert raw(Arithmetic(8).logarithm(2)) == pytest.approx(3.0)
        assert raw(Arithmetic(math.e).natural_logarithm()) == pytest.approx(1.0)
        assert raw(Arithmetic(1000).common_logarithm()) == pytest.approx(3.0)
        assert raw(Arithmetic(1).exponential()) == pytest.approx(math.e)

    def test_log_of_negative_is_nan(self):
        assert math.isnan(raw(Arithmetic(-1).natural_logarithm()))

    @pytest.mark.parametrize("method, x, expected", [
        ("sine", math.pi / 2, 1.0),
        ("cosine", 0.0, 1.0),
        ("tangent", math.pi / 4, 1.0),
        ("cotangent", math.pi / 4, 1.0),
        ("secant", 0.0, 1.0),
        ("cosecant", math.pi / 2, 1.0),
        ("arcsine", 1.0, math.pi / 2),
        ("arccosine", 1.0, 0.0),
        ("arctangent", 1.0, math.pi / 4),
        ("arccotangent", 1.0, math.pi / 4),
        ("arcsecant", 1.0, 0.0),
        ("arccosecant", 1.0, math.pi / 2),
        ("hyperbolic_sine", 1.0, math.sinh(1.0)),
        ("hyperbolic_cosine", 1.0, math.cosh(1.0)),
        ("hyperbolic_tangent", 1.0, math.tanh(1.0)),
        ("hyperbolic_cotangent", 1.0, 1 / math.tanh(1.0)),
        ("hyperbolic_secant", 1.0, 1 / math.cosh(1.0)),
        ("hyperbolic_cosecant", 1.0, 1 / math.sinh(1.0)),
        ("inverse_hyperbolic_sine", 1.0, math.asinh(1.0)),
        ("inverse_hyperbolic_cosine", 2.0, math.acosh(2.0)),
        ("inverse_hyperbolic_tangent", 0.5, math.atanh(0.5)),
        ("inverse_hyperbolic_cotangent", 2.0, math.atanh(0.5)),
        ("inverse_hyperbolic_secant", 0.5, math.acosh(2.0)),
        ("inverse_hyperbolic_cosecant", 0.5, math.asinh(2.0)),
    ])
    def test_values(self, method, x, expected):
        calc = Arithmetic(x)
        assert getattr(calc, method)() is calc
        assert raw(calc) == pytest.approx(expected, abs=1e-12)

    def test_cotangent_of_zero_is_infinite(self):
        assert math.isinf(raw(Arithmetic(0).cotangent()))

    def test_arcsine_out_of_domain_is_nan(self):
        assert math.isnan(raw(Arithmetic(2).arcsine()))


# ═══════════════════════════════════════════════════════════════════════
# Factorial and percentages
# ═══════════════════════════════════════════════════════════════════════


class TestFactorial:

    @pytest.mark.parametrize("x, expected", [(0, 1), (1, 1), (5, 120), (5.9, 120), (10, 3628800)])
    def test_values(self, x, expected):
        assert Arithmetic(x).factorial().get_result() == expected

    def test_fraction_below_one(self):
        assert Arithmetic(0.5).factorial().get_result() == 1.0

    def test_negative_raises(self):
        calc = Arithmetic(-3)
        with pytest.raises(InvalidArgumentError, match="not defined"):
            calc.factorial()
        assert raw(calc) == -3.0

    @pytest.mark.parametrize("n", [25, 50, 100, 170])
    def test_matches_sequential_product(self, n):
        expected = 1.0
        for k in range(1, n + 1):
            expected *= k
        assert raw(Arithmetic(n).factorial()) == expected

    def test_25_last_bit(self):
        assert raw(Arithmetic(25).factorial()) == 1.5511210043330986e+25

    def test_formatted_int_uses_sequential_product(self):
        expected = 1.0
        for k in range(1, 26):
            expected *= k
        assert Arithmetic(25).factorial().get_formatted_result("int") == int(expected)

    @pytest.mark.parametrize("x", [171, 200, float("inf")])
    def test_overflow_is_inf(self, x):
        assert raw(Arithmetic(x).factorial()) == float("inf")


class TestPercentages:

    def test_percentage(self):
        assert Arithmetic(200).percentage(15).get_result() == 30.0

    def test_add_subtract(self):
        assert Arithmetic(200).add_percentage(10).get_result() == 220.0
        assert Arithmetic(200).subtract_percentage(10).get_result() == 180.0

    def test_aliases(self):
        assert Arithmetic(80).discount(25).get_result() == 60.0
        assert Arithmetic(80).increase_by_percentage(25).get_result() == 100.0
        assert Arithmetic(80).decrease_by_percentage(25).get_result() == 60.0


# ═══════════════════════════════════════════════════════════════════════
# Reading results
# ═══════════════════════════════════════════════════════════════════════


class TestResults:

    def test_default_two_decimals(self):
        assert Arithmetic(10).divide(3).get_result() == 3.33

    def test_register_keeps_full_precision(self):
        calc = Arithmetic(10).divide(3)
        assert raw(calc) == pytest.approx(10 / 3)
        assert calc.multiply(3).get_result() == 10.0

    @pytest.mark.parametrize("mode, expected", [("ceil", 4.0), ("floor", 3.0), ("round", 4.0)])
    def test_rounding_modes(self, mode, expected):
        calc = Arithmetic(3.5, is_rounded=True, rounding_mode=mode)
        assert calc.get_result() == expected

    def test_enable_rounding_ignores_decimal_places(self):
        calc = Arithmetic(2.71828).enable_rounding("floor")
        assert calc.get_result() == 2.0
        assert calc.rounding.decimal_places == 2

    def test_enable_invalid_mode(self):
        calc = Arithmetic(1)
        with pytest.raises(InvalidRoundingModeError):
            calc.enable_rounding("sideways")
        assert calc.rounding.enabled is False

    def test_disable_rounding(self):
        calc = Arithmetic(2.71828, is_rounded=True).disable_rounding(3)
        assert calc.get_result() == 2.718

    def test_disable_rounding_negative(self):
        with pytest.raises(InvalidArgumentError):
            Arithmetic(1).disable_rounding(-2)

    def test_formatted_int(self):
        result = Arithmetic(10).divide(4).get_formatted_result()
        assert result == 2
        assert isinstance(result, int)

    def test_formatted_string(self):
        assert Arithmetic(6).get_formatted_result("string") == "6"
        assert Arithmetic(10).divide(3).get_formatted_result("string") == "3.33"

    def test_formatted_float(self):
        assert Arithmetic(1.005).get_formatted_result("float") == 1.01

    def test_formatted_unknown(self):
        with pytest.raises(InvalidArgumentError):
            Arithmetic(1).get_formatted_result("hex")

    def test_formatted_int_of_nan(self):
        with pytest.raises(NumericalError):
            Arithmetic(-1).natural_logarithm().get_formatted_result("int")

    def test_str_call_float(self):
        calc = Arithmetic(10).divide(4)
        assert str(calc) == "2.5"
        assert calc() == 2.5
        assert float(calc) == 2.5

    def test_repr(self):
        assert repr(Arithmetic(1.5)) == "Arithmetic(result=1.5, decimal_places=2)"
        assert "mode='ceil'" in repr(Arithmetic(1.5, is_rounded=True, rounding_mode="ceil"))
