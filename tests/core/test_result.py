"""
Tests for the Result[P] envelope and the Timer utility.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pycalcify.core.compute.timing import Timer
from pycalcify.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_DECOMPOSITION,
    CPU_FP64_ILL_CONDITIONED,
    rank_tolerance,
    select_tolerance,
)
from pycalcify.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"n": 3},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["n"] == 3
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("constant data: skewness undefined",),
        )
        assert result.has_warning("constant data")
        assert not result.has_warning("overflow")


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "a"}
        assert result["total_seconds"] >= 0.0

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_no_sections(self):
        timer = Timer()
        timer.start()
        timer.stop()
        assert list(timer.result()) == ["total_seconds"]


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:

    def test_select_direct(self):
        assert select_tolerance("add") is CPU_FP64

    def test_select_decomposition(self):
        assert select_tolerance("lu") is CPU_FP64_DECOMPOSITION

    def test_select_ill_conditioned(self):
        assert select_tolerance("lu", is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_rank_tolerance_scales(self):
        assert rank_tolerance((3, 3), 0.0) == 0.0
        assert rank_tolerance((4, 2), 10.0) == pytest.approx(4 * 10.0 * 2.220446049250313e-16)
