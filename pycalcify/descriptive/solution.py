"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper returned
by describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycalcify.core.result import Result


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    Statistics that are undefined for the given sample (sample variance
    for N = 1, skewness/kurtosis for constant data) are None.
    """
    n: int
    mean: float
    median: float
    mode: NDArray[np.floating[Any]]
    minimum: float
    q1: float
    q3: float
    maximum: float
    value_range: float
    interquartile_range: float
    variance: float
    standard_deviation: float
    mean_absolute_deviation: float
    sample_variance: float | None = None
    sample_standard_deviation: float | None = None
    skewness: float | None = None
    kurtosis: float | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> NDArray[np.floating[Any]]:
        return self._result.params.mode

    @property
    def variance(self) -> float:
        """Population variance (N)."""
        return self._result.params.variance

    @property
    def standard_deviation(self) -> float:
        """Population standard deviation (N)."""
        return self._result.params.standard_deviation

    @property
    def sample_variance(self) -> float | None:
        """Bessel-corrected variance (N-1), None for a single observation."""
        return self._result.params.sample_variance

    @property
    def sample_standard_deviation(self) -> float | None:
        return self._result.params.sample_standard_deviation

    @property
    def skewness(self) -> float | None:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis, None for constant data."""
        return self._result.params.kurtosis

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Aligned two-column text table of every statistic."""
        p = self._result.params
        rows: list[tuple[str, str]] = [("N", str(p.n))]

        def fmt(v: float | None) -> str:
            return "NA" if v is None else f"{v:.6f}"

        rows += [
            ("Min.", fmt(p.minimum)),
            ("1st Qu.", fmt(p.q1)),
            ("Median", fmt(p.median)),
            ("Mean", fmt(p.mean)),
            ("3rd Qu.", fmt(p.q3)),
            ("Max.", fmt(p.maximum)),
            ("Range", fmt(p.value_range)),
            ("IQR", fmt(p.interquartile_range)),
            ("Var (pop.)", fmt(p.variance)),
            ("SD (pop.)", fmt(p.standard_deviation)),
            ("Var (sample)", fmt(p.sample_variance)),
            ("SD (sample)", fmt(p.sample_standard_deviation)),
            ("MAD (mean)", fmt(p.mean_absolute_deviation)),
            ("Skewness", fmt(p.skewness)),
            ("Ex. kurtosis", fmt(p.kurtosis)),
            ("Mode", ", ".join(f"{v:g}" for v in p.mode)),
        ]

        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)
        lines = [
            label.ljust(label_width) + "  " + value.rjust(value_width)
            for label, value in rows
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return f"DescriptiveSolution(n={p.n}, mean={p.mean:.6g}, sd={p.standard_deviation:.6g})"
