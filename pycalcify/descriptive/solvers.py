"""
Descriptive statistics over 1D samples.

Every function takes an array-like of finite numbers, never mutates it,
and returns a float (mode() returns an array). Variance, standard
deviation, covariance, skewness and kurtosis are population statistics
(divide by N); the sample_* variants apply Bessel's correction (N - 1).

Failure modes:
    EmptyInputError      no observations
    DimensionError       paired inputs of unequal length, or non-1D input
    DivisionByZeroError  a statistic divides by a zero spread or mean
                         (e.g. skewness of constant data)
    ValidationError      NaN/Inf in the data, or N < 2 for sample_*
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycalcify.core.compute.timing import Timer
from pycalcify.core.exceptions import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidArgumentError,
)
from pycalcify.core.result import Result
from pycalcify.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_not_empty,
    check_real_number,
)
from pycalcify.descriptive.solution import DescriptiveParams, DescriptiveSolution


def _as_sample(x: ArrayLike, name: str = 'x') -> NDArray[np.floating[Any]]:
    """Validate a 1D, finite, non-empty sample."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_not_empty(arr, name)
    check_finite(arr, name)
    return arr


def _as_pair(
    x: ArrayLike, y: ArrayLike, names: tuple[str, str] = ('x', 'y')
) -> tuple[NDArray, NDArray]:
    a = _as_sample(x, names[0])
    b = _as_sample(y, names[1])
    check_consistent_length(a, b, names=names)
    return a, b


def _sum_sq_dev(arr: NDArray) -> float:
    d = arr - np.mean(arr)
    return float(np.sum(d * d))


def _nonzero_sd(arr: NDArray, statistic: str) -> tuple[float, float]:
    """Population mean and sd, refusing zero spread."""
    m = float(np.mean(arr))
    sd = math.sqrt(_sum_sq_dev(arr) / len(arr))
    if sd == 0:
        raise DivisionByZeroError(
            f"{statistic}: standard deviation is zero (constant data)"
        )
    return m, sd


def linear_percentile(sorted_x: NDArray, p: float) -> float:
    """
    Percentile of pre-sorted data by linear interpolation.

    The rank ``h = p/100 * (n - 1)`` is split into floor and ceiling
    positions and the two order statistics are blended by the fractional
    part. Same as R quantile type 7.
    """
    index = p / 100.0 * (len(sorted_x) - 1)
    lo = math.floor(index)
    hi = math.ceil(index)
    if lo == hi:
        return float(sorted_x[lo])
    return float(sorted_x[lo] * (hi - index) + sorted_x[hi] * (index - lo))


# --- Location ---

def mean(x: ArrayLike) -> float:
    """Arithmetic mean."""
    return float(np.mean(_as_sample(x)))


def median(x: ArrayLike) -> float:
    """Middle value; for even N the average of the two middle values."""
    arr = np.sort(_as_sample(x))
    n = len(arr)
    middle = (n - 1) // 2
    if n % 2:
        return float(arr[middle])
    return float((arr[middle] + arr[middle + 1]) / 2.0)


def mode(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Most frequent value(s).

    Returns
    -------
    NDArray
        Every value sharing the maximum frequency, ascending.
    """
    values, counts = np.unique(_as_sample(x), return_counts=True)
    return values[counts == counts.max()]


def weighted_mean(x: ArrayLike, weights: ArrayLike) -> float:
    """
    ``sum(x * w) / sum(w)``.

    Raises
    ------
    DimensionError
        If ``x`` and ``weights`` differ in length.
    EmptyInputError
        If the inputs are empty or the weights sum to zero.
    """
    arr, w = _as_pair(x, weights, ('x', 'weights'))
    total = float(np.sum(w))
    if total == 0:
        raise EmptyInputError("weights: sum to zero, no mass to average over", name='weights')
    return float(np.sum(arr * w) / total)


def geometric_mean(x: ArrayLike) -> float:
    """
    N-th root of the product, computed in log space.

    Any zero gives 0.0. Negative values raise InvalidArgumentError.
    """
    arr = _as_sample(x)
    if np.any(arr < 0):
        raise InvalidArgumentError("x: geometric mean requires non-negative values")
    if np.any(arr == 0):
        return 0.0
    return float(np.exp(np.mean(np.log(arr))))


def harmonic_mean(x: ArrayLike) -> float:
    """``N / sum(1 / x)``."""
    arr = _as_sample(x)
    if np.any(arr == 0):
        raise DivisionByZeroError("x: harmonic mean is undefined with a zero value")
    reciprocal_sum = float(np.sum(1.0 / arr))
    if reciprocal_sum == 0:
        raise DivisionByZeroError("x: reciprocals sum to zero")
    return len(arr) / reciprocal_sum


# --- Spread ---

def value_range(x: ArrayLike) -> float:
    """``max - min``."""
    arr = _as_sample(x)
    return float(np.max(arr) - np.min(arr))


def variance(x: ArrayLike) -> float:
    """Population variance (divides by N)."""
    arr = _as_sample(x)
    return _sum_sq_dev(arr) / len(arr)


def standard_deviation(x: ArrayLike) -> float:
    """Population standard deviation."""
    return math.sqrt(variance(x))


def sample_variance(x: ArrayLike) -> float:
    """
    Sample variance (divides by N - 1).

    Raises
    ------
    ValidationError
        If fewer than 2 observations are given; N = 1 would divide by zero.
    """
    arr = _as_sample(x)
    check_min_samples(arr, 2, 'x')
    return _sum_sq_dev(arr) / (len(arr) - 1)


def sample_standard_deviation(x: ArrayLike) -> float:
    return math.sqrt(sample_variance(x))


def mean_absolute_deviation(x: ArrayLike) -> float:
    """Mean of ``|x - mean(x)|``."""
    arr = _as_sample(x)
    return float(np.mean(np.abs(arr - np.mean(arr))))


def coefficient_of_variation(x: ArrayLike) -> float:
    """Population standard deviation divided by the mean."""
    arr = _as_sample(x)
    m = float(np.mean(arr))
    if m == 0:
        raise DivisionByZeroError("x: coefficient of variation is undefined for zero mean")
    return math.sqrt(_sum_sq_dev(arr) / len(arr)) / m


def percentile(x: ArrayLike, p: float) -> float:
    """
    ``p``-th percentile (0-100) with linear interpolation.

    Raises
    ------
    InvalidArgumentError
        If ``p`` is outside [0, 100].
    """
    arr = _as_sample(x)
    p = check_real_number(p, 'p')
    if not 0 <= p <= 100:
        raise InvalidArgumentError(f"p: must be within [0, 100], got {p}")
    return linear_percentile(np.sort(arr), p)


def interquartile_range(x: ArrayLike) -> float:
    """75th minus 25th percentile."""
    arr = np.sort(_as_sample(x))
    return linear_percentile(arr, 75) - linear_percentile(arr, 25)


# --- Shape ---

def skewness(x: ArrayLike) -> float:
    """
    Population skewness ``mean(((x - mean) / sd)^3)``.

    Unlike bias-adjusted estimators (e1071 type 2, scipy bias=False) no
    small-sample correction is applied.
    """
    arr = _as_sample(x)
    m, sd = _nonzero_sd(arr, 'skewness')
    return float(np.mean(((arr - m) / sd) ** 3))


def kurtosis(x: ArrayLike) -> float:
    """Population excess kurtosis ``mean(((x - mean) / sd)^4) - 3``."""
    arr = _as_sample(x)
    m, sd = _nonzero_sd(arr, 'kurtosis')
    return float(np.mean(((arr - m) / sd) ** 4)) - 3.0


def z_score(value: float, x: ArrayLike) -> float:
    """Standardise ``value`` against the population mean and sd of ``x``."""
    v = check_real_number(value, 'value')
    m, sd = _nonzero_sd(_as_sample(x), 'z_score')
    return (v - m) / sd


# --- Bivariate ---

def covariance(x: ArrayLike, y: ArrayLike) -> float:
    """Population covariance (divides by N)."""
    a, b = _as_pair(x, y)
    return float(np.sum((a - np.mean(a)) * (b - np.mean(b))) / len(a))


def correlation(x: ArrayLike, y: ArrayLike) -> float:
    """Pearson correlation coefficient."""
    a, b = _as_pair(x, y)
    cov = float(np.sum((a - np.mean(a)) * (b - np.mean(b))) / len(a))
    denom = math.sqrt(_sum_sq_dev(a) / len(a)) * math.sqrt(_sum_sq_dev(b) / len(b))
    if denom == 0:
        raise DivisionByZeroError("correlation: a variable has zero standard deviation")
    return cov / denom


# --- Summary ---

def describe(x: ArrayLike) -> DescriptiveSolution:
    """
    Compute every univariate statistic in one pass over a validated sample.

    Statistics undefined for the sample are reported as None with a
    warning on the result instead of raising: sample variance needs
    N >= 2, skewness and kurtosis need nonzero spread.

    Parameters
    ----------
    x : array-like
        1D finite numeric data.

    Returns
    -------
    DescriptiveSolution
    """
    arr = _as_sample(x)
    n = len(arr)

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('location'):
        sorted_arr = np.sort(arr)
        m = float(np.mean(arr))
        values, counts = np.unique(arr, return_counts=True)
        modes = values[counts == counts.max()]
        q1 = linear_percentile(sorted_arr, 25)
        med = linear_percentile(sorted_arr, 50)
        q3 = linear_percentile(sorted_arr, 75)

    with timer.section('spread'):
        ss = _sum_sq_dev(arr)
        var_pop = ss / n
        sd_pop = math.sqrt(var_pop)
        mad = float(np.mean(np.abs(arr - m)))
        if n >= 2:
            var_sample = ss / (n - 1)
            sd_sample = math.sqrt(var_sample)
        else:
            var_sample = sd_sample = None
            warnings_list.append("single observation: sample variance is undefined")

    with timer.section('shape'):
        if sd_pop > 0:
            z = (arr - m) / sd_pop
            skew = float(np.mean(z ** 3))
            kurt = float(np.mean(z ** 4)) - 3.0
        else:
            skew = kurt = None
            warnings_list.append("constant data: skewness and kurtosis are undefined")

    timer.stop()

    params = DescriptiveParams(
        n=n,
        mean=m,
        median=med,
        mode=modes,
        minimum=float(sorted_arr[0]),
        q1=q1,
        q3=q3,
        maximum=float(sorted_arr[-1]),
        value_range=float(sorted_arr[-1] - sorted_arr[0]),
        interquartile_range=q3 - q1,
        variance=var_pop,
        standard_deviation=sd_pop,
        mean_absolute_deviation=mad,
        sample_variance=var_sample,
        sample_standard_deviation=sd_sample,
        skewness=skew,
        kurtosis=kurt,
    )

    result = Result(
        params=params,
        info={'n': n, 'percentile_method': 'linear'},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result)
