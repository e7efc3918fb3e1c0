"""
Descriptive statistics module.

Stateless functions over 1D numeric samples. Population statistics divide
by N; the sample_* variants divide by N - 1.

Public API:
    describe(x)                      - every statistic at once
    mean, median, mode, weighted_mean, geometric_mean, harmonic_mean
    value_range, variance, standard_deviation,
    sample_variance, sample_standard_deviation,
    mean_absolute_deviation, coefficient_of_variation
    percentile, interquartile_range
    skewness, kurtosis, z_score
    covariance, correlation
"""

from pycalcify.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pycalcify.descriptive.solvers import (
    describe,
    mean,
    median,
    mode,
    weighted_mean,
    geometric_mean,
    harmonic_mean,
    value_range,
    variance,
    standard_deviation,
    sample_variance,
    sample_standard_deviation,
    mean_absolute_deviation,
    coefficient_of_variation,
    percentile,
    interquartile_range,
    skewness,
    kurtosis,
    z_score,
    covariance,
    correlation,
)

__all__ = [
    "describe",
    "mean",
    "median",
    "mode",
    "weighted_mean",
    "geometric_mean",
    "harmonic_mean",
    "value_range",
    "variance",
    "standard_deviation",
    "sample_variance",
    "sample_standard_deviation",
    "mean_absolute_deviation",
    "coefficient_of_variation",
    "percentile",
    "interquartile_range",
    "skewness",
    "kurtosis",
    "z_score",
    "covariance",
    "correlation",
    "DescriptiveParams",
    "DescriptiveSolution",
]
