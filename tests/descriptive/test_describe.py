"""
Tests for describe() and its solution wrapper.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pycalcify.core.exceptions import EmptyInputError
from pycalcify.descriptive import (
    DescriptiveParams,
    DescriptiveSolution,
    describe,
    kurtosis,
    sample_variance,
    skewness,
)


class TestDescribe:

    def test_returns_solution(self):
        result = describe([1, 1, 2, 3, 4, 7])
        assert isinstance(result, DescriptiveSolution)
        assert isinstance(result.params, DescriptiveParams)

    def test_known_values(self):
        p = describe([1, 1, 2, 3, 4, 7]).params
        assert p.n == 6
        assert p.mean == 3.0
        assert p.median == 2.5
        assert_array_equal(p.mode, [1.0])
        assert p.minimum == 1.0
        assert p.maximum == 7.0
        assert p.value_range == 6.0
        assert p.q1 == 1.25
        assert p.q3 == 3.75
        assert p.interquartile_range == 2.5

    def test_agrees_with_standalone_functions(self, rng):
        x = rng.standard_normal(40)
        r = describe(x)
        assert_allclose(r.variance, np.var(x))
        assert_allclose(r.sample_variance, sample_variance(x))
        assert_allclose(r.skewness, skewness(x))
        assert_allclose(r.kurtosis, kurtosis(x))
        assert_allclose(r.median, np.median(x))

    def test_metadata(self):
        r = describe([1.0, 2.0, 3.0])
        assert r.backend_name == "cpu_descriptive"
        assert r.info == {"n": 3, "percentile_method": "linear"}
        assert r.warnings == ()
        assert r.timing["total_seconds"] >= 0
        for section in ("location", "spread", "shape"):
            assert section in r.timing

    def test_params_frozen(self):
        r = describe([1.0, 2.0])
        with pytest.raises(FrozenInstanceError):
            r.params.mean = 0.0

    def test_single_observation(self):
        r = describe([5.0])
        assert r.sample_variance is None
        assert r.sample_standard_deviation is None
        assert r.variance == 0.0
        assert any("sample variance" in w for w in r.warnings)

    def test_constant_data(self):
        r = describe([2.0, 2.0, 2.0])
        assert r.skewness is None
        assert r.kurtosis is None
        assert r.sample_variance == 0.0
        assert r.warnings == ("constant data: skewness and kurtosis are undefined",)

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            describe([])


class TestSummary:

    def test_contains_statistics(self):
        text = describe([1, 1, 2, 3, 4, 7]).summary()
        assert text.splitlines()[0].startswith("N")
        assert "Median" in text
        assert "2.500000" in text
        assert "Warning" not in text

    def test_undefined_shown_as_na(self):
        text = describe([4.0]).summary()
        assert "NA" in text
        assert "Warning: single observation" in text

    def test_repr(self):
        assert repr(describe([1.0, 3.0])) == "DescriptiveSolution(n=2, mean=2, sd=1)"
