"""
Tests for the paired t-test.
"""

from __future__ import annotations

import logging
import math

import pytest
from scipy import stats

from pairmatch.core.errors import DegenerateSample
from pairmatch.stats.common.t_test import TTestResult, paired_t


class TestPairedT:
    """Statistic and density for well-behaved samples."""

    def test_statistic_matches_scipy(self) -> None:
        """t agrees with scipy's related-samples t-test."""
        x = [5.1, 4.8, 6.2, 5.9, 7.0, 4.4]
        y = [4.9, 5.0, 5.1, 5.2, 6.1, 4.0]

        result = paired_t(x, y)

        assert result.t == pytest.approx(stats.ttest_rel(x, y).statistic)
        assert result.df == 5

    def test_p_is_density_at_t(self) -> None:
        """p is the Student-t pdf at t, not a tail probability."""
        x = [5.1, 4.8, 6.2, 5.9, 7.0, 4.4]
        y = [4.9, 5.0, 5.1, 5.2, 6.1, 4.0]

        result = paired_t(x, y)

        assert result.p == pytest.approx(stats.t.pdf(result.t, df=5))
        assert result.p != pytest.approx(stats.ttest_rel(x, y).pvalue)

    def test_symmetric_differences_give_zero_t(self) -> None:
        """Zero mean difference with spread gives t = 0 and the peak density."""
        result = paired_t([1.0, 2.0, 3.0], [2.0, 2.0, 2.0])

        assert result.mean_difference == 0.0
        assert result.t == 0.0
        assert result.p == pytest.approx(1 / (2 * math.sqrt(2)))

    def test_sign_follows_difference(self) -> None:
        """t is positive when x exceeds y on average."""
        assert paired_t([3.0, 5.0, 4.0], [1.0, 2.0, 2.5]).t > 0
        assert paired_t([1.0, 2.0, 2.5], [3.0, 5.0, 4.0]).t < 0

    def test_standard_error(self) -> None:
        """se is sd(d) / sqrt(n)."""
        result = paired_t([2.0, 4.0, 6.0], [1.0, 2.0, 3.0])

        assert result.se == pytest.approx(1.0 / math.sqrt(3))
        assert result.is_finite

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            paired_t([1.0, 2.0], [1.0, 2.0, 3.0])


class TestDegenerateSamples:
    """Fewer than two pairs or zero standard error."""

    def test_identical_samples_give_nan(self, caplog: pytest.LogCaptureFixture) -> None:
        """x == y: zero mean difference over zero spread is NaN."""
        with caplog.at_level(logging.WARNING, logger="pairmatch"):
            result = paired_t([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])

        assert result.mean_difference == 0.0
        assert math.isnan(result.t)
        assert math.isnan(result.p)
        assert not result.is_finite
        assert "zero standard error" in caplog.text

    def test_constant_nonzero_difference_gives_infinite_t(self) -> None:
        """Identical non-zero differences push t to infinity and the density to 0."""
        result = paired_t([2.0, 3.0, 4.0], [1.0, 2.0, 3.0])

        assert math.isinf(result.t) and result.t > 0
        assert result.p == 0.0

    def test_single_pair_is_undefined(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="pairmatch"):
            result = paired_t([1.0], [0.5])

        assert math.isnan(result.t)
        assert result.df == 0
        assert result.mean_difference == 0.5
        assert "undefined" in caplog.text

    def test_strict_mode_raises_on_zero_se(self) -> None:
        with pytest.raises(DegenerateSample):
            paired_t([1.0, 2.0], [1.0, 2.0], strict=True)

    def test_strict_mode_raises_on_single_pair(self) -> None:
        with pytest.raises(DegenerateSample):
            paired_t([1.0], [2.0], strict=True)

    def test_strict_mode_passes_regular_samples(self) -> None:
        result = paired_t([1.0, 2.0, 4.0], [1.0, 1.0, 1.0], strict=True)

        assert isinstance(result, TTestResult)
        assert result.is_finite
