"""
pairmatch.stats.common.t_test
=============================

Paired t-test returning the Student-t *density* at the observed statistic.

For paired observations ``x`` and ``y`` the test uses the differences
``d_i = x_i - y_i``:

    t = mean(d) / (sd(d) / sqrt(n)),   df = n - 1

and reports ``p = f_t(t; df, loc=0, scale=1)``, the probability density
of Student's t distribution evaluated at ``t``. This value is what the
iteration table stores as ``post_t_pvalue`` and what the aggregator
compares against the significance level. It is not a tail probability.

Degenerate samples (fewer than two pairs, or zero standard error) follow
IEEE-754 semantics by default: the result carries NaN or an infinite ``t``
(whose density is 0.0) and a warning is logged. ``strict=True`` raises
`DegenerateSample` instead.

Examples
--------
>>> result = paired_t([2.0, 4.0, 6.0], [1.0, 2.0, 3.0])
>>> result.df
2
>>> round(result.t, 3)
3.464
>>> result.mean_difference
2.0
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy.stats import t as student_t

from pairmatch.core.errors import DegenerateSample
from pairmatch.stats.common.descriptive import mean, sample_stdev

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TTestResult:
    """Outcome of a paired t-test.

    Attributes:
        t: t-statistic of the mean paired difference
        p: Student-t density at ``t`` with ``df`` degrees of freedom
        mean_difference: mean of ``x - y``
        se: standard error of the mean difference
        df: degrees of freedom (``n - 1``)
    """

    t: float
    p: float
    mean_difference: float
    se: float
    df: int

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.t) and math.isfinite(self.p)


def paired_t(
    x: Sequence[float], y: Sequence[float], *, strict: bool = False
) -> TTestResult:
    """
    Paired t-test of ``x`` against ``y``.

    Args:
        x: First member of each pair
        y: Second member of each pair (same length as ``x``)
        strict: Raise on degenerate samples instead of propagating NaN/inf

    Returns:
        TTestResult with the t-statistic and the density at t

    Raises:
        ValueError: if ``x`` and ``y`` differ in length
        DegenerateSample: in strict mode, for n < 2 or zero standard error
    """
    a = np.asarray(x, dtype=float)
    b = np.asarray(y, dtype=float)
    if a.shape != b.shape:
        raise ValueError(
            f"paired samples must have equal length, got {a.size} and {b.size}"
        )

    n = int(a.size)
    d = a - b
    dbar = mean(d)

    if n < 2:
        if strict:
            raise DegenerateSample(f"paired t-test needs at least 2 pairs, got {n}")
        logger.warning("Paired t-test over %d pair(s) is undefined; recording NaN", n)
        return TTestResult(
            t=float("nan"), p=float("nan"), mean_difference=dbar, se=float("nan"), df=max(n - 1, 0)
        )

    se = sample_stdev(d) / math.sqrt(n)
    if se == 0.0:
        if strict:
            raise DegenerateSample(
                "paired t-test has zero standard error (all differences identical)"
            )
        logger.warning(
            "Paired t-test has zero standard error (mean difference %s); t is not finite",
            dbar,
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        t = float(np.float64(dbar) / np.float64(se))
    p = float(student_t.pdf(t, df=n - 1, loc=0.0, scale=1.0))

    return TTestResult(t=t, p=p, mean_difference=dbar, se=se, df=n - 1)
