"""
pairmatch.stats.common.descriptive
==================================

Descriptive statistics shared by the iteration driver and the aggregator.

The sample standard deviation uses the ``n - 1`` denominator. Statistics
that are undefined for the given length (mean of nothing, spread of fewer
than two values) are returned as NaN rather than raised, so a degenerate
series shows up in the output instead of aborting a run. NaN inputs
propagate.

Examples
--------
>>> mean([1.0, 2.0, 3.0])
2.0
>>> sample_stdev([1.0, 2.0, 3.0])
1.0
>>> import math
>>> math.isnan(sample_stdev([4.0]))
True
"""

from __future__ import annotations
from typing import Iterable, Tuple

import numpy as np


def _as_array(values: Iterable[float]) -> np.ndarray:
    if isinstance(values, np.ndarray):
        return values.astype(float, copy=False)
    return np.asarray(list(values), dtype=float)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; NaN for an empty series."""
    arr = _as_array(values)
    if arr.size == 0:
        return float("nan")
    return float(arr.mean())


def sample_stdev(values: Iterable[float]) -> float:
    """Sample standard deviation (ddof=1); NaN for fewer than two values."""
    arr = _as_array(values)
    if arr.size < 2:
        return float("nan")
    return float(arr.std(ddof=1))


def describe(values: Iterable[float]) -> Tuple[float, float]:
    """Return ``(mean, sample_stdev)`` of a series."""
    arr = _as_array(values)
    return mean(arr), sample_stdev(arr)
