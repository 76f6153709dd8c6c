"""
pairmatch.stats.schemes.matched_pairs.iteration
===============================================

One resampling iteration of the matched-pairs scheme:

1. shuffle the to-be-matched population with the caller's generator,
2. greedily match it against the full matched-against population,
3. compute mean and sample standard deviation of ``pre``, ``post``,
   ``mid`` and ``gain`` on each side,
4. run the paired t-test of small ``post`` against big ``post``.

Inputs are never mutated; each call works on its own shuffled tuple.
The generator is consumed exactly once per call (one permutation), so a
run is reproducible from its seed.

Examples
--------
>>> import numpy as np
>>> from pairmatch.core.records import Record
>>> big = [Record("Big-Group", float(v), 0.0, float(v), 0.0) for v in (1, 2, 3, 10)]
>>> small = [Record("Small", 1.1, 0.0, 1.0, 0.0), Record("Small", 9.9, 0.0, 11.0, 0.0)]
>>> stats = run_iteration(big, small, np.random.default_rng(0))
>>> stats.big_pre_mean
5.5
"""

from __future__ import annotations
from typing import Dict, Sequence, Tuple

import numpy as np

from pairmatch.core.names import MEASURE_ORDER, Measure, Side, field_name
from pairmatch.core.records import IterationStatistics, Pair, Record
from pairmatch.stats.common.descriptive import describe
from pairmatch.stats.common.matching import greedy_nearest_match
from pairmatch.stats.common.t_test import paired_t
from pairmatch.stats.schemes.matched_pairs.core import side_series


def shuffled(records: Sequence[Record], rng: np.random.Generator) -> Tuple[Record, ...]:
    """Uniformly random permutation of ``records``."""
    order = rng.permutation(len(records))
    return tuple(records[int(i)] for i in order)


def describe_pairs(pairs: Sequence[Pair], *, strict: bool = False) -> IterationStatistics:
    """Descriptive statistics of both sides plus the paired t-test on ``post``."""
    values: Dict[str, float] = {}
    for side in (Side.SMALL, Side.BIG):
        for measure in MEASURE_ORDER:
            m, s = describe(side_series(pairs, side, measure))
            values[field_name(side, measure, "mean")] = m
            values[field_name(side, measure, "stdev")] = s

    result = paired_t(
        side_series(pairs, Side.SMALL, Measure.POST),
        side_series(pairs, Side.BIG, Measure.POST),
        strict=strict,
    )
    values["post_t_pvalue"] = result.p
    values["post_t_tvalue"] = result.t

    return IterationStatistics(**values)


def run_iteration(
    big: Sequence[Record],
    small: Sequence[Record],
    rng: np.random.Generator,
    *,
    strict: bool = False,
) -> IterationStatistics:
    """
    Run one shuffle/match/describe/test trial.

    Args:
        big: Matched-against population
        small: To-be-matched population (shuffled here)
        rng: Random generator, advanced by one permutation
        strict: Raise `DegenerateSample` instead of recording non-finite t values

    Returns:
        The iteration's statistics

    Raises:
        InsufficientPopulation: unless ``len(big) >= len(small) > 0``
    """
    pairs = greedy_nearest_match(big, shuffled(small, rng))
    return describe_pairs(pairs, strict=strict)
