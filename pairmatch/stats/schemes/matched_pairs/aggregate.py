"""
pairmatch.stats.schemes.matched_pairs.aggregate
===============================================

Cross-iteration aggregation.

For every field of `IterationStatistics` the aggregator reports the mean
and the sample standard deviation across iterations. It also reports
``proportion_significant``, the fraction of iterations whose t density
(``post_t_pvalue``) is strictly below the significance level. NaN
densities never count as significant, but NaN values in any field do
propagate into that field's mean and standard deviation.

Examples
--------
>>> from pairmatch.core.names import ITERATION_FIELDS
>>> from pairmatch.core.records import IterationStatistics
>>> def row(p): return IterationStatistics(**{**{n: 1.0 for n in ITERATION_FIELDS}, "post_t_pvalue": p})
>>> summary = aggregate_iterations([row(0.01), row(0.2), row(0.04), row(0.5)])
>>> summary.proportion_significant
0.5
>>> summary.means["small_pre_mean"], summary.stdevs["small_pre_mean"]
(1.0, 0.0)
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, Union

import numpy as np

from pairmatch.backends.polars.ledger import IterationLog
from pairmatch.core.errors import EmptyIterationSet
from pairmatch.core.names import DEFAULT_SIGNIFICANCE_LEVEL, ITERATION_FIELDS
from pairmatch.core.records import AggregateSummary, IterationStatistics
from pairmatch.stats.common.descriptive import describe

logger = logging.getLogger(__name__)


def proportion_below(values: np.ndarray, threshold: float) -> float:
    """Fraction of ``values`` strictly below ``threshold`` (NaN never counts)."""
    if values.size == 0:
        raise EmptyIterationSet("Cannot take a proportion over zero iterations")
    with np.errstate(invalid="ignore"):
        hits = int(np.count_nonzero(values < threshold))
    return hits / values.size


def aggregate_iterations(
    iterations: Union[IterationLog, Iterable[IterationStatistics]],
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
) -> AggregateSummary:
    """
    Aggregate a run's iteration log.

    Args:
        iterations: The run's log, or any iterable of iteration rows
        significance_level: Threshold for ``proportion_significant``

    Returns:
        AggregateSummary over all iterations

    Raises:
        EmptyIterationSet: if there is nothing to aggregate
    """
    log = iterations if isinstance(iterations, IterationLog) else IterationLog(iterations)
    n = log.count()
    if n == 0:
        raise EmptyIterationSet("Cannot aggregate an empty iteration set")
    if n == 1:
        logger.warning(
            "Aggregating a single iteration: standard deviations across iterations are undefined"
        )

    means: Dict[str, float] = {}
    stdevs: Dict[str, float] = {}
    for name in ITERATION_FIELDS:
        means[name], stdevs[name] = describe(log.column(name))

    return AggregateSummary(
        means=means,
        stdevs=stdevs,
        proportion_significant=proportion_below(
            log.column("post_t_pvalue"), significance_level
        ),
        iterations=n,
        significance_level=significance_level,
    )
