"""
pairmatch.api.resampling
========================

One-call entry points for matched-pairs resampling.

Examples
--------
>>> from pairmatch.api.resampling import matched_pairs_resampling
>>> from pairmatch.core.records import Record
>>> records = [Record("Big-Group", float(v), 0.0, float(v), 0.0) for v in range(5)]
>>> records += [Record("Small-Group", v + 0.5, 0.0, v * 3.0, 0.0) for v in range(3)]
>>> result = matched_pairs_resampling(records, iterations=20, seed=1)
>>> result.iterations
20
>>> 0.0 <= result.summary.proportion_significant <= 1.0
True
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from pairmatch.backends.polars.io import read_records, sink_for_path
from pairmatch.core.config import ResamplingConfig
from pairmatch.core.names import DEFAULT_REFERENCE_LABEL, DEFAULT_SIGNIFICANCE_LEVEL
from pairmatch.core.records import Record
from pairmatch.runtime.experiment_template import ResamplingResult
from pairmatch.runtime.runners import SequentialRunner
from pairmatch.stats.schemes.matched_pairs.experiments import MatchedPairsTemplate

logger = logging.getLogger(__name__)


def matched_pairs_resampling(
    records: Iterable[Record],
    iterations: int,
    *,
    seed: Optional[int] = None,
    reference_label: str = DEFAULT_REFERENCE_LABEL,
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
    strict: bool = False,
) -> ResamplingResult:
    """
    Run a randomized matched-pairs resampling over in-memory records.

    Parameters
    ----------
    records : Iterable[Record]
        Observations of both populations
    iterations : int
        Number of shuffle/match/test iterations (at least 1)
    seed : int, optional
        Seed for the run's random generator
    reference_label : str, default="Big-Group"
        Label of the matched-against population
    significance_level : float, default=0.05
        Threshold for ``proportion_significant``
    strict : bool, default=False
        Raise `DegenerateSample` instead of recording non-finite t values

    Returns
    -------
    ResamplingResult
        The iteration log and its aggregate summary
    """
    template = MatchedPairsTemplate(
        records,
        reference_label=reference_label,
        significance_level=significance_level,
        strict=strict,
    )
    return SequentialRunner(template).run(iterations, seed=seed)


def run_from_config(records: Iterable[Record], config: ResamplingConfig) -> ResamplingResult:
    """Validate ``config`` and run it over ``records``."""
    config.validate()
    return matched_pairs_resampling(
        records,
        config.iterations,
        seed=config.seed,
        reference_label=config.reference_label,
        significance_level=config.significance_level,
        strict=config.strict,
    )


def resample_file(
    input_path: Union[str, Path], config: ResamplingConfig
) -> ResamplingResult:
    """
    Read ``input_path``, run the resampling, and persist the iteration table.

    The table is written only after every iteration and the aggregation
    have succeeded; any failure before that leaves no output file.
    """
    config.validate()
    records = read_records(input_path)
    result = run_from_config(records, config)
    sink_for_path(config.output).write(result.log.frame())
    logger.info("Wrote %d iteration rows to %s", result.iterations, config.output)
    return result
