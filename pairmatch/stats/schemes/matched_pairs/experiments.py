"""
pairmatch.stats.schemes.matched_pairs.experiments
=================================================

Experiment template for randomized matched-pairs resampling.

`MatchedPairsTemplate` partitions the input records once, checks that the
matched-against population can cover the to-be-matched one, and then
produces one `IterationStatistics` per call to `run_iteration`.

Examples
--------
>>> import numpy as np
>>> from pairmatch.backends.polars.ledger import IterationLog
>>> from pairmatch.core.records import Record
>>> records = [Record("Big-Group", float(v), 0.0, float(v), 0.0) for v in range(5)]
>>> records += [Record("Small-Group", float(v), 0.0, float(v) * 2.0, 0.0) for v in range(3)]
>>> template = MatchedPairsTemplate(records)
>>> template.setup(IterationLog())
>>> template.population_sizes
(5, 3)
>>> _ = template.run_iteration(np.random.default_rng(1))
>>> template.analyze().iterations
1
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, Tuple

import numpy as np

from pairmatch.backends.polars.ledger import IterationLog
from pairmatch.core.names import DEFAULT_REFERENCE_LABEL, DEFAULT_SIGNIFICANCE_LEVEL
from pairmatch.core.records import AggregateSummary, IterationStatistics, Record
from pairmatch.runtime.experiment_template import ResamplingTemplate
from pairmatch.stats.common.matching import check_populations
from pairmatch.stats.schemes.matched_pairs.aggregate import aggregate_iterations
from pairmatch.stats.schemes.matched_pairs.core import partition_records
from pairmatch.stats.schemes.matched_pairs.iteration import run_iteration

logger = logging.getLogger(__name__)


class MatchedPairsTemplate(ResamplingTemplate):
    """
    Greedy nearest-neighbour matched-pairs resampling.

    Attributes:
        records: All input records (both populations)
        reference_label: Label of the matched-against population
        significance_level: Threshold for ``proportion_significant``
        strict: Raise on degenerate t-tests instead of recording NaN/inf
    """

    def __init__(
        self,
        records: Iterable[Record],
        experiment_id: str = "matched_pairs",
        reference_label: str = DEFAULT_REFERENCE_LABEL,
        significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
        strict: bool = False,
    ):
        super().__init__(experiment_id)
        self.records: Tuple[Record, ...] = tuple(records)
        self.reference_label = reference_label
        self.significance_level = significance_level
        self.strict = strict
        self.big: Tuple[Record, ...] = ()
        self.small: Tuple[Record, ...] = ()

    @property
    def population_sizes(self) -> Tuple[int, int]:
        """``(matched-against, to-be-matched)`` sizes after setup."""
        return len(self.big), len(self.small)

    def prepare(self) -> None:
        """Partition records and fail fast if matching is impossible."""
        if not 0 < self.significance_level < 1:
            raise ValueError(
                f"significance_level must be in (0, 1), got {self.significance_level}"
            )

        big, small = partition_records(self.records, self.reference_label)
        check_populations(len(big), len(small))
        self.big, self.small = big, small
        logger.info(
            "Partitioned %d records: %d labelled %r, %d to be matched",
            len(self.records),
            len(big),
            self.reference_label,
            len(small),
        )

    def iterate(self, rng: np.random.Generator) -> IterationStatistics:
        return run_iteration(self.big, self.small, rng, strict=self.strict)

    def extract_results(self, log: IterationLog) -> AggregateSummary:
        return aggregate_iterations(log, self.significance_level)

    def get_summary(self) -> Dict[str, Any]:
        """Template summary with population sizes and settings."""
        summary = super().get_summary()
        summary.update(
            {
                "experiment_type": "matched_pairs",
                "reference_label": self.reference_label,
                "significance_level": self.significance_level,
                "strict": self.strict,
                "total_records": len(self.records),
                "big_population": len(self.big),
                "small_population": len(self.small),
            }
        )
        return summary
