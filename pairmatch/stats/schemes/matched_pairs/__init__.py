"""
Randomized matched-pairs resampling.

**Module Organization:**

- `core`: population partitioning and per-side series extraction
- `iteration`: one shuffle/match/describe/test trial
- `aggregate`: cross-iteration statistics
- `experiments`: the `MatchedPairsTemplate` driven by a runner
"""

from pairmatch.stats.schemes.matched_pairs.aggregate import aggregate_iterations
from pairmatch.stats.schemes.matched_pairs.core import partition_records, side_series
from pairmatch.stats.schemes.matched_pairs.experiments import MatchedPairsTemplate
from pairmatch.stats.schemes.matched_pairs.iteration import (
    describe_pairs,
    run_iteration,
    shuffled,
)

__all__ = [
    "MatchedPairsTemplate",
    "aggregate_iterations",
    "describe_pairs",
    "partition_records",
    "run_iteration",
    "shuffled",
    "side_series",
]
