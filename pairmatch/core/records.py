"""
pairmatch.core.records
======================

Typed records flowing through a resampling run.

- `Record`: one input row (immutable).
- `Pair`: one small record matched to one big record (ephemeral).
- `IterationStatistics`: one row of the iteration table (immutable).
- `AggregateSummary`: cross-iteration statistics (terminal output).

Examples
--------
>>> from dataclasses import fields
>>> from pairmatch.core.names import ITERATION_FIELDS
>>> from pairmatch.core.records import Record, IterationStatistics
>>> r = Record(group_label="Big-Group", pre=1.0, mid=2.0, post=3.0, gain=2.0)
>>> r.is_reference("Big-Group")
True
>>> tuple(f.name for f in fields(IterationStatistics)) == ITERATION_FIELDS
True
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterator, Mapping, Tuple

from pairmatch.core.names import ITERATION_FIELDS, Measure


@dataclass(frozen=True)
class Record:
    """A single observation read from the input table."""

    group_label: str
    pre: float
    mid: float
    post: float
    gain: float

    def is_reference(self, reference_label: str) -> bool:
        """True when this record belongs to the matched-against population."""
        return self.group_label == reference_label

    def measure(self, measure: Measure) -> float:
        """Value of one numeric measurement."""
        return float(getattr(self, measure.value))


@dataclass(frozen=True)
class Pair:
    """A to-be-matched record and the big record it was matched to."""

    small: Record
    big: Record


@dataclass(frozen=True)
class IterationStatistics:
    """Descriptive statistics and paired t-test of one resampling iteration.

    Field order is the column order of the persisted iteration table.
    `post_t_pvalue` holds the Student-t density at `post_t_tvalue`, not a
    tail probability; the name is kept for compatibility with existing
    iteration tables.
    """

    small_pre_mean: float
    small_post_mean: float
    small_mid_mean: float
    small_gain_mean: float

    big_pre_mean: float
    big_post_mean: float
    big_mid_mean: float
    big_gain_mean: float

    small_pre_stdev: float
    small_post_stdev: float
    small_mid_stdev: float
    small_gain_stdev: float

    big_pre_stdev: float
    big_post_stdev: float
    big_mid_stdev: float
    big_gain_stdev: float

    post_t_pvalue: float
    post_t_tvalue: float

    def as_dict(self) -> Dict[str, float]:
        """Field name to value, in column order."""
        return asdict(self)


@dataclass(frozen=True)
class AggregateSummary:
    """Mean and standard deviation of every iteration field across a run."""

    means: Mapping[str, float]
    stdevs: Mapping[str, float]
    proportion_significant: float
    iterations: int
    significance_level: float = 0.05
    fields: Tuple[str, ...] = field(default=ITERATION_FIELDS)

    def items(self) -> Iterator[Tuple[str, float]]:
        """Yield ``(name, value)`` in report order.

        Each iteration field contributes ``<field>_mean`` then
        ``<field>_stdev``; ``proportion_significant`` comes last.
        """
        for name in self.fields:
            yield f"{name}_mean", self.means[name]
            yield f"{name}_stdev", self.stdevs[name]
        yield "proportion_significant", self.proportion_significant

    def as_dict(self) -> Dict[str, float]:
        """Report names to values, in report order."""
        return dict(self.items())
