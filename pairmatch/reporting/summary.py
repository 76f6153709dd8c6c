"""
pairmatch.reporting.summary
===========================

Console report of a run's aggregate statistics.

One ``name = value`` line per scalar, in the fixed order given by
`AggregateSummary.items()`: ``<field>_mean`` and ``<field>_stdev`` for
every iteration field, then ``proportion_significant``. Each field's
mean and stdev sit next to each other, so the layout differs from
reports that list every mean before every stdev. Values use Python's
`float` repr, so non-finite aggregates print as ``nan``, ``inf`` and
``-inf``.

Examples
--------
>>> from pairmatch.core.names import ITERATION_FIELDS
>>> from pairmatch.core.records import AggregateSummary
>>> from pairmatch.reporting.summary import SummaryReporter
>>> summary = AggregateSummary(
...     means={n: 1.0 for n in ITERATION_FIELDS},
...     stdevs={n: 0.0 for n in ITERATION_FIELDS},
...     proportion_significant=0.25,
...     iterations=4,
... )
>>> rep = SummaryReporter(summary)
>>> rep.lines()[0]
'small_pre_mean_mean = 1.0'
>>> rep.lines()[-1]
'proportion_significant = 0.25'
>>> rep.frame().shape
(37, 2)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

import polars as pl
from rich.console import Console

from pairmatch.core.records import AggregateSummary


@dataclass
class SummaryReporter:
    """Plain-text and tabular views of an `AggregateSummary`."""

    summary: AggregateSummary

    def lines(self) -> List[str]:
        """Report lines, one per aggregate scalar."""
        return [f"{name} = {value}" for name, value in self.summary.items()]

    def frame(self) -> pl.DataFrame:
        """Return ``(statistic, value)`` rows in report order."""
        names, values = zip(*self.summary.items())
        return pl.DataFrame(
            {"statistic": list(names), "value": list(values)},
            schema={"statistic": pl.Utf8, "value": pl.Float64},
        )

    def print(self, console: Optional[Console] = None) -> None:
        """Write every report line to a rich console (stdout by default)."""
        console = console or Console()
        for line in self.lines():
            console.print(line, markup=False, highlight=False, soft_wrap=True)
