"""
Tests for the console summary report.
"""

from __future__ import annotations

import io

import polars as pl
from rich.console import Console

from pairmatch.core.names import ITERATION_FIELDS
from pairmatch.core.records import AggregateSummary
from pairmatch.reporting.summary import SummaryReporter


def make_summary() -> AggregateSummary:
    return AggregateSummary(
        means={name: float(i) for i, name in enumerate(ITERATION_FIELDS)},
        stdevs={name: float("nan") for name in ITERATION_FIELDS},
        proportion_significant=0.125,
        iterations=8,
    )


class TestSummaryReporter:
    """Report lines, frame and console output."""

    def test_line_count_and_order(self) -> None:
        lines = SummaryReporter(make_summary()).lines()

        assert len(lines) == 2 * len(ITERATION_FIELDS) + 1
        assert lines[0] == "small_pre_mean_mean = 0.0"
        assert lines[1] == "small_pre_mean_stdev = nan"
        assert lines[-1] == "proportion_significant = 0.125"

    def test_frame(self) -> None:
        frame = SummaryReporter(make_summary()).frame()

        assert frame.columns == ["statistic", "value"]
        assert frame.dtypes == [pl.Utf8, pl.Float64]
        assert frame["statistic"][2] == "small_post_mean_mean"
        assert frame["value"][2] == 1.0

    def test_print_to_console(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, color_system=None)

        SummaryReporter(make_summary()).print(console)

        printed = buffer.getvalue().splitlines()
        assert printed == SummaryReporter(make_summary()).lines()

    def test_non_finite_values(self) -> None:
        """Non-finite aggregates use Python's float spelling."""
        base = make_summary()
        summary = AggregateSummary(
            means={**base.means, "post_t_tvalue": float("inf")},
            stdevs={**base.stdevs, "post_t_tvalue": float("-inf")},
            proportion_significant=base.proportion_significant,
            iterations=base.iterations,
        )

        lines = SummaryReporter(summary).lines()

        assert "post_t_tvalue_mean = inf" in lines
        assert "post_t_tvalue_stdev = -inf" in lines
        assert "post_t_pvalue_stdev = nan" in lines
