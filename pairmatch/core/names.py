"""
pairmatch.core.names
====================

Typed names shared across the package.

- `Side`: an Enum for the two sides of a matched pair.
- `Measure`: an Enum for the four numeric measurements of a record.
- Default constants for the reference label and the significance threshold.
- `ITERATION_FIELDS`: the ordered field names of one iteration row.

Examples
--------
>>> from pairmatch.core.names import Side, Measure, ITERATION_FIELDS
>>> Side.SMALL.value
'small'
>>> Measure.POST.column
'final'
>>> ITERATION_FIELDS[0], ITERATION_FIELDS[-1]
('small_pre_mean', 'post_t_tvalue')
>>> len(ITERATION_FIELDS)
18
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple


class Side(str, Enum):
    """Sides of a matched pair.

    - SMALL: the to-be-matched population, presented in random order
    - BIG: the matched-against population (the reference label)
    """

    SMALL = "small"
    BIG = "big"


class Measure(str, Enum):
    """Numeric measurements carried by every record."""

    PRE = "pre"
    POST = "post"
    MID = "mid"
    GAIN = "gain"

    @property
    def column(self) -> str:
        """Input column holding this measurement."""
        return "final" if self is Measure.POST else self.value


DEFAULT_REFERENCE_LABEL = "Big-Group"
DEFAULT_SIGNIFICANCE_LEVEL = 0.05
DEFAULT_OUTPUT_PATH = "iterations.csv"

LABEL_COLUMN = "condition"
INPUT_COLUMNS: Tuple[str, ...] = (LABEL_COLUMN, "mid", "pre", "gain", "final")

# Row layout of the iteration table: means, then stdevs, each small before big.
MEASURE_ORDER: Tuple[Measure, ...] = (Measure.PRE, Measure.POST, Measure.MID, Measure.GAIN)


def field_name(side: Side, measure: Measure, stat: str) -> str:
    """Column name for a per-side descriptive statistic, e.g. ``small_pre_mean``."""
    return f"{side.value}_{measure.value}_{stat}"


ITERATION_FIELDS: Tuple[str, ...] = tuple(
    field_name(side, measure, stat)
    for stat in ("mean", "stdev")
    for side in (Side.SMALL, Side.BIG)
    for measure in MEASURE_ORDER
) + ("post_t_pvalue", "post_t_tvalue")
