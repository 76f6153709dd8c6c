"""
pairmatch.stats.schemes.matched_pairs.core
==========================================

Population handling for the matched-pairs scheme.

- `partition_records`: split records into the matched-against ("big") and
  to-be-matched ("small") populations.
- `side_series`: pull one measurement of one side out of a list of pairs.

Partitioning tests equality with the reference label only. Every other
label, including a typo or an unexpected third category, lands in the
to-be-matched population.

Examples
--------
>>> from pairmatch.core.records import Record
>>> rows = [
...     Record("Big-Group", 1.0, 0.0, 0.0, 0.0),
...     Record("Small-Group", 2.0, 0.0, 0.0, 0.0),
...     Record("big-group", 3.0, 0.0, 0.0, 0.0),
... ]
>>> big, small = partition_records(rows)
>>> len(big), len(small)
(1, 2)
"""

from __future__ import annotations
from typing import Iterable, Sequence, Tuple

import numpy as np

from pairmatch.core.names import DEFAULT_REFERENCE_LABEL, Measure, Side
from pairmatch.core.records import Pair, Record


def partition_records(
    records: Iterable[Record], reference_label: str = DEFAULT_REFERENCE_LABEL
) -> Tuple[Tuple[Record, ...], Tuple[Record, ...]]:
    """Return ``(big, small)`` preserving input order within each population."""
    big = []
    small = []
    for record in records:
        (big if record.is_reference(reference_label) else small).append(record)
    return tuple(big), tuple(small)


def side_series(pairs: Sequence[Pair], side: Side, measure: Measure) -> np.ndarray:
    """One measurement of one side of every pair, in pair order."""
    return np.fromiter(
        (getattr(pair, side.value).measure(measure) for pair in pairs),
        dtype=float,
        count=len(pairs),
    )
