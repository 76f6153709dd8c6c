"""
pairmatch.backends.polars.ledger
================================

A **Polars-backed**, append-only log of iteration results.
No persistence here (see `pairmatch.backends.polars.io`).

Every resampling iteration appends exactly one `IterationStatistics`;
rows are never updated or removed. The log is the run's single source of
truth: the aggregator reads columns from it and the sinks persist its
frame.

Examples
--------
>>> from pairmatch.backends.polars.ledger import IterationLog
>>> from pairmatch.core.names import ITERATION_FIELDS
>>> from pairmatch.core.records import IterationStatistics
>>> row = IterationStatistics(**{name: 1.0 for name in ITERATION_FIELDS})
>>> log = IterationLog().append(row).append(row)
>>> log.count()
2
>>> log.frame().shape
(2, 18)
>>> log.column("post_t_tvalue").tolist()
[1.0, 1.0]
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional, cast

import numpy as np
import polars as pl

from pairmatch.core.names import ITERATION_FIELDS
from pairmatch.core.records import IterationStatistics


class IterationLog:
    """Append-only log of per-iteration statistics with a fixed Float64 schema."""

    _SCHEMA: Dict[str, Any] = {name: pl.Float64 for name in ITERATION_FIELDS}

    def __init__(self, rows: Optional[Iterable[IterationStatistics]] = None) -> None:
        self._rows: List[IterationStatistics] = list(rows) if rows is not None else []

    # ---- writer ----

    def append(self, stats: IterationStatistics) -> "IterationLog":
        """Append one iteration's statistics."""
        if not isinstance(stats, IterationStatistics):
            raise TypeError(
                f"IterationLog accepts IterationStatistics, got {type(stats).__name__}"
            )
        self._rows.append(stats)
        return self

    # ---- readers ----

    def count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[IterationStatistics]:
        return self.iter_rows()

    def iter_rows(self) -> Iterator[IterationStatistics]:
        """Iterate rows in append order."""
        return iter(tuple(self._rows))

    def latest(self) -> Optional[IterationStatistics]:
        """Return the most recently appended row (or None)."""
        return self._rows[-1] if self._rows else None

    def column(self, name: str) -> np.ndarray:
        """Return one field across all iterations as a float array."""
        if name not in self._SCHEMA:
            raise KeyError(f"Unknown iteration field: {name}")
        return np.fromiter(
            (getattr(row, name) for row in self._rows), dtype=float, count=len(self._rows)
        )

    # ---- frame helpers (no I/O) ----

    def frame(self) -> pl.DataFrame:
        """Return the log as a Polars DataFrame, one row per iteration."""
        data = {name: [getattr(row, name) for row in self._rows] for name in ITERATION_FIELDS}
        return pl.DataFrame(data, schema=cast(Any, self._SCHEMA))
