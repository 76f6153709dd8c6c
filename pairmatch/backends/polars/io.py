"""
pairmatch.backends.polars.io
============================

Pluggable tabular I/O via **sources/sinks**.

- CSV source for the input observations
- CSV and Parquet sinks for the iteration table

This module contains no statistics, just I/O and row typing.

Doctest (smoke):
>>> import polars as pl
>>> from pairmatch.backends.polars.io import CsvFileSink, sink_for_path
>>> type(sink_for_path("out.parquet")).__name__
'ParquetFileSink'
>>> CsvFileSink("_tmp.csv").write(pl.DataFrame({"x": [1, 2, 3]}))  # doctest: +SKIP
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Protocol, Union

import polars as pl

from pairmatch.core.errors import InputError
from pairmatch.core.names import INPUT_COLUMNS, LABEL_COLUMN, Measure
from pairmatch.core.records import Record

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_INPUT_SCHEMA: Dict[str, Any] = {
    LABEL_COLUMN: pl.Utf8,
    "mid": pl.Float64,
    "pre": pl.Float64,
    "gain": pl.Float64,
    "final": pl.Float64,
}
_LINE_COLUMN = "__line"


class RecordSource(Protocol):
    """A read-only source: storage -> DataFrame."""
    def read(self) -> pl.DataFrame: ...


class TableSink(Protocol):
    """A write-only sink: DataFrame -> storage."""
    def write(self, df: pl.DataFrame) -> None: ...


class CsvFileSource:
    """Read the observation table from a CSV file with a header row.

    Blank lines are skipped. Any other row with an empty cell is an error.
    """

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    def read(self) -> pl.DataFrame:
        if not self.path.is_file():
            raise InputError(f"Input file not found: {self.path}")
        try:
            header = pl.read_csv(self.path, n_rows=0, infer_schema=False).columns
        except (pl.exceptions.PolarsError, OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Could not read {self.path}: {exc}") from exc

        missing = [c for c in INPUT_COLUMNS if c not in header]
        if missing:
            raise InputError(f"{self.path} is missing required column(s): {', '.join(missing)}")

        try:
            df = pl.read_csv(self.path, schema_overrides=_INPUT_SCHEMA)
        except (pl.exceptions.PolarsError, OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Could not read {self.path}: {exc}") from exc

        # offset 2: one for the header, one for 1-based line numbers
        df = (
            df.select(INPUT_COLUMNS)
            .with_row_index(_LINE_COLUMN, offset=2)
            .filter(~pl.all_horizontal(pl.col(list(INPUT_COLUMNS)).is_null()))
        )
        for column in INPUT_COLUMNS:
            nulls = df.get_column(column).is_null()
            if nulls.any():
                line = int(df.get_column(_LINE_COLUMN).filter(nulls)[0])
                raise InputError(f"{self.path}: line {line} has no value for '{column}'")
        df = df.drop(_LINE_COLUMN)
        logger.debug("Read %d rows from %s", df.height, self.path)
        return df


def records_from_frame(df: pl.DataFrame) -> List[Record]:
    """Convert a validated observation frame into `Record` objects."""
    return [
        Record(
            group_label=row[LABEL_COLUMN],
            pre=row[Measure.PRE.column],
            mid=row[Measure.MID.column],
            post=row[Measure.POST.column],
            gain=row[Measure.GAIN.column],
        )
        for row in df.iter_rows(named=True)
    ]


def read_records(path: PathLike) -> List[Record]:
    """Read typed records from a CSV file; raises `InputError` on any failure."""
    return records_from_frame(CsvFileSource(path).read())


class CsvFileSink:
    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
    def write(self, df: pl.DataFrame) -> None:
        df.write_csv(self.path)


class ParquetFileSink:
    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
    def write(self, df: pl.DataFrame) -> None:
        df.write_parquet(self.path)


def sink_for_path(path: PathLike) -> TableSink:
    """Pick a sink from the file extension: Parquet for .parquet/.pq, CSV otherwise."""
    if Path(path).suffix.lower() in (".parquet", ".pq"):
        return ParquetFileSink(path)
    return CsvFileSink(path)
