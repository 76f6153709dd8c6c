"""
Shared fixtures for pairmatch tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from pairmatch.core.records import Record

CSV_HEADER = "condition,mid,pre,gain,final"


def make_record(
    pre: float,
    *,
    label: str = "Small-Group",
    mid: float = 0.0,
    post: float = 0.0,
    gain: float = 0.0,
) -> Record:
    return Record(group_label=label, pre=pre, mid=mid, post=post, gain=gain)


@pytest.fixture
def big_population() -> List[Record]:
    """Five reference records with distinct pre and post values."""
    return [
        make_record(float(v), label="Big-Group", mid=v * 0.5, post=float(v) * 1.5, gain=1.0)
        for v in range(5)
    ]


@pytest.fixture
def small_population() -> List[Record]:
    """Three to-be-matched records with spread-out post values."""
    return [
        make_record(0.2, mid=1.0, post=3.0, gain=2.0),
        make_record(2.1, mid=2.0, post=1.0, gain=0.5),
        make_record(3.9, mid=0.5, post=8.0, gain=4.0),
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV text lines to a temporary file and return its path."""

    def _write(*lines: str, name: str = "data.csv", header: str = CSV_HEADER) -> Path:
        path = tmp_path / name
        rows = [header, *lines] if header else list(lines)
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv: Callable[..., Path]) -> Path:
    """A valid input file: five reference rows and three to-be-matched rows."""
    return write_csv(
        "Big-Group,0.0,0.0,1.0,0.0",
        "Big-Group,0.5,1.0,1.0,1.5",
        "Big-Group,1.0,2.0,1.0,3.0",
        "Big-Group,1.5,3.0,1.0,4.5",
        "Big-Group,2.0,4.0,1.0,6.0",
        "Small-Group,1.0,0.2,2.0,3.0",
        "Small-Group,2.0,2.1,0.5,1.0",
        "Small-Group,0.5,3.9,4.0,8.0",
    )
