"""
pairmatch.core.config
=====================

Run configuration for a matched-pairs resampling run.

Examples
--------
>>> from pairmatch.core.config import ResamplingConfig
>>> config = ResamplingConfig(iterations=100, seed=7)
>>> config.validate()
>>> config.reference_label
'Big-Group'
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Optional

from pairmatch.core.errors import EmptyIterationSet
from pairmatch.core.names import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_REFERENCE_LABEL,
    DEFAULT_SIGNIFICANCE_LEVEL,
)


@dataclass(frozen=True)
class ResamplingConfig:
    """
    Configuration for a resampling run.

    Parameters
    ----------
    iterations : int
        Number of shuffle/match/test iterations (at least 1)
    seed : int, optional
        Seed for the run's random generator; None draws fresh entropy
    reference_label : str, default="Big-Group"
        Label of the matched-against population; every other label is
        treated as the to-be-matched population
    significance_level : float, default=0.05
        Threshold below which an iteration's t density counts as significant
    strict : bool, default=False
        Raise `DegenerateSample` instead of propagating non-finite t values
    output : str, default="iterations.csv"
        Destination of the iteration table
    """

    iterations: int
    seed: Optional[int] = None
    reference_label: str = DEFAULT_REFERENCE_LABEL
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL
    strict: bool = False
    output: str = DEFAULT_OUTPUT_PATH

    def validate(self) -> None:
        """Validate the configuration."""
        if self.iterations < 1:
            raise EmptyIterationSet(
                f"At least one iteration is required, got {self.iterations}"
            )
        if not 0 < self.significance_level < 1:
            raise ValueError(
                f"significance_level must be in (0, 1), got {self.significance_level}"
            )
        if not self.reference_label:
            raise ValueError("reference_label must be a non-empty string")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

    def with_overrides(self, **overrides: Any) -> "ResamplingConfig":
        """Return a copy with the given fields replaced (None values are ignored)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
