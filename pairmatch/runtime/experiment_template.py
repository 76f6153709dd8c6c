"""
pairmatch.runtime.experiment_template
=====================================

Base classes for resampling templates.

A template owns the experiment logic (how to prepare populations, what one
iteration computes, how results are aggregated); a runner owns the loop
and the random generator. Templates append one row per iteration to the
`IterationLog` they are set up with.

Examples
--------
>>> import numpy as np
>>> from pairmatch.backends.polars.ledger import IterationLog
>>> from pairmatch.core.names import ITERATION_FIELDS
>>> from pairmatch.core.records import IterationStatistics
>>> from pairmatch.runtime.experiment_template import ResamplingTemplate
>>> class ConstantTemplate(ResamplingTemplate):
...     def prepare(self): pass
...     def iterate(self, rng):
...         return IterationStatistics(**{n: 0.0 for n in ITERATION_FIELDS})
...     def extract_results(self, log): return log.count()
>>> template = ConstantTemplate("constant")
>>> template.setup(IterationLog())
>>> _ = template.run_iteration(np.random.default_rng(0))
>>> template.analyze()
1
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from pairmatch.backends.polars.ledger import IterationLog
from pairmatch.core.errors import EmptyIterationSet
from pairmatch.core.records import AggregateSummary, IterationStatistics


@dataclass
class ResamplingResult:
    """Outcome of a resampling run: the full iteration log and its aggregate."""

    log: IterationLog
    summary: AggregateSummary

    @property
    def iterations(self) -> int:
        return self.log.count()


class ResamplingTemplate(ABC):
    """
    Base class for resampling experiment templates.

    Encapsulates:
    - Input preparation and validation (before any iteration runs)
    - One iteration's computation
    - Aggregation of the iteration log

    Subclasses implement `prepare`, `iterate` and `extract_results`.
    """

    def __init__(self, experiment_id: str):
        self.experiment_id = experiment_id
        self.log: Optional[IterationLog] = None
        self._is_setup = False
        self._current_iteration = 0

    @abstractmethod
    def prepare(self) -> None:
        """Validate inputs and build whatever every iteration shares."""
        pass

    @abstractmethod
    def iterate(self, rng: np.random.Generator) -> IterationStatistics:
        """Compute one iteration. Must not mutate shared state."""
        pass

    @abstractmethod
    def extract_results(self, log: IterationLog) -> Any:
        """Aggregate the iteration log."""
        pass

    def setup(self, log: IterationLog) -> None:
        """Attach the template to an empty log and prepare its inputs."""
        if log.count():
            raise ValueError(
                f"setup requires an empty IterationLog, got one with {log.count()} row(s)"
            )
        self.prepare()
        self.log = log
        self._is_setup = True
        self._current_iteration = 0

    def run_iteration(self, rng: np.random.Generator) -> IterationStatistics:
        """Run one iteration and append it to the log."""
        if not self._is_setup or self.log is None:
            raise RuntimeError("Template not setup. Call setup(log) first.")

        stats = self.iterate(rng)
        self.log.append(stats)
        self._current_iteration += 1
        return stats

    def analyze(self) -> AggregateSummary:
        """Aggregate everything appended so far."""
        if not self._is_setup or self.log is None:
            raise RuntimeError("Template not setup. Call setup(log) first.")

        if self._current_iteration == 0:
            raise EmptyIterationSet(
                "No iterations run yet. Call run_iteration() first."
            )

        return self.extract_results(self.log)

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the template state."""
        return {
            "experiment_id": str(self.experiment_id),
            "status": "ready" if self._is_setup else "not_setup",
            "current_iteration": self._current_iteration,
        }

    def reset(self) -> None:
        """Detach from the current log (the log itself is append-only and kept)."""
        self.log = None
        self._is_setup = False
        self._current_iteration = 0
