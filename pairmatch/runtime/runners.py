"""
pairmatch.runtime.runners
=========================

Runners execute resampling templates.

Runners own the iteration loop and the random generator while templates
define what one iteration computes. Iterations run strictly in sequence
and draw from a single generator, so a seed fixes the whole run.

Examples
--------
>>> from pairmatch.core.records import Record
>>> from pairmatch.runtime.runners import SequentialRunner
>>> from pairmatch.stats.schemes.matched_pairs.experiments import MatchedPairsTemplate
>>> records = [Record("Big-Group", float(v), 0.0, float(v), 0.0) for v in range(6)]
>>> records += [Record("Small", float(v), 0.0, float(v) * 2, 0.0) for v in range(3)]
>>> result = SequentialRunner(MatchedPairsTemplate(records)).run(10, seed=42)
>>> result.iterations
10
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import numpy as np

from pairmatch.backends.polars.ledger import IterationLog
from pairmatch.core.errors import EmptyIterationSet
from pairmatch.runtime.experiment_template import ResamplingResult, ResamplingTemplate

logger = logging.getLogger(__name__)


class SequentialRunner:
    """
    Sequential resampling runner.

    Provides:
    - Setup against a fresh or caller-supplied (empty) iteration log;
      every run after the first starts a fresh log
    - A single explicit random generator per run
    - Progress logging
    - Aggregation once every iteration has completed
    """

    def __init__(self, template: ResamplingTemplate, log: Optional[IterationLog] = None):
        self.template = template
        self._log: Optional[IterationLog] = None

        if log is not None:
            self.setup(log)

    def setup(self, log: IterationLog) -> None:
        """Setup the runner (and its template) with a specific log."""
        self.template.setup(log)
        self._log = log

    def run(
        self,
        iterations: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> ResamplingResult:
        """
        Run ``iterations`` iterations and aggregate them.

        Parameters
        ----------
        iterations : int
            Number of iterations (at least 1)
        seed : int, optional
            Seed for a new ``numpy.random.Generator``; ignored when ``rng`` is given
        rng : numpy.random.Generator, optional
            Generator to draw from

        Returns
        -------
        ResamplingResult
            The iteration log and its aggregate summary
        """
        if iterations < 1:
            raise EmptyIterationSet(f"At least one iteration is required, got {iterations}")

        # A run aggregates only its own rows.
        log = self._log
        if log is None or log.count():
            log = IterationLog()
            self.setup(log)

        generator = rng if rng is not None else np.random.default_rng(seed)
        logger.info(
            "Running %d iteration(s) of %s", iterations, self.template.experiment_id
        )

        progress_every = max(iterations // 10, 1)
        for i in range(1, iterations + 1):
            self.template.run_iteration(generator)
            if i % progress_every == 0:
                logger.debug("Completed %d/%d iterations", i, iterations)

        summary = self.template.analyze()
        logger.info(
            "Finished %d iteration(s); proportion significant = %s",
            summary.iterations,
            summary.proportion_significant,
        )
        return ResamplingResult(log=log, summary=summary)

    def get_summary(self) -> Dict[str, Any]:
        """Template summary plus runner state."""
        summary = self.template.get_summary()
        summary.update(
            {
                "runner_type": "sequential",
                "logged_iterations": self._log.count() if self._log is not None else 0,
            }
        )
        return summary

    def reset(self) -> None:
        """Reset template and runner; the next run starts a fresh log."""
        self.template.reset()
        self._log = None
