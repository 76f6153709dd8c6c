"""
pairmatch.core.errors
=====================

Exception hierarchy for a resampling run.

All errors derive from `PairMatchError` so callers (the CLI in particular)
can abort a run with a single handler. Each error also derives from the
closest built-in so code that already catches `ValueError` keeps working.

- `InputError`: input file missing, unreadable, or a row fails to parse.
- `InsufficientPopulation`: the to-be-matched group is empty or outnumbers
  the matched-against group.
- `DegenerateSample`: a paired t-test over fewer than two pairs or with
  zero standard error (raised only in strict mode).
- `EmptyIterationSet`: zero iterations requested or nothing to aggregate.

Examples
--------
>>> from pairmatch.core.errors import InsufficientPopulation, PairMatchError
>>> issubclass(InsufficientPopulation, PairMatchError)
True
>>> issubclass(InsufficientPopulation, ValueError)
True
"""

from __future__ import annotations


class PairMatchError(Exception):
    """Base class for every fatal condition of a resampling run."""


class InputError(PairMatchError):
    """The input table could not be read into typed records."""


class InsufficientPopulation(PairMatchError, ValueError):
    """The matched-against population cannot cover the to-be-matched one."""

    def __init__(self, n_big: int, n_small: int) -> None:
        self.n_big = n_big
        self.n_small = n_small
        if n_small == 0:
            message = "No records to match: the to-be-matched population is empty"
        else:
            message = (
                f"Cannot match {n_small} records against a population of {n_big} "
                "without replacement"
            )
        super().__init__(message)


class DegenerateSample(PairMatchError, ArithmeticError):
    """The paired t-test is undefined for the given sample."""


class EmptyIterationSet(PairMatchError, ValueError):
    """At least one iteration is required."""
