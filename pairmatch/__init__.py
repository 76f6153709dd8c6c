"""
pairmatch: randomized matched-pairs resampling.

Two populations of unequal size are compared by repeatedly pairing every
member of the smaller, to-be-matched group with its nearest neighbour (on
the ``pre`` measurement) in the larger group, in a fresh random order each
time. Each iteration yields descriptive statistics of both sides and a
paired t-test on the ``post`` measurement; the run then reports the
distribution of those statistics across iterations.

Every iteration is appended to an *append-only log*, the run's single
source of truth. The aggregate report and the persisted iteration table
are both derived from it. Randomness comes from one explicit generator
per run, so a seed reproduces a run exactly.

Example
-------
>>> import pairmatch
>>> assert hasattr(pairmatch, "core")
>>> assert hasattr(pairmatch, "stats")
"""

from pairmatch import core, stats
from pairmatch.__version__ import __version__

__all__ = ["__version__", "core", "stats"]
