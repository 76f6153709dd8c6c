"""
pairmatch.stats.common.matching
===============================

Greedy nearest-neighbour matching without replacement.

Each to-be-matched record, taken in the order given, is paired with the
remaining pool record whose ``pre`` value is closest in absolute
difference; that pool record is then removed. The assignment is greedy
and order dependent (not a minimum-total-distance assignment), which is
why shuffling the presentation order between iterations yields a
distribution of pairings.

The pool is kept as an array of ``pre`` values plus a live mask, so
removal is O(1) and each step is a linear scan over the live entries.

Tie-break: among equally close candidates the one earliest in the pool's
input order wins. NaN distances rank after every finite distance.

Examples
--------
>>> from pairmatch.core.records import Record
>>> def rec(pre): return Record(group_label="x", pre=pre, mid=0.0, post=0.0, gain=0.0)
>>> pool = [rec(1.0), rec(2.0)]
>>> pairs = greedy_nearest_match(pool, [rec(1.5), rec(1.6)])
>>> [(p.small.pre, p.big.pre) for p in pairs]
[(1.5, 1.0), (1.6, 2.0)]
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from pairmatch.core.errors import InsufficientPopulation
from pairmatch.core.records import Pair, Record


def check_populations(n_big: int, n_small: int) -> None:
    """Raise `InsufficientPopulation` unless ``n_big >= n_small > 0``."""
    if n_small == 0 or n_big < n_small:
        raise InsufficientPopulation(n_big, n_small)


def greedy_nearest_match(pool: Sequence[Record], ordered: Sequence[Record]) -> List[Pair]:
    """
    Match every record of ``ordered`` to a distinct record of ``pool``.

    Args:
        pool: Matched-against population (not mutated)
        ordered: To-be-matched population, already in presentation order

    Returns:
        One `Pair` per element of ``ordered``, in the same order

    Raises:
        InsufficientPopulation: unless ``len(pool) >= len(ordered) > 0``
    """
    check_populations(len(pool), len(ordered))

    pool_pre = np.fromiter((r.pre for r in pool), dtype=float, count=len(pool))
    alive = np.ones(len(pool), dtype=bool)

    pairs: List[Pair] = []
    for record in ordered:
        candidates = np.flatnonzero(alive)
        with np.errstate(invalid="ignore"):
            distances = np.abs(pool_pre[candidates] - record.pre)
        distances[np.isnan(distances)] = np.inf
        chosen = int(candidates[np.argmin(distances)])
        alive[chosen] = False
        pairs.append(Pair(small=record, big=pool[chosen]))

    return pairs
