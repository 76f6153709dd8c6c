"""
pairmatch.core
==============

Typed records, names, errors and configuration shared by every layer.
"""

from pairmatch.core.config import ResamplingConfig
from pairmatch.core.errors import (
    DegenerateSample,
    EmptyIterationSet,
    InputError,
    InsufficientPopulation,
    PairMatchError,
)
from pairmatch.core.records import AggregateSummary, IterationStatistics, Pair, Record

__all__ = [
    "AggregateSummary",
    "DegenerateSample",
    "EmptyIterationSet",
    "InputError",
    "InsufficientPopulation",
    "IterationStatistics",
    "Pair",
    "PairMatchError",
    "Record",
    "ResamplingConfig",
]
