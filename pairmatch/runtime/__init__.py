"""
pairmatch.runtime
=================

Runtime for executing resampling templates.

Key Components
--------------
- `ResamplingTemplate`: Base class for experiment definitions
- `ResamplingResult`: Iteration log plus aggregate summary of a run
- `SequentialRunner`: Runs a template N times with one random generator
"""

from pairmatch.runtime.experiment_template import ResamplingResult, ResamplingTemplate
from pairmatch.runtime.runners import SequentialRunner

__all__ = ["ResamplingResult", "ResamplingTemplate", "SequentialRunner"]
