"""
pairmatch.api - User-Friendly Facade
====================================

Off-the-shelf entry points that hide the template/runner machinery.

- `matched_pairs_resampling()`: run over in-memory records
- `run_from_config()`: run over records with a `ResamplingConfig`
- `resample_file()`: read a CSV, run, and write the iteration table

Examples
--------
>>> from pairmatch.api import matched_pairs_resampling
>>> callable(matched_pairs_resampling)
True
"""

from pairmatch.api.resampling import (
    matched_pairs_resampling,
    resample_file,
    run_from_config,
)

__all__ = ["matched_pairs_resampling", "resample_file", "run_from_config"]
