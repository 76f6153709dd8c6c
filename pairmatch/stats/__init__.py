"""
Statistical methods for matched-pairs resampling.

1. **Common** (pairmatch.stats.common):
   Generic building blocks independent of any scheme: descriptive
   statistics, the paired t-test and greedy nearest-neighbour matching.

2. **Schemes** (pairmatch.stats.schemes):
   The matched-pairs scheme composing those blocks into iterations,
   aggregation and an experiment template.

Example:
--------
>>> from pairmatch.stats.common.t_test import paired_t
>>> paired_t([1.0, 2.0, 4.0], [1.0, 1.0, 1.0]).df
2
"""
