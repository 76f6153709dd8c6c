"""
pairmatch.stats.common
======================

Scheme-independent statistical building blocks: descriptive statistics,
the paired t-test and greedy nearest-neighbour matching.
"""
