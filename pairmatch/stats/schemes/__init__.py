"""
pairmatch.stats.schemes
=======================

Problem-specific schemes built from the generic methods in
`pairmatch.stats.common`.
"""
