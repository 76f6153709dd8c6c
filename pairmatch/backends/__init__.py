"""
pairmatch.backends
==================

Storage backends for the iteration log and tabular I/O.
"""
