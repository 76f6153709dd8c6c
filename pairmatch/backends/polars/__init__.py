"""
pairmatch.backends.polars
=========================

Polars-backed iteration log and CSV/Parquet sources and sinks.
"""
