"""
pairmatch.reporting
===================

Human-readable views of a resampling run.
"""

from pairmatch.reporting.summary import SummaryReporter

__all__ = ["SummaryReporter"]
