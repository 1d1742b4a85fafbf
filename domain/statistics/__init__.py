"""
Descriptive statistics over a single numeric series.

All functions are pure and leave their input untouched.
"""

from domain.statistics.sampling import sample_lines
from domain.statistics.summary import mean, median, mode, quintiles, stdev, summarize, variance

__all__ = [
    "mean",
    "variance",
    "stdev",
    "median",
    "mode",
    "quintiles",
    "summarize",
    "sample_lines",
]
