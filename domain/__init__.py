"""
Domain layer: the statistics engine, with no I/O.

Contains:
- schemas: Pydantic result models
- errors: Error hierarchy
- statistics: Descriptive statistics and row sampling
- evaluation: Confusion matrix, class rates, Bayes calibration, threshold sweep
- analysis: Pearson correlation matrix
- features: Byte histogram, entropy and feature hashing
"""

from domain.errors import (
    ConfigurationError,
    ConfigurationMismatchError,
    EmptyInputError,
    InsufficientDataError,
    MalformedInputError,
    StatsError,
)
from domain.schemas import BayesEstimate, ClassRates, QuantileCut, Sample, SeriesSummary, SweepRow

__all__ = [
    "Sample",
    "SeriesSummary",
    "QuantileCut",
    "ClassRates",
    "BayesEstimate",
    "SweepRow",
    "StatsError",
    "InsufficientDataError",
    "EmptyInputError",
    "MalformedInputError",
    "ConfigurationError",
    "ConfigurationMismatchError",
]
