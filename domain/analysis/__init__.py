"""Correlation structure of multi-column inputs."""

from domain.analysis.correlation import correlation_matrix, symmetric

__all__ = [
    "correlation_matrix",
    "symmetric",
]
