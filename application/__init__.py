"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it parses the
input text, runs the engine and renders fixed-width text for stdout.
"""

from application.analysis import run_byte_histogram, run_correlation, run_entropy, run_hash_trick
from application.evaluation import run_evaluation, save_metrics
from application.statistics import run_quantiles, run_sample, run_summary

__all__ = [
    # Single-series workflows
    "run_summary",
    "run_quantiles",
    "run_sample",
    # Evaluation
    "run_evaluation",
    "save_metrics",
    # Correlation and features
    "run_correlation",
    "run_byte_histogram",
    "run_entropy",
    "run_hash_trick",
]
