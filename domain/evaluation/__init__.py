"""
Classifier evaluation.

Provides:
- Confusion matrix construction (descending label orientation)
- Per-class rates and Bayes calibration against base rates
- Binary threshold sweep (precision / recall / F1 / FPR) and ROC AUC
- Labelled pandas tables for display

All functions are pure (depend only on numpy, pandas, sklearn).
"""

from domain.evaluation.bayes import bayes_estimates
from domain.evaluation.confusion import build_confusion_matrix, class_labels, samples_to_arrays
from domain.evaluation.metrics import compute_classification_metrics
from domain.evaluation.rates import class_counts, compute_class_rates
from domain.evaluation.sweep import roc_auc, threshold_sweep
from domain.evaluation.tables import (
    bayes_frame,
    class_rates_frame,
    confusion_matrix_frame,
    sweep_frame,
)

__all__ = [
    "build_confusion_matrix",
    "class_labels",
    "samples_to_arrays",
    "class_counts",
    "compute_class_rates",
    "bayes_estimates",
    "threshold_sweep",
    "roc_auc",
    "compute_classification_metrics",
    "confusion_matrix_frame",
    "class_rates_frame",
    "bayes_frame",
    "sweep_frame",
]
