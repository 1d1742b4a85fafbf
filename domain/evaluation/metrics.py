"""Classification metrics for (prediction, actual_class) samples."""

from collections.abc import Sequence

import pandas as pd

from domain.evaluation.bayes import bayes_estimates
from domain.evaluation.confusion import build_confusion_matrix, class_labels
from domain.evaluation.rates import compute_class_rates
from domain.evaluation.sweep import roc_auc, threshold_sweep
from domain.evaluation.tables import confusion_matrix_frame
from domain.schemas import Sample


def compute_classification_metrics(
    samples: Sequence[Sample],
    threshold: float | None = None,
    base_rates: Sequence[float] | None = None,
    include_sweep: bool = False,
) -> tuple[dict, pd.DataFrame]:
    """
    Compute the confusion matrix and every metric derived from it.

    Args:
        samples: (prediction, actual_class) pairs
        threshold: Optional decision threshold in (0, 1)
        base_rates: Optional prior per class (enables Bayes estimates)
        include_sweep: Add the threshold sweep and ROC AUC (binary problems only)

    Returns:
        Tuple of (metrics dict, confusion_matrix DataFrame)

    Raises:
        ConfigurationMismatchError: If base_rates does not have one entry per class
    """
    matrix = build_confusion_matrix(samples, threshold)
    cm_df = confusion_matrix_frame(matrix)
    rates = compute_class_rates(matrix)

    metrics: dict = {
        "n_samples": int(matrix.sum()),
        "threshold": threshold,
        "labels": class_labels(matrix),
        "confusion_matrix": matrix.tolist(),
        "class_rates": [r.model_dump() for r in rates],
    }

    if base_rates:
        metrics["bayes"] = [e.model_dump() for e in bayes_estimates(rates, base_rates)]

    if include_sweep and len(matrix) == 2:
        metrics["threshold_sweep"] = [row.model_dump() for row in threshold_sweep(samples)]
        metrics["roc_auc"] = roc_auc(samples)

    return metrics, cm_df
