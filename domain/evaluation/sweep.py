"""Threshold sweep (ROC / precision-recall table) for binary problems."""

from collections.abc import Sequence

import numpy as np
from sklearn.metrics import roc_auc_score

from domain.evaluation.confusion import samples_to_arrays
from domain.schemas import Sample, SweepRow

# t = i / SWEEP_STEPS for i in 1..SWEEP_STEPS, i.e. 0.05 .. 1.00
SWEEP_STEPS = 20


def _binary_arrays(samples: Sequence[Sample]) -> tuple[np.ndarray, np.ndarray]:
    preds, actual = samples_to_arrays(samples)
    if not np.isin(actual, (0, 1)).all():
        raise ValueError("threshold sweep requires binary classes (0 or 1)")
    return preds, actual


def threshold_sweep(samples: Sequence[Sample]) -> list[SweepRow]:
    """
    Recompute the 2x2 confusion counts at thresholds 0.05, 0.10, ..., 1.00.

    A sample is predicted positive when ``prediction >= t``.

    Args:
        samples: (prediction, actual_class) pairs with classes in {0, 1}

    Returns:
        One SweepRow per threshold in increasing order. Zero denominators yield NaN.

    Raises:
        ValueError: If any class is not 0 or 1
    """
    preds, actual = _binary_arrays(samples)
    positive = actual == 1

    rows: list[SweepRow] = []
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(1, SWEEP_STEPS + 1):
            t = i / SWEEP_STEPS
            # compare in float32, the precision the predictions were parsed at
            predicted = preds >= np.float32(t)

            tp = np.int64(np.sum(predicted & positive))
            fp = np.int64(np.sum(predicted & ~positive))
            fn = np.int64(np.sum(~predicted & positive))
            tn = np.int64(np.sum(~predicted & ~positive))

            precision = np.float64(tp) / np.float64(tp + fp)
            recall = np.float64(tp) / np.float64(tp + fn)
            f1 = 2.0 * recall * precision / (recall + precision)
            fpr = np.float64(fp) / np.float64(fp + tn)

            rows.append(
                SweepRow(
                    threshold=t,
                    tp=int(tp),
                    fp=int(fp),
                    fn=int(fn),
                    tn=int(tn),
                    precision=float(precision),
                    recall=float(recall),
                    f1=float(f1),
                    fpr=float(fpr),
                )
            )
    return rows


def roc_auc(samples: Sequence[Sample]) -> float:
    """Area under the ROC curve of the raw scores; NaN when only one class is present."""
    preds, actual = _binary_arrays(samples)
    if np.unique(actual).size < 2:
        return float("nan")
    return float(roc_auc_score(actual, preds))
