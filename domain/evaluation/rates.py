"""Per-class rates derived from a descending-orientation confusion matrix."""

import numpy as np

from domain.schemas import ClassRates


def class_counts(matrix: np.ndarray, k: int) -> tuple[int, int, int, int]:
    """
    Return (tp, row_excess, col_excess, tn) for matrix index ``k``.

    ``tp + row_excess + col_excess + tn`` always equals the matrix total.
    """
    m = np.asarray(matrix, dtype=np.int64)
    total = int(m.sum())
    tp = int(m[k, k])
    row_excess = int(m[k, :].sum()) - tp
    col_excess = int(m[:, k].sum()) - tp
    tn = total - tp - row_excess - col_excess
    return tp, row_excess, col_excess, tn


def _ratio(num: int, den: int) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


def compute_class_rates(matrix: np.ndarray) -> list[ClassRates]:
    """
    Derive tpr/fpr/tnr/fnr for every class of a confusion matrix.

    Row excess (predicted k, actually something else) is the "FN" mass and column
    excess (actually k, predicted something else) is the "FP" mass; tnr divides by
    TN + row excess. This is swapped relative to the usual terminology.
    TODO: decide whether FP/FN should follow the conventional definition (open question).

    Args:
        matrix: Square confusion matrix in descending label order

    Returns:
        One ClassRates per class, ordered by ascending label. Zero denominators yield NaN.
    """
    size = len(matrix)
    out: list[ClassRates] = []
    # index size-1 holds label 0
    for k in reversed(range(size)):
        tp, row_excess, col_excess, tn = class_counts(matrix, k)
        out.append(
            ClassRates(
                label=size - 1 - k,
                tp=tp,
                row_excess=row_excess,
                col_excess=col_excess,
                tn=tn,
                tpr=_ratio(tp, tp + row_excess),
                fpr=_ratio(col_excess, col_excess + tn),
                tnr=_ratio(tn, tn + row_excess),
                fnr=_ratio(row_excess, row_excess + tp),
            )
        )
    return out
