"""Confusion matrix construction from (prediction, actual_class) samples."""

from collections.abc import Sequence

import numpy as np

from domain.errors import EmptyInputError
from domain.schemas import Sample


def samples_to_arrays(samples: Sequence[Sample]) -> tuple[np.ndarray, np.ndarray]:
    """Split samples into (float32 predictions, int64 classes) arrays."""
    if len(samples) == 0:
        return np.empty(0, dtype=np.float32), np.empty(0, dtype=np.int64)
    preds, actual = zip(*samples, strict=True)
    return np.asarray(preds, dtype=np.float32), np.asarray(actual, dtype=np.int64)


def build_confusion_matrix(samples: Sequence[Sample], threshold: float | None = None) -> np.ndarray:
    """
    Count predicted vs. actual classes.

    The number of classes is the number of distinct actual classes observed. The
    predicted row for a sample is:
      - ``floor(p + (1 - threshold))`` when a threshold is given
      - ``floor(p + 0.5)`` for a two-class problem without threshold
      - ``floor(p)`` otherwise (p is already a class index)

    The arithmetic is done in float32, the precision predictions are parsed at.

    The result is in descending label order: index 0 is the highest class, so the
    binary layout reads ``TP FP / FN TN`` for class 1.

    Args:
        samples: (prediction, actual_class) pairs
        threshold: Optional decision threshold in (0, 1)

    Returns:
        Square int64 matrix, rows = predicted, cols = actual

    Raises:
        EmptyInputError: If there are no samples
        ValueError: If threshold is outside (0, 1)
        IndexError: If a predicted row or an actual class falls outside 0..size-1
    """
    if threshold is not None and not 0.0 < threshold < 1.0:
        raise ValueError(f"threshold must be in (0, 1), got {threshold}")

    preds, actual = samples_to_arrays(samples)
    if preds.size == 0:
        raise EmptyInputError("cannot build a confusion matrix from zero samples")

    size = int(np.unique(actual).size)
    # float32 throughout, so a prediction equal to the threshold lands on 1.0
    if threshold is not None:
        rows = np.floor(preds + (np.float32(1.0) - np.float32(threshold)))
    elif size == 2:
        rows = np.floor(preds + np.float32(0.5))
    else:
        rows = np.floor(preds)
    rows = rows.astype(np.int64)

    bad = (rows < 0) | (rows >= size) | (actual < 0) | (actual >= size)
    if bad.any():
        i = int(np.argmax(bad))
        raise IndexError(
            f"sample {i} maps to row={rows[i]}, class={actual[i]} outside a {size}x{size} matrix; "
            "classes must form a dense range 0..N"
        )

    matrix = np.zeros((size, size), dtype=np.int64)
    np.add.at(matrix, (rows, actual), 1)

    return matrix[::-1, ::-1].copy()


def class_labels(matrix: np.ndarray) -> list[int]:
    """Class label of each matrix index (descending)."""
    size = len(matrix)
    return [size - 1 - k for k in range(size)]
