"""Labelled pandas tables for evaluation results."""

from collections.abc import Sequence

import numpy as np
import pandas as pd

from domain.evaluation.confusion import class_labels
from domain.schemas import BayesEstimate, ClassRates, SweepRow

RATE_COLUMNS = ["tpr", "fpr", "tnr", "fnr"]
# canonical sweep column order
SWEEP_COLUMNS = ["precision", "recall", "f1", "fpr"]


def confusion_matrix_frame(matrix: np.ndarray) -> pd.DataFrame:
    """
    Wrap a descending-orientation confusion matrix in a labelled DataFrame.

    Index = predicted class, columns = actual class, both in descending label order.
    """
    labels = class_labels(matrix)
    return pd.DataFrame(
        np.asarray(matrix),
        index=pd.Index(labels, name="predicted"),
        columns=pd.Index(labels, name="actual"),
    )


def class_rates_frame(rates: Sequence[ClassRates]) -> pd.DataFrame:
    """One row per class label with the four rates."""
    df = pd.DataFrame(
        [{"class": r.label, **{c: getattr(r, c) for c in RATE_COLUMNS}} for r in rates],
        columns=["class", *RATE_COLUMNS],
    )
    return df.set_index("class")


def bayes_frame(estimates: Sequence[BayesEstimate]) -> pd.DataFrame:
    """One row per class label with its base rate and posterior."""
    df = pd.DataFrame(
        [e.model_dump() for e in estimates],
        columns=["label", "base_rate", "prob_positive", "prob_class_given_positive"],
    )
    return df.set_index("label")


def sweep_frame(rows: Sequence[SweepRow]) -> pd.DataFrame:
    """Threshold sweep table indexed by threshold, columns in canonical order."""
    df = pd.DataFrame(
        [{"t": r.threshold, **{c: getattr(r, c) for c in SWEEP_COLUMNS}} for r in rows],
        columns=["t", *SWEEP_COLUMNS],
    )
    return df.set_index("t")
