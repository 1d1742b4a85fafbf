"""Fixed-width text rendering of engine results."""

from collections.abc import Sequence

import numpy as np
import pandas as pd

from application.constants import COL, SUMMARY_COL, SUMMARY_T_COL
from domain.schemas import BayesEstimate, QuantileCut, SeriesSummary

SUMMARY_FIELDS = [
    ("n", "n"),
    ("min", "min"),
    ("max", "max"),
    ("mean", "mean"),
    ("median", "median"),
    ("mode", "mode"),
    ("sd", "stdev"),
    ("var", "variance"),
]


def _cell(value: object, width: int, spec: str = "") -> str:
    if isinstance(value, float | np.floating) and spec:
        return f"{float(value):<{width}{spec}}"
    return f"{value!s:<{width}}"


def format_summary(summary: SeriesSummary, transpose: bool = False) -> str:
    """Summary statistics as a one-row table, or one statistic per line when transposed."""
    values = summary.model_dump()
    if transpose:
        return "\n".join(
            (_cell(label, SUMMARY_T_COL) + _cell(values[field], SUMMARY_T_COL, ".4f")).rstrip()
            for label, field in SUMMARY_FIELDS
        )

    header = "".join(_cell(label, SUMMARY_COL) for label, _ in SUMMARY_FIELDS)
    row = "".join(_cell(values[field], SUMMARY_COL, ".4f") for _, field in SUMMARY_FIELDS)
    return f"{header.rstrip()}\n{row.rstrip()}"


def format_quantiles(cuts: Sequence[QuantileCut]) -> str:
    """One ``percentile% value`` line per cut point."""
    return "\n".join(f"{f'{c.percentile}%':<{COL}} {c.value:<{COL}g}".rstrip() for c in cuts)


def format_confusion_matrix(cm_df: pd.DataFrame) -> str:
    """Confusion matrix with predicted classes on the y-axis and actual on the x-axis."""
    lines = [
        "Confusion Matrix",
        "Predicted on y-axis, Actual on x-axis",
        "",
        ("".join(_cell(c, COL) for c in ["-", *cm_df.columns])).rstrip(),
    ]
    for label, row in cm_df.iterrows():
        lines.append(("".join(_cell(v, COL) for v in [label, *row.tolist()])).rstrip())
    return "\n".join(lines)


def format_class_rates(rates_df: pd.DataFrame) -> str:
    """Per-class tpr/fpr/tnr/fnr table."""
    lines = [("".join(_cell(c, COL) for c in ["class", *rates_df.columns])).rstrip()]
    for label, row in rates_df.iterrows():
        cells = [_cell(label, COL)] + [_cell(float(v), COL, ".3f") for v in row.tolist()]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def format_bayes(estimates: Sequence[BayesEstimate]) -> str:
    """Posterior estimate per class."""
    lines = ["Bayes estimates with baseline rates", ""]
    lines.extend(
        f"{e.label}: Pr(class_{e.label}|positive) = {e.prob_class_given_positive}" for e in estimates
    )
    return "\n".join(lines)


def format_sweep(sweep_df: pd.DataFrame) -> str:
    """ROC table: threshold followed by precision, recall, f1, fpr."""
    lines = ["ROC table", "", ("".join(_cell(c, COL) for c in ["t", *sweep_df.columns])).rstrip()]
    for t, row in sweep_df.iterrows():
        cells = [_cell(float(t), COL, ".2f")] + [_cell(float(v), COL, ".4f") for v in row.tolist()]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def format_correlation(matrix: np.ndarray) -> str:
    """Lower-triangular correlation table; the upper triangle is left blank."""
    size = len(matrix)
    lines = [("".join(_cell(c, COL) for c in ["-", *range(size)])).rstrip()]
    for i in range(size):
        cells = [_cell(i, COL)] + [_cell(float(matrix[i][j]), COL, ".2f") for j in range(i + 1)]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def format_vector(values: Sequence[float] | np.ndarray) -> str:
    """Comma-joined vector on a single line."""
    return ",".join(str(v) for v in np.asarray(values).tolist())
