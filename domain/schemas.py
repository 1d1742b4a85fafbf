"""Pydantic models for the plain-data results returned by the engine."""

from pydantic import BaseModel, Field

# (prediction, actual_class)
Sample = tuple[float, int]


class SeriesSummary(BaseModel):
    """Descriptive statistics for one numeric series."""

    n: int
    min: float
    max: float
    mean: float
    median: float
    mode: float
    stdev: float = Field(..., description="Population standard deviation.")
    variance: float = Field(..., description="Population variance (denominator n).")


class QuantileCut(BaseModel):
    """One order-statistic cut point."""

    percentile: int = Field(..., description="Integer-truncated percentile label.")
    value: float


class ClassRates(BaseModel):
    """Per-class counts and rates derived from a confusion matrix."""

    label: int
    tp: int
    row_excess: int = Field(..., description="Predicted as this class, actually another class.")
    col_excess: int = Field(..., description="Actually this class, predicted as another class.")
    tn: int
    tpr: float
    fpr: float
    tnr: float
    fnr: float


class BayesEstimate(BaseModel):
    """Posterior probability of a class given a positive prediction."""

    label: int
    base_rate: float
    prob_positive: float
    prob_class_given_positive: float


class SweepRow(BaseModel):
    """Binary metrics at a single decision threshold."""

    threshold: float
    tp: int
    fp: int
    fn: int
    tn: int
    precision: float
    recall: float
    f1: float
    fpr: float
