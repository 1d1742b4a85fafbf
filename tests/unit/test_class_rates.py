import math

import numpy as np
import pytest

from domain.errors import ConfigurationMismatchError
from domain.evaluation import bayes_estimates, class_counts, class_rates_frame, compute_class_rates

# descending orientation: row 0 / col 0 is class 1
MATRIX = np.array([[3, 1], [2, 4]])


def test_counts_partition_the_total() -> None:
    m = np.array([[5, 1, 0], [2, 7, 3], [1, 0, 4]])
    total = int(m.sum())

    for k in range(3):
        tp, row_excess, col_excess, tn = class_counts(m, k)
        assert tp + row_excess + col_excess + tn == total


def test_rates_follow_row_and_column_excess() -> None:
    rates = compute_class_rates(MATRIX)

    # ascending label order
    assert [r.label for r in rates] == [0, 1]

    zero, one = rates
    assert (one.tp, one.row_excess, one.col_excess, one.tn) == (3, 1, 2, 4)
    assert one.tpr == pytest.approx(3 / 4)
    assert one.fpr == pytest.approx(2 / 6)
    assert one.fnr == pytest.approx(1 / 4)
    assert one.tnr == pytest.approx(4 / 5)

    assert (zero.tp, zero.row_excess, zero.col_excess, zero.tn) == (4, 2, 1, 3)
    assert zero.tpr == pytest.approx(4 / 6)
    assert zero.fpr == pytest.approx(1 / 4)
    assert zero.fnr == pytest.approx(2 / 6)
    assert zero.tnr == pytest.approx(3 / 5)


def test_zero_denominator_is_nan() -> None:
    rates = compute_class_rates(np.array([[0, 0], [0, 5]]))
    one = rates[1]

    assert math.isnan(one.tpr)
    assert math.isnan(one.fnr)
    assert one.fpr == 0.0
    assert one.tnr == 1.0


def test_rates_frame() -> None:
    df = class_rates_frame(compute_class_rates(MATRIX))

    assert list(df.columns) == ["tpr", "fpr", "tnr", "fnr"]
    assert list(df.index) == [0, 1]
    assert df.loc[1, "tpr"] == pytest.approx(0.75)


def test_bayes_estimates() -> None:
    estimates = bayes_estimates(compute_class_rates(MATRIX), [0.9, 0.1])

    zero, one = estimates
    assert one.prob_positive == pytest.approx(0.75 * 0.1 + (1 / 3) * 0.9)
    assert one.prob_class_given_positive == pytest.approx(0.2)
    assert zero.prob_positive == pytest.approx(0.625)
    assert zero.prob_class_given_positive == pytest.approx(0.96)


def test_bayes_requires_one_base_rate_per_class() -> None:
    with pytest.raises(ConfigurationMismatchError):
        bayes_estimates(compute_class_rates(MATRIX), [0.5])


def test_bayes_degenerate_rates_propagate_nan() -> None:
    # class 1 never predicted and never present: tpr NaN
    rates = compute_class_rates(np.array([[0, 0], [0, 5]]))
    estimates = bayes_estimates(rates, [0.5, 0.5])

    assert math.isnan(estimates[1].prob_class_given_positive)
