"""Bayes-theorem calibration of class rates against known base rates."""

from collections.abc import Sequence

import numpy as np

from domain.errors import ConfigurationMismatchError
from domain.schemas import BayesEstimate, ClassRates


def bayes_estimates(rates: Sequence[ClassRates], base_rates: Sequence[float]) -> list[BayesEstimate]:
    """
    Estimate P(class | positive) for each class from its rates and prior.

        P(positive)         = tpr * b + fpr * (1 - b)
        P(class | positive) = tpr * b / P(positive)

    Args:
        rates: ClassRates ordered by ascending label
        base_rates: Prior probability of each class, indexed by label

    Returns:
        One BayesEstimate per class. Values are not clamped; NaN/Inf propagate.

    Raises:
        ConfigurationMismatchError: If the number of base rates differs from the number of classes
    """
    if len(base_rates) != len(rates):
        raise ConfigurationMismatchError(
            f"invalid number of baseline values ({len(base_rates)}), "
            f"it must match the number of classes ({len(rates)})"
        )

    out: list[BayesEstimate] = []
    with np.errstate(divide="ignore", invalid="ignore"):
        for r in rates:
            b = np.float64(base_rates[r.label])
            tpr = np.float64(r.tpr)
            prob_positive = tpr * b + np.float64(r.fpr) * (1.0 - b)
            out.append(
                BayesEstimate(
                    label=r.label,
                    base_rate=float(b),
                    prob_positive=float(prob_positive),
                    prob_class_given_positive=float(tpr * b / prob_positive),
                )
            )
    return out
