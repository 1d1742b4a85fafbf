"""Evaluation workflow and summary rendering."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from application.formatting import (
    format_bayes,
    format_class_rates,
    format_confusion_matrix,
    format_sweep,
)
from domain.evaluation import (
    bayes_frame,
    class_rates_frame,
    compute_classification_metrics,
    sweep_frame,
)
from domain.schemas import BayesEstimate, ClassRates, Sample, SweepRow
from infrastructure.config.models import EvalConfig
from infrastructure.observability import get_log_context

logger = logging.getLogger(__name__)


def run_evaluation(
    cfg: EvalConfig,
    samples: Sequence[Sample],
    metrics_path: Path | None = None,
) -> str:
    """
    Evaluate (prediction, actual_class) samples and render the report.

    Output sections, depending on ``cfg``:
      - confusion matrix (always)
      - per-class rates (verbose >= 1)
      - Bayes estimates (base_rates set)
      - ROC table (verbose >= 2, binary problems only)

    Args:
        cfg: Evaluation settings
        samples: Parsed samples
        metrics_path: Optional JSON file to receive every computed metric and the run context

    Returns:
        Report text for stdout

    Raises:
        ConfigurationMismatchError: If the number of base rates differs from the number of classes
    """
    metrics, cm_df = compute_classification_metrics(
        samples,
        threshold=cfg.threshold,
        base_rates=cfg.base_rates or None,
        include_sweep=cfg.verbose > 1,
    )
    logger.info("Evaluated %d samples over %d classes", metrics["n_samples"], len(metrics["labels"]))
    logger.debug("Confusion matrix (rows=pred, cols=actual):\n%s", cm_df)

    sections = [format_confusion_matrix(cm_df)]

    if cfg.verbose > 0:
        rates = [ClassRates(**r) for r in metrics["class_rates"]]
        sections.append(format_class_rates(class_rates_frame(rates)))

    if "bayes" in metrics:
        estimates = [BayesEstimate(**e) for e in metrics["bayes"]]
        logger.debug("Bayes estimates:\n%s", bayes_frame(estimates))
        sections.append(format_bayes(estimates))

    if "threshold_sweep" in metrics:
        rows = [SweepRow(**r) for r in metrics["threshold_sweep"]]
        sections.append(format_sweep(sweep_frame(rows)))
        logger.info("ROC AUC: %.4f", metrics["roc_auc"])
    elif cfg.verbose > 1:
        logger.warning("ROC table is only available for binary problems; skipped.")

    if metrics_path is not None:
        save_metrics({**metrics, "context": get_log_context()}, metrics_path)

    return "\n\n".join(sections)


def save_metrics(metrics: dict, metrics_path: Path) -> Path:
    """Write the metrics dict as JSON (NaN is written as NaN)."""
    metrics_path.parent.mkdir(parents=True, exist_ok=True)
    with metrics_path.open("w", encoding="utf-8") as f:
        json.dump(metrics, f, ensure_ascii=False, indent=2)
    logger.info("Saved metrics to %s", metrics_path)
    return metrics_path
