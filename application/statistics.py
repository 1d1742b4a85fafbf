"""Single-series workflows: summary, quantiles and row sampling."""

import logging

from application.formatting import format_quantiles, format_summary
from domain.errors import InsufficientDataError
from domain.statistics import quintiles, sample_lines, summarize
from infrastructure.config.models import SampleConfig, SummaryConfig
from infrastructure.io import data_lines, to_vector

logger = logging.getLogger(__name__)


def run_summary(cfg: SummaryConfig, text: str, with_header: bool = False) -> str:
    """Summary statistics of a single numeric column."""
    series = to_vector(text, with_header)
    logger.info("Loaded %d values", len(series))
    return format_summary(summarize(series, cfg.precision), transpose=cfg.transpose)


def run_quantiles(cfg: SummaryConfig, text: str, with_header: bool = False) -> str | None:
    """
    k-quantile cut points of a single numeric column.

    Returns None (and logs a warning) when there are fewer values than ``k``.
    """
    series = to_vector(text, with_header)
    try:
        cuts = quintiles(series, cfg.quantiles)
    except InsufficientDataError as e:
        logger.warning("%s", e)
        return None
    return format_quantiles(cuts)


def run_sample(
    cfg: SampleConfig,
    text: str,
    size: int,
    replace: bool = False,
    with_header: bool = False,
) -> str:
    """Random rows of the input; the header (if any) is kept on top."""
    header, lines = data_lines(text, with_header)
    picked = sample_lines(lines, size, replace=replace, seed=cfg.seed)
    logger.info("Sampled %d of %d rows (replace=%s)", len(picked), len(lines), replace)
    if header:
        picked = [header, *picked]
    return "\n".join(picked)
