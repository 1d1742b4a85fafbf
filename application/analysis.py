"""Correlation and feature-extraction workflows."""

import logging

from application.formatting import format_correlation, format_vector
from domain.analysis import correlation_matrix
from domain.features import byte_histogram, entropy, hash_trick
from infrastructure.config.models import HashTrickConfig
from infrastructure.io import NO_LABEL_COL, to_matrix

logger = logging.getLogger(__name__)


def run_correlation(text: str, label_col: int = NO_LABEL_COL, with_header: bool = False) -> str:
    """Pearson correlation table of every column except ``label_col``."""
    xdata, _ = to_matrix(text, label_col, with_header)
    logger.info("Loaded matrix: %d rows, %d columns", xdata.shape[0], xdata.shape[1])
    return format_correlation(correlation_matrix(xdata))


def run_byte_histogram(data: bytes) -> str:
    """Normalized byte histogram as one comma-separated line."""
    logger.info("Read %d bytes", len(data))
    return format_vector(byte_histogram(data))


def run_entropy(data: bytes) -> str:
    """Shannon entropy (bits per byte)."""
    if not data:
        logger.warning("Empty input; entropy reported as 0")
    return str(entropy(data))


def run_hash_trick(cfg: HashTrickConfig, text: str) -> str:
    """Hashed token vector as one comma-separated line."""
    # trailing line terminators come from file/stdin, not from the token list
    vector = hash_trick(text.rstrip("\r\n"), cfg.k_buckets, binary=cfg.binary, delimiter=cfg.delimiter)
    return format_vector(vector)
