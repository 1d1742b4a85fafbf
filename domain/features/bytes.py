"""Byte-distribution features: normalized histogram and Shannon entropy."""

import numpy as np

N_BYTE_VALUES = 256


def byte_counts(data: bytes) -> np.ndarray:
    """Raw 256-bin count of byte values."""
    return np.bincount(np.frombuffer(bytes(data), dtype=np.uint8), minlength=N_BYTE_VALUES)


def byte_histogram(data: bytes) -> np.ndarray:
    """
    Probability distribution of byte values.

    Each of the 256 entries is count / len(data), so entries sum to 1 for non-empty
    input. Empty input returns an all-zero histogram.
    """
    counts = byte_counts(data).astype(np.float64)
    if len(data) == 0:
        return counts
    return counts / len(data)


def entropy(data: bytes) -> float:
    """Shannon entropy in bits over the non-zero byte bins; 0.0 for empty input."""
    hist = byte_histogram(data)
    p = hist[hist > 0]
    if p.size == 0:
        return 0.0
    return float(-np.sum(p * np.log2(p)))
