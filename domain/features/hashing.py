"""Feature hashing ("hash trick") of delimited tokens."""

import numpy as np
from sklearn.utils import murmurhash3_32


def tokenize(text: str, delimiter: str = ",") -> list[str]:
    """Split on ``delimiter`` verbatim; tokens are not trimmed."""
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    return text.split(delimiter)


def hash_trick(
    text: str,
    k_buckets: int,
    binary: bool = False,
    delimiter: str = ",",
) -> np.ndarray:
    """
    Map tokens to a fixed-size count vector with MurmurHash3 (32-bit, seed 0).

    Only ``k_buckets - 1`` slots are allocated and hashes are reduced modulo
    ``k_buckets - 1``, so one requested bucket is never used.

    Args:
        text: Delimited token string
        k_buckets: Requested number of buckets (>= 2)
        binary: Store 1/0 presence instead of counts
        delimiter: Token separator

    Returns:
        uint32 vector of length ``k_buckets - 1``

    Raises:
        ValueError: If k_buckets < 2 or the delimiter is empty
    """
    if k_buckets < 2:
        raise ValueError(f"k_buckets must be >= 2, got {k_buckets}")

    n_slots = k_buckets - 1
    out = np.zeros(n_slots, dtype=np.uint32)
    for token in tokenize(text, delimiter):
        index = murmurhash3_32(token, seed=0, positive=True) % n_slots
        if binary:
            out[index] = 1
        else:
            out[index] += 1
    return out
