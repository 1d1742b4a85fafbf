"""Random sampling of input rows."""

from collections.abc import Sequence

import numpy as np


def sample_lines(
    lines: Sequence[str],
    size: int,
    replace: bool = False,
    seed: int | None = None,
) -> list[str]:
    """
    Draw ``size`` rows from ``lines``.

    Args:
        lines: Candidate rows (header already removed)
        size: Number of rows to return
        replace: Sample with replacement if True
        seed: Optional seed for a reproducible draw

    Returns:
        The sampled rows, in draw order

    Raises:
        ValueError: If size is not positive, there are no rows, or (without replacement)
            size exceeds the number of rows
    """
    if size <= 0:
        raise ValueError(f"sample size must be a positive number, got {size}")
    if not lines:
        raise ValueError("cannot sample from an empty input")
    if not replace and size > len(lines):
        raise ValueError(
            f"sampling without replacement needs size <= {len(lines)} (rows in input), got {size}"
        )

    rng = np.random.default_rng(seed)
    idx = rng.choice(len(lines), size=size, replace=replace)
    return [lines[int(i)] for i in idx]
