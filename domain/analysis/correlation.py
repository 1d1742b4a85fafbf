"""Pairwise Pearson correlation over the columns of a feature table."""

import numpy as np

from domain.errors import EmptyInputError


def correlation_matrix(matrix: np.ndarray) -> np.ndarray:
    """
    Pearson correlation for every column pair (i, j) with i <= j.

        r_ij = (sum(x_i * x_j) - n * mean_i * mean_j)
               / sqrt((sum(x_i^2) - n * mean_i^2) * (sum(x_j^2) - n * mean_j^2))

    ``r_ij`` is stored at ``out[j][i]``: the lower triangle and the diagonal are
    filled, the strict upper triangle stays 0. The diagonal is always 1; constant
    columns give NaN off the diagonal.

    Args:
        matrix: Array-like of shape (rows, cols)

    Returns:
        float64 array of shape (cols, cols)

    Raises:
        EmptyInputError: If there are no rows or no columns
    """
    x = np.asarray(matrix, dtype=np.float64)
    if x.ndim != 2 or x.shape[0] == 0 or x.shape[1] == 0:
        raise EmptyInputError("correlation matrix needs at least one row and one column")

    n = x.shape[0]
    means = x.mean(axis=0)
    cross = x.T @ x - n * np.outer(means, means)
    spread = np.diag(cross)

    with np.errstate(divide="ignore", invalid="ignore"):
        r = cross / np.sqrt(np.outer(spread, spread))

    out = np.tril(r)
    np.fill_diagonal(out, 1.0)
    return out


def symmetric(lower: np.ndarray) -> np.ndarray:
    """Rebuild the full symmetric matrix from a lower-triangular correlation result."""
    lower = np.asarray(lower, dtype=np.float64)
    return lower + np.tril(lower, k=-1).T
