"""
Parse delimited numeric text into series, samples and matrices.

Rows are separated by newlines and blank rows are skipped. Columns are separated by
commas and whitespace-trimmed.
"""

import logging
import math

import numpy as np

from domain.errors import ConfigurationError, MalformedInputError
from domain.schemas import Sample

logger = logging.getLogger(__name__)

# Column index meaning "no label column"
NO_LABEL_COL = 1_000_000


def iter_rows(text: str, with_header: bool = False):
    """Yield (line_number, line) for every non-empty data row."""
    for index, line in enumerate(text.split("\n")):
        if index == 0 and with_header:
            continue
        line = line.rstrip("\r")
        if not line:
            continue
        yield index, line


def data_lines(text: str, with_header: bool = False) -> tuple[str | None, list[str]]:
    """Return (header, rows) without parsing the values."""
    lines = text.split("\n")
    header = lines[0].rstrip("\r") if with_header and lines else None
    return header, [line for _, line in iter_rows(text, with_header)]


def _to_float(value: str, line: str, index: int) -> float:
    try:
        f = float(value.strip())
    except ValueError as e:
        raise MalformedInputError(f"error converting to float: {line!r} at line {index}") from e
    if not math.isfinite(f):
        raise MalformedInputError(f"non-finite value {value.strip()!r} at line {index}")
    return f


def to_vector(text: str, with_header: bool = False) -> np.ndarray:
    """
    Parse a single column of floats.

    Raises:
        MalformedInputError: On the first value that is not a finite number
    """
    values = [_to_float(line, line, index) for index, line in iter_rows(text, with_header)]
    return np.asarray(values, dtype=np.float64)


def to_samples(text: str) -> list[Sample]:
    """
    Parse ``prediction,actual_class`` rows.

    Rows with a column count other than 2, a non-numeric value, a non-finite
    prediction, or a class that is not a non-negative integer are logged and skipped.
    """
    samples: list[Sample] = []
    skipped = 0

    for index, line in iter_rows(text):
        cols = line.split(",")
        if len(cols) != 2:
            logger.warning("invalid column count for sample row %d: %r", index, line)
            skipped += 1
            continue

        try:
            prediction = float(np.float32(cols[0].strip()))
            actual = float(cols[1].strip())
        except ValueError:
            logger.warning("non-numeric value in sample row %d: %r", index, line)
            skipped += 1
            continue

        if not math.isfinite(prediction):
            logger.warning("non-finite prediction in sample row %d: %r", index, line)
            skipped += 1
            continue

        if not math.isfinite(actual) or actual < 0 or actual != int(actual):
            logger.warning("class must be a non-negative integer in row %d: %r", index, line)
            skipped += 1
            continue

        samples.append((prediction, int(actual)))

    if skipped:
        logger.info("Parsed %d samples, skipped %d malformed rows", len(samples), skipped)
    return samples


def to_matrix(
    text: str,
    label_col: int = NO_LABEL_COL,
    with_header: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Parse a multi-column table, optionally holding out one label column.

    Args:
        text: Comma-separated rows
        label_col: Index of the column to hold out as labels (ignored if out of range)
        with_header: Skip the first row

    Returns:
        Tuple of (features of shape (rows, cols), float32 labels)

    Raises:
        MalformedInputError: On a non-numeric or non-finite value, or rows of unequal width
    """
    xdata: list[list[float]] = []
    ydata: list[float] = []

    for index, line in iter_rows(text, with_header):
        row: list[float] = []
        for col, val in enumerate(line.split(",")):
            f = _to_float(val, line, index)
            if col == label_col:
                ydata.append(f)
            else:
                row.append(f)

        if xdata and len(row) != len(xdata[0]):
            raise MalformedInputError(
                f"row at line {index} has {len(row)} feature columns, expected {len(xdata[0])}"
            )
        xdata.append(row)

    width = len(xdata[0]) if xdata else 0
    x = np.asarray(xdata, dtype=np.float64).reshape(len(xdata), width)
    return x, np.asarray(ydata, dtype=np.float32)


def parse_float_list(text: str, sep: str = ",") -> list[float]:
    """
    Parse a separator-delimited list of floats, e.g. ``"0.1, 0.9"``.

    Raises:
        ConfigurationError: If any item is not a number
    """
    try:
        return [float(item.strip()) for item in text.split(sep)]
    except ValueError as e:
        raise ConfigurationError(f"error parsing float list: {text!r}") from e
