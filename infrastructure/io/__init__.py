"""I/O utilities: input reading and numeric text parsing."""

from infrastructure.io.fs import read_input_bytes, read_input_text
from infrastructure.io.parsing import (
    NO_LABEL_COL,
    data_lines,
    parse_float_list,
    to_matrix,
    to_samples,
    to_vector,
)

__all__ = [
    "read_input_text",
    "read_input_bytes",
    "NO_LABEL_COL",
    "data_lines",
    "to_vector",
    "to_samples",
    "to_matrix",
    "parse_float_list",
]
