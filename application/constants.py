"""Application-level constants."""

# Column widths for fixed-width tables
COL = 8
SUMMARY_COL = 11
SUMMARY_T_COL = 8

# Command names (also used as logging context)
CMD_SUMMARY = "summary"
CMD_QUANTILES = "quantiles"
CMD_EVAL = "eval"
CMD_COR_MATRIX = "cor-matrix"
CMD_SAMPLE = "sample"
CMD_EXTRACT = "extract"
CMD_BYTE_HISTOGRAM = "byte-histogram"
CMD_ENTROPY = "entropy"
CMD_HASH_TRICK = "hash-trick"
