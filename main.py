"""
CLI entrypoint for ``st``: statistics and classifier-evaluation tools.

This script performs the following steps:
- parses the subcommand and its options
- loads the optional YAML config (st.yaml) and applies command-line overrides
- configures logging (stderr, optional rotating log file)
- reads the input from a file or stdin
- runs the requested workflow and prints the result to stdout

Exit status is 0 on success and 1 on any reported error.
"""

import argparse
import logging
import sys
from pathlib import Path

from application import (
    run_byte_histogram,
    run_correlation,
    run_entropy,
    run_evaluation,
    run_hash_trick,
    run_quantiles,
    run_sample,
    run_summary,
)
from application.constants import (
    CMD_BYTE_HISTOGRAM,
    CMD_COR_MATRIX,
    CMD_ENTROPY,
    CMD_EVAL,
    CMD_EXTRACT,
    CMD_HASH_TRICK,
    CMD_QUANTILES,
    CMD_SAMPLE,
    CMD_SUMMARY,
)
from domain.errors import StatsError
from infrastructure.config import RunConfig, load_run_config
from infrastructure.io import NO_LABEL_COL, parse_float_list, read_input_bytes, read_input_text, to_samples
from infrastructure.observability import configure_logging, set_log_context

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _add_input(p: argparse.ArgumentParser, with_header: bool = True) -> None:
    if with_header:
        p.add_argument("-H", "--with-header", action="store_true", help="Skip the first row (header).")
    p.add_argument("input", nargs="?", type=Path, default=None, help="Input file (default: stdin)")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="st", description="stat information and processing")
    p.add_argument("--config", type=Path, default=None, help="Path to a YAML config (default: ./st.yaml if present)")
    p.add_argument("--console-level", type=str, default=None, choices=LEVELS, help="Console log level")
    p.add_argument("--file-level", type=str, default=None, choices=LEVELS, help="File log level")
    p.add_argument("--log-file", type=Path, default=None, help="Also log to this (rotating) file")

    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser(CMD_SUMMARY, help="summary statistics from a single vector")
    s.add_argument("-t", "--transpose", action="store_true", default=None, help="One statistic per line")
    s.add_argument(
        "--precision",
        type=int,
        default=None,
        help="if inputs are floats, for bucketing purposes they are multiplied by this and converted to ints",
    )
    _add_input(s)

    q = sub.add_parser(CMD_QUANTILES, help="k-quantile from a single vector (default k = 5)")
    q.add_argument("-k", dest="quantiles", type=int, default=None, help="k-quantile, for some input k")
    _add_input(q)

    e = sub.add_parser(
        CMD_EVAL,
        help="confusion matrix, class rates and other helpful probabilities; classes must be 0..N",
    )
    e.add_argument(
        "-t",
        "--threshold",
        type=float,
        default=None,
        help="if value is in (0,1), predictions at or above it are converted to the positive class",
    )
    e.add_argument("-v", "--verbose", action="count", default=None, help="-v: class rates, -vv: also ROC table")
    e.add_argument(
        "-b",
        "--bayes",
        type=str,
        default=None,
        help="base rate of each class for Bayes estimates, e.g. -b '0.1, 0.9'",
    )
    e.add_argument("--metrics-out", type=Path, default=None, help="Write all metrics to this JSON file")
    _add_input(e, with_header=False)

    c = sub.add_parser(CMD_COR_MATRIX, help="Computes the Pearson correlation coefficient")
    c.add_argument("-y", "--ycol", type=int, default=NO_LABEL_COL, help="label column to leave out")
    _add_input(c)

    sm = sub.add_parser(CMD_SAMPLE, help="random sample of input rows")
    sm.add_argument("-n", "--size", type=int, required=True, help="number of rows to draw")
    sm.add_argument("-r", "--replace", action="store_true", help="sample with replacement")
    sm.add_argument("--seed", type=int, default=None, help="seed for a reproducible sample")
    _add_input(sm)

    x = sub.add_parser(CMD_EXTRACT, help="data transformations and feature generation tools")
    xsub = x.add_subparsers(dest="extract_command", required=True)

    _add_input(xsub.add_parser(CMD_BYTE_HISTOGRAM, help="normalized byte histogram of the input"), with_header=False)
    _add_input(xsub.add_parser(CMD_ENTROPY, help="bits of entropy of the input"), with_header=False)

    h = xsub.add_parser(CMD_HASH_TRICK, help="apply the hash-trick with k buckets to a delimited list of strings")
    h.add_argument("-k", "--kbuckets", dest="k_buckets", type=int, default=None, help="number of buckets")
    h.add_argument("-b", "--binary", action="store_true", default=None, help="use 1 or 0 only in the buckets")
    h.add_argument("-F", "--delimiter", type=str, default=None, help="delimiter used to split the items (default ',')")
    _add_input(h, with_header=False)

    return p


def _overrides(args: argparse.Namespace) -> dict[str, dict]:
    """Collect command-line values per config section (None = not given)."""
    a = vars(args)
    bayes = a.get("bayes")
    return {
        "summary": {"precision": a.get("precision"), "quantiles": a.get("quantiles"), "transpose": a.get("transpose")},
        "eval": {
            "threshold": a.get("threshold"),
            "verbose": a.get("verbose"),
            "base_rates": parse_float_list(bayes) if bayes else None,
        },
        "hash_trick": {"k_buckets": a.get("k_buckets"), "binary": a.get("binary"), "delimiter": a.get("delimiter")},
        "sample": {"seed": a.get("seed")},
        "logging": {
            "console_level": args.console_level,
            "file_level": args.file_level,
            "log_file": args.log_file,
        },
    }


def _run(cfg: RunConfig, args: argparse.Namespace) -> str | None:
    source = args.input
    with_header = bool(getattr(args, "with_header", False))

    if args.command == CMD_SUMMARY:
        return run_summary(cfg.summary, read_input_text(source), with_header)
    if args.command == CMD_QUANTILES:
        return run_quantiles(cfg.summary, read_input_text(source), with_header)
    if args.command == CMD_EVAL:
        return run_evaluation(cfg.eval, to_samples(read_input_text(source)), args.metrics_out)
    if args.command == CMD_COR_MATRIX:
        return run_correlation(read_input_text(source), args.ycol, with_header)
    if args.command == CMD_SAMPLE:
        return run_sample(cfg.sample, read_input_text(source), args.size, args.replace, with_header)

    if args.extract_command == CMD_BYTE_HISTOGRAM:
        return run_byte_histogram(read_input_bytes(source))
    if args.extract_command == CMD_ENTROPY:
        return run_entropy(read_input_bytes(source))
    if args.extract_command == CMD_HASH_TRICK:
        return run_hash_trick(cfg.hash_trick, read_input_text(source))

    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    command = args.command if args.command != CMD_EXTRACT else f"{CMD_EXTRACT} {args.extract_command}"
    set_log_context(command=command, source=args.input or "stdin")

    try:
        cfg = load_run_config(args.config, _overrides(args))
    except (StatsError, FileNotFoundError) as e:
        configure_logging()
        logger.error("%s", e)
        return 1

    configure_logging(
        log_file=cfg.logging.log_file,
        console_level=cfg.logging.console_level_no,
        file_level=cfg.logging.file_level_no,
    )
    logger.debug("Resolved config: %s", cfg.model_dump(mode="json"))

    try:
        output = _run(cfg, args)
    except (StatsError, FileNotFoundError, ValueError, IndexError) as e:
        logger.error("%s", e)
        return 1

    if output is not None:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
