"""Filesystem and stdin utility functions."""

import sys
from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_input_text(path: Path | None) -> str:
    """
    Read the whole input as text: from ``path`` if given, else from stdin.

    Args:
        path: Input file, or None for stdin

    Returns:
        File contents (UTF-8)
    """
    if path is None:
        return sys.stdin.read()
    ensure_exists(path, "input file")
    return path.read_text(encoding="utf-8")


def read_input_bytes(path: Path | None) -> bytes:
    """Read the whole input as raw bytes: from ``path`` if given, else from stdin."""
    if path is None:
        return sys.stdin.buffer.read()
    ensure_exists(path, "input file")
    return path.read_bytes()
