"""
Logging setup with contextvars-based metadata injection.

- Adds the running command and input source into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Console output goes to stderr so stdout carries only results.
"""

import contextvars
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_command = contextvars.ContextVar("command", default="-")
cv_source = contextvars.ContextVar("source", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.cmd = cv_command.get() or "-"
        record.src = cv_source.get() or "-"
        return True


def set_log_context(
    *,
    command: str | None = None,
    source: Path | str | None = None,
) -> None:
    """Update logging context (safe across threads via contextvars)."""
    if command is not None:
        cv_command.set(str(command))
    if source is not None:
        cv_source.set(str(source))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "command": str(cv_command.get() or "-"),
        "source": str(cv_source.get() or "-"),
    }


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: WARNING)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(levelname)s: [%(cmd)s] %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | cmd=%(cmd)s src=%(src)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, DEBUG+, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
