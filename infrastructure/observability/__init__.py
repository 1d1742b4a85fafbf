"""
Observability: structured logging and context management.

Provides:
- Contextual logging with the running command and input source
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    configure_logging,
    get_log_context,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
]
