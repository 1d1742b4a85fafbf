"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- Configuration loading (YAML, command-line overrides)
- Input reading (file or stdin) and numeric text parsing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import RunConfig, load_run_config
from infrastructure.observability import configure_logging, set_log_context

__all__ = [
    # Configuration (most commonly used)
    "load_run_config",
    "RunConfig",
    # Logging
    "configure_logging",
    "set_log_context",
]
