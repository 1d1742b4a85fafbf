"""
Configuration management: models, loading, and validation.

Handles:
- RunConfig: Top-level configuration for one invocation
- Per-command sections: summary, eval, hash_trick, sample, logging
- YAML file loading with command-line overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_run_config
from infrastructure.config.models import (
    EvalConfig,
    HashTrickConfig,
    LoggingConfig,
    RunConfig,
    SampleConfig,
    SummaryConfig,
)

__all__ = [
    # Main config (most commonly used)
    "RunConfig",
    "load_run_config",
    # Sections
    "SummaryConfig",
    "EvalConfig",
    "HashTrickConfig",
    "SampleConfig",
    "LoggingConfig",
]
