"""Configuration loading from YAML files and command-line overrides."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from domain.errors import ConfigurationError
from infrastructure.config.models import RunConfig
from infrastructure.constants import CONFIG_FILE

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # an empty file is an empty config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _merge_overrides(base: dict[str, Any], overrides: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """Overlay per-section overrides onto base; None values leave the base untouched."""
    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in base.items()}
    for section, values in overrides.items():
        current = merged.get(section) or {}
        if not isinstance(current, dict):
            raise ConfigurationError(f"Config section '{section}' must be a mapping")
        current.update({k: v for k, v in values.items() if v is not None})
        merged[section] = current
    return merged


def load_run_config(
    config_path: Path | None = None,
    overrides: dict[str, dict[str, Any]] | None = None,
) -> RunConfig:
    """
    Build a validated RunConfig.

    Resolution order (later wins):
    - model defaults
    - YAML file (``config_path``, or ``st.yaml`` in the working directory if it exists)
    - command-line overrides

    Args:
        config_path: Explicit YAML file; must exist when given
        overrides: Mapping of section name -> {field: value}; None values are ignored

    Returns:
        RunConfig

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigurationError: If the YAML or the overrides do not validate
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        data = _load_yaml(config_path)
        logger.debug("Loaded config from %s", config_path)
    elif CONFIG_FILE.exists():
        data = _load_yaml(CONFIG_FILE)
        logger.debug("Loaded default config from %s", CONFIG_FILE)

    data = _merge_overrides(data, overrides or {})

    try:
        return RunConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
