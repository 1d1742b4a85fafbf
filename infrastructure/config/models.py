"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SummaryConfig(BaseModel):
    """Settings for the single-series commands (summary, quantiles)."""

    precision: int = Field(
        default=1,
        ge=1,
        description="Values are multiplied by this and truncated to integer buckets for the mode.",
    )
    quantiles: int = Field(default=5, ge=1, description="k for the k-quantile cut points.")
    transpose: bool = False


class EvalConfig(BaseModel):
    """Settings for classifier evaluation."""

    threshold: float | None = Field(
        default=None,
        description="Decision threshold in (0, 1); predictions are rounded when unset.",
    )
    base_rates: list[float] = Field(
        default_factory=list,
        description="Prior probability of each class, indexed by class label.",
    )
    verbose: int = Field(default=0, ge=0)

    @field_validator("threshold")
    @classmethod
    def _threshold_in_open_unit_interval(cls, v: float | None) -> float | None:
        if v is not None and not 0.0 < v < 1.0:
            raise ValueError(f"threshold must be in (0, 1), got {v}")
        return v

    @field_validator("base_rates")
    @classmethod
    def _base_rates_are_probabilities(cls, v: list[float]) -> list[float]:
        bad = [b for b in v if not 0.0 <= b <= 1.0]
        if bad:
            raise ValueError(f"base rates must be in [0, 1], got {bad}")
        return v


class HashTrickConfig(BaseModel):
    """Settings for feature hashing."""

    k_buckets: int = Field(default=1024, ge=2)
    binary: bool = False
    delimiter: str = Field(default=",", min_length=1)


class SampleConfig(BaseModel):
    """Settings for row sampling."""

    seed: int | None = None


class LoggingConfig(BaseModel):
    """Console / file logging levels."""

    console_level: LogLevel = "WARNING"
    file_level: LogLevel = "DEBUG"
    log_file: Path | None = None

    @property
    def console_level_no(self) -> int:
        return logging.getLevelName(self.console_level)

    @property
    def file_level_no(self) -> int:
        return logging.getLevelName(self.file_level)


class RunConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from an optional YAML file
    - Overridden by command-line options
    - Consumed by the command workflows
    """

    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    eval: EvalConfig = Field(default_factory=EvalConfig)
    hash_trick: HashTrickConfig = Field(default_factory=HashTrickConfig)
    sample: SampleConfig = Field(default_factory=SampleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
