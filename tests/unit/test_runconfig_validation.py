from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.errors import ConfigurationError
from infrastructure.config.loader import load_run_config
from infrastructure.config.models import EvalConfig, HashTrickConfig, RunConfig, SummaryConfig


def test_defaults() -> None:
    cfg = RunConfig()

    assert cfg.summary.precision == 1
    assert cfg.summary.quantiles == 5
    assert cfg.eval.threshold is None
    assert cfg.eval.base_rates == []
    assert cfg.hash_trick.delimiter == ","
    assert cfg.logging.log_file is None


@pytest.mark.parametrize("threshold", [0.0, 1.0, -0.2, 1.5])
def test_threshold_must_be_in_open_unit_interval(threshold: float) -> None:
    with pytest.raises(ValidationError):
        EvalConfig(threshold=threshold)


def test_base_rates_must_be_probabilities() -> None:
    assert EvalConfig(base_rates=[0.0, 0.25, 1.0]).base_rates == [0.0, 0.25, 1.0]
    with pytest.raises(ValidationError):
        EvalConfig(base_rates=[0.5, 1.2])


def test_hash_trick_needs_two_buckets() -> None:
    with pytest.raises(ValidationError):
        HashTrickConfig(k_buckets=1)
    with pytest.raises(ValidationError):
        HashTrickConfig(delimiter="")


def test_precision_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        SummaryConfig(precision=0)


def test_yaml_then_overrides(tmp_path: Path) -> None:
    path = tmp_path / "st.yaml"
    path.write_text(
        "summary:\n  precision: 10\n  quantiles: 4\neval:\n  threshold: 0.3\n  base_rates: [0.2, 0.8]\n",
        encoding="utf-8",
    )

    cfg = load_run_config(path, {"eval": {"threshold": 0.7, "base_rates": None}, "summary": {"quantiles": None}})

    assert cfg.summary.precision == 10
    assert cfg.summary.quantiles == 4
    assert cfg.eval.threshold == 0.7
    assert cfg.eval.base_rates == [0.2, 0.8]


def test_empty_yaml_is_default_config(tmp_path: Path) -> None:
    path = tmp_path / "st.yaml"
    path.write_text("", encoding="utf-8")

    assert load_run_config(path) == RunConfig()


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "st.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_run_config(path)


def test_invalid_override_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        load_run_config(None, {"eval": {"threshold": 2.0}})


def test_missing_explicit_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_run_config(tmp_path / "nope.yaml")


def test_example_config_matches_defaults() -> None:
    path = Path(__file__).resolve().parents[2] / "configs" / "st.example.yaml"

    assert load_run_config(path) == RunConfig()
