import json
import logging

import pytest

from main import main

SCENARIO = "0.9,1\n0.2,0\n0.6,1\n0.3,0\n"


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    # no st.yaml from the caller's cwd; drop handlers bound to captured streams
    monkeypatch.chdir(tmp_path)
    yield
    logging.getLogger().handlers.clear()


def _write(tmp_path, name: str, content: str):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_summary(tmp_path, capsys) -> None:
    path = _write(tmp_path, "v.csv", "value\n1\n2\n3\n4\n")

    assert main(["summary", "-H", str(path)]) == 0

    header, row = capsys.readouterr().out.splitlines()
    assert header.split() == ["n", "min", "max", "mean", "median", "mode", "sd", "var"]
    assert row.split()[:4] == ["4", "1.0000", "4.0000", "2.5000"]


def test_summary_transposed(tmp_path, capsys) -> None:
    path = _write(tmp_path, "v.csv", "1\n2\n3\n4\n")

    assert main(["summary", "-t", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "n       4"
    assert lines[3] == "mean    2.5000"
    assert len(lines) == 8


def test_quantiles(tmp_path, capsys) -> None:
    path = _write(tmp_path, "v.csv", "\n".join(str(i) for i in range(1, 11)) + "\n")

    assert main(["quantiles", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["20%", "40%", "60%", "80%"]


def test_quantiles_insufficient_data_is_a_warning(tmp_path, capsys) -> None:
    path = _write(tmp_path, "v.csv", "1\n2\n")

    assert main(["quantiles", str(path)]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "insufficient data" in captured.err


def test_eval_with_threshold(tmp_path, capsys) -> None:
    path = _write(tmp_path, "s.csv", SCENARIO)

    assert main(["eval", "-t", "0.5", str(path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["Confusion Matrix", "Predicted on y-axis, Actual on x-axis", ""]
    assert out[3:6] == ["-       1       0", "1       2       0", "0       0       2"]


def test_eval_roc_table_and_metrics_file(tmp_path, capsys) -> None:
    path = _write(tmp_path, "s.csv", SCENARIO)
    metrics_out = tmp_path / "out" / "metrics.json"

    assert main(["eval", "-vv", "-t", "0.5", "--metrics-out", str(metrics_out), str(path)]) == 0

    out = capsys.readouterr().out
    assert "ROC table" in out
    assert "tpr" in out

    metrics = json.loads(metrics_out.read_text(encoding="utf-8"))
    assert metrics["confusion_matrix"] == [[2, 0], [0, 2]]
    assert metrics["n_samples"] == 4
    assert len(metrics["threshold_sweep"]) == 20
    assert metrics["roc_auc"] == 1.0
    assert metrics["context"] == {"command": "eval", "source": str(path)}


def test_eval_bayes(tmp_path, capsys) -> None:
    path = _write(tmp_path, "s.csv", SCENARIO)

    assert main(["eval", "-t", "0.5", "-b", "0.5, 0.5", str(path)]) == 0

    assert "Bayes estimates with baseline rates" in capsys.readouterr().out


def test_eval_base_rate_count_mismatch_fails(tmp_path, capsys) -> None:
    path = _write(tmp_path, "s.csv", SCENARIO)

    assert main(["eval", "-b", "0.5", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_eval_rejects_threshold_outside_unit_interval(tmp_path) -> None:
    path = _write(tmp_path, "s.csv", SCENARIO)

    assert main(["eval", "-t", "1.5", str(path)]) == 1


def test_cor_matrix(tmp_path, capsys) -> None:
    path = _write(tmp_path, "m.csv", "x,y,label\n1,2,0\n2,4,1\n3,7,0\n")

    assert main(["cor-matrix", "-H", "-y", "2", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[1].split() == ["0", "1.00"]
    assert lines[2].split()[-1] == "1.00"


def test_sample_keeps_header(tmp_path, capsys) -> None:
    path = _write(tmp_path, "rows.csv", "h\na\nb\nc\n")

    assert main(["sample", "-H", "-n", "2", "--seed", "5", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "h"
    assert len(lines) == 3
    assert set(lines[1:]) <= {"a", "b", "c"}


def test_extract_entropy(tmp_path, capsys) -> None:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"abab")

    assert main(["extract", "entropy", str(path)]) == 0
    assert float(capsys.readouterr().out) == pytest.approx(1.0)


def test_extract_byte_histogram(tmp_path, capsys) -> None:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\x01")

    assert main(["extract", "byte-histogram", str(path)]) == 0

    values = [float(v) for v in capsys.readouterr().out.strip().split(",")]
    assert len(values) == 256
    assert values[:3] == [0.5, 0.5, 0.0]


def test_extract_hash_trick(tmp_path, capsys) -> None:
    path = _write(tmp_path, "tokens.txt", "red,green,blue\n")

    assert main(["extract", "hash-trick", "-k", "10", str(path)]) == 0

    values = [int(v) for v in capsys.readouterr().out.strip().split(",")]
    assert len(values) == 9
    assert sum(values) == 3


def test_extract_hash_trick_ignores_trailing_newline(tmp_path, capsys) -> None:
    path = _write(tmp_path, "tokens.txt", "foo\n")

    assert main(["extract", "hash-trick", "-k", "11", str(path)]) == 0

    assert capsys.readouterr().out.strip() == "0,0,0,0,1,0,0,0,0,0"


def test_config_file_supplies_defaults(tmp_path, capsys) -> None:
    _write(tmp_path, "st.yaml", "hash_trick:\n  k_buckets: 5\n  binary: true\n")
    path = _write(tmp_path, "tokens.txt", "a,a,a\n")

    assert main(["extract", "hash-trick", str(path)]) == 0

    values = [int(v) for v in capsys.readouterr().out.strip().split(",")]
    assert len(values) == 4
    assert sum(values) == 1


def test_summary_rejects_infinite_value(tmp_path, capsys) -> None:
    path = _write(tmp_path, "v.csv", "1\ninf\n2\n")

    assert main(["summary", str(path)]) == 1
    assert "non-finite" in capsys.readouterr().err


def test_missing_input_file(tmp_path) -> None:
    assert main(["summary", str(tmp_path / "nope.csv")]) == 1


def test_invalid_config_file(tmp_path) -> None:
    config = _write(tmp_path, "bad.yaml", "summary:\n  precision: 0\n")
    path = _write(tmp_path, "v.csv", "1\n")

    assert main(["--config", str(config), "summary", str(path)]) == 1
