from __future__ import annotations

from pathlib import Path

import numpy as np
from typer.testing import CliRunner

from vecbayes.cli import app

runner = CliRunner()


def _write_dataset(path: Path, *, seed: int = 0, per_class: int = 30) -> Path:
    rng = np.random.default_rng(seed)
    rows = []
    for label, center in (("setosa", 0.0), ("virginica", 6.0)):
        for point in rng.normal(center, 1.0, size=(per_class, 3)):
            rows.append(",".join(f"{value:.6f}" for value in point) + f",{label}")
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


def _write_config(tmp_path: Path, *lines: str) -> Path:
    config = tmp_path / "config.yaml"
    config.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return config


def test_info_reports_configuration(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "learner:", "  name: online")

    result = runner.invoke(app, ["-c", str(config_path), "info"])

    assert result.exit_code == 0
    assert "Learner: online" in result.stdout
    assert str(config_path) in result.stdout
    assert "gaussian, batch, online" in result.stdout


def test_evaluate_reports_accuracy(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "logging:", "  level: warning")
    data = _write_dataset(tmp_path / "train.csv")

    for learner in ("gaussian", "batch", "online"):
        result = runner.invoke(
            app,
            ["-c", str(config_path), "evaluate", str(data), "--learner", learner],
        )
        assert result.exit_code == 0, result.stdout
        assert "Accuracy: 1.000" in result.stdout
        assert "Train/test: 45/15" in result.stdout


def test_classify_prints_each_row(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path, "learner:", "  name: gaussian", "logging:", "  level: warning"
    )
    data = _write_dataset(tmp_path / "train.csv")
    queries = tmp_path / "queries.csv"
    queries.write_text("0.1,0.0,-0.2\n6.2,5.8,6.1\n", encoding="utf-8")

    result = runner.invoke(app, ["-c", str(config_path), "classify", str(data), str(queries)])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines[0].startswith("1: setosa (p=")
    assert lines[1].startswith("2: virginica (p=")


def test_classify_rejects_wrong_dimensionality(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "learner:", "  name: gaussian")
    data = _write_dataset(tmp_path / "train.csv")
    queries = tmp_path / "queries.csv"
    queries.write_text("0.1,0.0\n", encoding="utf-8")

    result = runner.invoke(app, ["-c", str(config_path), "classify", str(data), str(queries)])

    assert result.exit_code == 1


def test_unknown_learner_exits_with_config_error(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "learner:", "  name: gaussian")
    data = _write_dataset(tmp_path / "train.csv")

    result = runner.invoke(
        app,
        ["-c", str(config_path), "evaluate", str(data), "--learner", "perceptron"],
    )

    assert result.exit_code == 2


def test_missing_data_file(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "learner:", "  name: gaussian")

    result = runner.invoke(
        app,
        ["-c", str(config_path), "evaluate", str(tmp_path / "absent.csv")],
    )

    assert result.exit_code == 1


def test_evaluate_reports_unsplittable_data(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "learner:", "  name: gaussian")
    data = tmp_path / "tiny.csv"
    data.write_text("1.0,a\n1.1,a\n5.0,b\n5.1,b\n", encoding="utf-8")

    result = runner.invoke(app, ["-c", str(config_path), "evaluate", str(data)])

    assert result.exit_code == 1
    assert "Cannot split 4 example(s)" in result.output
