from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from vecbayes.config import (
    DEFAULT_CONFIG_PATH,
    Config,
    ConfigError,
    LearnerConfig,
    load_config,
    resolved_config_path,
)


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_path


def test_load_config_success(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        f"""
        logging:
          level: DEBUG
          file: {tmp_path}/logs/vecbayes.log
        learner:
          name: batch
          estimator: KDE
          bandwidth: scott
        data:
          label_column: 0
          header: true
        """,
    )

    config = load_config(config_path)

    assert config.source == config_path
    assert config.logging.level == "debug"
    assert config.logging.file == tmp_path / "logs" / "vecbayes.log"
    assert config.learner == LearnerConfig(name="batch", estimator="kde", bandwidth="scott")
    assert config.data.label_column == 0
    assert config.data.header is True


def test_load_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        """
        learner:
          name: online
        """,
    )

    monkeypatch.setenv("VECBAYES_CONFIG", str(config_path))
    config = load_config()
    assert config.learner.name == "online"
    assert config.learner.min_variance == 0.0
    assert config.logging.level == "info"
    assert resolved_config_path() == config_path


def test_missing_default_config_uses_defaults(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.delenv("VECBAYES_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert not DEFAULT_CONFIG_PATH.expanduser().exists()
    assert load_config() == Config()


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "absent.yaml")


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "")
    config = load_config(config_path)
    assert config.learner == LearnerConfig()
    assert config.source == config_path


@pytest.mark.parametrize(
    "bad_content, expected_message",
    [
        ("- just\n- a list\n", "Configuration root must be a mapping"),
        ("logging: verbose\n", "logging must be a mapping"),
        ("logging:\n  file: 12\n", "logging.file must be a string path"),
        ("learner: gaussian\n", "learner must be a mapping"),
        ("learner:\n  name: ''\n", "learner.name cannot be empty"),
        ("learner:\n  min_variance: lots\n", "learner.min_variance must be a number"),
        ("learner:\n  min_variance: -0.1\n", "learner.min_variance cannot be negative"),
        ("learner:\n  bandwidth: wide\n", "learner.bandwidth must be one of"),
        ("learner:\n  bandwidth: 0\n", "learner.bandwidth must be positive"),
        ("data:\n  label_column: last\n", "data.label_column must be an integer"),
        ("learner: [unclosed\n", "Invalid YAML"),
    ],
)
def test_load_config_validation_errors(
    bad_content: str,
    expected_message: str,
    tmp_path: Path,
) -> None:
    config_path = _write_config(tmp_path, bad_content)
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert expected_message in str(excinfo.value)
