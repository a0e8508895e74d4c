"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VECBAYES_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/vecbayes/config.yaml")
DEFAULT_LOG_LEVEL = "info"
DEFAULT_LEARNER = "gaussian"
DEFAULT_ESTIMATOR = "gaussian"
BANDWIDTH_RULES = ("scott", "silverman")


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class LearnerConfig:
    """Which learner to build and how to parameterise it."""

    name: str = DEFAULT_LEARNER
    estimator: str = DEFAULT_ESTIMATOR
    min_variance: float = 0.0
    bandwidth: str | float | None = None


@dataclass(frozen=True)
class DataConfig:
    """CSV layout used by the command-line tools."""

    label_column: int = -1
    header: bool = False


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    learner: LearnerConfig = field(default_factory=LearnerConfig)
    data: DataConfig = field(default_factory=DataConfig)
    source: Path | None = None


def load_config(path: Path | str | None = None) -> Config:
    """Load and validate configuration from YAML.

    An explicitly requested file (argument or environment variable) must exist.
    When neither is given and the default file is absent, defaults are used.
    """

    config_path, explicit = _resolve_config_path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        LOGGER.debug("No config file at %s; using defaults.", config_path)
        return Config()

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return _parse_config(raw, config_path)


def resolved_config_path(path: Path | str | None = None) -> Path:
    return _resolve_config_path(path)[0]


def _resolve_config_path(explicit: Path | str | None) -> tuple[Path, bool]:
    if explicit:
        return Path(explicit).expanduser(), True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True
    return DEFAULT_CONFIG_PATH.expanduser(), False


def _parse_config(raw: dict[str, Any], source: Path) -> Config:
    return Config(
        logging=_parse_logging(raw.get("logging")),
        learner=_parse_learner(raw.get("learner")),
        data=_parse_data(raw.get("data")),
        source=source,
    )


def _parse_logging(value: Any) -> LoggingConfig:
    if value is None:
        return LoggingConfig()
    if not isinstance(value, dict):
        raise ConfigError("logging must be a mapping.")
    level = str(value.get("level", DEFAULT_LOG_LEVEL)).lower()
    file_value = value.get("file")
    if file_value is not None and not isinstance(file_value, str):
        raise ConfigError("logging.file must be a string path.")
    log_file = Path(file_value).expanduser() if file_value else None
    return LoggingConfig(level=level, file=log_file)


def _parse_learner(value: Any) -> LearnerConfig:
    if value is None:
        return LearnerConfig()
    if not isinstance(value, dict):
        raise ConfigError("learner must be a mapping.")

    name = str(value.get("name", DEFAULT_LEARNER)).strip().lower()
    estimator = str(value.get("estimator", DEFAULT_ESTIMATOR)).strip().lower()
    if not name:
        raise ConfigError("learner.name cannot be empty.")

    raw_min_variance = value.get("min_variance", 0.0)
    if isinstance(raw_min_variance, bool) or not isinstance(raw_min_variance, (int, float)):
        raise ConfigError("learner.min_variance must be a number.")
    min_variance = float(raw_min_variance)
    if min_variance < 0.0:
        raise ConfigError("learner.min_variance cannot be negative.")

    return LearnerConfig(
        name=name,
        estimator=estimator,
        min_variance=min_variance,
        bandwidth=_parse_bandwidth(value.get("bandwidth")),
    )


def _parse_bandwidth(value: Any) -> str | float | None:
    if value is None:
        return None
    if isinstance(value, str):
        rule = value.strip().lower()
        if rule not in BANDWIDTH_RULES:
            raise ConfigError(
                f"learner.bandwidth must be one of {', '.join(BANDWIDTH_RULES)} or a number."
            )
        return rule
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError("learner.bandwidth must be a string rule or a number.")
    if value <= 0:
        raise ConfigError("learner.bandwidth must be positive.")
    return float(value)


def _parse_data(value: Any) -> DataConfig:
    if value is None:
        return DataConfig()
    if not isinstance(value, dict):
        raise ConfigError("data must be a mapping.")
    label_column = value.get("label_column", -1)
    if isinstance(label_column, bool) or not isinstance(label_column, int):
        raise ConfigError("data.label_column must be an integer.")
    header = bool(value.get("header", False))
    return DataConfig(label_column=label_column, header=header)


__all__ = [
    "Config",
    "ConfigError",
    "DataConfig",
    "LearnerConfig",
    "LoggingConfig",
    "load_config",
    "resolved_config_path",
]
