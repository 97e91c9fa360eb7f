"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HEARTVOTE_CONFIG"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_TEST_SIZE = 0.2


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class DataConfig:
    """Where records come from and how they are partitioned."""

    path: Path | None = None
    test_size: float = DEFAULT_TEST_SIZE
    seed: int | None = None
    standardize: bool = False


@dataclass(frozen=True)
class LogisticRegressionConfig:
    learning_rate: float = 0.01
    epochs: int = 1000
    enabled: bool = True


@dataclass(frozen=True)
class NaiveBayesConfig:
    enabled: bool = True


@dataclass(frozen=True)
class KnnConfig:
    k: int = 5
    enabled: bool = True


@dataclass(frozen=True)
class DecisionTreeConfig:
    max_depth: int = 10
    min_samples_split: int = 2
    enabled: bool = True


@dataclass(frozen=True)
class ModelsConfig:
    """Hyperparameters for every model in the lineup."""

    logistic_regression: LogisticRegressionConfig = field(default_factory=LogisticRegressionConfig)
    naive_bayes: NaiveBayesConfig = field(default_factory=NaiveBayesConfig)
    knn: KnnConfig = field(default_factory=KnnConfig)
    decision_tree: DecisionTreeConfig = field(default_factory=DecisionTreeConfig)


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    data: DataConfig = field(default_factory=DataConfig)
    models: ModelsConfig = field(default_factory=ModelsConfig)
    ensemble: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load and validate configuration from YAML.

    Without an explicit path the ``HEARTVOTE_CONFIG`` environment variable is
    consulted; when neither is set the built-in defaults are returned.
    """

    config_path = _resolve_config_path(path)
    if config_path is None:
        return Config()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return parse_config(raw, base_dir=config_path.parent)


def parse_config(raw: dict[str, Any], *, base_dir: Path | None = None) -> Config:
    """Build a Config from an already-decoded mapping."""

    config = Config(
        data=_parse_data(raw.get("data"), base_dir),
        models=_parse_models(raw.get("models")),
        ensemble=_parse_bool(raw.get("ensemble", True), "ensemble"),
        logging=_parse_logging(raw.get("logging"), base_dir),
    )
    _check_lineup(config)
    return config


def enabled_model_count(models: ModelsConfig) -> int:
    return sum(
        1
        for section in (
            models.logistic_regression,
            models.naive_bayes,
            models.knn,
            models.decision_tree,
        )
        if section.enabled
    )


def _check_lineup(config: Config) -> None:
    enabled = enabled_model_count(config.models)
    if enabled == 0:
        raise ConfigError("At least one model must be enabled.")
    if config.ensemble and enabled == 1:
        LOGGER.warning("Ensemble has a single member; it will mirror that model's predictions.")


def _resolve_config_path(explicit: Path | str | None) -> Path | None:
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return None


def _parse_data(value: Any, base_dir: Path | None) -> DataConfig:
    section = _mapping(value, "data")
    path = section.get("path")
    test_size = _parse_float(section.get("test_size", DEFAULT_TEST_SIZE), "data.test_size")
    if not 0.0 < test_size < 1.0:
        raise ConfigError("data.test_size must be between 0 and 1 (exclusive).")
    seed = section.get("seed")
    if seed is not None:
        seed = _parse_int(seed, "data.seed")
    return DataConfig(
        path=_resolve_path(path, base_dir, "data.path") if path is not None else None,
        test_size=test_size,
        seed=seed,
        standardize=_parse_bool(section.get("standardize", False), "data.standardize"),
    )


def _parse_models(value: Any) -> ModelsConfig:
    section = _mapping(value, "models")
    unknown = set(section) - {"logistic_regression", "naive_bayes", "knn", "decision_tree"}
    if unknown:
        raise ConfigError(f"Unknown model section(s): {', '.join(sorted(unknown))}")

    lr = _mapping(section.get("logistic_regression"), "models.logistic_regression")
    nb = _mapping(section.get("naive_bayes"), "models.naive_bayes")
    knn = _mapping(section.get("knn"), "models.knn")
    tree = _mapping(section.get("decision_tree"), "models.decision_tree")

    learning_rate = _parse_float(
        lr.get("learning_rate", 0.01), "models.logistic_regression.learning_rate"
    )
    if learning_rate <= 0:
        raise ConfigError("models.logistic_regression.learning_rate must be positive.")
    epochs = _parse_int(lr.get("epochs", 1000), "models.logistic_regression.epochs")
    if epochs < 0:
        raise ConfigError("models.logistic_regression.epochs cannot be negative.")
    k = _parse_int(knn.get("k", 5), "models.knn.k")
    if k < 1:
        raise ConfigError("models.knn.k must be at least 1.")
    max_depth = _parse_int(tree.get("max_depth", 10), "models.decision_tree.max_depth")
    if max_depth < 0:
        raise ConfigError("models.decision_tree.max_depth cannot be negative.")
    min_samples_split = _parse_int(
        tree.get("min_samples_split", 2), "models.decision_tree.min_samples_split"
    )
    if min_samples_split < 1:
        raise ConfigError("models.decision_tree.min_samples_split must be at least 1.")

    return ModelsConfig(
        logistic_regression=LogisticRegressionConfig(
            learning_rate=learning_rate,
            epochs=epochs,
            enabled=_enabled(lr, "models.logistic_regression"),
        ),
        naive_bayes=NaiveBayesConfig(enabled=_enabled(nb, "models.naive_bayes")),
        knn=KnnConfig(k=k, enabled=_enabled(knn, "models.knn")),
        decision_tree=DecisionTreeConfig(
            max_depth=max_depth,
            min_samples_split=min_samples_split,
            enabled=_enabled(tree, "models.decision_tree"),
        ),
    )


def _parse_logging(value: Any, base_dir: Path | None) -> LoggingConfig:
    section = _mapping(value, "logging")
    level = str(section.get("level", DEFAULT_LOG_LEVEL)).lower()
    file_value = section.get("file")
    log_file = _resolve_path(file_value, base_dir, "logging.file") if file_value else None
    return LoggingConfig(level=level, file=log_file)


def _mapping(value: Any, field_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{field_name} must be a mapping.")
    return value


def _enabled(section: dict[str, Any], field_name: str) -> bool:
    return _parse_bool(section.get("enabled", True), f"{field_name}.enabled")


def _parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{field_name} must be true or false.")


def _parse_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{field_name} must be an integer.")
    return value


def _parse_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{field_name} must be a number.")
    return float(value)


def _resolve_path(value: Any, base_dir: Path | None, field_name: str) -> Path:
    if not isinstance(value, (str, Path)):
        raise ConfigError(f"{field_name} must be a string path.")
    path = Path(value).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return path


__all__ = [
    "Config",
    "ConfigError",
    "DataConfig",
    "DecisionTreeConfig",
    "KnnConfig",
    "LoggingConfig",
    "LogisticRegressionConfig",
    "ModelsConfig",
    "NaiveBayesConfig",
    "load_config",
    "parse_config",
]
