"""Application configuration with YAML + env vars + CLI override support."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class LoggingConfig:
    verbose: bool = False
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class StorageConfig:
    seed_path: str | None = None  # JSON file with documents to preload


@dataclass
class OutputConfig:
    format: str = "markdown"  # markdown | json
    preview_length: int = 100


@dataclass
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


_SECTIONS = {f.name for f in fields(AppConfig)}

_ENV_MAPPING: dict[str, str] = {
    "DOCUMENT_MANAGER_SEED_PATH": "storage.seed_path",
    "DOCUMENT_MANAGER_VERBOSE": "logging.verbose",
    "DOCUMENT_MANAGER_OUTPUT_FORMAT": "output.format",
    "DOCUMENT_MANAGER_PREVIEW_LENGTH": "output.preview_length",
}


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the config from layers, later ones winning: YAML, env vars, CLI.

    Every layer is a flat ``{"section.field": value}`` mapping; ``None``
    values mean "not provided" and leave the earlier value in place.
    """
    layers: list[dict[str, Any]] = []
    if config_path:
        layers.append(_read_yaml(Path(config_path)))
    layers.append(_read_env())
    if cli_overrides:
        layers.append(cli_overrides)

    config = AppConfig()
    for layer in layers:
        for key, value in layer.items():
            if value is not None:
                _set(config, key, value)
    return config


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        logger.warning("Config file not found: %s, using defaults", path)
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        logger.warning("Config file is not a valid YAML mapping: %s", path)
        return {}

    flat: dict[str, Any] = {}
    for section_name, section_data in data.items():
        if section_name not in _SECTIONS or not isinstance(section_data, dict):
            logger.debug("Ignoring config section: %s", section_name)
            continue
        for field_name, value in section_data.items():
            flat[f"{section_name}.{field_name}"] = value

    logger.info("Loaded config from %s", path)
    return flat


def _read_env() -> dict[str, Any]:
    return {key: os.environ.get(env_name) for env_name, key in _ENV_MAPPING.items()}


def _set(config: AppConfig, key: str, value: Any) -> None:
    section_name, field_name = key.split(".", 1)
    section = getattr(config, section_name)
    type_name = {f.name: f.type for f in fields(section)}.get(field_name)
    if type_name is None:
        logger.debug("Ignoring unknown config key: %s", key)
        return
    setattr(section, field_name, _coerce(value, type_name))


def _coerce(value: Any, type_name: str) -> Any:
    # Annotations are strings here (postponed evaluation)
    if type_name == "bool" and isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    if type_name == "bool":
        return bool(value)
    if type_name == "int":
        return int(value)
    return value
