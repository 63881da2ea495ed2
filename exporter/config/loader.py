"""YAML config loader with dotted-key overrides."""

import json
from pathlib import Path
from typing import Any

import yaml

from exporter.config.schema import ExporterConfig


def load_config(path: str | Path | None = None) -> ExporterConfig:
    """Load and validate config from a YAML file.

    With no path, every section falls back to its schema defaults.
    """
    if path is None:
        return ExporterConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    return ExporterConfig(**raw)


def set_config_value(config: ExporterConfig, dotted_key: str, value: Any) -> ExporterConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new ExporterConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    target[parts[-1]] = value
    return ExporterConfig(**data)


def apply_overrides(config: ExporterConfig, overrides: dict[str, Any]) -> ExporterConfig:
    """Apply every non-None override on top of ``config``."""
    for key, value in overrides.items():
        if value is not None:
            config = set_config_value(config, key, value)
    return config
