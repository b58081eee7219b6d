"""Settings for the selection package.

Values come from an optional YAML file and are then overridden by
environment variables. Keys use the ``SELECTION_`` prefix and ``__`` to
express nesting, e.g. ``SELECTION_LOGGING__LEVEL=DEBUG`` becomes
``{"logging": {"level": "DEBUG"}}``. Values try to decode JSON so numbers
and booleans can be expressed directly.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .logging_setup import LoggingConfig
from .selection.selector import SelectionStrategy

ENV_PREFIX = "SELECTION_"
ENV_SEPARATOR = "__"
ENV_CONFIG_FILE_KEY = "SELECTION_CONFIG_FILE"


class SelectionSettings(BaseModel):
    default_strategy: SelectionStrategy = SelectionStrategy.PARTITION
    max_workers: int = Field(default=4, ge=1)
    enable_metrics: bool = True
    metrics_history: int = Field(default=1000, ge=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("default_strategy", mode="before")
    @classmethod
    def _lowercase_strategy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value


def load_settings(
    path: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SelectionSettings:
    """Build settings from ``path`` (or ``$SELECTION_CONFIG_FILE``) plus env overrides."""

    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    path = path or environ.get(ENV_CONFIG_FILE_KEY)
    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file {config_path} not found")
        data = _load_yaml(config_path)

    data = _deep_merge_dicts(data, _env_overrides(environ))
    return SelectionSettings(**data)


def _load_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        payload = yaml.safe_load(fh) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return payload


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for key, raw_value in environ.items():
        if not key.startswith(ENV_PREFIX) or key == ENV_CONFIG_FILE_KEY:
            continue
        path = key[len(ENV_PREFIX):].lower().split(ENV_SEPARATOR)
        cursor = payload
        for part in path[:-1]:
            cursor = cursor.setdefault(part, {})
        cursor[path[-1]] = _coerce_env_value(raw_value)
    return payload


def _coerce_env_value(raw_value: str) -> Any:
    try:
        return json.loads(raw_value)
    except json.JSONDecodeError:
        return raw_value


def _deep_merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
