"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherlog.config.schema import AppConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"
DB_PATH_ENV = "WEATHERLOG_DB"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. An empty provider.api_key
    is filled from OPENWEATHER_API_KEY, and WEATHERLOG_DB overrides
    history.db_path.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    provider = raw.setdefault("provider", {}) or {}
    raw["provider"] = provider
    if not provider.get("api_key") and os.environ.get(API_KEY_ENV):
        provider["api_key"] = os.environ[API_KEY_ENV]

    if os.environ.get(DB_PATH_ENV):
        history = raw.get("history") or {}
        history["db_path"] = os.environ[DB_PATH_ENV]
        raw["history"] = history

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'ui.default_city'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: AppConfig) -> str:
    """Config as JSON with the provider key masked, for `config show`."""
    data = config.model_copy(deep=True)
    if data.provider.api_key:
        data.provider.api_key = "***"
    return data.model_dump_json(indent=2)
