"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherlog.config.schema import AppConfig
from weatherlog.history.service import HistoryService
from weatherlog.models.reading import IconCategory, Reading


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's environment out of config and client defaults."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHERLOG_DB", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def paris_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "openweather_paris.json") as f:
        return json.load(f)


@pytest.fixture
def paris_reading() -> Reading:
    return Reading(
        temperature_celsius=21,
        humidity_percent=40,
        wind_speed=3.2,
        location="Paris",
        icon=IconCategory.CLEAR,
    )


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "history.db"


@pytest.fixture
def history(db_path: Path) -> HistoryService:
    return HistoryService(db_path)


@pytest.fixture
def app_config(db_path: Path) -> AppConfig:
    return AppConfig(
        provider={"base_url": "https://owm.test", "api_key": "test-key"},
        history={"db_path": str(db_path)},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path, db_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"base_url": "https://owm.test", "api_key": "test-key"},
        "history": {"db_path": str(db_path)},
        "ui": {"default_city": "Paris"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
