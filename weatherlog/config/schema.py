"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org"
    api_key: str = ""
    units: Units = Units.METRIC
    timeout_seconds: float = Field(default=5.0, gt=0.0)


class HistoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherlog.db"
    # Empty means the UI talks to the local store directly
    api_url: str = ""
    max_limit: int = Field(default=10, ge=1, le=10)
    timeout_seconds: float = Field(default=5.0, gt=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8778, ge=1, le=65535)


class UIConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = "London"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    history: HistoryConfig = HistoryConfig()
    server: ServerConfig = ServerConfig()
    ui: UIConfig = UIConfig()
