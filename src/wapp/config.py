"""Typed settings, persisted provider choice, and the provider environment."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("config.json")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path = Field(default=DEFAULT_CONFIG_PATH, alias="WAPP_CONFIG_PATH")
    log_level: str = Field(default="WARNING", alias="WAPP_LOG_LEVEL")
    http_timeout_seconds: float | None = Field(
        default=None,
        alias="WAPP_HTTP_TIMEOUT_SECONDS",
    )

    @field_validator("http_timeout_seconds", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat an empty env-string timeout as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"WAPP_LOG_LEVEL must be a logging level name, got {value!r}.")
        return level

    @model_validator(mode="after")
    def validate_timeout(self) -> Settings:
        if self.http_timeout_seconds is not None and self.http_timeout_seconds <= 0:
            raise ValueError("WAPP_HTTP_TIMEOUT_SECONDS must be > 0 when set.")
        return self


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc


class AppConfig(BaseModel):
    """Persisted CLI configuration: which weather provider is active."""

    provider: str


def save_config(cfg: AppConfig, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Write the config as pretty JSON, replacing any existing file."""
    try:
        path.write_text(json.dumps(cfg.model_dump(), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed writing config file {path}: {exc}") from exc


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Read the config saved by `wapp configure`."""
    if not path.exists():
        raise ConfigError(f"{path} not found. Run: wapp configure <provider>")
    try:
        return AppConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed reading config file {path}: {exc}") from exc
    except (ValidationError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc


def load_environment(env_file: Path | str | None = ".env") -> dict[str, str]:
    """Return the process environment layered over values from `env_file`.

    Variables already set in the process always win over the file.
    """
    merged: dict[str, str] = {}
    if env_file is not None and Path(env_file).is_file():
        merged.update(
            {key: value for key, value in dotenv_values(env_file).items() if value is not None}
        )
    merged.update(os.environ)
    return merged


def env_value(env: Mapping[str, str], name: str) -> str | None:
    """Look up `name`, treating empty or whitespace-only values as unset."""
    value = env.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()
