"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen after
initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages


class NodeSettings(BaseModel):
    """Playback node connection configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    host: str = Field(default="localhost", min_length=1)
    port: int = Field(default=3000, ge=1, le=65535)
    secure: bool = False
    password: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("password", "auth", "token")
    )
    request_timeout_s: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        validation_alias=AliasChoices("request_timeout_s", "request_timeout", "timeout"),
    )

    @property
    def base_url(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.host}:{self.port}/"


class PlayerSettings(BaseModel):
    """Player behaviour configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    default_volume: int = Field(default=100, ge=0, le=1000)
    connect_poll_interval_s: float = Field(
        default=1.0,
        gt=0.0,
        le=30.0,
        validation_alias=AliasChoices("connect_poll_interval_s", "poll_interval"),
    )


class Settings(BaseSettings):
    """Application settings container.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - NODE__HOST, NODE__PORT, NODE__SECURE, NODE__PASSWORD, ...
    - PLAYER__DEFAULT_VOLUME, PLAYER__CONNECT_POLL_INTERVAL_S
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    node: NodeSettings = Field(default_factory=NodeSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels))
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
