"""
config.py — Environment-driven settings

The monetary core takes no configuration. These settings belong to the
applications built around it and currently drive logging setup only.

Configuration sources (in order of precedence):
1. Environment variables (optionally namespaced with a prefix)
2. .env file in the working directory
3. Default values below

Variables:
    ENVIRONMENT       development | staging | production | ...  (default development)
    LOGGING_LEVEL     debug | info | warn | warning | error | ""  (default info)
    LOGGING_TYPE      text | json | ""  (default text; "" means text in
                      development, json elsewhere)
    LOGGING_STDERR    write logs to stderr instead of stdout (default false)
"""

from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["", "DEBUG", "INFO", "WARN", "WARNING", "ERROR"]
LogType = Literal["", "text", "json"]


class Settings(BaseSettings):
    """Typed settings, read from the environment at construction."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment, decides the log level when none is set",
    )
    logging_level: LogLevel = Field(
        default="INFO",
        description="Log level; empty means derive from environment",
    )
    logging_type: LogType = Field(
        default="text",
        description="Log output format; empty means derive from environment",
    )
    logging_stderr: bool = Field(default=False, description="Log to stderr instead of stdout")

    @field_validator("logging_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("logging_type", mode="before")
    @classmethod
    def normalize_type(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


def load_settings(prefix: str = "") -> Settings:
    """
    Read settings from the environment, uncached.

    With prefix="PAYMENTS" the variables become PAYMENTS_LOGGING_LEVEL, ...
    """
    env_prefix = f"{prefix.rstrip('_')}_" if prefix else ""
    return Settings(_env_prefix=env_prefix)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
