"""
Runtime configuration for the users API.

Values are resolved from environment variables prefixed with
``USERS_API_`` and fall back to the defaults declared on ``Settings``.
"""

from __future__ import annotations

import os
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

ENV_PREFIX = "USERS_API_"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


class Settings(BaseModel):
    title: str = "Users Sample API"
    description: str = "Sample REST API exposing CRUD endpoints over a user resource"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides) -> Settings:
    """
    Build ``Settings`` from explicit overrides, then the environment,
    then the built-in defaults.
    """
    environ = os.environ if environ is None else environ

    values = {}
    for name in Settings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw
    values.update(overrides)

    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
