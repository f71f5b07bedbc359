# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ErrorsConfig(BaseSettings):
    log_level: str = Field("INFO", alias="WRAPPERRORS_LOG_LEVEL")
    log_file: Path | None = Field(None, alias="WRAPPERRORS_LOG_FILE")
    # status sent for errors without a non-zero status of their own
    default_status: int = Field(500, ge=100, le=599, alias="WRAPPERRORS_DEFAULT_STATUS")
    expose_cause: bool = Field(False, alias="WRAPPERRORS_EXPOSE_CAUSE")
    debug_logging: bool = Field(False, alias="WRAPPERRORS_DEBUG_LOGGING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("expose_cause", "debug_logging", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


@lru_cache(maxsize=1)
def load_config() -> ErrorsConfig:
    return ErrorsConfig()  # type: ignore[call-arg]


__all__ = ["ErrorsConfig", "load_config"]
