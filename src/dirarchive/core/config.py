# dirarchive/src/dirarchive/core/config.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "DIRARCHIVE_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SettingsError(Exception):
    """Raised when the environment or .env file holds an invalid setting."""


class Settings(BaseSettings):
    # Explicit archiver executable; overrides the platform lookup when set
    tar_path: Optional[str] = Field(default=None)
    windows_tar_path: str = Field(default="C:\\Windows\\System32\\tar.exe")

    # Reporting
    list_limit: int = Field(default=20, ge=1)
    log_level: LogLevel = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


def describe_errors(error: ValidationError) -> str:
    """Turn a pydantic error into one line naming the offending variables."""
    parts = []
    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else "settings"
        parts.append(f"{ENV_PREFIX}{field.upper()}: {item['msg']}")
    return "Invalid configuration: " + "; ".join(parts)


@lru_cache()
def get_settings() -> Settings:
    """
    Load settings from the environment and an optional .env file.

    Raises:
        SettingsError: If any value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise SettingsError(describe_errors(e)) from e
