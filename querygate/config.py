"""Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a QUERYGATE_-prefixed environment variable
    - get_settings() is cached (lru_cache), single instance per process
    - Only the shell (boundary, logging setup) reads settings; core/ never does
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from querygate.core.errors import DEFAULT_PARSE_MESSAGE


class Settings(BaseSettings):
    """Defaults for boundary rendering and observability."""

    model_config = SettingsConfigDict(
        env_prefix="QUERYGATE_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Boundaries
    loader_on_fetch: bool = False
    validation_message: str = DEFAULT_PARSE_MESSAGE

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
