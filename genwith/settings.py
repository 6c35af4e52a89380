"""Tool settings loaded from GENWITH_* environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # External formatters, run in this order on the generated file
    gofmt: str = "gofmt"
    goimports: str = "goimports"

    # Permissions of the generated file
    file_mode: int = 0o600

    # Logging
    log_level: LogLevel = "WARNING"

    model_config = {"env_prefix": "GENWITH_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
