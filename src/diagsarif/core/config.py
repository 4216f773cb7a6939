# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from diagsarif.core.constants import DEFAULT_EMPTY_RUN_TOOL_NAME


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DIAGSARIF_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Rendering
    root: str = ""  # empty means the current working directory
    pretty: bool = False
    empty_run_tool_name: str = DEFAULT_EMPTY_RUN_TOOL_NAME

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # "json" or "text"

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("json", "text"):
            msg = f"log_format must be 'json' or 'text', got {v!r}"
            raise ValueError(msg)
        return v


def get_settings() -> Settings:
    return Settings()
