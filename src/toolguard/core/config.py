# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from toolguard.core.constants import (
    DETECTOR_TIMEOUT_SECONDS,
    MAX_FILE_SIZE,
    SCAN_EXTENSIONS,
    WALK_MAX_DEPTH,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOOLGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # File scanner
    max_file_size: int = MAX_FILE_SIZE
    walk_max_depth: int = WALK_MAX_DEPTH
    # Comma-separated in the environment: TOOLGUARD_SCAN_EXTENSIONS=".md,.py"
    scan_extensions: Annotated[list[str], NoDecode] = list(SCAN_EXTENSIONS)
    ast_analysis: bool = True

    @field_validator("scan_extensions", mode="before")
    @classmethod
    def _parse_scan_extensions(cls, v: object) -> list[str]:
        if isinstance(v, str):
            v = [e.strip() for e in v.split(",") if e.strip()]
        if not isinstance(v, list):
            return []
        return [e if e.startswith(".") else f".{e}" for e in v]

    # Detection orchestrator
    detector_timeout: float = DETECTOR_TIMEOUT_SECONDS
    suggestion_max_distance: int = 5
    suggestion_limit: int = 5

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"


def get_settings() -> Settings:
    return Settings()
