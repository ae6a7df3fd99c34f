"""Configuration module for maid settings.

Every setting can be overridden through a ``MAID_``-prefixed environment
variable or a local ``.env`` file.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rubric import DEFAULT_TOP_KEYWORDS, MIN_KEYWORD_LENGTH, RUBRIC_FILENAME


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MAID_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Parent directory for timestamped holding areas (maid-trash-bin-*)
    trash_root: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))

    rubric_filename: str = RUBRIC_FILENAME
    top_keyword_count: int = Field(default=DEFAULT_TOP_KEYWORDS, ge=1)
    min_keyword_length: int = Field(default=MIN_KEYWORD_LENGTH, ge=1)

    # Open a terminal that deletes the holding area when it is closed
    spawn_expiry_terminal: bool = True

    watch_interval_seconds: int = Field(default=60, ge=1)

    activity_log_enabled: bool = True
    activity_log_name: str = ".maid_activity.jsonl"

    log_level: str = "INFO"
    log_dir: Optional[Path] = None


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""

    return settings
