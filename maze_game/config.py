"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (the one holding maze_game/)
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Game settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Maze Game"

    # Maze source
    maze_file: Path = Path("maze.txt")
    max_rows: int = 105
    max_cols: int = 105
    strict_markers: bool = False  # reject duplicate S/E instead of keeping the last one

    # Possible-paths mode
    max_paths_to_show: int = 20

    # Presentation
    color: bool = True
    clear_screen: bool = True
    step_delay_seconds: float = 1.0

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @field_validator("max_rows", "max_cols", "max_paths_to_show")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Capacities and counts must be positive."""
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("step_delay_seconds")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("step delay cannot be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
