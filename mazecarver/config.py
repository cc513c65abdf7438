"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Carver"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Maze dimensions
    default_width: int = 32
    default_height: int = 24
    max_width: int = 200
    max_height: int = 200
    max_animate_cells: int = 2500  # largest maze /v1/maze/animate will stream

    # Generation
    random_seed: Optional[int] = None  # None = fresh randomness every run
    step_delay_seconds: float = 1 / 25

    # Painter glyphs
    wall_char: str = "X"
    open_char: str = "."

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    @field_validator("step_delay_seconds")
    @classmethod
    def validate_step_delay(cls, v: float) -> float:
        """Reject negative animation delays."""
        if v < 0:
            raise ValueError("STEP_DELAY_SECONDS must not be negative")
        return v

    @field_validator(
        "default_width", "default_height", "max_width", "max_height", "max_animate_cells"
    )
    @classmethod
    def validate_dimension(cls, v: int) -> int:
        """Maze dimensions must be positive."""
        if v < 1:
            raise ValueError("Maze dimensions must be positive")
        return v

    @field_validator("wall_char", "open_char")
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        """Painter glyphs are single characters."""
        if len(v) != 1:
            raise ValueError("Painter glyphs must be single characters")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @model_validator(mode="after")
    def validate_consistency(self) -> "Settings":
        """Cross-field checks."""
        if self.wall_char == self.open_char:
            raise ValueError("WALL_CHAR and OPEN_CHAR must differ")
        if self.default_width > self.max_width or self.default_height > self.max_height:
            raise ValueError("Default maze size exceeds the configured maximum")
        if self.default_width * self.default_height > self.max_animate_cells:
            raise ValueError("Default maze size exceeds MAX_ANIMATE_CELLS")
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
