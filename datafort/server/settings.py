from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:5174"]


class Settings(BaseModel):
    """Runtime configuration for the navigation server."""

    source_path: Path = Field(default_factory=lambda: Path(os.getenv("DATAFORT_SOURCE", "db.tsv")))
    field_separator: str = Field(default_factory=lambda: os.getenv("DATAFORT_SEPARATOR", "\t"))
    log_level: str = Field(default_factory=lambda: os.getenv("DATAFORT_LOG_LEVEL", "INFO"))
    cors_origins: List[str] = Field(default_factory=lambda: os.getenv("CORS_ORIGINS") or list(DEFAULT_CORS_ORIGINS))

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("field_separator", mode="before")
    @classmethod
    def _unescape_separator(cls, value: object) -> str:
        if value is None or value == "":
            raise ValueError("DATAFORT_SEPARATOR must not be empty")
        text = str(value)
        # Accept a literal backslash-t from the environment.
        return "\t" if text == "\\t" else text

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        level = str(value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(value, str):
            if not value.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return list(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_CORS_ORIGINS"]
