from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, HttpUrl, field_validator


class FeedConfig(BaseModel):
    url: HttpUrl = Field(..., description="Absolute URL des Feed-Endpunkts.")


class HTTPClientConfig(BaseModel):
    timeout_s: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default="feedloader/0.1")
    follow_redirects: bool = Field(default=True)
    max_redirects: int = Field(default=5, ge=0)
    max_connections: int = Field(default=20, ge=1)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    file: Optional[Path] = Field(default=None, description="Optionales Logfile zusätzlich zur Konsole.")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if isinstance(logging.getLevelName(level), int):
            return level
        raise ValueError(f"Unbekanntes Loglevel: {value}")


class AppConfig(BaseModel):
    feed: FeedConfig
    http: HTTPClientConfig = Field(default_factory=HTTPClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> AppConfig:
    """Lädt die YAML-Konfiguration und validiert sie über Pydantic."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Konfigdatei nicht gefunden: {file_path}")
    with file_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    return AppConfig.model_validate(raw)
