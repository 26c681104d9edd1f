# src/yfxrate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a .env file) with validation.

Files that USE this module:
- yfxrate.app (loads settings for logging and transport configuration)
- yfxrate.adapters.providers.yahoo_finance (default quote endpoint)
- yfxrate.adapters.http.client (timeout and User-Agent defaults)

Files that this module USES:
- None
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for log_level validation
import urllib.parse  # URL parsing for endpoint validation
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from yfxrate import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Yahoo! Finance ---
    yahoo_quotes_url: str = Field(
        default="http://download.finance.yahoo.com/d/quotes.csv",
        alias="YAHOO_QUOTES_URL",
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    http_user_agent: str = Field(default=f"yfxrate/{__version__}", alias="HTTP_USER_AGENT")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    # stdout carries only command output unless this is set
    log_stdout: bool = Field(default=False, alias="YFXRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("yahoo_quotes_url")
    @classmethod
    def validate_quotes_url(cls, v: str) -> str:
        """Quote endpoint must be an absolute http(s) URL; the query is built per request."""
        parsed = urllib.parse.urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("YAHOO_QUOTES_URL must be an http(s) URL")
        if parsed.query:
            raise ValueError("YAHOO_QUOTES_URL must not contain a query string")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


# Global settings instance
settings = Settings()
