"""
Configuration management for the Bank of Thailand client.

Supports:
- Environment variables (BOT_API_TOKEN, BOT_BASE_URL, ...)
- .env file for local development
- Optional YAML overlay file

Settings are plain values: build one, pass it to the client. There is no
process-wide instance.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bank_of_thailand.core.errors import BOTError

DEFAULT_BASE_URL = "https://gateway.api.bot.or.th"
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_RETRIES = 3


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==============================================
    # API access
    # ==============================================
    api_token: Optional[str] = Field(default=None, description="BOT API portal token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Gateway base URL")

    # ==============================================
    # Runtime
    # ==============================================
    timeout: int = Field(default=DEFAULT_TIMEOUT, ge=0, description="HTTP timeout in seconds")
    # Reserved: read and validated, no component retries yet.
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)

    # ==============================================
    # Logging
    # ==============================================
    env: str = Field(default="local", description="Environment: local/cloud")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v

    def validate_for_requests(self) -> None:
        """
        Check the settings needed before any request is made.

        Raises:
            BOTError: kind CONFIGURATION when the token or base URL is missing
        """
        if not self.api_token:
            raise BOTError.configuration("API token is required")
        if not self.base_url:
            raise BOTError.configuration("Base URL cannot be empty")

    def is_valid(self) -> bool:
        """Non-raising variant of validate_for_requests()."""
        try:
            self.validate_for_requests()
        except BOTError:
            return False
        return True

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a validated copy with the given fields replaced."""
        if not overrides:
            return self
        values = self.model_dump()
        values.update(overrides)
        return type(self)(**values)


class ConfigLoader:
    """
    Configuration loader that supports multiple sources.

    Environment / .env values are read first, then an optional YAML file
    overlays them, then explicit keyword overrides win.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or os.getenv("BOT_CONFIG_FILE")

    def load(self, **overrides: Any) -> Settings:
        """Load settings from all configured sources."""
        values: dict[str, Any] = {}
        if self.config_path:
            values.update(load_yaml_config(self.config_path))
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**values)


def load_settings(config_path: Optional[str] = None, **overrides: Any) -> Settings:
    """Build a fresh Settings value. Every call returns a new instance."""
    return ConfigLoader(config_path).load(**overrides)


def load_yaml_config(config_path: Optional[str] = None) -> dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to config file. Defaults to config/config.yaml

    Returns:
        Configuration dictionary (empty if the file has no content)
    """
    if config_path is None:
        # Find project root (where pyproject.toml is)
        current = Path(__file__).resolve()
        for parent in current.parents:
            if (parent / "pyproject.toml").exists():
                config_path = str(parent / "config" / "config.yaml")
                break
        else:
            config_path = "config/config.yaml"

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise BOTError.configuration(
            f"Config file must contain a mapping: {config_path}",
            path=str(path),
        )
    return loaded
