# src/config/settings.py - v1
"""Typed configuration loaded from environment / .env via pydantic-settings.

Every variable is prefixed with GRAPHLOUVAIN_, e.g.
GRAPHLOUVAIN_WEIGHT_ATTRIBUTE=w or GRAPHLOUVAIN_LOG_FORMAT=text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Library settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_prefix="GRAPHLOUVAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Graph attributes ===
    weight_attribute: str = "weight"
    community_attribute: str = "community"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("weight_attribute", "community_attribute")
    @classmethod
    def validate_attribute_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("attribute names must not be blank")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if self.log_file is not None and self.log_retention == 0:
            errors.append("LOG_FILE requires LOG_RETENTION >= 1")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment / .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
