"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all bom-validator settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bom_validator.spec_version import SpecVersion


class ValidationSettings(BaseSettings):
    """Validation engine configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    spec_version: SpecVersion = Field(
        default=SpecVersion.V1_5,
        validation_alias="BOM_SPEC_VERSION",
        description="Schema version used when the caller does not name one",
    )
    max_reported_errors: int = Field(
        default=100,
        ge=1,
        validation_alias="MAX_REPORTED_ERRORS",
        description="Maximum number of errors listed in a formatted report",
    )

    @field_validator("spec_version", mode="before")
    @classmethod
    def parse_spec_version(cls, v):
        if isinstance(v, str):
            return SpecVersion.parse(v)
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for the bom_validator namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from bom_validator.config import get_settings

        settings = get_settings()
        version = settings.validation.spec_version
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
