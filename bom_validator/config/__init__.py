"""Configuration module for bom-validator.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from bom_validator.config import get_settings

    settings = get_settings()

    # Schema version used when callers do not pass one
    version = settings.validation.spec_version

    # Logging
    level = settings.logging.log_level
"""

from bom_validator.config.settings import (
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reset_settings",
]
