"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from bom_validator.config import reset_settings


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test.

    This ensures that environment variable changes made by monkeypatch
    are properly reflected in the settings, since pydantic-settings
    reads env vars at instantiation time.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo setup_logging() so cached loggers do not leak between tests."""
    yield
    structlog.reset_defaults()
