"""
Configuration module for inputguard.

This module provides type-safe, validated configuration using Pydantic BaseSettings.

Usage:
    from inputguard.config import get_config

    config = get_config()
    logger.info("Sanitizer configuration", max_filename_length=config.sanitizer.max_filename_length)
"""

import sys
import threading
from functools import lru_cache
from os import getenv

from ..structured_logging.enhanced_logging_config import setup_enhanced_logging
from .models import AppConfig, LoggingConfig, SanitizerConfig

__all__ = ["configure_logging", "get_config", "reset_config", "AppConfig", "LoggingConfig", "SanitizerConfig"]

# Module-level config cache
_config_instance = None
_config_lock = threading.Lock()


def _is_test_mode() -> bool:
    """
    Detect if running in test environment.

    Returns:
        bool: True if running in test mode, False otherwise
    """
    if "pytest" in sys.modules:
        return True

    if getenv("PYTEST_CURRENT_TEST"):
        return True

    return False


@lru_cache(maxsize=1)
def _get_config_cached() -> AppConfig:
    """
    Production config loader with caching.

    Returns:
        AppConfig: Cached application configuration
    """
    global _config_instance  # pylint: disable=global-statement
    with _config_lock:
        if _config_instance is None:
            _config_instance = AppConfig()
    return _config_instance


def get_config() -> AppConfig:
    """
    Get configuration (singleton in production, fresh in tests).

    In test mode a fresh instance is built from the current environment on
    every call so tests can monkeypatch environment variables.

    Returns:
        AppConfig: The configuration

    Raises:
        ValidationError: If configuration is invalid
    """
    if _is_test_mode():
        return AppConfig()
    return _get_config_cached()


def reset_config() -> None:
    """
    Reset the configuration cache.

    This is primarily used for testing to force configuration reload.
    """
    global _config_instance  # pylint: disable=global-statement

    with _config_lock:
        _get_config_cached.cache_clear()
        _config_instance = None


def configure_logging(config: AppConfig | None = None, *, force_reconfigure: bool = False) -> None:
    """
    Configure structlog from the logging section of the configuration.

    Applications call this once at startup; the sanitizers themselves only
    obtain loggers and never configure logging on import.
    """
    config = config or get_config()
    setup_enhanced_logging(config.to_legacy_dict(), force_reconfigure=force_reconfigure)
