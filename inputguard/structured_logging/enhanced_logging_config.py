"""
Enhanced structlog-based logging configuration for inputguard.

This module is the entry point for the logging system. It wires structlog on
top of the standard library logging module, installs the security-aware
processors, and hands out loggers to the rest of the package.
"""

import json
import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

from inputguard.structured_logging.logging_processors import (
    add_correlation_id,
    sanitize_sensitive_data,
    truncate_untrusted_values,
)

# Module-level logger for internal use
# NOTE: Infrastructure code may use structlog.get_logger() directly to avoid
# circular imports during logging system initialization. All other modules
# must use get_logger() from this module.
logger = structlog.get_logger(__name__)

VALID_ENVIRONMENTS = ["unit_test", "local", "production"]
VALID_FORMATS = ["json", "human", "colored"]


class _LoggingState:
    """State container for logging initialization to avoid global statements."""

    initialized: bool = False
    signature: str | None = None


_logging_state = _LoggingState()


def detect_environment() -> str:
    """
    Detect the current environment based on various indicators.

    Returns:
        Environment name: "unit_test", "local", or "production"
    """
    # Check if running under pytest (unit tests)
    if "pytest" in sys.modules or "pytest" in sys.argv[0]:
        return "unit_test"

    env = os.getenv("INPUTGUARD_ENV")
    if env and env in VALID_ENVIRONMENTS:
        return env

    logging_env = os.getenv("LOGGING_ENVIRONMENT", "")
    if logging_env in VALID_ENVIRONMENTS:
        return logging_env

    return "local"


def remove_inputguard_handlers() -> None:
    """Detach and close the root handlers installed by configure_enhanced_structlog()."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if getattr(handler, "_inputguard_handler", False):
            root_logger.removeHandler(handler)
            handler.close()


def _select_renderer(log_format: str) -> Any:
    """Pick the final structlog renderer for the requested format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    if log_format == "colored":
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])


def configure_enhanced_structlog(
    environment: str | None = None,
    log_level: str = "INFO",
    log_format: str = "human",
    disable_logging: bool = False,
) -> None:
    """
    Configure structlog with redaction, correlation IDs and a level filter.

    Args:
        environment: Environment name (auto-detected if None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Renderer to use ("json", "human" or "colored")
        disable_logging: When True, drop every entry below CRITICAL
    """
    if environment is None:
        environment = detect_environment()

    level = logging.CRITICAL if disable_logging else getattr(logging, log_level.upper(), logging.INFO)

    # Replace rather than reuse our handler so it writes to the current sys.stderr
    root_logger = logging.getLogger()
    remove_inputguard_handlers()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._inputguard_handler = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    base_processors = [
        # Security first - redact secrets and clamp hostile input
        sanitize_sensitive_data,
        truncate_untrusted_values,
        add_correlation_id,
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=base_processors + [_select_renderer(log_format)],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )

    configured_logger = structlog.get_logger(__name__)
    configured_logger.debug(
        "Structlog configured",
        environment=environment,
        log_level=log_level,
        log_format=log_format,
    )


def setup_enhanced_logging(config: dict[str, Any], *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a configuration dictionary.

    Calling this more than once is a no-op unless force_reconfigure is set.

    Args:
        config: Configuration dictionary with a "logging" section
        force_reconfigure: When True, reconfigure even if already initialized
    """
    config_signature = json.dumps(config, sort_keys=True, default=str)

    if _logging_state.initialized and not force_reconfigure:
        get_logger("inputguard.structured_logging.setup").debug(
            "setup_enhanced_logging skipped; logging system already initialized",
            config_signature=_logging_state.signature,
        )
        return

    logging_config = config.get("logging", {})
    environment = logging_config.get("environment", detect_environment())
    log_level = logging_config.get("level", "INFO")
    log_format = logging_config.get("format", "human")
    disable_logging = logging_config.get("disable_logging", False)

    configure_enhanced_structlog(environment, log_level, log_format, disable_logging)

    get_logger("inputguard.structured_logging.enhanced").info(
        "Logging system initialized",
        environment=environment,
        log_level=log_level,
        log_format=log_format,
        security_sanitization=True,
    )

    _logging_state.initialized = True
    _logging_state.signature = config_signature


def reset_logging_state() -> None:
    """Forget that logging was initialized so the next setup call reconfigures."""
    _logging_state.initialized = False
    _logging_state.signature = None


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a Structlog logger with the specified name.

    This is the public API for obtaining loggers. All package code should use
    this function rather than calling structlog.get_logger() directly.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured Structlog logger instance
    """
    return structlog.get_logger(name)
