"""
Category-aware logging for inputguard.

Callers that report rejected input log against a fixed category rather than a
module name, so security diagnostics can be routed and filtered as one stream
regardless of which validator produced them.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from inputguard.structured_logging.enhanced_logging_config import get_logger


class LogCategory(Enum):
    """Log categories for grouping entries by concern."""

    SECURITY = "SECURITY"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"


class CategoryLogger:
    """
    Thin wrapper around a structlog logger that tags every entry with a category.

    The context mapping is flattened into the structured entry. Keys that
    collide with structlog's own fields are prefixed with "ctx_".
    """

    _RESERVED_KEYS = frozenset({"event", "category", "level", "logger", "timestamp"})

    def __init__(self, name: str = "inputguard.security") -> None:
        self.name = name
        self._logger = get_logger(name)

    def _log(self, level: str, category: LogCategory, message: str, context: Mapping[str, Any] | None) -> None:
        fields: dict[str, Any] = {}
        for key, value in (context or {}).items():
            key = str(key)
            fields[f"ctx_{key}" if key in self._RESERVED_KEYS else key] = value
        getattr(self._logger, level)(message, category=category.value, **fields)

    def error(self, category: LogCategory, message: str, context: Mapping[str, Any] | None = None) -> None:
        """Log an error-level entry in the given category."""
        self._log("error", category, message, context)

    def warn(self, category: LogCategory, message: str, context: Mapping[str, Any] | None = None) -> None:
        """Log a warning-level entry in the given category."""
        self._log("warning", category, message, context)

    def info(self, category: LogCategory, message: str, context: Mapping[str, Any] | None = None) -> None:
        """Log an info-level entry in the given category."""
        self._log("info", category, message, context)

    def debug(self, category: LogCategory, message: str, context: Mapping[str, Any] | None = None) -> None:
        """Log a debug-level entry in the given category."""
        self._log("debug", category, message, context)


security_logger = CategoryLogger("inputguard.security")
