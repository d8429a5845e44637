"""
Exception hierarchy for inputguard.

The sanitize and validate functions never raise on bad input; these
exceptions are reserved for programmer and deployment mistakes, such as
asking the facade for a kind it does not know or loading a broken
configuration.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """Contextual information attached to an inputguard error."""

    operation: str | None = None
    kind: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "operation": self.operation,
            "kind": self.kind,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


class InputGuardError(Exception):
    """
    Base exception for all inputguard errors.

    Carries structured context and logs itself once on construction.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.details = details or {}
        self.timestamp = datetime.now(UTC)

        self._log_error()

    def _log_error(self) -> None:
        """Log the error with structured context."""
        logger.error(
            "inputguard error occurred",
            error_type=self.__class__.__name__,
            message=self.message,
            context=self.context.to_dict(),
            details=self.details,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context.to_dict(),
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigurationError(InputGuardError):
    """Raised when deploy-time configuration cannot be loaded."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        config_key: str = "unknown",
        details: dict[str, Any] | None = None,
    ):
        self.config_key = config_key
        super().__init__(message, context, details={**(details or {}), "config_key": config_key})


class UnsupportedSanitizationKindError(InputGuardError, ValueError):
    """Raised when the Sanitizer facade is asked for an unknown kind of input."""

    def __init__(self, kind: Any, context: ErrorContext | None = None):
        self.kind = kind
        super().__init__(
            f"Unsupported sanitization kind: {kind!r}",
            context or ErrorContext(kind=str(kind)),
            details={"kind": repr(kind)},
        )
