"""
Sanitizer facade.

Groups the per-kind sanitize/validate function pairs behind one object for
callers that pick the kind of input at runtime, e.g. from a form schema.
Results are identical to calling the free functions directly.
"""

from collections.abc import Callable
from typing import Any

from .exceptions import UnsupportedSanitizationKindError
from .models import SanitizationKind, ValidationResult
from .structured_logging.enhanced_logging_config import get_logger
from .validators import (
    sanitize_filename,
    sanitize_path,
    sanitize_url,
    validate_filename,
    validate_path,
    validate_url,
)

logger = get_logger(__name__)


class Sanitizer:
    """Dispatches sanitize/validate calls by SanitizationKind."""

    _SANITIZERS: dict[SanitizationKind, Callable[[Any], str]] = {
        SanitizationKind.PATH: sanitize_path,
        SanitizationKind.URL: sanitize_url,
        SanitizationKind.FILENAME: sanitize_filename,
    }
    _VALIDATORS: dict[SanitizationKind, Callable[[Any], ValidationResult]] = {
        SanitizationKind.PATH: validate_path,
        SanitizationKind.URL: validate_url,
        SanitizationKind.FILENAME: validate_filename,
    }

    @staticmethod
    def resolve_kind(kind: SanitizationKind | str) -> SanitizationKind:
        """
        Accept either a SanitizationKind or its string value ("path", "URL", ...).

        Raises:
            UnsupportedSanitizationKindError: If kind names no known input kind
        """
        if isinstance(kind, SanitizationKind):
            return kind
        if isinstance(kind, str):
            try:
                return SanitizationKind(kind.strip().lower())
            except ValueError:
                pass
        raise UnsupportedSanitizationKindError(kind)

    def sanitize(self, kind: SanitizationKind | str, value: Any) -> str:
        """Clean value as the given kind of input."""
        return self._SANITIZERS[self.resolve_kind(kind)](value)

    def validate(self, kind: SanitizationKind | str, value: Any) -> ValidationResult:
        """Validate value as the given kind of input."""
        resolved = self.resolve_kind(kind)
        result = self._VALIDATORS[resolved](value)
        if not result.is_valid:
            logger.debug("Input failed validation", kind=resolved.value, errors=result.errors)
        return result


default_sanitizer = Sanitizer()
