"""
Logging processors for structlog event processing.

This module provides processors for redacting sensitive fields, adding
correlation IDs, and truncating oversized values taken from untrusted input.
"""

import re
import uuid
from typing import Any

# Sensitive patterns that should be redacted
# These patterns match whole words or specific suffixes/prefixes
SENSITIVE_FIELD_PATTERNS = [
    r"\bpassword\b",
    r"\btoken\b",
    r"\bsecret\b",
    r"_key\b",  # Matches fields ending with _key (api_key, private_key, etc.)
    r"^key$",  # Matches exact field name "key"
    r"\bcredential\b",
    r"\bauth\b",
    r"\bjwt\b",
    r"\bbearer\b",
    r"\bauthorization\b",
]

# Longest string value from untrusted input kept verbatim in a log entry
MAX_LOGGED_VALUE_LENGTH = 200


def sanitize_sensitive_data(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive data from log entries.

    Rejected URLs can carry credentials in their userinfo or query string, so
    any field whose name looks like a secret is replaced with a placeholder
    before the entry reaches a handler.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to sanitize

    Returns:
        Sanitized event dictionary
    """

    def sanitize_dict(d: dict[str, Any]) -> dict[str, Any]:
        """Recursively sanitize dictionary values."""
        sanitized: dict[str, Any] = {}
        for key, value in d.items():
            if isinstance(value, dict):
                sanitized[key] = sanitize_dict(value)
            elif any(re.search(pattern, str(key).lower()) for pattern in SENSITIVE_FIELD_PATTERNS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = value
        return sanitized

    return sanitize_dict(event_dict)


def truncate_untrusted_values(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Truncate long string values so hostile input cannot flood the log files.

    The event message itself is left untouched.
    """
    for key, value in event_dict.items():
        if key == "event" or not isinstance(value, str):
            continue
        if len(value) > MAX_LOGGED_VALUE_LENGTH:
            event_dict[key] = value[:MAX_LOGGED_VALUE_LENGTH] + "...[truncated]"
    return event_dict


def add_correlation_id(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Add correlation ID to log entries if not already present.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to enhance

    Returns:
        Enhanced event dictionary with correlation ID
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = str(uuid.uuid4())

    return event_dict
