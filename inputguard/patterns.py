"""
Pattern tables and the extension allow-list.

Everything in this module is built once at import time and never mutated
afterwards, which is what makes the validators safe to call from any number
of threads without locking.
"""

import re

from pydantic import ValidationError

from .config import get_config
from .exceptions import ConfigurationError, ErrorContext
from .models import SanitizationRule

# Ordered: traversal and system prefixes must go before control/reserved
# characters are stripped, and all four before separators are normalized.
PATH_SANITIZATION_RULES: tuple[SanitizationRule, ...] = (
    SanitizationRule(re.compile(r"\.\.[/\\]"), "", "traversal sequences (../ and ..\\)"),
    SanitizationRule(
        re.compile(r"^(?:/(?:etc|proc|sys)/|c:\\(?:windows|program files))", re.IGNORECASE),
        "",
        "absolute system-path prefixes",
    ),
    SanitizationRule(re.compile(r"[\x00-\x1f]"), "", "control characters"),
    SanitizationRule(re.compile(r'[<>:"|?*]'), "", "reserved filesystem characters"),
)

BACKSLASH_PATTERN = re.compile(r"\\")
REPEATED_SLASH_PATTERN = re.compile(r"/{2,}")
LEADING_SLASH_PATTERN = re.compile(r"^/+")

# Validation-side checks inspect the original, unsanitized string
ABSOLUTE_PATH_PATTERN = re.compile(r"^(?:[/\\]|[a-zA-Z]:)")
SYSTEM_DIRECTORY_PATTERN = re.compile(
    r"^(?:[a-zA-Z]:)?[/\\]*(?:etc|proc|sys|windows|program files)(?:[/\\]|$)",
    re.IGNORECASE,
)
CONTROL_CHARACTER_PATTERN = re.compile(r"[\x00-\x1f]")
RESERVED_CHARACTER_PATTERN = re.compile(r'[<>:"|?*]')

FILENAME_SEPARATOR_PATTERN = re.compile(r"[/\\]")
FILENAME_UNSAFE_CHARACTER_PATTERN = re.compile(r'[<>:"|?*\x00-\x1f]')
FILENAME_EDGE_PATTERN = re.compile(r"^[.\s]+|[.\s]+$")
WINDOWS_RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})
BLOCKED_QUERY_PARAMETERS = frozenset({"javascript", "data", "vbscript"})
DANGEROUS_URL_PATTERN = re.compile(r"javascript:|data:|vbscript:", re.IGNORECASE)
PERCENT_ENCODED_PATTERN = re.compile(r"%[0-9a-fA-F]{2}")

DEFAULT_ALLOWED_EXTENSIONS = frozenset(
    {
        # Documents
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods", "odp", "rtf", "txt", "md",
        # Archives
        "zip", "tar", "gz", "tgz", "bz2", "7z", "rar",
        # Images
        "jpg", "jpeg", "png", "gif", "bmp", "webp", "tif", "tiff", "svg", "ico",
        # Audio and video
        "mp3", "wav", "ogg", "flac", "m4a", "aac", "mp4", "mov", "avi", "mkv", "webm",
        # Data interchange
        "csv", "tsv", "json", "xml", "yaml", "yml",
    }
)  # fmt: skip


def _load_sanitizer_settings():
    try:
        return get_config().sanitizer
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid sanitizer configuration",
            ErrorContext(operation="load_sanitizer_settings"),
            config_key="sanitizer",
            details={"errors": e.errors(include_url=False)},
        ) from e


_settings = _load_sanitizer_settings()

MAX_FILENAME_LENGTH: int = _settings.max_filename_length
FILENAME_FALLBACK: str = _settings.filename_fallback
ALLOWED_EXTENSIONS: frozenset[str] = DEFAULT_ALLOWED_EXTENSIONS | frozenset(_settings.extra_allowed_extensions)
