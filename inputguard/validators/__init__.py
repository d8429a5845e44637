"""
Input validation utilities for inputguard.

Each kind of untrusted input gets a sanitize_* function that cleans it
(never raising) and a validate_* function that reports what was wrong with
it (also never raising).
"""

from .filename_validator import (
    get_safe_extension,
    is_allowed_extension,
    sanitize_filename,
    validate_filename,
)
from .path_validator import join_paths, sanitize_path, validate_path
from .url_validator import sanitize_url, validate_url

__all__ = [
    "sanitize_path",
    "validate_path",
    "join_paths",
    "sanitize_url",
    "validate_url",
    "sanitize_filename",
    "validate_filename",
    "get_safe_extension",
    "is_allowed_extension",
]
