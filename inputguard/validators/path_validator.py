"""
Path sanitization and validation.

sanitize_path() strips known hazards and always returns a relative-looking
string; validate_path() re-inspects the original input and reports what it
found. Neither touches the filesystem.

Removal of ".." sequences is a single regex pass, not a fixed point, so
overlapping constructions such as "....//" can leave a traversal sequence
behind after one pass. Callers that need a hard guarantee must check
validate_path() errors, which look at the raw string.
"""

from typing import Any

from ..error_types import IssueType
from ..models import ValidationResult
from ..patterns import (
    ABSOLUTE_PATH_PATTERN,
    BACKSLASH_PATTERN,
    CONTROL_CHARACTER_PATTERN,
    LEADING_SLASH_PATTERN,
    PATH_SANITIZATION_RULES,
    REPEATED_SLASH_PATTERN,
    RESERVED_CHARACTER_PATTERN,
    SYSTEM_DIRECTORY_PATTERN,
)


def sanitize_path(path: Any) -> str:
    """
    Strip traversal sequences, system prefixes and unsafe characters from a path.

    Args:
        path: Untrusted path string; anything else yields ""

    Returns:
        str: Relative path using single forward slashes, possibly empty
    """
    if not isinstance(path, str) or not path:
        return ""

    sanitized = path
    for rule in PATH_SANITIZATION_RULES:
        sanitized = rule.apply(sanitized)

    sanitized = sanitized.strip()
    sanitized = BACKSLASH_PATTERN.sub("/", sanitized)
    sanitized = REPEATED_SLASH_PATTERN.sub("/", sanitized)
    return LEADING_SLASH_PATTERN.sub("", sanitized)


def validate_path(path: Any) -> ValidationResult:
    """
    Report the hazards present in an untrusted path.

    Traversal, system directories and control characters are errors;
    absolute paths and reserved characters are only warnings.

    Args:
        path: Untrusted path string

    Returns:
        ValidationResult: Issues found, with sanitized set to sanitize_path(path)
    """
    result = ValidationResult()
    if not isinstance(path, str) or not path:
        result.add_issue(IssueType.PATH_EMPTY)
        return result

    if ".." in path:
        result.add_issue(IssueType.PATH_TRAVERSAL)
    if ABSOLUTE_PATH_PATTERN.search(path):
        result.add_issue(IssueType.PATH_ABSOLUTE)
    if SYSTEM_DIRECTORY_PATTERN.search(path):
        result.add_issue(IssueType.PATH_SYSTEM_DIRECTORY)
    if CONTROL_CHARACTER_PATTERN.search(path):
        result.add_issue(IssueType.PATH_CONTROL_CHARACTERS)
    if RESERVED_CHARACTER_PATTERN.search(path):
        result.add_issue(IssueType.PATH_RESERVED_CHARACTERS)

    result.sanitized = sanitize_path(path)
    return result


def join_paths(*segments: Any) -> str:
    """
    Sanitize each segment independently and join the non-empty ones with "/".

    Example:
        join_paths("uploads", "../../etc", "report.pdf") -> "uploads/etc/report.pdf"
    """
    cleaned = (sanitize_path(segment) for segment in segments)
    return "/".join(segment for segment in cleaned if segment)
