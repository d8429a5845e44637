"""
Filename sanitization and the extension allow-list policy.

A sanitized filename never contains a path separator, so it can be appended
to a trusted directory without changing which directory it lands in.
"""

from collections.abc import Iterable
from typing import Any

from ..error_types import IssueType
from ..models import ValidationResult
from ..patterns import (
    ALLOWED_EXTENSIONS,
    CONTROL_CHARACTER_PATTERN,
    FILENAME_EDGE_PATTERN,
    FILENAME_FALLBACK,
    FILENAME_SEPARATOR_PATTERN,
    FILENAME_UNSAFE_CHARACTER_PATTERN,
    MAX_FILENAME_LENGTH,
    RESERVED_CHARACTER_PATTERN,
    WINDOWS_RESERVED_NAMES,
)


def sanitize_filename(name: Any) -> str:
    """
    Make an untrusted filename safe to store.

    Removes path separators, reserved and control characters, trims leading
    and trailing dots and whitespace, and truncates to the maximum length.

    Args:
        name: Untrusted filename

    Returns:
        str: Safe filename, or the fallback name ("file") when nothing survives
    """
    if not isinstance(name, str) or not name:
        return FILENAME_FALLBACK

    sanitized = FILENAME_SEPARATOR_PATTERN.sub("", name)
    sanitized = FILENAME_UNSAFE_CHARACTER_PATTERN.sub("", sanitized)
    sanitized = FILENAME_EDGE_PATTERN.sub("", sanitized)
    sanitized = sanitized[:MAX_FILENAME_LENGTH]
    return sanitized or FILENAME_FALLBACK


def get_safe_extension(name: Any) -> str:
    """
    Return the lower-cased extension of name if it is allow-listed, else "".

    Only the text after the last dot counts ("archive.tar.gz" -> "gz").
    Dotfiles have no extension.
    """
    sanitized = sanitize_filename(name)
    last_dot = sanitized.rfind(".")
    if last_dot <= 0:
        return ""

    extension = sanitized[last_dot + 1 :].lower()
    return extension if extension in ALLOWED_EXTENSIONS else ""


def is_allowed_extension(name: Any, allowed_extensions: Iterable[str]) -> bool:
    """
    Check name against both the global allow-list and a caller-specific one.

    Args:
        name: Untrusted filename
        allowed_extensions: Bare extensions the caller accepts, e.g. {"pdf", "csv"}

    Returns:
        bool: True only if the extension is in both lists
    """
    extension = get_safe_extension(name)
    if not extension or isinstance(allowed_extensions, (str, bytes)):
        return False
    try:
        allowed = frozenset(allowed_extensions)
    except TypeError:
        return False
    return extension in allowed


def validate_filename(name: Any) -> ValidationResult:
    """
    Report problems with an untrusted filename.

    Separators, traversal sequences and control characters are errors.
    Everything sanitize_filename() would quietly fix, plus reserved device
    names and extensions outside the allow-list, is a warning.
    """
    result = ValidationResult(sanitized=sanitize_filename(name))
    if not isinstance(name, str) or not name:
        result.add_issue(IssueType.FILENAME_EMPTY)
        return result

    if FILENAME_SEPARATOR_PATTERN.search(name):
        result.add_issue(IssueType.FILENAME_PATH_SEPARATORS)
    if ".." in name:
        result.add_issue(IssueType.FILENAME_TRAVERSAL)
    if CONTROL_CHARACTER_PATTERN.search(name):
        result.add_issue(IssueType.FILENAME_CONTROL_CHARACTERS)
    if RESERVED_CHARACTER_PATTERN.search(name):
        result.add_issue(IssueType.FILENAME_RESERVED_CHARACTERS)
    if name != name.strip() or name.startswith(".") or name.endswith("."):
        result.add_issue(IssueType.FILENAME_EDGE_DOTS_OR_SPACES)
    if len(name) > MAX_FILENAME_LENGTH:
        result.add_issue(IssueType.FILENAME_TOO_LONG)

    stem = result.sanitized.split(".", 1)[0]
    if stem.upper() in WINDOWS_RESERVED_NAMES:
        result.add_issue(IssueType.FILENAME_RESERVED_DEVICE)
    if "." in result.sanitized and not get_safe_extension(name):
        result.add_issue(IssueType.FILENAME_EXTENSION_NOT_ALLOWED)

    return result
