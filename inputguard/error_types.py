"""
Validation issue types and severities for inputguard.

The values of IssueType are the exact messages placed in
ValidationResult.errors and ValidationResult.warnings, so callers can compare
against the enum instead of hard-coding strings.
"""

from enum import Enum


class IssueSeverity(Enum):
    """Whether an issue rejects the input or is only advisory."""

    ERROR = "error"
    WARNING = "warning"


class IssueType(Enum):
    """Standardized validation messages."""

    # Paths
    PATH_EMPTY = "Path must be a non-empty string"
    PATH_TRAVERSAL = "Path traversal sequences (..) are not allowed"
    PATH_ABSOLUTE = "Absolute paths are not recommended"
    PATH_SYSTEM_DIRECTORY = "Access to system directories is not allowed"
    PATH_CONTROL_CHARACTERS = "Path contains control characters"
    PATH_RESERVED_CHARACTERS = "Path contains reserved filesystem characters"

    # URLs
    URL_EMPTY = "URL must be a non-empty string"
    URL_INVALID_FORMAT = "Invalid URL format"
    URL_UNSUPPORTED_PROTOCOL = "Unsupported URL protocol"
    URL_DANGEROUS_PROTOCOL = "URL contains a dangerous protocol"
    URL_ENCODED_CHARACTERS = "URL contains percent-encoded characters"

    # Filenames
    FILENAME_EMPTY = "Filename must be a non-empty string"
    FILENAME_PATH_SEPARATORS = "Filename contains path separators"
    FILENAME_TRAVERSAL = "Filename contains path traversal sequences (..)"
    FILENAME_CONTROL_CHARACTERS = "Filename contains control characters"
    FILENAME_RESERVED_CHARACTERS = "Filename contains reserved filesystem characters"
    FILENAME_EDGE_DOTS_OR_SPACES = "Filename has leading or trailing dots or whitespace"
    FILENAME_TOO_LONG = "Filename exceeds the maximum length and will be truncated"
    FILENAME_RESERVED_DEVICE = "Filename is a reserved device name"
    FILENAME_EXTENSION_NOT_ALLOWED = "Filename extension is not in the allow-list"

    @property
    def severity(self) -> IssueSeverity:
        """Default severity of this issue."""
        return IssueSeverity.WARNING if self in _WARNING_ISSUES else IssueSeverity.ERROR


_WARNING_ISSUES = frozenset(
    {
        IssueType.PATH_ABSOLUTE,
        IssueType.PATH_RESERVED_CHARACTERS,
        IssueType.URL_ENCODED_CHARACTERS,
        IssueType.FILENAME_RESERVED_CHARACTERS,
        IssueType.FILENAME_EDGE_DOTS_OR_SPACES,
        IssueType.FILENAME_TOO_LONG,
        IssueType.FILENAME_RESERVED_DEVICE,
        IssueType.FILENAME_EXTENSION_NOT_ALLOWED,
    }
)
