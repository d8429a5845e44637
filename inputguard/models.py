"""
Data models for inputguard.

All of these are transient values created per call; nothing here has a
lifecycle beyond the function that produces it.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .error_types import IssueSeverity, IssueType


class SanitizationKind(Enum):
    """The kinds of untrusted input the Sanitizer facade understands."""

    PATH = "path"
    URL = "url"
    FILENAME = "filename"


@dataclass(frozen=True)
class SanitizationRule:
    """One pattern-to-replacement step of an ordered sanitization pass."""

    pattern: re.Pattern[str]
    replacement: str
    description: str

    def apply(self, value: str) -> str:
        """Replace every match of the pattern in value."""
        return self.pattern.sub(self.replacement, value)


@dataclass
class ValidationResult:
    """
    Outcome of a validate_* call.

    is_valid is derived from errors, so it cannot drift out of sync with
    them. sanitized is always filled in, even for invalid input.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    sanitized: str = ""

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_issue(self, issue: IssueType) -> None:
        """Record an issue under errors or warnings according to its severity."""
        target = self.errors if issue.severity is IssueSeverity.ERROR else self.warnings
        if issue.value not in target:
            target.append(issue.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for JSON responses."""
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "sanitized": self.sanitized,
        }
