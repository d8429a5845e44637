"""inputguard: best-effort sanitization of untrusted paths, URLs and filenames."""

from .config import configure_logging
from .error_types import IssueSeverity, IssueType
from .exceptions import ConfigurationError, InputGuardError, UnsupportedSanitizationKindError
from .models import SanitizationKind, ValidationResult
from .patterns import ALLOWED_EXTENSIONS
from .sanitizer import Sanitizer, default_sanitizer
from .validators import (
    get_safe_extension,
    is_allowed_extension,
    join_paths,
    sanitize_filename,
    sanitize_path,
    sanitize_url,
    validate_filename,
    validate_path,
    validate_url,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Paths
    "sanitize_path",
    "validate_path",
    "join_paths",
    # URLs
    "sanitize_url",
    "validate_url",
    # Filenames
    "sanitize_filename",
    "validate_filename",
    "get_safe_extension",
    "is_allowed_extension",
    "ALLOWED_EXTENSIONS",
    # Facade and models
    "Sanitizer",
    "default_sanitizer",
    "SanitizationKind",
    "ValidationResult",
    "IssueType",
    "IssueSeverity",
    "configure_logging",
    # Exceptions
    "InputGuardError",
    "ConfigurationError",
    "UnsupportedSanitizationKindError",
]
