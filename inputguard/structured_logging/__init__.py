"""
Structured logging package for inputguard.

This package provides structlog configuration, security-aware log processors,
and the category logger used to report rejected input.

All imports should use explicit paths like
'from inputguard.structured_logging.enhanced_logging_config import get_logger'.

The directory is named 'structured_logging' rather than 'logging' to avoid
namespace conflicts with Python's standard library logging module.
"""

# This is a namespace package that does NOT interfere with standard library 'logging' imports.
__all__: list[str] = []
