"""
URL sanitization and validation.

Only http and https URLs survive sanitization. Rejections are reported to the
security log category and never raised; validate_url() surfaces the same
failures as structured errors instead.
"""

from typing import Any
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from ..error_types import IssueType
from ..models import ValidationResult
from ..patterns import (
    ALLOWED_URL_SCHEMES,
    BLOCKED_QUERY_PARAMETERS,
    DANGEROUS_URL_PATTERN,
    PERCENT_ENCODED_PATTERN,
)
from ..structured_logging.category_logger import LogCategory, security_logger

DEFAULT_PORTS = {"http": 80, "https": 443}


def _parse_url(url: str) -> SplitResult:
    """
    Split a URL and enforce the parts urlsplit() itself is lenient about.

    Raises:
        ValueError: If the URL has no scheme, an http(s) URL has no host,
            or the port is not a valid number
    """
    parts = urlsplit(url)
    if not parts.scheme:
        raise ValueError("URL has no scheme")
    if parts.scheme in ALLOWED_URL_SCHEMES:
        if not parts.hostname:
            raise ValueError("URL has no host")
        # Accessing .port validates it and raises ValueError when out of range
        _ = parts.port
    return parts


def _normalize_netloc(parts: SplitResult) -> str:
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    userinfo, sep, _ = parts.netloc.rpartition("@")
    return f"{userinfo}@{host}" if sep else host


def _strip_blocked_parameters(query: str) -> str:
    if not query:
        return ""
    pairs = parse_qsl(query, keep_blank_values=True)
    # Lone surrogates are percent-encoded as their raw code units instead of failing strict UTF-8
    return urlencode(
        [(name, value) for name, value in pairs if name not in BLOCKED_QUERY_PARAMETERS],
        errors="surrogatepass",
    )


def sanitize_url(url: Any) -> str:
    """
    Return a normalized http(s) URL with script-like query parameters removed.

    Unparseable input and any scheme other than http/https yield "" and a
    warning in the SECURITY log category.

    Args:
        url: Untrusted URL string

    Returns:
        str: Re-serialized URL, or "" when the URL is rejected
    """
    if not isinstance(url, str) or not url:
        return ""

    try:
        parts = _parse_url(url)
    except ValueError as e:
        security_logger.warn(LogCategory.SECURITY, "Failed to parse URL", {"url": url, "error": str(e)})
        return ""

    if parts.scheme not in ALLOWED_URL_SCHEMES:
        security_logger.warn(
            LogCategory.SECURITY,
            "Blocked URL with unsupported protocol",
            {"protocol": f"{parts.scheme}:"},
        )
        return ""

    return urlunsplit(
        (
            parts.scheme,
            _normalize_netloc(parts),
            parts.path or "/",
            _strip_blocked_parameters(parts.query),
            parts.fragment,
        )
    )


def validate_url(url: Any) -> ValidationResult:
    """
    Report problems with an untrusted URL.

    Unparseable URLs, unsupported protocols and embedded javascript:/data:/
    vbscript: markers are errors. Percent-encoded sequences are a warning,
    since they are common in legitimate URLs but also used for obfuscation.

    Args:
        url: Untrusted URL string

    Returns:
        ValidationResult: Issues found, with sanitized set to sanitize_url(url)
    """
    result = ValidationResult()
    if not isinstance(url, str) or not url:
        result.add_issue(IssueType.URL_EMPTY)
        return result

    try:
        parts = _parse_url(url)
    except ValueError:
        result.add_issue(IssueType.URL_INVALID_FORMAT)
    else:
        if parts.scheme not in ALLOWED_URL_SCHEMES:
            result.add_issue(IssueType.URL_UNSUPPORTED_PROTOCOL)

    if DANGEROUS_URL_PATTERN.search(url):
        result.add_issue(IssueType.URL_DANGEROUS_PROTOCOL)
    if PERCENT_ENCODED_PATTERN.search(url):
        result.add_issue(IssueType.URL_ENCODED_CHARACTERS)

    result.sanitized = sanitize_url(url)
    return result
