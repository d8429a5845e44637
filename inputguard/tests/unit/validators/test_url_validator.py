"""
Tests for URL sanitization and validation.
"""

import pytest

from inputguard.error_types import IssueType
from inputguard.validators.url_validator import sanitize_url, validate_url


class TestSanitizeUrl:
    """Tests for sanitize_url."""

    def test_javascript_url_rejected_and_logged(self, captured_logs):
        """javascript: URLs are rejected with a security warning."""
        assert sanitize_url("javascript:alert(1)") == ""

        assert len(captured_logs) == 1
        entry = captured_logs[0]
        assert entry["log_level"] == "warning"
        assert entry["category"] == "SECURITY"
        assert entry["protocol"] == "javascript:"

    @pytest.mark.parametrize(
        "url, protocol",
        [
            ("data:text/html,<script>alert(1)</script>", "data:"),
            ("vbscript:msgbox(1)", "vbscript:"),
            ("file:///etc/passwd", "file:"),
            ("ftp://example.com/file.txt", "ftp:"),
            ("JaVaScRiPt:alert(1)", "javascript:"),
        ],
    )
    def test_other_protocols_rejected(self, captured_logs, url, protocol):
        """Anything other than http/https is rejected and the protocol is logged."""
        assert sanitize_url(url) == ""
        assert captured_logs[-1]["protocol"] == protocol

    def test_blocked_query_parameter_removed(self):
        """Parameters named data/javascript/vbscript are removed, others kept."""
        result = sanitize_url("https://example.com/a?data=x&id=1")
        assert result == "https://example.com/a?id=1"
        assert result.startswith("https://example.com")

    def test_all_blocked_parameters_removed(self):
        """When every parameter is blocked the query disappears."""
        assert sanitize_url("https://example.com/?javascript=alert(1)&vbscript=x&data=y") == "https://example.com/"

    def test_parameter_names_matched_exactly(self):
        """Only exact parameter names are blocked, not their content."""
        assert sanitize_url("https://example.com/?metadata=1&Data=2") == "https://example.com/?metadata=1&Data=2"

    def test_blank_values_kept(self):
        """Parameters without values survive re-serialization."""
        assert sanitize_url("https://example.com/?flag=&id=3") == "https://example.com/?flag=&id=3"

    def test_scheme_and_host_normalized(self):
        """Scheme and host are lower-cased and an empty path becomes '/'."""
        assert sanitize_url("HTTPS://Example.COM") == "https://example.com/"

    def test_path_case_preserved(self):
        """Only the host is lower-cased."""
        assert sanitize_url("https://example.com/Docs/Readme") == "https://example.com/Docs/Readme"

    def test_default_port_dropped(self):
        """Default ports are removed, others kept."""
        assert sanitize_url("http://example.com:80/x") == "http://example.com/x"
        assert sanitize_url("https://example.com:443/x") == "https://example.com/x"
        assert sanitize_url("https://example.com:8443/x") == "https://example.com:8443/x"

    def test_fragment_and_userinfo_kept(self):
        """Fragments and credentials are not this function's concern."""
        assert sanitize_url("https://user@Example.com/p#section") == "https://user@example.com/p#section"

    def test_ipv6_host(self):
        """IPv6 hosts keep their brackets."""
        assert sanitize_url("http://[::1]:8080/status") == "http://[::1]:8080/status"

    def test_query_re_encoded(self):
        """The query is re-serialized as form data."""
        assert sanitize_url("https://example.com/s?q=hello world") == "https://example.com/s?q=hello+world"

    @pytest.mark.parametrize("url", ["not a url", "example.com/path", "http://", "http://[::1", "http://example.com:99999/"])
    def test_unparseable_returns_empty_and_logs(self, captured_logs, url):
        """Parse failures degrade to an empty string and a security warning."""
        assert sanitize_url(url) == ""
        assert captured_logs[-1]["event"] == "Failed to parse URL"
        assert captured_logs[-1]["category"] == "SECURITY"

    @pytest.mark.parametrize("value", [None, "", 3, ["https://example.com"], b"https://example.com"])
    def test_invalid_input_returns_empty_string(self, captured_logs, value):
        """Non-string or empty input yields an empty string silently."""
        assert sanitize_url(value) == ""
        assert captured_logs == []

    def test_lone_surrogate_in_query_does_not_raise(self):
        """Malformed Unicode in the query is percent-encoded rather than raising."""
        assert sanitize_url("https://example.com/?a=\ud800") == "https://example.com/?a=%ED%A0%80"
        assert sanitize_url("https://example.com/?\udfff=1&data=x") == "https://example.com/?%ED%BF%BF=1"

    def test_accepted_url_not_logged(self, captured_logs):
        """Accepted URLs produce no security log entries."""
        sanitize_url("https://example.com/")
        assert captured_logs == []


class TestValidateUrl:
    """Tests for validate_url."""

    def test_clean_url_is_valid(self):
        """A plain https URL has no issues."""
        result = validate_url("https://example.com/a?id=1")
        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []
        assert result.sanitized == "https://example.com/a?id=1"

    def test_javascript_url_has_protocol_errors(self):
        """javascript: fails both the protocol and the pattern check."""
        result = validate_url("javascript:alert(1)")
        assert result.is_valid is False
        assert IssueType.URL_UNSUPPORTED_PROTOCOL.value in result.errors
        assert IssueType.URL_DANGEROUS_PROTOCOL.value in result.errors
        assert result.sanitized == ""

    def test_embedded_dangerous_protocol_is_error(self):
        """Dangerous markers anywhere in an http URL are errors."""
        result = validate_url("https://example.com/?next=JavaScript:alert(1)")
        assert result.is_valid is False
        assert result.errors == [IssueType.URL_DANGEROUS_PROTOCOL.value]
        assert result.sanitized.startswith("https://example.com/?next=")

    def test_percent_encoding_is_warning(self):
        """Percent-encoded sequences only warn."""
        result = validate_url("https://example.com/a%20b")
        assert result.is_valid is True
        assert result.warnings == [IssueType.URL_ENCODED_CHARACTERS.value]

    def test_lone_percent_is_not_encoding(self):
        """A percent sign without two hex digits is not flagged."""
        result = validate_url("https://example.com/100%")
        assert result.warnings == []

    def test_unparseable_is_error(self):
        """Validation surfaces parse failures that sanitization swallows."""
        result = validate_url("not a url")
        assert result.is_valid is False
        assert result.errors == ["Invalid URL format"]
        assert result.sanitized == ""

    def test_lone_surrogate_in_query(self):
        """Malformed Unicode does not escape validation as an exception."""
        result = validate_url("https://example.com/?a=\ud800")
        assert result.is_valid is True
        assert result.errors == []
        assert result.sanitized == "https://example.com/?a=%ED%A0%80"

    def test_unsupported_protocol_is_error(self):
        """ftp is parseable but not allowed."""
        result = validate_url("ftp://example.com/file.txt")
        assert result.errors == [IssueType.URL_UNSUPPORTED_PROTOCOL.value]

    @pytest.mark.parametrize("value", [None, "", 0, {}])
    def test_empty_or_non_string(self, value):
        """Empty or non-string input short-circuits with a single error."""
        result = validate_url(value)
        assert result.is_valid is False
        assert result.errors == [IssueType.URL_EMPTY.value]
        assert result.sanitized == ""
