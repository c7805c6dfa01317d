"""
Tests for security module.

Validates query sanitization.
"""
import pytest

from troubleshoot_kb.security import InputValidator, SecurityError, ValidationError


class TestInputValidator:
    """Test input validation and sanitization."""

    def test_sanitize_query_valid(self):
        """Test valid query passes validation."""
        query = "wifi not working"
        result = InputValidator.sanitize_query(query)
        assert result == query

    def test_sanitize_query_strips_whitespace(self):
        """Test surrounding whitespace is removed."""
        assert InputValidator.sanitize_query("  printer offline \n") == "printer offline"

    def test_sanitize_query_removes_null_bytes(self):
        """Test NUL bytes are dropped."""
        assert InputValidator.sanitize_query("error\x00 404") == "error 404"

    def test_sanitize_query_too_long(self):
        """Test query exceeding max length is rejected."""
        long_query = "a" * 501
        with pytest.raises(ValidationError, match="exceeds maximum length of 500"):
            InputValidator.sanitize_query(long_query)

    def test_sanitize_query_custom_max_length(self):
        """Test max length can be configured."""
        with pytest.raises(ValidationError, match="maximum length of 10"):
            InputValidator.sanitize_query("printer is offline", max_length=10)

    def test_sanitize_query_empty(self):
        """Test empty query is rejected."""
        with pytest.raises(ValidationError, match="Query is required"):
            InputValidator.sanitize_query("")

    def test_sanitize_query_whitespace_only(self):
        """Test whitespace-only query is rejected."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            InputValidator.sanitize_query("   \x00  ")

    @pytest.mark.parametrize("query", [None, 42, ["wifi"]])
    def test_sanitize_query_non_string(self, query):
        """Test non-string input is rejected."""
        with pytest.raises(ValidationError):
            InputValidator.sanitize_query(query)

    def test_validation_error_is_security_error(self):
        assert issubclass(ValidationError, SecurityError)
