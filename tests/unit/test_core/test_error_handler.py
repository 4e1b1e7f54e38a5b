"""
Unit tests for the error hierarchy and ErrorHandler.
"""

from unittest.mock import Mock

import pytest

from chronotext.core.error_handler import (
    ChronoTextError, ConfigurationError, CultureResourceError, ErrorHandler, ErrorSeverity,
    ParseError, lookup
)


class TestErrorHierarchy:
    """Test suite for ChronoText exceptions"""

    @pytest.mark.unit
    def test_default_severities(self):
        """Test the severity each error type carries"""
        assert ChronoTextError("x").severity == ErrorSeverity.MEDIUM
        assert ParseError("x").severity == ErrorSeverity.MEDIUM
        assert ConfigurationError("x").severity == ErrorSeverity.HIGH
        assert CultureResourceError("month_of_year", "smarch").severity == ErrorSeverity.CRITICAL

    @pytest.mark.unit
    def test_culture_resource_error_message(self):
        """Test that the table and key are reported"""
        error = CultureResourceError("day_of_week", "funday")

        assert isinstance(error, ConfigurationError)
        assert error.table == "day_of_week"
        assert error.key == "funday"
        assert "funday" in str(error)


class TestLookup:
    """Test suite for culture table lookup"""

    @pytest.mark.unit
    def test_present_key(self):
        """Test reading an existing entry"""
        assert lookup({"may": 5}, "may", "month_of_year") == 5

    @pytest.mark.unit
    def test_missing_key(self):
        """Test that a missing entry is a resource error"""
        with pytest.raises(CultureResourceError) as exc_info:
            lookup({"may": 5}, "smarch", "month_of_year")

        assert exc_info.value.table == "month_of_year"


class TestErrorHandler:
    """Test suite for ErrorHandler"""

    @pytest.fixture
    def handler(self):
        return ErrorHandler()

    @pytest.mark.unit
    def test_severity_of_library_errors(self, handler):
        """Test that ChronoText errors keep their own severity"""
        assert handler.handle_error(ConfigurationError("bad culture")) == ErrorSeverity.HIGH
        assert handler.handle_error(ParseError("bad date"), context="reference") == ErrorSeverity.MEDIUM

    @pytest.mark.unit
    def test_severity_of_builtin_errors(self, handler):
        """Test the mapping for standard exceptions"""
        assert handler.handle_error(PermissionError("denied")) == ErrorSeverity.HIGH
        assert handler.handle_error(RuntimeError("boom")) == ErrorSeverity.MEDIUM

    @pytest.mark.unit
    def test_callback_for_base_class(self, handler):
        """Test that callbacks registered for a base class fire for subclasses"""
        callback = Mock()
        handler.register_error_callback(ConfigurationError, callback)

        error = CultureResourceError("day_of_week", "funday")
        handler.handle_error(error)

        callback.assert_called_once_with(error)

    @pytest.mark.unit
    def test_callback_not_called_for_other_types(self, handler):
        """Test that unrelated errors skip the callback"""
        callback = Mock()
        handler.register_error_callback(ConfigurationError, callback)

        handler.handle_error(ParseError("bad date"))

        callback.assert_not_called()

    @pytest.mark.unit
    def test_error_is_logged_with_context(self, handler, caplog):
        """Test the logged message"""
        with caplog.at_level("ERROR", logger="chronotext.core.error_handler"):
            handler.handle_error(ConfigurationError("bad culture"), context="startup")

        assert "startup: bad culture" in caplog.text
