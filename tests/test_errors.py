# =============================================================================
# test_errors.py - Error Hierarchy Tests
# =============================================================================
# Tests for error messages, source locations and error collection.
# =============================================================================

import pytest

from lc1c.errors import (
    AssemblerError,
    ErrorCollector,
    InvalidArgumentError,
    IntegerError,
    IntegerParseError,
    IntErrorKind,
    Lc1Error,
    ParseStatementError,
    SourceLocation,
    TooManyErrors,
    TooManyTokensError,
    TooShortError,
)


class TestMessages:
    """Test error message formatting."""

    def test_default_message(self):
        assert str(TooShortError()) == "error: statement is invalid because it's too short"

    def test_reserved_invalid_argument(self):
        error = InvalidArgumentError()
        assert isinstance(error, ParseStatementError)
        assert error.message == "argument is invalid"

    def test_too_many_tokens(self):
        error = TooManyTokensError(4)
        assert error.count == 4
        assert "expected at most 2, got 4" in error.message

    def test_integer_error_keeps_cause(self):
        cause = IntegerParseError(IntErrorKind.OVERFLOW, "70000")
        error = IntegerError(cause)
        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.message == "parsing argument failed: number too large to fit in target type"

    def test_hierarchy(self):
        assert issubclass(ParseStatementError, AssemblerError)
        assert issubclass(AssemblerError, Lc1Error)
        assert issubclass(IntegerParseError, Lc1Error)
        assert issubclass(IntegerParseError, ValueError)


class TestLocate:
    """Test attaching source locations."""

    def test_locate(self):
        error = TooShortError().locate(SourceLocation("a.lc1", 4, 3), "  X")
        assert error.location.line == 4
        assert str(error).splitlines() == [
            "a.lc1:4:3: error: statement is invalid because it's too short",
            "      X",
            "      ^",
        ]

    def test_location_format(self):
        assert str(SourceLocation("a.lc1", 2)) == "a.lc1:2:1"


class TestErrorCollector:
    """Test batch error collection."""

    def test_collect(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        collector.add(TooShortError())
        collector.add_warning("careful")
        assert collector.error_count() == 1
        report = collector.report()
        assert "Warnings:" in report
        assert "1 error, 1 warning" in report

    def test_limit(self):
        collector = ErrorCollector(max_errors=2)
        collector.add(TooShortError())
        with pytest.raises(TooManyErrors):
            collector.add(TooShortError())
        assert collector.error_count() == 2

    def test_clear(self):
        collector = ErrorCollector()
        collector.add(TooShortError())
        collector.clear()
        assert not collector.has_errors()
