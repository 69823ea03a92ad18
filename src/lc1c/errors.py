"""
LC1 Toolkit Error Hierarchy
===========================

This module defines the exception hierarchy for the whole toolkit. All
exceptions inherit from Lc1Error, allowing callers to catch every
toolkit-related error with a single except clause if desired.

Exception Hierarchy
-------------------
Lc1Error (base)
├── IntegerParseError - a numeric payload is not an unsigned 16-bit integer
└── AssemblerError (statement-related)
    ├── ParseStatementError - a line could not be parsed into a statement
    │   ├── TooShortError
    │   ├── UnexpectedArgumentError
    │   ├── ArgumentNotFoundError
    │   ├── InvalidArgumentError
    │   ├── TooManyTokensError
    │   ├── UnknownCommandError
    │   ├── InlineLabelError
    │   └── IntegerError - wraps an IntegerParseError
    └── TooManyErrors - error collection limit reached

Design Philosophy
-----------------
Every statement error is a distinct class, so callers (and tests) can match
on the kind of failure without comparing message text. The wrapped numeric
failure is kept both as the ``cause`` attribute and as ``__cause__``.

Statement errors can carry source location information (filename, line,
column) once the source driver knows where the offending line came from.
Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Lc1Error(Exception):
    """
    Base exception for all LC1 toolkit errors.

        try:
            statements = parse_file("program.lc1")
        except Lc1Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Numeric Payload Errors
# =============================================================================

class IntErrorKind(Enum):
    """Why a numeric payload was rejected."""
    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    OVERFLOW = "number too large to fit in target type"


class IntegerParseError(Lc1Error, ValueError):
    """
    A token is not a valid unsigned 16-bit decimal integer.

    Raised by the argument parser for the remainder of an ``@``/``$`` token
    and by the statement parser for a ``DEF`` payload.

    Attributes:
        kind: The IntErrorKind describing the failure
        text: The offending text
    """

    def __init__(self, kind: IntErrorKind, text: str = ""):
        self.kind = kind
        self.text = text
        super().__init__(kind.value)


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(Lc1Error):
    """
    Base exception for statement-related errors.

    Provides error messages with source location tracking and optional
    hint messages.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def locate(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ) -> "AssemblerError":
        """
        Attach a source location to an error raised without one.

        Returns the error itself so the call can be chained into a raise
        or an ErrorCollector.add().
        """
        self.location = location
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            loop.lc1:3:1: error: got unknown command 'JMPP'
                JMPP start
                ^
            hint: known commands are ...
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Statement Parse Errors
# =============================================================================

class ParseStatementError(AssemblerError):
    """
    A single line could not be parsed into a statement.

    Never instantiated directly by the parser; one of the subclasses below
    is raised instead. No partial statement is produced on failure.
    """

    default_message = "statement is invalid"

    def __init__(self, message: Optional[str] = None, hint: Optional[str] = None):
        super().__init__(message or self.default_message, hint=hint)


class TooShortError(ParseStatementError):
    """The line is too short to be any valid statement."""

    default_message = "statement is invalid because it's too short"


class UnexpectedArgumentError(ParseStatementError):
    """An argument-less command was given an argument token."""

    default_message = "expected no argument, found one"


class ArgumentNotFoundError(ParseStatementError):
    """An argument-taking command was given no argument token."""

    default_message = "expected one argument, found none"


class InvalidArgumentError(ParseStatementError):
    """
    The argument has an invalid shape.

    Reserved for argument validation beyond integer parsing; the current
    grammar never raises it.
    """

    default_message = "argument is invalid"


class TooManyTokensError(ParseStatementError):
    """
    The line has more than two whitespace-separated tokens.

    Attributes:
        count: Number of tokens found
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            "statement consists of too many (whitespace-separated) tokens "
            f"(expected at most 2, got {count})"
        )


class UnknownCommandError(ParseStatementError):
    """
    The first token is not a known mnemonic.

    Attributes:
        command: The unrecognized token, as written
    """

    def __init__(self, command: str, hint: Optional[str] = None):
        self.command = command
        super().__init__(f"got unknown command '{command}'", hint=hint)


class InlineLabelError(ParseStatementError):
    """
    A label appears where labels are not allowed.

    Raised for a multi-token line whose first token ends in ':' and for an
    unknown command containing ':'.
    """

    default_message = "got forbidden inline label"


class IntegerError(ParseStatementError):
    """
    Parsing a numeric payload failed.

    Attributes:
        cause: The underlying IntegerParseError
    """

    def __init__(self, cause: IntegerParseError):
        self.cause = cause
        super().__init__(f"parsing argument failed: {cause}")
        self.__cause__ = cause


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects multiple errors for batch reporting.

    The source driver uses this to keep parsing after a bad line, collecting
    all errors before reporting them together.

    Example:
        collector = ErrorCollector(max_errors=100)

        try:
            for error in line_errors:
                collector.add(error)
        except TooManyErrors:
            pass  # Already holds max_errors

        if collector.has_errors():
            print(collector.report())
            sys.exit(1)
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[AssemblerError] = []
        self.warnings: list[str] = []
        self.max_errors = max_errors

    def add(self, error: AssemblerError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        if len(self.errors) >= self.max_errors:
            raise TooManyErrors(f"Too many errors ({self.max_errors}), stopping")

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def warning_count(self) -> int:
        """Return the number of collected warnings."""
        return len(self.warnings)

    def report(self) -> str:
        """Format all errors and warnings for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        if self.warnings:
            lines.append("Warnings:")
            for warning in self.warnings:
                lines.append(f"  {warning}")

        error_word = "error" if len(self.errors) == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(
            f"\n{len(self.errors)} {error_word}, {len(self.warnings)} {warning_word}"
        )

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors and warnings."""
        self.errors.clear()
        self.warnings.clear()


class TooManyErrors(AssemblerError):
    """Raised when too many errors have been encountered."""

    def __init__(self, message: str = "Too many errors"):
        super().__init__(message)
