"""
LC1 Source Driver
=================

Feeds whole source texts through the line parser and renders statements
back to canonical text.

- Lines are split on LF; one trailing CR per line is dropped, so CRLF
  sources parse the same as LF sources.
- Blank lines are skipped. Other lines are stripped of surrounding
  whitespace before parsing.
- A bad line does not stop parsing: its error is located (filename, line)
  and collected, and the driver moves on to the next line.

Usage:
    result = parse_source(text, "prog.lc1")
    if result.has_errors():
        print(result.report())
    else:
        print(render_statements(result.statements))
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from lc1c.argument import WHITESPACE
from lc1c.errors import (
    ErrorCollector,
    ParseStatementError,
    SourceLocation,
    TooManyErrors,
)
from lc1c.parser import parse_statement
from lc1c.statement import Statement

logger = logging.getLogger(__name__)


def split_lines(text: str) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, line) pairs with terminators removed.

    Line numbers are 1-indexed. A trailing empty line after the final
    newline is not yielded.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield number, line


@dataclass
class ParseResult:
    """
    Outcome of parsing a whole source.

    Attributes:
        statements: Statements of every line that parsed, in source order
        errors: Collected diagnostics for the lines that did not
    """
    statements: list[Statement] = field(default_factory=list)
    errors: ErrorCollector = field(default_factory=ErrorCollector)

    def has_errors(self) -> bool:
        return self.errors.has_errors()

    def report(self) -> str:
        return self.errors.report()


class SourceParser:
    """
    Parses LC1 source texts line by line.

    Usage:
        parser = SourceParser("prog.lc1", optimizable=True)
        result = parser.parse(text)
    """

    def __init__(self, filename: str = "<input>", optimizable: bool = True,
                 max_errors: int = 100):
        """
        Initialize the source parser.

        Args:
            filename: Source filename for error reporting
            optimizable: Flag recorded on every produced Statement
            max_errors: Stop after collecting this many errors
        """
        self._filename = filename
        self._optimizable = optimizable
        self._max_errors = max_errors

    def parse(self, text: str) -> ParseResult:
        """Parse every non-blank line of text."""
        result = ParseResult(errors=ErrorCollector(max_errors=self._max_errors))

        for number, raw in split_lines(text):
            line = raw.strip(WHITESPACE)
            if not line:
                continue

            # Column of the first non-blank character
            location = SourceLocation(self._filename, number, len(raw) - len(raw.lstrip(WHITESPACE)) + 1)
            try:
                invoc = parse_statement(line)
            except ParseStatementError as exc:
                logger.debug("%s: %s", location, exc.message)
                try:
                    result.errors.add(exc.locate(location, raw))
                except TooManyErrors as stop:
                    logger.warning("%s", stop.message)
                    result.errors.add_warning(f"parsing stopped at line {number}")
                    break
                continue

            logger.debug("%s: %s", location, invoc)
            result.statements.append(invoc.into_statement(self._optimizable, location))

        logger.info(
            "%s: parsed %d statements, %d errors",
            self._filename, len(result.statements), result.errors.error_count(),
        )
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_source(text: str, filename: str = "<input>",
                 optimizable: bool = True) -> ParseResult:
    """Parse a source text. See SourceParser."""
    return SourceParser(filename, optimizable).parse(text)


def parse_file(filepath: str | Path, optimizable: bool = True) -> ParseResult:
    """
    Parse a source file (UTF-8).

    Raises:
        FileNotFoundError: If the file does not exist
    """
    filepath = Path(filepath)
    return parse_source(filepath.read_text(encoding="utf-8"), str(filepath), optimizable)


def render_statements(statements: Iterable[Statement], unix2dos: bool = False) -> str:
    """
    Render statements in canonical form, one per line.

    Args:
        statements: Statements to render
        unix2dos: Terminate lines with CRLF instead of LF
    """
    newline = "\r\n" if unix2dos else "\n"
    return "".join(f"{statement}{newline}" for statement in statements)
