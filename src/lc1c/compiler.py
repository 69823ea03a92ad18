"""
LC1 Compiler Driver
===================

Ties the source driver to the compiler options: parse a source, record the
optimization level on every statement, and write the canonical output.

There is no optimizer or emitter yet, so the output is the canonical form
of the parsed statements (mnemonics uppercased, whitespace normalized).

Usage:
    compiler = Compiler(CompilerOptions(unix2dos=True))
    compiler.compile_file("prog.asm")
    if compiler.has_errors():
        print(compiler.get_error_report())
    else:
        compiler.write_output("prog.lc1")
"""

import logging
from pathlib import Path
from typing import Optional

from lc1c.config import CompilerOptions
from lc1c.parser import is_label_definition
from lc1c.source import ParseResult, SourceParser, render_statements
from lc1c.statement import Statement

logger = logging.getLogger(__name__)


class Compiler:
    """LC1 compiler front end."""

    def __init__(self, options: Optional[CompilerOptions] = None):
        self._options = options or CompilerOptions()
        self._result: Optional[ParseResult] = None

    @property
    def options(self) -> CompilerOptions:
        return self._options

    # =========================================================================
    # Compilation Methods
    # =========================================================================

    def compile_string(self, source: str, filename: str = "<input>") -> list[Statement]:
        """
        Parse source code from a string.

        Returns:
            The statements of every line that parsed; check has_errors()
            for the lines that did not
        """
        parser = SourceParser(
            filename,
            optimizable=self._options.optimization.enables_optimization,
            max_errors=self._options.max_errors,
        )
        self._result = parser.parse(source)

        statements = self._result.statements
        labels = sum(1 for s in statements if is_label_definition(s.invoc))
        logger.debug(
            "%d statements (%d labels), optimization level %s",
            len(statements), labels, self._options.optimization,
        )
        return statements

    def compile_file(self, filepath: str | Path) -> list[Statement]:
        """
        Parse source code from a file.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        filepath = Path(filepath)
        logger.debug("Compiling %s...", filepath)
        return self.compile_string(filepath.read_text(encoding="utf-8"), str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_statements(self) -> list[Statement]:
        return self._require_result().statements

    def get_output(self) -> str:
        """Return the canonical text of the compiled statements."""
        return render_statements(self.get_statements(), unix2dos=self._options.unix2dos)

    def write_output(self, filepath: str | Path) -> None:
        """Write the canonical text to a file."""
        filepath = Path(filepath)
        output = self.get_output()
        # newline="" keeps CRLF terminators exactly as rendered
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(output)
        logger.debug("Wrote %d statements to %s", len(self.get_statements()), filepath)

    # =========================================================================
    # Error Handling
    # =========================================================================

    def has_errors(self) -> bool:
        return self._result is not None and self._result.has_errors()

    def get_error_report(self) -> str:
        return self._require_result().report()

    def _require_result(self) -> ParseResult:
        if self._result is None:
            raise RuntimeError("nothing compiled yet")
        return self._result
