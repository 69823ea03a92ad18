"""
Compiler Options
================

Options accepted by the lc1c tool. They are plain values passed into the
Compiler constructor; there is no configuration file.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class OptimizationLevel(Enum):
    """
    Optimization level selected with -O.

    The value is the flag text: "0" (none), "1" (normal), "D" (deep).
    """
    NONE = "0"
    NORMAL = "1"
    DEEP = "D"

    @classmethod
    def from_flag(cls, text: str) -> "OptimizationLevel":
        """
        Parse the -O flag value (case-insensitive).

        Raises:
            ValueError: If text is not 0, 1 or D
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(
                f"invalid optimization level '{text}' (expected 0, 1 or D)"
            ) from None

    @property
    def enables_optimization(self) -> bool:
        """True if statements should be marked optimizable."""
        return self is not OptimizationLevel.NONE

    def __str__(self) -> str:
        return {
            OptimizationLevel.NONE: "0 (no optimization)",
            OptimizationLevel.NORMAL: "1 (normal optimization)",
            OptimizationLevel.DEEP: "D (deep optimization)",
        }[self]


OUTPUT_SUFFIX = ".lc1"


@dataclass
class CompilerOptions:
    """
    Options for one compiler run.

    Attributes:
        output: Output file (default: derived from the input, see default_output)
        unix2dos: Terminate every output line with CRLF instead of LF
        verbose: Log progress at debug level
        optimization: Optimization level recorded on every statement
        max_errors: Stop collecting diagnostics after this many
    """
    output: Optional[Path] = None
    unix2dos: bool = False
    verbose: bool = False
    optimization: OptimizationLevel = OptimizationLevel.NORMAL
    max_errors: int = 100

    @staticmethod
    def default_output(input_path: Path) -> Path:
        """
        Derive an output path from the input path.

        "prog.asm" -> "prog.lc1"; an input already named "prog.lc1" gives
        "prog.out.lc1" so the input is never overwritten.
        """
        candidate = input_path.with_suffix(OUTPUT_SUFFIX)
        if candidate == input_path:
            return input_path.with_name(f"{input_path.stem}.out{OUTPUT_SUFFIX}")
        return candidate

    def resolve_output(self, input_path: Path) -> Path:
        return self.output if self.output is not None else self.default_output(input_path)
