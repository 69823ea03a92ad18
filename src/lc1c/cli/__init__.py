"""
LC1 Toolkit Command-Line Interface
==================================

- **lc1c**: LC1 statement compiler

The tool is a Click-based CLI application with help text and unified
error reporting (see lc1c.cli.errors).
"""

__all__ = ["lc1c"]
