"""
lc1c - LC1 Assembly Toolkit
===========================

This package models and parses single lines of LC1 assembly into a typed
intermediate representation for later stages (optimization, assembly, code
emission).

Main Components
---------------
- **isa**: the 19 LC1 commands and their metadata
- **argument**: operands (absolute address, indirect constant, label)
- **statement**: invocations, backends and statements
- **parser**: one line of text -> StatementInvoc
- **source**: whole sources with line-numbered diagnostics
- **compiler**: the front end behind the ``lc1c`` command

Quick Start
-----------
Parse a line:
    >>> from lc1c import parse_statement
    >>> invoc = parse_statement("lda @42")
    >>> str(invoc)
    'LDA @42'

Parse a whole source:
    >>> from lc1c import parse_source
    >>> result = parse_source("start:\\nJMP start\\n")
    >>> [str(s) for s in result.statements]
    ['start:', 'JMP start']

Or use the command-line tool:
    $ lc1c prog.asm -o prog.lc1
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lc1c.argument import (
    PLACEHOLDER,
    Absolute,
    Argument,
    ArgumentSlot,
    IdConst,
    Label,
    Placeholder,
    parse_argument,
    parse_u16,
)
from lc1c.compiler import Compiler
from lc1c.config import CompilerOptions, OptimizationLevel
from lc1c.errors import (
    Lc1Error,
    AssemblerError,
    SourceLocation,
    ErrorCollector,
    TooManyErrors,
    IntErrorKind,
    IntegerParseError,
    ParseStatementError,
    TooShortError,
    UnexpectedArgumentError,
    ArgumentNotFoundError,
    InvalidArgumentError,
    TooManyTokensError,
    UnknownCommandError,
    InlineLabelError,
    IntegerError,
)
from lc1c.isa import (
    COMMAND_TABLE,
    MNEMONICS,
    ArgKind,
    Command,
    Mnemonic,
    get_command,
    lookup_mnemonic,
)
from lc1c.parser import parse_statement
from lc1c.source import ParseResult, parse_file, parse_source, render_statements
from lc1c.statement import (
    UNPARSED,
    ArgumentBackend,
    InvocationBackend,
    RecognitionBackend,
    RecognizedInvoc,
    Statement,
    StatementInvoc,
    StatementInvocBase,
)

__all__ = [
    "__version__",
    # Arguments
    "Argument",
    "Absolute",
    "IdConst",
    "Label",
    "Placeholder",
    "PLACEHOLDER",
    "ArgumentSlot",
    "parse_argument",
    "parse_u16",
    # Instruction set
    "Mnemonic",
    "ArgKind",
    "Command",
    "COMMAND_TABLE",
    "MNEMONICS",
    "get_command",
    "lookup_mnemonic",
    # Statements
    "InvocationBackend",
    "ArgumentBackend",
    "RecognitionBackend",
    "UNPARSED",
    "StatementInvocBase",
    "StatementInvoc",
    "RecognizedInvoc",
    "Statement",
    # Parsing
    "parse_statement",
    "parse_source",
    "parse_file",
    "render_statements",
    "ParseResult",
    # Compiler
    "Compiler",
    "CompilerOptions",
    "OptimizationLevel",
    # Errors
    "Lc1Error",
    "AssemblerError",
    "SourceLocation",
    "ErrorCollector",
    "TooManyErrors",
    "IntErrorKind",
    "IntegerParseError",
    "ParseStatementError",
    "TooShortError",
    "UnexpectedArgumentError",
    "ArgumentNotFoundError",
    "InvalidArgumentError",
    "TooManyTokensError",
    "UnknownCommandError",
    "InlineLabelError",
    "IntegerError",
]
