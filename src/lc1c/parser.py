"""
LC1 Statement Parser
====================

Parses one line of LC1 source into a StatementInvoc.

Grammar
-------
    line        := label_def | instruction
    label_def   := NAME ':'
    instruction := MNEMONIC (WS argument)?
    argument    := '@' UINT16 | '$' UINT16 | NAME

Mnemonics are recognized case-insensitively. The line must already be
stripped of its line terminator; the parser keeps no state between calls.

Parsing runs in two phases:

1. Recognition: the first token is matched against the command table,
   yielding a RecognizedInvoc whose argument slot holds UNPARSED.
2. Payload parsing: RecognizedInvoc.map_or_fail() fills the slot from the
   argument token, or checks that there is none.

Failures are raised as ParseStatementError subclasses (see lc1c.errors).
"""

import re
from typing import Optional

from lc1c.argument import WHITESPACE, Argument, parse_argument, parse_u16
from lc1c.errors import (
    ArgumentNotFoundError,
    InlineLabelError,
    IntegerError,
    IntegerParseError,
    TooManyTokensError,
    TooShortError,
    UnexpectedArgumentError,
    UnknownCommandError,
)
from lc1c.isa import Mnemonic, lookup_mnemonic
from lc1c.statement import RecognizedInvoc, StatementInvoc


_TOKEN_SEPARATOR = re.compile("[" + re.escape(WHITESPACE) + "]+")


def _split(line: str) -> tuple[str, Optional[str]]:
    """Split a line into (command token, optional argument token)."""
    parts = [part for part in _TOKEN_SEPARATOR.split(line) if part]
    if not parts:
        raise TooShortError()
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1]
    # A first token like "loop:" means a label was written inline
    if parts[0].endswith(":"):
        raise InlineLabelError()
    raise TooManyTokensError(len(parts))


def recognize(command: str) -> RecognizedInvoc:
    """
    Match a command token against the known mnemonics.

    Raises:
        InlineLabelError: If the unknown token contains ':'
        UnknownCommandError: If the token is not a mnemonic
    """
    mnemonic = lookup_mnemonic(command)
    if mnemonic is None:
        if ":" in command:
            raise InlineLabelError()
        raise UnknownCommandError(command)
    return RecognizedInvoc.for_mnemonic(mnemonic)


def parse_statement(line: str) -> StatementInvoc:
    """
    Parse one line of LC1 source.

    Args:
        line: Source line without its line terminator

    Returns:
        The parsed StatementInvoc

    Raises:
        ParseStatementError: One of its subclasses, describing the failure

    Examples:
        >>> str(parse_statement("lda @42"))
        'LDA @42'
        >>> parse_statement("loop:")
        StatementInvoc(mnemonic=<Mnemonic.LABEL: 'Label'>, payload='loop')
    """
    # Length is measured in UTF-8 bytes, so a single non-ASCII character
    # is long enough to reach the unknown-command check.
    if len(line.encode("utf-8")) < 2:
        raise TooShortError()

    if line.endswith(":"):
        return StatementInvoc.label(line[:-1])

    command, arg = _split(line)

    def require_arg() -> str:
        if arg is None:
            raise ArgumentNotFoundError()
        return arg

    def parse_operand(_: object) -> Argument:
        token = require_arg()
        try:
            return parse_argument(token)
        except IntegerParseError as exc:
            raise IntegerError(exc) from exc

    def parse_def_code(_: object) -> int:
        token = require_arg()
        try:
            return parse_u16(token)
        except IntegerParseError as exc:
            raise IntegerError(exc) from exc

    def reject_arg() -> None:
        if arg is not None:
            raise UnexpectedArgumentError()

    return recognize(command).map_or_fail(
        StatementInvoc,
        operand=parse_operand,
        def_code=parse_def_code,
        label=lambda name: name,
        empty=reject_arg,
    )


def is_label_definition(invoc: StatementInvoc) -> bool:
    return invoc.mnemonic is Mnemonic.LABEL
