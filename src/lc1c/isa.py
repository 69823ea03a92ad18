"""
LC1 Instruction Set Definition
==============================

This module defines the closed LC1 instruction set: the mnemonics, whether
each is a real machine instruction or a pseudo-op, and whether it takes an
argument. The command table is the single source of truth for arity; the
statement model and the parser both consult it.

Commands
--------
| Mnemonic                                   | Argument      | Real |
|--------------------------------------------|---------------|------|
| LDA, LDB, MOV, JMP, JPS, JPO, CAL, RRA, RLA| operand       | yes  |
| MAB, ADD, SUB, AND, NOT, RET, HLT, NOP     | none          | yes  |
| DEF                                        | 16-bit value  | no   |
| Label (definition, written ``name:``)      | name          | no   |

Argument Kinds
--------------
Every command with an argument stores it in one of three kinds of slot:

- **OPERAND**: an addressing-mode argument (``@42``, ``$7``, ``start``)
- **DEF_CODE**: the bare numeric payload of ``DEF``
- **LABEL**: the name of a label definition

The kind decides which backend type a payload must have (see
lc1c.statement).
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Mnemonics
# =============================================================================

class Mnemonic(Enum):
    """
    LC1 mnemonics, in table order.

    The value is the mnemonic text reported by the command metadata.
    """
    LDA = "LDA"
    LDB = "LDB"
    MOV = "MOV"
    MAB = "MAB"
    ADD = "ADD"
    SUB = "SUB"
    AND = "AND"
    NOT = "NOT"

    JMP = "JMP"
    JPS = "JPS"
    JPO = "JPO"
    CAL = "CAL"
    RET = "RET"
    RRA = "RRA"
    RLA = "RLA"
    HLT = "HLT"

    NOP = "NOP"
    DEF = "DEF"
    LABEL = "Label"

    def __str__(self) -> str:
        return self.value


class ArgKind(Enum):
    """Which kind of payload slot a command carries."""
    NONE = auto()
    OPERAND = auto()
    DEF_CODE = auto()
    LABEL = auto()

    def __str__(self) -> str:
        return {
            ArgKind.NONE: "none",
            ArgKind.OPERAND: "operand",
            ArgKind.DEF_CODE: "def code",
            ArgKind.LABEL: "label",
        }[self]


# =============================================================================
# Command Metadata
# =============================================================================

@dataclass(frozen=True)
class Command:
    """
    Fixed metadata for one command.

    Attributes:
        mnemonic: Mnemonic text ("LDA", ..., "Label")
        is_real: True for machine instructions, False for pseudo-ops
        has_arg: True if the command carries exactly one argument
        arg_kind: Slot kind of the argument (ArgKind.NONE when has_arg is False)
    """
    mnemonic: str
    is_real: bool
    has_arg: bool
    arg_kind: ArgKind = ArgKind.NONE


def _real(mnemonic: Mnemonic, arg_kind: ArgKind = ArgKind.NONE) -> Command:
    return Command(mnemonic.value, True, arg_kind is not ArgKind.NONE, arg_kind)


def _pseudo(mnemonic: Mnemonic, arg_kind: ArgKind) -> Command:
    return Command(mnemonic.value, False, True, arg_kind)


# =============================================================================
# Command Table
# =============================================================================
# Key: Mnemonic
# Value: Command(mnemonic, is_real, has_arg, arg_kind)
# =============================================================================

COMMAND_TABLE: dict[Mnemonic, Command] = {
    Mnemonic.LDA: _real(Mnemonic.LDA, ArgKind.OPERAND),
    Mnemonic.LDB: _real(Mnemonic.LDB, ArgKind.OPERAND),
    Mnemonic.MOV: _real(Mnemonic.MOV, ArgKind.OPERAND),
    Mnemonic.MAB: _real(Mnemonic.MAB),
    Mnemonic.ADD: _real(Mnemonic.ADD),
    Mnemonic.SUB: _real(Mnemonic.SUB),
    Mnemonic.AND: _real(Mnemonic.AND),
    Mnemonic.NOT: _real(Mnemonic.NOT),

    Mnemonic.JMP: _real(Mnemonic.JMP, ArgKind.OPERAND),
    Mnemonic.JPS: _real(Mnemonic.JPS, ArgKind.OPERAND),
    Mnemonic.JPO: _real(Mnemonic.JPO, ArgKind.OPERAND),
    Mnemonic.CAL: _real(Mnemonic.CAL, ArgKind.OPERAND),
    Mnemonic.RET: _real(Mnemonic.RET),
    Mnemonic.RRA: _real(Mnemonic.RRA, ArgKind.OPERAND),
    Mnemonic.RLA: _real(Mnemonic.RLA, ArgKind.OPERAND),
    Mnemonic.HLT: _real(Mnemonic.HLT),

    Mnemonic.NOP: _real(Mnemonic.NOP),
    Mnemonic.DEF: _pseudo(Mnemonic.DEF, ArgKind.DEF_CODE),
    Mnemonic.LABEL: _pseudo(Mnemonic.LABEL, ArgKind.LABEL),
}


# =============================================================================
# Instruction Set Reference Lists
# =============================================================================

# Keywords accepted as the first token of a line. The label pseudo-op is
# written as "name:" and is never a keyword.
MNEMONICS: frozenset[str] = frozenset(
    m.value for m in Mnemonic if m is not Mnemonic.LABEL
)

REAL_INSTRUCTIONS: frozenset[Mnemonic] = frozenset(
    m for m, cmd in COMMAND_TABLE.items() if cmd.is_real
)

PSEUDO_OPS: frozenset[Mnemonic] = frozenset(
    m for m, cmd in COMMAND_TABLE.items() if not cmd.is_real
)

OPERAND_INSTRUCTIONS: frozenset[Mnemonic] = frozenset(
    m for m, cmd in COMMAND_TABLE.items() if cmd.arg_kind is ArgKind.OPERAND
)

_KEYWORDS: dict[str, Mnemonic] = {m.value: m for m in Mnemonic if m is not Mnemonic.LABEL}


# =============================================================================
# Lookup Functions
# =============================================================================

def get_command(mnemonic: Mnemonic) -> Command:
    """
    Look up the metadata of a mnemonic.

    Total over Mnemonic: every member has an entry.
    """
    return COMMAND_TABLE[mnemonic]


def lookup_mnemonic(text: str) -> Optional[Mnemonic]:
    """
    Recognize a mnemonic keyword, case-insensitively.

    Args:
        text: The first token of a line (e.g., "lda", "Mov")

    Returns:
        The Mnemonic, or None if the text is not a keyword
    """
    return _KEYWORDS.get(text.upper())


def is_valid_mnemonic(text: str) -> bool:
    """Check whether text is a mnemonic keyword (case-insensitive)."""
    return lookup_mnemonic(text) is not None
