"""
LC1 Statement Model
===================

A statement invocation is one mnemonic plus its payload. The payload slot
depends on the command's argument kind (see lc1c.isa):

- OPERAND:  LDA, LDB, MOV, JMP, JPS, JPO, CAL, RRA, RLA
- DEF_CODE: DEF
- LABEL:    label definitions ("name:")
- NONE:     MAB, ADD, SUB, AND, NOT, RET, HLT, NOP (payload is None)

Backends
--------
What a slot holds is decided by the invocation's *backend*:

| Backend            | OPERAND   | DEF_CODE  | LABEL |
|--------------------|-----------|-----------|-------|
| ArgumentBackend    | Argument  | int (u16) | str   |
| RecognitionBackend | UNPARSED  | UNPARSED  | str   |

StatementInvoc uses ArgumentBackend and is what the parser returns.
RecognizedInvoc uses RecognitionBackend: it records that a mnemonic was
matched before its argument has been looked at. map_or_fail() turns one into
the other, so the shape of every command is dispatched in exactly one place.

Statement pairs a StatementInvoc with the "optimizable" flag consumed by a
later optimizer.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional, TypeVar

from lc1c.argument import PLACEHOLDER, Argument, U16_MAX
from lc1c.errors import SourceLocation
from lc1c.isa import ArgKind, Command, Mnemonic, get_command


# =============================================================================
# Backends
# =============================================================================

class _Unparsed:
    """Marker payload: the mnemonic matched, its argument is not parsed yet."""

    _instance: Optional["_Unparsed"] = None

    def __new__(cls) -> "_Unparsed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNPARSED"


UNPARSED = _Unparsed()


class InvocationBackend:
    """
    Declares the payload type of each argument slot kind.

    Subclasses set the three type attributes; accepts() checks a payload
    against them.
    """

    operand_type: ClassVar[type]
    def_code_type: ClassVar[type]
    label_type: ClassVar[type]

    @classmethod
    def slot_type(cls, kind: ArgKind) -> Optional[type]:
        return {
            ArgKind.OPERAND: cls.operand_type,
            ArgKind.DEF_CODE: cls.def_code_type,
            ArgKind.LABEL: cls.label_type,
        }.get(kind)

    @classmethod
    def accepts(cls, kind: ArgKind, payload: Any) -> bool:
        """Check that payload may live in a slot of the given kind."""
        if kind is ArgKind.NONE:
            return payload is None
        expected = cls.slot_type(kind)
        if expected is int and isinstance(payload, bool):
            return False
        return isinstance(payload, expected)


class ArgumentBackend(InvocationBackend):
    """Fully parsed payloads."""

    operand_type = Argument
    def_code_type = int
    label_type = str


class RecognitionBackend(InvocationBackend):
    """Payloads of a mnemonic that was recognized but not parsed further."""

    operand_type = _Unparsed
    def_code_type = _Unparsed
    label_type = str


# =============================================================================
# Invocations
# =============================================================================

InvocT = TypeVar("InvocT", bound="StatementInvocBase")


@dataclass
class StatementInvocBase:
    """
    A mnemonic with its payload, typed by the class's backend.

    The payload is validated on construction, so an invocation can never
    carry a payload of the wrong shape for its command.

    Attributes:
        mnemonic: The command
        payload: Argument, DEF value, label name, marker, or None
    """

    backend: ClassVar[type[InvocationBackend]] = InvocationBackend

    mnemonic: Mnemonic
    payload: Any = None

    def __post_init__(self) -> None:
        kind = self.get_cmd().arg_kind
        if not self.backend.accepts(kind, self.payload):
            raise TypeError(
                f"{type(self).__name__}: {self.mnemonic} takes a {kind} payload "
                f"of type {self._expected_type_name(kind)}, got {self.payload!r}"
            )
        if kind is ArgKind.DEF_CODE and isinstance(self.payload, int):
            if not 0 <= self.payload <= U16_MAX:
                raise ValueError(f"DEF value {self.payload} out of range")

    def _expected_type_name(self, kind: ArgKind) -> str:
        expected = self.backend.slot_type(kind)
        return "None" if expected is None else expected.__name__

    # -------------------------------------------------------------------------
    # Metadata
    # -------------------------------------------------------------------------

    def get_cmd(self) -> Command:
        """Return the command metadata (mnemonic text, is_real, has_arg)."""
        return get_command(self.mnemonic)

    def cmd2str(self) -> str:
        return self.get_cmd().mnemonic

    def is_cmd_real(self) -> bool:
        return self.get_cmd().is_real

    def has_arg(self) -> bool:
        return self.get_cmd().has_arg

    def arg(self) -> Any:
        """Return the operand payload, or None for commands without an operand slot."""
        if self.get_cmd().arg_kind is ArgKind.OPERAND:
            return self.payload
        return None

    # -------------------------------------------------------------------------
    # Payload Mapping
    # -------------------------------------------------------------------------

    def map_or_fail(
        self,
        target: type[InvocT],
        operand: Callable[[Any], Any],
        def_code: Callable[[Any], Any],
        label: Callable[[Any], Any],
        empty: Callable[[], None],
    ) -> InvocT:
        """
        Convert this invocation into another backend's invocation.

        The callback matching the command's slot kind receives the current
        payload and returns the new one; ``empty`` is called for commands
        without a payload. Exceptions raised by a callback propagate and no
        invocation is produced.

        Args:
            target: Invocation class to build (e.g., StatementInvoc)
            operand: Maps an OPERAND payload
            def_code: Maps a DEF_CODE payload
            label: Maps a LABEL payload
            empty: Validates a command without payload
        """
        kind = self.get_cmd().arg_kind
        if kind is ArgKind.OPERAND:
            return target(self.mnemonic, operand(self.payload))
        if kind is ArgKind.DEF_CODE:
            return target(self.mnemonic, def_code(self.payload))
        if kind is ArgKind.LABEL:
            return target(self.mnemonic, label(self.payload))
        empty()
        return target(self.mnemonic)


@dataclass
class RecognizedInvoc(StatementInvocBase):
    """Invocation whose argument has not been parsed yet."""

    backend: ClassVar[type[InvocationBackend]] = RecognitionBackend

    @classmethod
    def for_mnemonic(cls, mnemonic: Mnemonic, name: str = "") -> "RecognizedInvoc":
        """
        Build the recognized form of a mnemonic.

        OPERAND and DEF_CODE slots get the UNPARSED marker; a label
        definition keeps its (already known) name.
        """
        kind = get_command(mnemonic).arg_kind
        if kind is ArgKind.NONE:
            return cls(mnemonic)
        if kind is ArgKind.LABEL:
            return cls(mnemonic, name)
        return cls(mnemonic, UNPARSED)


@dataclass
class StatementInvoc(StatementInvocBase):
    """
    Fully parsed invocation.

    Examples:
        StatementInvoc(Mnemonic.LDA, Absolute(42))   # LDA @42
        StatementInvoc(Mnemonic.DEF, 7)              # DEF 7
        StatementInvoc(Mnemonic.LABEL, "loop")       # loop:
        StatementInvoc(Mnemonic.HLT)                 # HLT
    """

    backend: ClassVar[type[InvocationBackend]] = ArgumentBackend

    def __post_init__(self) -> None:
        super().__post_init__()
        # A bare ':' is too short to parse back as a label definition
        if self.mnemonic is Mnemonic.LABEL and not self.payload:
            raise ValueError("label definition name must not be empty")

    @classmethod
    def parse(cls, line: str) -> "StatementInvoc":
        """Parse one line of source. See lc1c.parser.parse_statement()."""
        from lc1c.parser import parse_statement
        return parse_statement(line)

    @classmethod
    def label(cls, name: str) -> "StatementInvoc":
        """Build a label definition."""
        return cls(Mnemonic.LABEL, name)

    def take_arg(self) -> Argument:
        """
        Move the operand out, leaving PLACEHOLDER behind.

        Raises:
            ValueError: If the command has no operand slot
        """
        if self.get_cmd().arg_kind is not ArgKind.OPERAND:
            raise ValueError(f"{self.mnemonic} has no operand to take")
        arg, self.payload = self.payload, PLACEHOLDER
        return arg

    def into_statement(self, optimizable: bool,
                       location: Optional[SourceLocation] = None) -> "Statement":
        return Statement(self, optimizable, location)

    def __str__(self) -> str:
        if self.mnemonic is Mnemonic.DEF:
            return f"DEF {self.payload}"
        if self.mnemonic is Mnemonic.LABEL:
            return f"{self.payload}:"
        arg = self.arg()
        if arg is None:
            return self.cmd2str()
        return f"{self.cmd2str()} {arg}"


# =============================================================================
# Statement
# =============================================================================

@dataclass
class Statement:
    """
    A parsed invocation ready for an optimizer or emitter.

    Attributes:
        invoc: The invocation
        optimizable: True if an optimizer may rewrite this statement
        location: Where the statement was parsed from (not part of equality)
    """
    invoc: StatementInvoc
    optimizable: bool
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def take_invoc(self) -> StatementInvoc:
        """Move the invocation out, leaving NOP behind."""
        invoc, self.invoc = self.invoc, StatementInvoc(Mnemonic.NOP)
        return invoc

    def __str__(self) -> str:
        return str(self.invoc)
