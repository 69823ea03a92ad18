"""
LC1 Argument Model
==================

An argument is the operand of an LC1 instruction. Its addressing mode is
chosen by a leading sigil:

| Syntax  | Class       | Meaning                        |
|---------|-------------|--------------------------------|
| @42     | Absolute    | 16-bit absolute address        |
| $42     | IdConst     | 16-bit indirect constant       |
| start   | Label       | symbolic reference by name     |
| @_      | Placeholder | left behind by a take, never parsed |

Argument values are immutable. Moving an argument out of a statement that
is being rewritten is done through its holder (ArgumentSlot, or
StatementInvoc.take_arg), which leaves a Placeholder behind.
"""

from dataclasses import dataclass
from typing import ClassVar

from lc1c.errors import IntegerParseError, IntErrorKind


U16_MAX = 0xFFFF

_DIGITS = frozenset("0123456789")

# Unicode White_Space. Unlike str.isspace() this excludes the separators
# U+001C..U+001F, so they stay part of a token.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


def parse_u16(text: str) -> int:
    """
    Parse an unsigned 16-bit decimal integer.

    Accepts an optional leading '+' followed by ASCII digits. Anything else
    (a sign of '-', whitespace, underscores, non-ASCII digits) is rejected.

    Raises:
        IntegerParseError: If the text is empty, contains a non-digit, or
                           the value does not fit in 16 bits
    """
    if not text:
        raise IntegerParseError(IntErrorKind.EMPTY, text)
    digits = text[1:] if text.startswith("+") else text
    if not digits or not _DIGITS.issuperset(digits):
        raise IntegerParseError(IntErrorKind.INVALID_DIGIT, text)
    # Leading zeros are insignificant; more than five significant digits
    # cannot fit, and are rejected before int() sees them
    significant = digits.lstrip("0")
    if len(significant) > len(str(U16_MAX)):
        raise IntegerParseError(IntErrorKind.OVERFLOW, text)
    value = int(significant or "0")
    if value > U16_MAX:
        raise IntegerParseError(IntErrorKind.OVERFLOW, text)
    return value


def _check_u16(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= U16_MAX:
        raise ValueError(f"value {value} out of range for a 16-bit unsigned integer")


# =============================================================================
# Argument Variants
# =============================================================================

class Argument:
    """
    Base class of the four argument variants.

    Subclasses set ``sigil`` and ``category``, reported by classify().
    """

    sigil: ClassVar[str]
    category: ClassVar[str]

    def classify(self) -> tuple[str, str]:
        """Return the variant's (sigil, category), e.g. ('@', 'absolute')."""
        return self.sigil, self.category

    @staticmethod
    def parse(token: str) -> "Argument":
        """Parse an argument token. See parse_argument()."""
        return parse_argument(token)


@dataclass(frozen=True)
class Absolute(Argument):
    """Absolute 16-bit address, written ``@<n>``."""

    sigil: ClassVar[str] = "@"
    category: ClassVar[str] = "absolute"

    value: int

    def __post_init__(self) -> None:
        _check_u16(self.value)

    def __str__(self) -> str:
        return f"@{self.value}"


@dataclass(frozen=True)
class IdConst(Argument):
    """Indirect 16-bit constant, written ``$<n>``."""

    sigil: ClassVar[str] = "$"
    category: ClassVar[str] = "ind.const"

    value: int

    def __post_init__(self) -> None:
        _check_u16(self.value)

    def __str__(self) -> str:
        return f"${self.value}"


@dataclass(frozen=True)
class Label(Argument):
    """
    Reference to a label by name, written as the bare name.

    The name must be non-empty, must not begin with a sigil ('@' or '$')
    and must not contain whitespace, so that it renders as a single token
    that parses back to a Label.
    """

    sigil: ClassVar[str] = ":"
    category: ClassVar[str] = "label"

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"expected a str, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("label name must not be empty")
        if self.name[0] in "@$":
            raise ValueError(f"label name {self.name!r} starts with an argument sigil")
        if any(ch in WHITESPACE for ch in self.name):
            raise ValueError(f"label name {self.name!r} contains whitespace")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Placeholder(Argument):
    """
    Sentinel left in a slot whose argument was taken.

    Renders as ``@_``, which does not parse back to a Placeholder. It must
    not survive into a finished statement.
    """

    sigil: ClassVar[str] = "_"
    category: ClassVar[str] = "place.holder"

    def __str__(self) -> str:
        return "@_"


PLACEHOLDER = Placeholder()


# =============================================================================
# Parsing
# =============================================================================

def parse_argument(token: str) -> Argument:
    """
    Parse a single whitespace-free argument token.

    The first character selects the variant: '@' gives Absolute, '$' gives
    IdConst, anything else makes the whole token a Label name.

    Args:
        token: The argument token (must not be empty)

    Returns:
        The parsed Argument

    Raises:
        ValueError: If the token is empty, or is a bare name containing
                    whitespace
        IntegerParseError: If a numeric sigil is followed by something that
                           is not an unsigned 16-bit decimal integer
    """
    if not token:
        raise ValueError("cannot parse an argument from an empty token")
    if token[0] == "@":
        return Absolute(parse_u16(token[1:]))
    if token[0] == "$":
        return IdConst(parse_u16(token[1:]))
    return Label(token)


# =============================================================================
# Argument Slot
# =============================================================================

class ArgumentSlot:
    """
    Mutable holder for an argument that may be moved out.

    Used by rewriting passes that need to move an argument from one place to
    another while the original place stays populated:

        slot = ArgumentSlot(Absolute(3))
        arg = slot.take()       # Absolute(3)
        slot.value              # Placeholder()
    """

    __slots__ = ("value",)

    def __init__(self, value: Argument):
        self.value = value

    def take(self) -> Argument:
        """Return the held argument, leaving PLACEHOLDER in its place."""
        value, self.value = self.value, PLACEHOLDER
        return value

    def __repr__(self) -> str:
        return f"ArgumentSlot({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentSlot):
            return NotImplemented
        return self.value == other.value
