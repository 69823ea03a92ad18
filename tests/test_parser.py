# =============================================================================
# test_parser.py - Statement Parser Tests
# =============================================================================
# Tests for parsing single lines of LC1 source.
#
# Test coverage includes:
#   - End-to-end examples for every statement shape
#   - Round trip: rendering a parsed statement parses back to it
#   - Arity enforcement for every mnemonic
#   - Case-insensitive mnemonic recognition
#   - Label definitions and the inline-label heuristic
#   - Token count and length limits
#   - Wrapped integer failures
# =============================================================================

import pytest

from lc1c.argument import Absolute, IdConst, Label
from lc1c.errors import (
    ArgumentNotFoundError,
    InlineLabelError,
    IntegerError,
    IntegerParseError,
    IntErrorKind,
    ParseStatementError,
    TooManyTokensError,
    TooShortError,
    UnexpectedArgumentError,
    UnknownCommandError,
)
from lc1c.isa import ArgKind, Mnemonic, get_command
from lc1c.parser import parse_statement, recognize
from lc1c.statement import UNPARSED, RecognizedInvoc, StatementInvoc


ARG_MNEMONICS = [m for m in Mnemonic
                 if m is not Mnemonic.LABEL and get_command(m).has_arg]
ARGLESS_MNEMONICS = [m for m in Mnemonic if not get_command(m).has_arg]
OPERAND_MNEMONICS = [m for m in Mnemonic
                     if get_command(m).arg_kind is ArgKind.OPERAND]

_OPERAND_SAMPLES = [Absolute(0), IdConst(65535), Label("sub_1"), Absolute(42)]


def _sample_invocation(index, mnemonic):
    """Build a representative invocation for any command shape."""
    kind = get_command(mnemonic).arg_kind
    if kind is ArgKind.OPERAND:
        return StatementInvoc(mnemonic, _OPERAND_SAMPLES[index % len(_OPERAND_SAMPLES)])
    if kind is ArgKind.DEF_CODE:
        return StatementInvoc(mnemonic, 65535)
    if kind is ArgKind.LABEL:
        return StatementInvoc.label("end")
    return StatementInvoc(mnemonic)


EVERY_COMMAND = [_sample_invocation(i, m) for i, m in enumerate(Mnemonic)]


# =============================================================================
# End-to-End Examples
# =============================================================================

class TestExamples:
    """Parse and render the basic statement shapes."""

    def test_absolute_operand(self):
        invoc = parse_statement("LDA @42")
        assert invoc == StatementInvoc(Mnemonic.LDA, Absolute(42))
        assert str(invoc) == "LDA @42"

    def test_constant_operand(self):
        assert parse_statement("MOV $5") == StatementInvoc(Mnemonic.MOV, IdConst(5))

    def test_label_operand(self):
        assert parse_statement("JMP start") == StatementInvoc(Mnemonic.JMP, Label("start"))

    def test_def(self):
        invoc = parse_statement("DEF 7")
        assert invoc == StatementInvoc(Mnemonic.DEF, 7)
        assert str(invoc) == "DEF 7"

    def test_label_definition(self):
        invoc = parse_statement("loop:")
        assert invoc == StatementInvoc.label("loop")
        assert str(invoc) == "loop:"

    def test_argless(self):
        assert parse_statement("HLT") == StatementInvoc(Mnemonic.HLT)

    def test_extra_whitespace(self):
        assert parse_statement("  LDB \t @3  ") == StatementInvoc(Mnemonic.LDB, Absolute(3))

    def test_class_method(self):
        assert StatementInvoc.parse("NOP") == StatementInvoc(Mnemonic.NOP)

    def test_zero_padded_numbers(self):
        """Leading zeros never overflow, however many there are."""
        assert parse_statement("DEF " + "0" * 5000 + "7") == StatementInvoc(Mnemonic.DEF, 7)
        assert parse_statement("LDA @" + "0" * 5000 + "1") == StatementInvoc(Mnemonic.LDA, Absolute(1))

    @pytest.mark.parametrize("sep", ["\u00a0", "\u3000", "\x0b", "\u2028"])
    def test_unicode_whitespace_separates(self, sep):
        assert parse_statement(f"LDA{sep}@1") == StatementInvoc(Mnemonic.LDA, Absolute(1))

    @pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separators_do_not_split(self, sep):
        """U+001C..U+001F are not whitespace, so the line is one token."""
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_statement(f"LDA{sep}@1")
        assert exc_info.value.command == f"LDA{sep}@1"

    def test_argument_ending_in_colon(self):
        """Only a line ending in ':' is a label definition."""
        assert parse_statement("JMP a: ") == StatementInvoc(Mnemonic.JMP, Label("a:"))


class TestRoundTrip:
    """Rendering a parsed statement and parsing it again gives the same value."""

    @pytest.mark.parametrize("invoc", EVERY_COMMAND, ids=str)
    def test_every_command(self, invoc):
        assert parse_statement(str(invoc)) == invoc

    @pytest.mark.parametrize("mnemonic", OPERAND_MNEMONICS, ids=str)
    @pytest.mark.parametrize("arg", _OPERAND_SAMPLES, ids=str)
    def test_every_operand_form(self, mnemonic, arg):
        invoc = StatementInvoc(mnemonic, arg)
        assert parse_statement(str(invoc)) == invoc

    @pytest.mark.parametrize("invoc", [
        StatementInvoc(Mnemonic.DEF, 0),
        StatementInvoc.label("JMP start"),
        StatementInvoc.label(":"),
        StatementInvoc(Mnemonic.JMP, Label("a\x1fb")),
    ], ids=str)
    def test_edge_cases(self, invoc):
        assert parse_statement(str(invoc)) == invoc


# =============================================================================
# Arity
# =============================================================================

class TestArity:
    """Argument-taking and argument-less commands are enforced."""

    @pytest.mark.parametrize("mnemonic", ARGLESS_MNEMONICS, ids=str)
    def test_unexpected_argument(self, mnemonic):
        with pytest.raises(UnexpectedArgumentError):
            parse_statement(f"{mnemonic.value} x")

    @pytest.mark.parametrize("mnemonic", ARG_MNEMONICS, ids=str)
    def test_argument_not_found(self, mnemonic):
        with pytest.raises(ArgumentNotFoundError):
            parse_statement(mnemonic.value)

    def test_hlt_with_argument(self):
        with pytest.raises(UnexpectedArgumentError):
            parse_statement("HLT @1")


# =============================================================================
# Case Insensitivity
# =============================================================================

class TestCaseInsensitivity:
    """Mnemonics are recognized regardless of case."""

    def test_mov_variants(self):
        expected = StatementInvoc(Mnemonic.MOV, Absolute(1))
        assert parse_statement("mov @1") == expected
        assert parse_statement("MOV @1") == expected
        assert parse_statement("Mov @1") == expected

    def test_label_argument_keeps_case(self):
        assert parse_statement("jmp Start") == StatementInvoc(Mnemonic.JMP, Label("Start"))

    def test_rendering_uppercases(self):
        assert str(parse_statement("def 1")) == "DEF 1"


# =============================================================================
# Labels
# =============================================================================

class TestLabels:
    """Label definitions and the inline-label heuristic."""

    @pytest.mark.parametrize("line", ["ab:", "LDA:", "LDA @1:", "x y z:", "::"])
    def test_any_line_ending_in_colon(self, line):
        assert parse_statement(line) == StatementInvoc.label(line[:-1])

    def test_single_colon_is_too_short(self):
        with pytest.raises(TooShortError):
            parse_statement(":")

    def test_label_followed_by_tokens(self):
        with pytest.raises(InlineLabelError):
            parse_statement("loop: LDA @1")

    def test_unknown_command_with_colon(self):
        with pytest.raises(InlineLabelError):
            parse_statement("loop:LDA @1")

    def test_label_and_one_token(self):
        """'loop: HLT' has two tokens, so the first is checked as a command."""
        with pytest.raises(InlineLabelError):
            parse_statement("loop: HLT")


# =============================================================================
# Structural Errors
# =============================================================================

class TestStructuralErrors:
    """Too short, too many tokens, unknown commands."""

    @pytest.mark.parametrize("line", ["", "A", "\t"])
    def test_too_short(self, line):
        with pytest.raises(TooShortError):
            parse_statement(line)

    def test_whitespace_only(self):
        with pytest.raises(TooShortError):
            parse_statement("    ")

    def test_single_non_ascii_character(self):
        """Length is counted in UTF-8 bytes."""
        with pytest.raises(UnknownCommandError):
            parse_statement("é")

    def test_too_many_tokens(self):
        with pytest.raises(TooManyTokensError) as exc_info:
            parse_statement("MOV @1 @2")
        assert exc_info.value.count == 3

    def test_too_many_unknown_tokens(self):
        with pytest.raises(TooManyTokensError) as exc_info:
            parse_statement("a b c")
        assert exc_info.value.count == 3

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_statement("XYZ")
        assert exc_info.value.command == "XYZ"

    def test_label_keyword_is_unknown(self):
        with pytest.raises(UnknownCommandError):
            parse_statement("Label x")

    def test_all_errors_share_base(self):
        with pytest.raises(ParseStatementError):
            parse_statement("XYZ @1")


# =============================================================================
# Integer Errors
# =============================================================================

class TestIntegerErrors:
    """Numeric failures are wrapped with their cause."""

    def test_absolute_overflow(self):
        with pytest.raises(IntegerError) as exc_info:
            parse_statement("LDA @65536")
        assert exc_info.value.cause.kind is IntErrorKind.OVERFLOW
        assert isinstance(exc_info.value.__cause__, IntegerParseError)

    def test_constant_not_a_number(self):
        with pytest.raises(IntegerError) as exc_info:
            parse_statement("LDA $x")
        assert exc_info.value.cause.kind is IntErrorKind.INVALID_DIGIT

    def test_bare_sigil(self):
        with pytest.raises(IntegerError) as exc_info:
            parse_statement("JMP @")
        assert exc_info.value.cause.kind is IntErrorKind.EMPTY

    def test_def_requires_bare_number(self):
        """DEF takes a plain number, not a sigil argument."""
        with pytest.raises(IntegerError) as exc_info:
            parse_statement("DEF @7")
        assert exc_info.value.cause.kind is IntErrorKind.INVALID_DIGIT

    def test_def_label_is_rejected(self):
        with pytest.raises(IntegerError):
            parse_statement("DEF start")

    def test_overlong_number(self):
        with pytest.raises(IntegerError) as exc_info:
            parse_statement("DEF " + "9" * 5000)
        assert exc_info.value.cause.kind is IntErrorKind.OVERFLOW

    def test_message_includes_cause(self):
        with pytest.raises(IntegerError, match="number too large"):
            parse_statement("DEF 99999")


# =============================================================================
# Recognition Phase
# =============================================================================

class TestRecognize:
    """The first phase matches the mnemonic without touching the argument."""

    def test_operand_command(self):
        assert recognize("lda") == RecognizedInvoc(Mnemonic.LDA, UNPARSED)

    def test_def(self):
        assert recognize("DEF") == RecognizedInvoc(Mnemonic.DEF, UNPARSED)

    def test_argless(self):
        invoc = recognize("ret")
        assert invoc == RecognizedInvoc(Mnemonic.RET)
        assert invoc.get_cmd().arg_kind is ArgKind.NONE

    def test_unknown(self):
        with pytest.raises(UnknownCommandError):
            recognize("FOO")
