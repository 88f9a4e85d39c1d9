"""Grammar Table and single-line grammar validator.

WHY: Every LEGv8 instruction family has one fixed operand shape, e.g.
``ADDI X0, X1, #12`` is Instruction Register Comma Register Comma
Immediate. Checking a line means comparing its token kinds with that
shape and reporting the first place they disagree, precisely enough that
an editor can underline the right characters.

HOW: GRAMMARS maps each InstructionKind to a tuple of expected TokenKinds
(index 0 is always INSTRUCTION). validate_line() short-circuits blank
lines and ``label:`` definitions, requires a leading instruction, then
walks the actual and expected kinds in lock-step.

RULES:
- Empty token list → no diagnostic
- Exactly [LABEL, COLON] → no diagnostic
- First token not an instruction → "Expected an instruction keyword." on that token
- Extra tokens → "Expected end of line." from the first extra token to END_OF_LINE_SENTINEL
- Kind mismatch → "Expected a <kind>." on exactly that token
- Too few tokens → "Expected a <kind>." on the one character after the last token
- Only the first problem on a line is reported
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from legv8_checker.config import END_OF_LINE_SENTINEL
from legv8_checker.core.ir import Diagnostic, InstructionKind, Token, TokenKind

_INS = TokenKind.INSTRUCTION
_REG = TokenKind.REGISTER
_COM = TokenKind.COMMA
_IMM = TokenKind.IMMEDIATE
_LBL = TokenKind.LABEL

GRAMMARS: Mapping[InstructionKind, Tuple[TokenKind, ...]] = MappingProxyType({
    InstructionKind.R: (_INS, _REG, _COM, _REG, _COM, _REG),
    InstructionKind.I: (_INS, _REG, _COM, _REG, _COM, _IMM),
    InstructionKind.IM: (_INS, _REG),
    InstructionKind.D: (
        _INS, _REG, _COM, TokenKind.LEFT_BRACKET, _REG, _COM, _IMM, TokenKind.RIGHT_BRACKET,
    ),
    InstructionKind.B: (_INS, _LBL),
    InstructionKind.BR: (_INS, _REG),
    InstructionKind.CB: (_INS, _REG, _COM, _LBL),
    InstructionKind.IGNORE: (_INS,),
})

MSG_EXPECTED_INSTRUCTION = "Expected an instruction keyword."
MSG_EXPECTED_END_OF_LINE = "Expected end of line."


def expected_message(kind: TokenKind) -> str:
    """Message for a missing or mismatched token of ``kind``."""
    return "Expected a {}.".format(kind.display_name)


def _diagnostic(line_number: int, start: int, end: int, message: str, source: str) -> Diagnostic:
    return Diagnostic(
        start_line=line_number,
        start_char=start,
        end_line=line_number,
        end_char=end,
        message=message,
        source=source,
    )


def is_label_definition(tokens: Sequence[Token]) -> bool:
    return (
        len(tokens) == 2
        and tokens[0].kind is TokenKind.LABEL
        and tokens[1].kind is TokenKind.COLON
    )


def validate_line(
    tokens: Sequence[Token],
    line_number: int,
    source: str,
) -> Optional[Diagnostic]:
    """Check one line's tokens against the grammar of its leading instruction.

    Args:
        tokens: Output of tokenize_line() for the line.
        line_number: Zero-based line number, copied into the diagnostic.
        source: Tag for the diagnostic's ``source`` field.

    Returns:
        The first problem found on the line, or None if the line is valid.
    """
    if not tokens or is_label_definition(tokens):
        return None

    first = tokens[0]
    if first.kind is not TokenKind.INSTRUCTION:
        return _diagnostic(line_number, first.start, first.end, MSG_EXPECTED_INSTRUCTION, source)

    expected = GRAMMARS[first.instruction_kind]
    for index, token in enumerate(tokens):
        if index >= len(expected):
            return _diagnostic(
                line_number, token.start, END_OF_LINE_SENTINEL, MSG_EXPECTED_END_OF_LINE, source
            )
        if token.kind is not expected[index]:
            return _diagnostic(
                line_number, token.start, token.end, expected_message(expected[index]), source
            )

    if len(tokens) < len(expected):
        after = tokens[-1].end
        return _diagnostic(
            line_number, after, after + 1, expected_message(expected[len(tokens)]), source
        )

    return None
