"""Line lexer: one LEGv8 source line → ordered token list.

WHY: The grammar validator compares token *kinds*, so the lexer has to
decide for every character run whether it is a register, an immediate,
an instruction keyword, a label, punctuation or junk — while keeping
exact character offsets so diagnostics can point at the right columns.

HOW: A left-to-right scan. At each position, after skipping spaces, the
scanners below are tried in a fixed precedence order and the first one
that matches produces the token and advances the cursor:
  1. end of line or ``//`` comment → stop
  2. punctuation ``]`` ``[`` ``,`` ``:``
  3. immediate ``#`` + digits
  4. register ``X0``–``X99``, ``SP``, ``FP``, ``LR``, ``XZR``
  5. instruction keyword, tested per kind in _KEYWORD_CHECK_ORDER
  6. branch mnemonic with a dotted condition (``B.EQ``)
  7. label / identifier
  8. any other single character → UNKNOWN

RULES:
- Only the space character is skipped; tabs lex as UNKNOWN
- Every step consumes at least one character; the lexer never fails
- Comments and trailing whitespace produce no tokens
- Token.value == line[token.start:token.end] for every emitted token
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from legv8_checker.core.ir import InstructionKind, Token, TokenKind
from legv8_checker.core.keywords import lookup

_PUNCTUATION = {
    "]": TokenKind.RIGHT_BRACKET,
    "[": TokenKind.LEFT_BRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_REGISTER_ALIASES = frozenset({"SP", "FP", "LR"})

# B-kind mnemonics are handled by the dotted-suffix scan after this loop.
_KEYWORD_CHECK_ORDER = (
    InstructionKind.I,
    InstructionKind.R,
    InstructionKind.D,
    InstructionKind.CB,
    InstructionKind.IM,
    InstructionKind.BR,
    InstructionKind.IGNORE,
)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_letter(ch: str) -> bool:
    return _is_upper(ch) or "a" <= ch <= "z"


def _skip_spaces(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] == " ":
        pos += 1
    return pos


def _immediate_length(line: str, pos: int) -> int:
    """Length of a ``#<digits>`` literal at pos, or 0.

    A lone ``#`` (end of line, or no digit after it) is not an immediate.
    """
    if pos >= len(line) - 1 or line[pos] != "#":
        return 0
    end = pos + 1
    while end < len(line) and _is_digit(line[end]):
        end += 1
    if end - pos == 1:
        return 0
    return end - pos


def _register_length(line: str, pos: int) -> int:
    """Length of a register name at pos, or 0.

    ``X`` plus one or two digits is tried first (``X123`` yields ``X12``),
    then the two-letter aliases, then ``XZR``.
    """
    if pos >= len(line) - 1:
        return 0
    if line[pos] == "X" and _is_digit(line[pos + 1]):
        if pos + 2 < len(line) and _is_digit(line[pos + 2]):
            return 3
        return 2
    if line[pos:pos + 2] in _REGISTER_ALIASES:
        return 2
    if line[pos:pos + 3] == "XZR":
        return 3
    return 0


def _uppercase_run(line: str, pos: int) -> str:
    end = pos
    while end < len(line) and _is_upper(line[end]):
        end += 1
    return line[pos:end]


def _keyword_length(line: str, pos: int, kind: InstructionKind) -> int:
    """Length of the maximal uppercase run at pos if it is a ``kind`` mnemonic."""
    run = _uppercase_run(line, pos)
    if run and lookup(run) is kind:
        return len(run)
    return 0


def _branch_length(line: str, pos: int) -> int:
    """Length of a B-kind mnemonic at pos, allowing ``.`` as its second character."""
    end = pos
    while end < len(line) and (
        _is_upper(line[end]) or (end - pos == 1 and line[end] == ".")
    ):
        end += 1
    run = line[pos:end]
    if run and lookup(run) is InstructionKind.B:
        return len(run)
    return 0


def _identifier_length(line: str, pos: int) -> int:
    """Length of a label at pos: a letter, then letters, digits or underscores."""
    end = pos
    while end < len(line) and (
        _is_letter(line[end])
        or (end > pos and (line[end] == "_" or _is_digit(line[end])))
    ):
        end += 1
    return end - pos


def _next_token(line: str, pos: int) -> Tuple[Optional[Token], int]:
    """Scan one token starting at or after pos.

    Returns:
        (token, next_pos). token is None when the end of the line or a
        ``//`` comment was reached; scanning stops there.
    """
    pos = _skip_spaces(line, pos)
    if pos >= len(line):
        return None, len(line)

    ch = line[pos]
    if ch == "/" and line.startswith("//", pos):
        return None, len(line)

    kind = _PUNCTUATION.get(ch)
    if kind is not None:
        return Token(kind, ch, pos, pos + 1), pos + 1

    length = _immediate_length(line, pos)
    if length:
        return _make(line, pos, length, TokenKind.IMMEDIATE)

    length = _register_length(line, pos)
    if length:
        return _make(line, pos, length, TokenKind.REGISTER)

    for instruction_kind in _KEYWORD_CHECK_ORDER:
        length = _keyword_length(line, pos, instruction_kind)
        if length:
            return _make(line, pos, length, TokenKind.INSTRUCTION, instruction_kind)

    length = _branch_length(line, pos)
    if length:
        return _make(line, pos, length, TokenKind.INSTRUCTION, InstructionKind.B)

    length = _identifier_length(line, pos)
    if length:
        return _make(line, pos, length, TokenKind.LABEL)

    return Token(TokenKind.UNKNOWN, ch, pos, pos + 1), pos + 1


def _make(
    line: str,
    pos: int,
    length: int,
    kind: TokenKind,
    instruction_kind: InstructionKind = InstructionKind.NONE,
) -> Tuple[Token, int]:
    end = pos + length
    return Token(kind, line[pos:end], pos, end, instruction_kind), end


def tokenize_line(line: str) -> List[Token]:
    """Tokenize one physical source line.

    Args:
        line: The line text without its line terminator.

    Returns:
        Tokens in source order. Blank lines, whitespace-only lines and
        comment-only lines give an empty list.
    """
    tokens: List[Token] = []
    pos = 0
    while pos < len(line):
        token, pos = _next_token(line, pos)
        if token is None:
            break
        tokens.append(token)
    return tokens


def tokenize_document(lines: Iterable[str]) -> List[List[Token]]:
    """Tokenize every line of a document, one token list per line."""
    return [tokenize_line(line) for line in lines]
