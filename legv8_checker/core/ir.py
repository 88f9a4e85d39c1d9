"""Intermediate representation types for lexed lines and diagnostics.

WHY: The lexer, the grammar validator, the formatters and the API all
talk about the same things — token kinds, instruction families, tokens
with character offsets, and diagnostics with line/character ranges. The
IR gives them one well-typed vocabulary.

HOW: Two closed enumerations (TokenKind, InstructionKind), a Severity
IntEnum carrying the LSP numeric codes, and three dataclasses:
  Token          — one lexed token with its half-open [start, end) range
  Diagnostic     — one syntax error with zero-based line/character range
  DocumentReport — a checked document (name, lines, diagnostics)

RULES:
- Token.value == line[start:end] for every token the lexer emits
- InstructionKind is meaningful only on INSTRUCTION tokens (NONE elsewhere)
- Diagnostics are always Severity.ERROR in this checker
- All coordinates are zero-based code-point indices; to_lsp() converts
  them to UTF-16 code units when given the source line
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from legv8_checker.config import END_OF_LINE_SENTINEL


class TokenKind(str, enum.Enum):
    """Lexical class of a token.

    The value is the display name; messages use it lowercased, e.g.
    "Expected a left bracket.".
    """

    REGISTER = "Register"
    COMMA = "Comma"
    INSTRUCTION = "Instruction"
    LABEL = "Label"
    LEFT_BRACKET = "Left Bracket"
    RIGHT_BRACKET = "Right Bracket"
    UNKNOWN = "Unknown"
    END_OF_LINE = "EOL"
    IMMEDIATE = "Immediate"
    COLON = "Colon"

    @property
    def display_name(self) -> str:
        return self.value.lower()


class InstructionKind(str, enum.Enum):
    """Grammar family of an instruction mnemonic."""

    NONE = "NONE"
    I = "I"  # noqa: E741
    R = "R"
    D = "D"
    B = "B"
    BR = "BR"
    CB = "CB"
    IM = "IM"
    IGNORE = "IGNORE"


class Severity(enum.IntEnum):
    """Diagnostic severity, numbered as in the Language Server Protocol."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


def utf16_offset(line: str, index: int) -> int:
    """Convert a code-point index into ``line`` to a UTF-16 code-unit offset.

    RULES:
    - END_OF_LINE_SENTINEL is returned unchanged
    - Indices past the end of the line keep their distance from the end
    """
    if index == END_OF_LINE_SENTINEL:
        return index
    prefix = line[:index]
    return len(prefix.encode("utf-16-le")) // 2 + max(0, index - len(line))


@dataclass(frozen=True)
class Token:
    """A single token lexed from one source line.

    RULES:
    - start/end are zero-based, half-open character offsets into the line
    - value is the exact matched substring
    - instruction_kind is NONE unless kind is INSTRUCTION
    """

    kind: TokenKind
    value: str
    start: int
    end: int
    instruction_kind: InstructionKind = InstructionKind.NONE


@dataclass(frozen=True)
class Diagnostic:
    """A syntax error attached to a range of one source line.

    WHY: Clients (editors, CI annotations, the HTTP API) all need the same
    position-addressed error record. The field layout mirrors the LSP
    Diagnostic so ``to_lsp()`` is a direct mapping.

    RULES:
    - start_line == end_line (diagnostics never span lines)
    - end_char may be END_OF_LINE_SENTINEL meaning "to the end of the line"
    - severity is always Severity.ERROR here
    """

    start_line: int
    start_char: int
    end_line: int
    end_char: int
    message: str
    source: str
    severity: Severity = Severity.ERROR

    def to_lsp(self, line: str | None = None) -> dict[str, Any]:
        """Serialize to the LSP ``Diagnostic`` JSON shape.

        Offsets are code-point indices internally. LSP counts UTF-16 code
        units, so when the source ``line`` is given the characters are
        converted with utf16_offset(); without it they are emitted as is.
        """
        start_char, end_char = self.start_char, self.end_char
        if line is not None:
            start_char = utf16_offset(line, start_char)
            end_char = utf16_offset(line, end_char)
        return {
            "range": {
                "start": {"line": self.start_line, "character": start_char},
                "end": {"line": self.end_line, "character": end_char},
            },
            "severity": int(self.severity),
            "source": self.source,
            "message": self.message,
        }


@dataclass
class DocumentReport:
    """One checked document: its name, its physical lines and its diagnostics.

    Formatters consume lists of these; ``lines`` lets them quote the
    offending source and clamp unbounded end-of-line ranges.
    """

    name: str
    lines: list[str]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    def line_text(self, line_number: int) -> str | None:
        """The source line at ``line_number``, or None if out of range."""
        if 0 <= line_number < len(self.lines):
            return self.lines[line_number]
        return None
