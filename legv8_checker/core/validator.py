"""Document validation: lex and check every line, collect diagnostics.

WHY: Callers hold whole documents (a file, an editor buffer, an HTTP
request body). They need one call that splits the text into physical
lines, runs the lexer and grammar validator on each, and hands back the
diagnostics in line order.

HOW: split_lines() mirrors a line scanner (``\\n`` separators, optional
``\\r`` before them). validate_document() tokenizes each line, skips empty
token lists, and appends every non-None result of validate_line().
check_text() bundles the result into a DocumentReport for formatters.

RULES:
- Lines are independent; no state carries from one line to the next
- Output order is line order; at most one diagnostic per line
- source defaults to config.DIAGNOSTIC_SOURCE
- exact_line_end defaults to config.EXACT_LINE_END; when True the
  "Expected end of line." range ends at the real line length instead of
  END_OF_LINE_SENTINEL
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, List, Optional

from legv8_checker import config
from legv8_checker.core.grammar import validate_line
from legv8_checker.core.ir import Diagnostic, DocumentReport
from legv8_checker.core.lexer import tokenize_line

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split document text into physical lines without terminators.

    RULES:
    - ``\\n`` separates lines; one trailing ``\\r`` per line is dropped
    - A final newline does not produce an extra empty line
    - Empty text has no lines
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def validate_document(
    lines: Iterable[str],
    source: Optional[str] = None,
    exact_line_end: Optional[bool] = None,
) -> List[Diagnostic]:
    """Validate every line of a document.

    Args:
        lines: Physical source lines, in order, without terminators.
        source: Diagnostic source tag. None uses config.DIAGNOSTIC_SOURCE.
        exact_line_end: Clamp unbounded end-of-line ranges to the line
            length. None uses config.EXACT_LINE_END.

    Returns:
        One diagnostic per malformed line, in line order.
    """
    if source is None:
        source = config.DIAGNOSTIC_SOURCE
    if exact_line_end is None:
        exact_line_end = config.EXACT_LINE_END

    diagnostics: List[Diagnostic] = []
    line_count = 0
    for line_number, line in enumerate(lines):
        line_count += 1
        tokens = tokenize_line(line)
        if not tokens:
            continue
        diagnostic = validate_line(tokens, line_number, source)
        if diagnostic is None:
            continue
        if exact_line_end and diagnostic.end_char == config.END_OF_LINE_SENTINEL:
            diagnostic = dataclasses.replace(diagnostic, end_char=len(line))
        diagnostics.append(diagnostic)

    logger.debug("Validated %d lines, %d diagnostics", line_count, len(diagnostics))
    return diagnostics


def check_text(
    text: str,
    name: str,
    source: Optional[str] = None,
    exact_line_end: Optional[bool] = None,
) -> DocumentReport:
    """Validate document text and return a DocumentReport named ``name``."""
    lines = split_lines(text)
    diagnostics = validate_document(lines, source=source, exact_line_end=exact_line_end)
    return DocumentReport(name=name, lines=lines, diagnostics=diagnostics)
