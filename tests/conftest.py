"""Shared test fixtures for the legv8_checker test suite.

WHY: Several test modules need the same reference lines — the valid and
malformed instructions whose tokens and diagnostics are known exactly.
Centralizing them here keeps every module checking the same cases.

HOW: Pytest fixtures provide a small multi-line program mixing valid
lines, label definitions, comments and errors, plus its file on disk.

RULES:
- SAMPLE_PROGRAM line numbers are referenced by expected diagnostics
- Fixtures return fresh objects; tests may mutate them
"""

from pathlib import Path

import pytest

# Zero-based line numbers:
#  0 comment only, 1 label definition, 2 valid I, 3 missing comma,
#  4 blank, 5 extra tokens, 6 valid D, 7 lowercase mnemonic, 8 valid B.EQ
SAMPLE_PROGRAM = "\n".join([
    "// compute things",
    "loop:",
    "ADDI X0, X1, #12",
    "ADDI X0 X1, #12",
    "",
    "SUBI X1, XZR, #9 uh oh",
    "LDUR SP, [X2, #0]   // load",
    "addi X0, X1, #1",
    "B.EQ loop",
]) + "\n"


@pytest.fixture
def sample_program():
    """A short program with three malformed lines (3, 5 and 7)."""
    return SAMPLE_PROGRAM


@pytest.fixture
def sample_file(tmp_path) -> Path:
    """SAMPLE_PROGRAM written to a .s file in a temp directory."""
    path = tmp_path / "sample.s"
    path.write_text(SAMPLE_PROGRAM, encoding="utf-8")
    return path


@pytest.fixture
def clean_file(tmp_path) -> Path:
    """A .s file with no syntax errors."""
    path = tmp_path / "clean.s"
    path.write_text("start:\nADD X1, X2, X3\nCBZ X1, start\nHALT\n", encoding="utf-8")
    return path
