"""Keyword Table: LEGv8 mnemonic → instruction kind.

WHY: The lexer must know whether an uppercase run such as ``ADDI`` is an
instruction keyword and, if so, which grammar family it belongs to. The
mnemonic lists are plain data so they can be read and extended without
touching lexing logic.

HOW: One tuple of mnemonics per InstructionKind. build_keyword_table()
merges them into a dict, refusing any mnemonic listed under two kinds,
and the result is frozen behind a MappingProxyType at import time.

RULES:
- Lists are disjoint; a duplicate raises KeywordConflictError at build time
- lookup() returns InstructionKind.NONE for unknown or empty strings
- The module-level KEYWORDS mapping is read-only
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple

from legv8_checker.core.ir import InstructionKind

logger = logging.getLogger(__name__)


I_MNEMONICS = ("ADDI", "SUBI", "ANDI", "ADDIS", "ORRI", "EORI", "SUBIS", "ANDIS", "LSL", "LSR")
IM_MNEMONICS = ("PRNT",)
D_MNEMONICS = ("STURB", "LDURB", "STURH", "LDURH", "STURW", "LDURSW", "STXR", "LDXR", "STUR", "LDUR")
R_MNEMONICS = (
    "FDIVS", "FMULS", "FCMPS", "FADDS", "FSUBS", "FMULD", "FDIVD", "FCMPD", "FADDD", "FSUBD",
    "AND", "ADD", "SDIV", "UDIV", "MUL", "SMULH", "UMULH", "ORR", "ADDS", "STURS", "LDURS",
    "EOR", "SUB", "ANDS", "SUBS", "STURD", "LDURD",
)
B_MNEMONICS = (
    "B.EQ", "B.GT", "B.NE", "B.HS", "B.LO", "B.MI", "B.PL", "B.VS", "B.VC",
    "B.HI", "B.LS", "B.GE", "B.LT", "B.LE", "B", "BL",
)
CB_MNEMONICS = ("CBZ", "CBNZ")
BR_MNEMONICS = ("BR",)
IGNORE_MNEMONICS = ("PRNL", "DUMP", "HALT")

# Declaration order of the groups; also the order used by mnemonics_for().
MNEMONIC_GROUPS: Tuple[Tuple[InstructionKind, Sequence[str]], ...] = (
    (InstructionKind.I, I_MNEMONICS),
    (InstructionKind.IM, IM_MNEMONICS),
    (InstructionKind.D, D_MNEMONICS),
    (InstructionKind.R, R_MNEMONICS),
    (InstructionKind.B, B_MNEMONICS),
    (InstructionKind.CB, CB_MNEMONICS),
    (InstructionKind.BR, BR_MNEMONICS),
    (InstructionKind.IGNORE, IGNORE_MNEMONICS),
)


class KeywordConflictError(ValueError):
    """A mnemonic was assigned to more than one instruction kind."""

    def __init__(self, mnemonic: str, first: InstructionKind, second: InstructionKind):
        super().__init__(
            "Mnemonic {!r} is listed for both {} and {}".format(
                mnemonic, first.value, second.value
            )
        )
        self.mnemonic = mnemonic
        self.first = first
        self.second = second


def build_keyword_table(
    groups: Iterable[Tuple[InstructionKind, Sequence[str]]],
) -> Mapping[str, InstructionKind]:
    """Merge per-kind mnemonic lists into one read-only lookup table.

    Args:
        groups: (kind, mnemonics) pairs. NONE is not a valid kind here.

    Returns:
        A MappingProxyType from mnemonic to InstructionKind.

    Raises:
        KeywordConflictError: If a mnemonic appears under two kinds.
        ValueError: If a group is declared for InstructionKind.NONE.
    """
    table: dict[str, InstructionKind] = {}
    for kind, mnemonics in groups:
        if kind is InstructionKind.NONE:
            raise ValueError("Mnemonics cannot be assigned to InstructionKind.NONE")
        for mnemonic in mnemonics:
            existing = table.get(mnemonic)
            if existing is not None and existing is not kind:
                raise KeywordConflictError(mnemonic, existing, kind)
            table[mnemonic] = kind
    logger.debug("Built keyword table with %d mnemonics", len(table))
    return MappingProxyType(table)


KEYWORDS: Mapping[str, InstructionKind] = build_keyword_table(MNEMONIC_GROUPS)


def lookup(mnemonic: str) -> InstructionKind:
    """Return the instruction kind of ``mnemonic``, or NONE if it is not a keyword."""
    return KEYWORDS.get(mnemonic, InstructionKind.NONE)


def mnemonics_for(kind: InstructionKind) -> list[str]:
    """All mnemonics of one kind, in declaration order."""
    return [m for m, k in KEYWORDS.items() if k is kind]
