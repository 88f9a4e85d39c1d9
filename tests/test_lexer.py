"""Unit tests for the line lexer.

WHY: Every diagnostic the checker reports is positioned by token offsets
and decided by token kinds. A lexer that misclassifies a run or shifts an
offset by one produces wrong errors on correct code.

HOW: Tests are grouped by token class, following the scanner precedence:
  - Reference lines with their full expected token lists
  - Immediates, registers, keywords, branch mnemonics, labels
  - Comments, whitespace and the UNKNOWN fallback
  - Properties: determinism and value == line[start:end]

RULES:
- Expected tokens are written out in full (kind, value, start, end, instruction kind)
- Offsets are zero-based and half-open
"""

import pytest

from legv8_checker.core.ir import InstructionKind, Token, TokenKind
from legv8_checker.core.lexer import tokenize_document, tokenize_line

INS = TokenKind.INSTRUCTION
REG = TokenKind.REGISTER
COM = TokenKind.COMMA
IMM = TokenKind.IMMEDIATE
LBL = TokenKind.LABEL
UNK = TokenKind.UNKNOWN


def _tok(kind, value, start, end, instruction_kind=InstructionKind.NONE):
    return Token(kind, value, start, end, instruction_kind)


def _kinds(line):
    return [t.kind for t in tokenize_line(line)]


class TestReferenceLines:
    """Complete token lists for representative instructions."""

    def test_i_type(self):
        assert tokenize_line("ADDI X0, X1, #12") == [
            _tok(INS, "ADDI", 0, 4, InstructionKind.I),
            _tok(REG, "X0", 5, 7),
            _tok(COM, ",", 7, 8),
            _tok(REG, "X1", 9, 11),
            _tok(COM, ",", 11, 12),
            _tok(IMM, "#12", 13, 16),
        ]

    def test_i_type_with_zero_register(self):
        assert tokenize_line("SUBI X1, XZR, #9") == [
            _tok(INS, "SUBI", 0, 4, InstructionKind.I),
            _tok(REG, "X1", 5, 7),
            _tok(COM, ",", 7, 8),
            _tok(REG, "XZR", 9, 12),
            _tok(COM, ",", 12, 13),
            _tok(IMM, "#9", 14, 16),
        ]

    def test_d_type(self):
        assert tokenize_line("LDUR SP, [X2, #0]") == [
            _tok(INS, "LDUR", 0, 4, InstructionKind.D),
            _tok(REG, "SP", 5, 7),
            _tok(COM, ",", 7, 8),
            _tok(TokenKind.LEFT_BRACKET, "[", 9, 10),
            _tok(REG, "X2", 10, 12),
            _tok(COM, ",", 12, 13),
            _tok(IMM, "#0", 14, 16),
            _tok(TokenKind.RIGHT_BRACKET, "]", 16, 17),
        ]

    def test_b_type(self):
        assert tokenize_line("B label_1") == [
            _tok(INS, "B", 0, 1, InstructionKind.B),
            _tok(LBL, "label_1", 2, 9),
        ]

    def test_b_type_with_condition(self):
        assert tokenize_line("B.EQ done") == [
            _tok(INS, "B.EQ", 0, 4, InstructionKind.B),
            _tok(LBL, "done", 5, 9),
        ]

    def test_branch_and_link(self):
        assert tokenize_line("BL link") == [
            _tok(INS, "BL", 0, 2, InstructionKind.B),
            _tok(LBL, "link", 3, 7),
        ]

    def test_cb_type(self):
        assert tokenize_line("CBZ X1, top") == [
            _tok(INS, "CBZ", 0, 3, InstructionKind.CB),
            _tok(REG, "X1", 4, 6),
            _tok(COM, ",", 6, 7),
            _tok(LBL, "top", 8, 11),
        ]

    def test_r_type_two_digit_registers(self):
        assert tokenize_line("AND X12, X10, X1") == [
            _tok(INS, "AND", 0, 3, InstructionKind.R),
            _tok(REG, "X12", 4, 7),
            _tok(COM, ",", 7, 8),
            _tok(REG, "X10", 9, 12),
            _tok(COM, ",", 12, 13),
            _tok(REG, "X1", 14, 16),
        ]

    def test_unknown_word_is_label(self):
        assert tokenize_line("ZZZ") == [_tok(LBL, "ZZZ", 0, 3)]

    def test_label_definition(self):
        assert tokenize_line("loop:") == [
            _tok(LBL, "loop", 0, 4),
            _tok(TokenKind.COLON, ":", 4, 5),
        ]


class TestImmediates:

    def test_multi_digit(self):
        assert tokenize_line("#1234") == [_tok(IMM, "#1234", 0, 5)]

    def test_lone_hash_is_unknown(self):
        assert tokenize_line("#") == [_tok(UNK, "#", 0, 1)]

    def test_hash_without_digit_falls_through(self):
        assert tokenize_line("# 5") == [_tok(UNK, "#", 0, 1), _tok(UNK, "5", 2, 3)]

    def test_digits_stop_at_letter(self):
        assert tokenize_line("#12abc") == [_tok(IMM, "#12", 0, 3), _tok(LBL, "abc", 3, 6)]


class TestRegisters:

    @pytest.mark.parametrize("name", ["X0", "X9", "X30", "SP", "FP", "LR", "XZR"])
    def test_register_names(self, name):
        assert tokenize_line(name) == [_tok(REG, name, 0, len(name))]

    def test_register_number_is_at_most_two_digits(self):
        assert tokenize_line("X123") == [_tok(REG, "X12", 0, 3), _tok(UNK, "3", 3, 4)]

    def test_alias_prefix_wins_over_label(self):
        assert tokenize_line("SPAM") == [_tok(REG, "SP", 0, 2), _tok(LBL, "AM", 2, 4)]

    def test_lone_x_is_label(self):
        assert tokenize_line("X") == [_tok(LBL, "X", 0, 1)]

    def test_register_at_end_of_line(self):
        assert tokenize_line("BR X30") == [
            _tok(INS, "BR", 0, 2, InstructionKind.BR),
            _tok(REG, "X30", 3, 6),
        ]


class TestInstructionKeywords:

    @pytest.mark.parametrize("mnemonic,kind", [
        ("ADDI", InstructionKind.I),
        ("ADDIS", InstructionKind.I),
        ("LSL", InstructionKind.I),
        ("ADD", InstructionKind.R),
        ("ADDS", InstructionKind.R),
        ("FCMPD", InstructionKind.R),
        ("STUR", InstructionKind.D),
        ("STURB", InstructionKind.D),
        ("LDURSW", InstructionKind.D),
        ("CBNZ", InstructionKind.CB),
        ("PRNT", InstructionKind.IM),
        ("BR", InstructionKind.BR),
        ("HALT", InstructionKind.IGNORE),
        ("B", InstructionKind.B),
        ("B.LE", InstructionKind.B),
    ])
    def test_mnemonic_kind(self, mnemonic, kind):
        assert tokenize_line(mnemonic) == [_tok(INS, mnemonic, 0, len(mnemonic), kind)]

    def test_maximal_run_must_match(self):
        # "ADDX" is not a mnemonic, and the scan never splits it into "ADD" + "X".
        assert tokenize_line("ADDX") == [_tok(LBL, "ADDX", 0, 4)]

    def test_lowercase_mnemonic_is_label(self):
        assert tokenize_line("addi") == [_tok(LBL, "addi", 0, 4)]

    def test_unknown_condition_is_not_a_branch(self):
        tokens = tokenize_line("B.XX there")
        assert tokens[0] == _tok(LBL, "B", 0, 1)
        assert tokens[1] == _tok(UNK, ".", 1, 2)


class TestCommentsAndWhitespace:

    def test_empty_line(self):
        assert tokenize_line("") == []

    def test_spaces_only(self):
        assert tokenize_line("     ") == []

    def test_comment_only(self):
        assert tokenize_line("// just a note") == []

    def test_trailing_comment_dropped(self):
        assert _kinds("HALT // stop here") == [INS]

    def test_comment_without_space(self):
        assert _kinds("HALT//stop") == [INS]

    def test_single_slash_is_unknown(self):
        assert tokenize_line("/") == [_tok(UNK, "/", 0, 1)]

    def test_leading_spaces_keep_offsets(self):
        assert tokenize_line("   HALT") == [_tok(INS, "HALT", 3, 7, InstructionKind.IGNORE)]

    def test_tab_is_unknown(self):
        assert tokenize_line("\tHALT") == [
            _tok(UNK, "\t", 0, 1),
            _tok(INS, "HALT", 1, 5, InstructionKind.IGNORE),
        ]


class TestLexerProperties:

    LINES = [
        "ADDI X0, X1, #12",
        "LDUR SP, [X2, #0]   // load",
        "  loop:  ",
        "B.EQ done",
        "SUBI X1, XZR, #9 uh oh",
        "X123 %$ ## _x a_1",
        "\tCBZ X1,top",
    ]

    @pytest.mark.parametrize("line", LINES)
    def test_value_matches_slice(self, line):
        for token in tokenize_line(line):
            assert line[token.start:token.end] == token.value

    @pytest.mark.parametrize("line", LINES)
    def test_deterministic(self, line):
        assert tokenize_line(line) == tokenize_line(line)

    @pytest.mark.parametrize("line", LINES)
    def test_only_instructions_carry_instruction_kind(self, line):
        for token in tokenize_line(line):
            if token.kind is not INS:
                assert token.instruction_kind is InstructionKind.NONE

    def test_tokenize_document_one_list_per_line(self):
        result = tokenize_document(["HALT", "", "loop:"])
        assert len(result) == 3
        assert result[1] == []
        assert [t.kind for t in result[2]] == [LBL, TokenKind.COLON]
