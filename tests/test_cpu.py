"""
Unit Tests for the 6502 Instruction Set Definition
"""

import pytest

from disasm6502.cpu import (
    AddressingMode,
    Mnemonic,
    OPCODE_TABLE,
    DECODE_TABLE,
    BRANCH_INSTRUCTIONS,
    FLAG_EFFECTS,
    lookup_opcode,
    get_instruction_info,
    is_branch_opcode,
    signed_byte,
)


class TestOpcodeTable:
    """Tests for the opcode and decode tables."""

    def test_documented_opcode_count(self):
        """The 6502 has 151 documented opcodes."""
        assert len(OPCODE_TABLE) == 151

    def test_mnemonic_count(self):
        assert len(Mnemonic) == 56

    def test_decode_table_is_total(self):
        """Every byte value has a decode table entry."""
        assert len(DECODE_TABLE) == 256
        assert sum(1 for entry in DECODE_TABLE if entry is not None) == 151

    def test_decode_table_matches_opcodes(self):
        for info in OPCODE_TABLE.values():
            assert DECODE_TABLE[info.opcode] is info

    def test_lookup_lda_immediate(self):
        info = lookup_opcode(0xA9)

        assert info.mnemonic == Mnemonic.LDA
        assert info.mode == AddressingMode.IMMEDIATE
        assert info.size == 2
        assert info.cycles == 2

    def test_lookup_undocumented(self):
        assert lookup_opcode(0x02) is None
        assert lookup_opcode(0xFF) is None

    def test_lookup_out_of_range(self):
        with pytest.raises(ValueError):
            lookup_opcode(0x100)

    def test_get_instruction_info(self):
        info = get_instruction_info(Mnemonic.JMP, AddressingMode.INDIRECT)

        assert info.opcode == 0x6C
        assert get_instruction_info(Mnemonic.STA, AddressingMode.IMMEDIATE) is None

    def test_branches(self):
        """Exactly the eight conditional branches are flagged."""
        branch_opcodes = {op for op in range(256) if is_branch_opcode(op)}

        assert branch_opcodes == {0x10, 0x30, 0x50, 0x70, 0x90, 0xB0, 0xD0, 0xF0}
        assert len(BRANCH_INSTRUCTIONS) == 8
        assert not is_branch_opcode(0x4C)  # JMP

    def test_flag_effects_cover_all_mnemonics(self):
        assert set(FLAG_EFFECTS) == set(Mnemonic)

    def test_sizes_follow_modes(self):
        for info in OPCODE_TABLE.values():
            assert info.size == 1 + info.mode.operand_size
            assert info.size in (1, 2, 3)


class TestAddressingMode:
    """Tests for addressing mode helpers."""

    @pytest.mark.parametrize("name,mode", [
        ("Implied", AddressingMode.IMPLIED),
        ("implicit", AddressingMode.IMPLIED),
        ("Accumulator", AddressingMode.ACCUMULATOR),
        ("ZeroPageX", AddressingMode.ZERO_PAGE_X),
        ("zero_page_y", AddressingMode.ZERO_PAGE_Y),
        ("Zero Page,X", AddressingMode.ZERO_PAGE_X),
        ("ABSOLUTE", AddressingMode.ABSOLUTE),
        ("(Indirect,X)", AddressingMode.INDEXED_INDIRECT),
        ("IndirectY", AddressingMode.INDIRECT_INDEXED),
        ("indirect_indexed", AddressingMode.INDIRECT_INDEXED),
        ("Relative", AddressingMode.RELATIVE),
    ])
    def test_from_name(self, name, mode):
        assert AddressingMode.from_name(name) == mode

    def test_from_name_unknown(self):
        with pytest.raises(ValueError):
            AddressingMode.from_name("Sideways")

    def test_sizes(self):
        assert AddressingMode.IMPLIED.size == 1
        assert AddressingMode.RELATIVE.size == 2
        assert AddressingMode.INDIRECT.size == 3

    def test_str(self):
        assert str(AddressingMode.ZERO_PAGE_X) == "zero page x"


class TestSignedByte:

    @pytest.mark.parametrize("value,expected", [
        (0x00, 0), (0x05, 5), (0x7F, 127), (0x80, -128), (0xFB, -5), (0xFF, -1),
    ])
    def test_signed_byte(self, value, expected):
        assert signed_byte(value) == expected
