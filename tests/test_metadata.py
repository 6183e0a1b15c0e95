"""
Unit Tests for the Instruction Metadata Loader
==============================================

Covers the bundled 6502 table, structural validation of CSV rows, and the
consistency check against the built-in instruction set.

Copyright (c) 2026 disasm6502 Contributors
"""

import pytest

from disasm6502.cpu import AddressingMode
from disasm6502.errors import MetadataLoadError
from disasm6502.metadata import (
    DEFAULT_METADATA_PATH,
    MetadataTable,
    load_metadata,
    parse_number,
    verify_metadata,
)

HEADER = "opcode,mnemonic,addressing_mode,bytes,cycles,flags\n"


@pytest.fixture
def write_csv(tmp_path):
    """Fixture: write CSV text to a file and return its path."""
    def _write(body, header=HEADER, name="ops.csv"):
        path = tmp_path / name
        path.write_text(header + body, encoding="utf-8")
        return path
    return _write


class TestBundledTable:
    """Tests against the metadata table shipped with the package."""

    def setup_method(self):
        self.table = load_metadata()

    def test_default_path_exists(self):
        assert DEFAULT_METADATA_PATH.is_file()

    def test_row_count(self):
        assert len(self.table) == 151

    def test_opcode_lookup(self):
        record = self.table.for_opcode(0xA9)

        assert record.mnemonic == "LDA"
        assert record.addressing_mode == AddressingMode.IMMEDIATE
        assert record.size == 2
        assert record.cycles == "2"
        assert record.flags == "NZ"

    def test_mnemonic_key_last_row_wins(self):
        """Mnemonic keys keep the last row seen for that mnemonic."""
        record = self.table["LDA"]

        assert record.opcode == 0xBD
        assert record.addressing_mode == AddressingMode.ABSOLUTE_X

    def test_mnemonics(self):
        assert len(self.table.mnemonics) == 56
        assert "JMP" in self.table
        assert self.table.get("XYZ") is None

    def test_consistent_with_builtin(self):
        assert verify_metadata(self.table) == []


class TestLoadMetadata:
    """Tests for CSV parsing and validation."""

    def test_minimal_table(self, write_csv):
        path = write_csv("0xEA,NOP,Implied,1,2,-\n$4C,JMP,Absolute,3,3,-\n96,stx,Zero Page Y,2,4,-\n")
        table = load_metadata(path)

        assert isinstance(table, MetadataTable)
        assert len(table) == 3
        assert table.for_opcode(0x4C).mnemonic == "JMP"
        assert table.for_opcode(96).mnemonic == "STX"
        assert table.for_opcode(96).addressing_mode == AddressingMode.ZERO_PAGE_Y

    def test_blank_lines_skipped(self, write_csv):
        table = load_metadata(write_csv("0xEA,NOP,Implied,1,2,-\n\n0x60,RTS,Implied,1,6,-\n"))

        assert len(table) == 2

    def test_byte_order_mark(self, tmp_path):
        """Spreadsheet exports may start with a UTF-8 byte order mark."""
        path = tmp_path / "bom.csv"
        path.write_bytes(("\ufeff" + HEADER + "0xEA,NOP,Implied,1,2,-\n").encode("utf-8"))
        table = load_metadata(path)

        assert len(table) == 1
        assert table.for_opcode(0xEA).mnemonic == "NOP"

    def test_missing_file(self, tmp_path):
        with pytest.raises(MetadataLoadError) as exc_info:
            load_metadata(tmp_path / "absent.csv")

        assert "absent.csv" in str(exc_info.value)

    def test_empty_file(self, write_csv):
        with pytest.raises(MetadataLoadError):
            load_metadata(write_csv("", header=""))

    def test_wrong_header(self, write_csv):
        with pytest.raises(MetadataLoadError) as exc_info:
            load_metadata(write_csv("0xEA,NOP,Implied,1,2,-\n", header="op,name,mode\n"))

        assert ":1:" in str(exc_info.value)

    def test_wrong_column_count(self, write_csv):
        path = write_csv("0xEA,NOP,Implied,1,2,-\n0x60,RTS,Implied,1\n")
        with pytest.raises(MetadataLoadError) as exc_info:
            load_metadata(path)

        error = exc_info.value
        assert error.location.line == 3
        assert f"{path}:3: error:" in str(error)

    @pytest.mark.parametrize("row", [
        "0xZZ,NOP,Implied,1,2,-",       # unparseable opcode
        "0x100,NOP,Implied,1,2,-",      # opcode out of range
        "0xEA,NOP,Implied,one,2,-",     # unparseable byte count
        "0xEA,NOP,Sideways,1,2,-",      # unknown addressing mode
        "0xA9,LDA,Immediate,3,2,NZ",    # byte count disagrees with mode
        "0xEA,,Implied,1,2,-",          # empty mnemonic
    ])
    def test_invalid_rows(self, write_csv, row):
        with pytest.raises(MetadataLoadError):
            load_metadata(write_csv(row + "\n"))

    def test_duplicate_opcode(self, write_csv):
        path = write_csv("0xEA,NOP,Implied,1,2,-\n0xEA,NOP,Implied,1,2,-\n")
        with pytest.raises(MetadataLoadError) as exc_info:
            load_metadata(path)

        assert "already defined on line 2" in str(exc_info.value)

    def test_parse_number(self):
        assert parse_number("0x1F") == 0x1F
        assert parse_number("$1F") == 0x1F
        assert parse_number(" 31 ") == 31
        with pytest.raises(ValueError):
            parse_number("1F")


class TestVerifyMetadata:
    """Tests for the consistency check."""

    def test_reports_mismatches(self, write_csv):
        table = load_metadata(write_csv(
            "0xA9,LDA,Immediate,2,3,NZ\n"     # wrong cycle count
            "0x02,KIL,Implied,1,2,-\n"        # undocumented opcode
            "0xEA,NOP,Implied,1,2,NZ\n"       # wrong flags
            "0x4C,JSR,Absolute,3,3,-\n"       # wrong mnemonic
        ))
        problems = verify_metadata(table)

        assert any("$A9 LDA" in p and "cycles" in p for p in problems)
        assert any("$02 KIL" in p and "not a documented" in p for p in problems)
        assert any("$EA NOP" in p and "flags" in p for p in problems)
        assert any("$4C JSR" in p and "JMP" in p for p in problems)
        assert any("148 documented opcodes missing" in p for p in problems)

    def test_page_cross_marker_ignored(self, write_csv):
        table = load_metadata(write_csv("0xBD,LDA,AbsoluteX,3,4*,NZ\n"))
        problems = verify_metadata(table)

        assert not any("$BD" in p for p in problems)
