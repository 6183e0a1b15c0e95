"""
Unit Tests for Run Configuration and Binary Loading
"""

from pathlib import Path

import pytest

from disasm6502.binary import read_binary
from disasm6502.config import DEFAULT_BASE_ADDRESS, DisassemblerConfig, parse_address
from disasm6502.errors import BinaryOpenError, DisassemblerError
from disasm6502.metadata import DEFAULT_METADATA_PATH


class TestParseAddress:

    @pytest.mark.parametrize("text,expected", [
        ("0x5000", 0x5000),
        ("0XC000", 0xC000),
        ("$0800", 0x0800),
        ("$ffff", 0xFFFF),
        ("4096", 4096),
        ("0", 0),
        (" 0x10 ", 0x10),
    ])
    def test_valid(self, text, expected):
        assert parse_address(text) == expected

    @pytest.mark.parametrize("text", ["0x10000", "65536", "-1", "hello", "$", "0xZZ"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_address(text)


class TestDisassemblerConfig:

    def test_defaults(self):
        config = DisassemblerConfig()

        assert config.base_address == DEFAULT_BASE_ADDRESS == 0x5000
        assert config.metadata_path == DEFAULT_METADATA_PATH
        assert config.target_path is None

    def test_from_env_empty(self):
        config = DisassemblerConfig.from_env()

        assert config == DisassemblerConfig()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DISASM6502_BASE_ADDRESS", "$C000")
        monkeypatch.setenv("DISASM6502_METADATA", "/tmp/ops.csv")
        monkeypatch.setenv("DISASM6502_TARGET", "rom.bin")
        config = DisassemblerConfig.from_env()

        assert config.base_address == 0xC000
        assert config.metadata_path == Path("/tmp/ops.csv")
        assert config.target_path == Path("rom.bin")

    def test_from_env_ignores_invalid_address(self, monkeypatch):
        monkeypatch.setenv("DISASM6502_BASE_ADDRESS", "0x1FFFF")
        config = DisassemblerConfig.from_env()

        assert config.base_address == DEFAULT_BASE_ADDRESS


class TestReadBinary:

    def test_reads_all_bytes(self, write_binary):
        path = write_binary([0xA9, 0x01, 0x00, 0xFF])

        assert read_binary(path) == b"\xA9\x01\x00\xFF"

    def test_empty_file(self, write_binary):
        assert read_binary(write_binary(b"")) == b""

    def test_accepts_str_path(self, write_binary):
        assert read_binary(str(write_binary([0xEA]))) == b"\xEA"

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.bin"
        with pytest.raises(BinaryOpenError) as exc_info:
            read_binary(path)

        error = exc_info.value
        assert isinstance(error, DisassemblerError)
        assert error.path == path
        assert "missing.bin" in str(error)

    def test_directory(self, tmp_path):
        with pytest.raises(BinaryOpenError) as exc_info:
            read_binary(tmp_path)

        assert exc_info.value.reason == "is a directory"
