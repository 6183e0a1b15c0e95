"""
Shared pytest fixtures for the disasm6502 tests.
"""

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DISASM6502_* variables from the outer shell out of the tests."""
    for name in ("DISASM6502_BASE_ADDRESS", "DISASM6502_METADATA", "DISASM6502_TARGET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_binary(tmp_path):
    """Fixture: write bytes to a file under tmp_path and return its path."""
    def _write(data, name="test.bin"):
        path = tmp_path / name
        path.write_bytes(bytes(data))
        return path
    return _write
