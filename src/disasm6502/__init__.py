"""
disasm6502 - Static Disassembler for the MOS 6502
=================================================

Turns a raw 6502 binary into an assembly listing. For each instruction the
listing shows its address, raw bytes, mnemonic and operand; conditional
branches are annotated with their absolute target address.

Main Components
---------------
- **cpu**: The documented 6502 instruction set and 256-entry decode table
- **disassembler**: The decode-and-format engine
- **metadata**: Loader for the CSV instruction metadata table
- **config**: Run configuration (base address, paths, environment)
- **cli**: The ``disasm6502`` command

Quick Start
-----------
    >>> from disasm6502 import MOS6502Disassembler
    >>> disasm = MOS6502Disassembler(base_address=0x5000)
    >>> disasm.decode_one(bytes([0xA9, 0x01]), 0)
    ('5000 A9 01    LDA #$01', 2)

Or from the shell:
    $ disasm6502 rom.bin --address 0x5000

Copyright (c) 2026 disasm6502 Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from disasm6502.errors import (
    DisassemblerError,
    MetadataLoadError,
    BinaryOpenError,
    TruncatedInstructionError,
)
from disasm6502.cpu import AddressingMode, Mnemonic, InstructionInfo
from disasm6502.config import DEFAULT_BASE_ADDRESS, DisassemblerConfig
from disasm6502.metadata import MetadataTable, OpcodeMetadata, load_metadata, verify_metadata
from disasm6502.binary import read_binary
from disasm6502.disassembler import (
    MOS6502Disassembler,
    DisassembledInstruction,
    decode_one,
    disassemble,
)

__all__ = [
    "__version__",
    # Errors
    "DisassemblerError",
    "MetadataLoadError",
    "BinaryOpenError",
    "TruncatedInstructionError",
    # CPU
    "AddressingMode",
    "Mnemonic",
    "InstructionInfo",
    # Configuration
    "DEFAULT_BASE_ADDRESS",
    "DisassemblerConfig",
    # Metadata
    "MetadataTable",
    "OpcodeMetadata",
    "load_metadata",
    "verify_metadata",
    # Input
    "read_binary",
    # Disassembler
    "MOS6502Disassembler",
    "DisassembledInstruction",
    "decode_one",
    "disassemble",
]
