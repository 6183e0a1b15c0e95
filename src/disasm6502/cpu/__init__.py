"""
disasm6502 CPU Package
======================

CPU architecture definitions shared by the metadata loader and the
disassembler.

Modules:
    mos6502: The documented MOS 6502 instruction set, addressing modes,
             and the 256-entry opcode decode table.

Usage:
    from disasm6502.cpu import (
        AddressingMode,
        Mnemonic,
        InstructionInfo,
        lookup_opcode,
    )
"""

from disasm6502.cpu.mos6502 import (
    # Core types
    AddressingMode,
    Mnemonic,
    InstructionInfo,
    # Instruction tables
    OPCODE_TABLE,
    DECODE_TABLE,
    BRANCH_INSTRUCTIONS,
    FLAG_EFFECTS,
    # Lookup functions
    lookup_opcode,
    get_instruction_info,
    is_branch_opcode,
    signed_byte,
)

__all__ = [
    "AddressingMode",
    "Mnemonic",
    "InstructionInfo",
    "OPCODE_TABLE",
    "DECODE_TABLE",
    "BRANCH_INSTRUCTIONS",
    "FLAG_EFFECTS",
    "lookup_opcode",
    "get_instruction_info",
    "is_branch_opcode",
    "signed_byte",
]
