"""
disasm6502 Disassembler Module
==============================

Static disassembly of MOS 6502 machine code into an assembly listing.

Usage:
    from disasm6502.disassembler import MOS6502Disassembler

    disasm = MOS6502Disassembler(base_address=0x5000)
    for instr in disasm.iter_instructions(rom_bytes):
        print(instr)

Copyright (c) 2026 disasm6502 Contributors
"""

from .mos6502 import (
    MOS6502Disassembler,
    DisassembledInstruction,
    DATA_BYTE_DIRECTIVE,
    decode_one,
    disassemble,
    format_operand,
)

__all__ = [
    "MOS6502Disassembler",
    "DisassembledInstruction",
    "DATA_BYTE_DIRECTIVE",
    "decode_one",
    "disassemble",
    "format_operand",
]
