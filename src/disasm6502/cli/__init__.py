"""
disasm6502 Command-Line Interface
=================================

- **disasm6502**: MOS 6502 disassembler (disasm6502.cli.disasm)

Implemented as a Click application; exit codes are defined in
disasm6502.cli.errors.
"""

__all__ = ["disasm"]
