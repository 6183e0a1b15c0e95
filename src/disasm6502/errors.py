"""
disasm6502 Error Hierarchy
==========================

This module defines the exception hierarchy for the disassembler. All
exceptions inherit from DisassemblerError, allowing callers to catch every
package error with a single except clause.

Exception Hierarchy
-------------------
DisassemblerError (base)
├── MetadataLoadError - instruction metadata source missing or malformed
├── BinaryOpenError - target binary cannot be opened or read
└── TruncatedInstructionError - final instruction runs past the buffer end

Metadata and binary errors are precondition failures: they are raised to the
caller and never retried. The library itself never terminates the process;
the command-line layer decides on exit codes (see disasm6502.cli.errors).

Unknown opcode bytes are not errors. They decode as one-byte data.

Copyright (c) 2026 disasm6502 Contributors
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from disasm6502.disassembler.mos6502 import DisassembledInstruction


# =============================================================================
# Base Exception Class
# =============================================================================

class DisassemblerError(Exception):
    """
    Base exception for all disasm6502 errors.

        try:
            lines = disassemble(read_binary("rom.bin"))
        except DisassemblerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class RowLocation:
    """
    A row in a tabular metadata source, for error reporting.

    Attributes:
        filename: Name of the source file
        line: Line number in the file (1-indexed, header is line 1)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Metadata Exceptions
# =============================================================================

class MetadataLoadError(DisassemblerError):
    """
    The instruction metadata source could not be loaded.

    Raised when:
    - The file does not exist or cannot be read
    - The header row is missing or has the wrong columns
    - A row has the wrong number of fields
    - A numeric field (opcode, bytes) cannot be parsed
    - A row is structurally invalid (unknown addressing mode, byte count
      that disagrees with the mode, opcode outside 0-255, duplicate opcode)

    Attributes:
        message: The error description
        location: Row where the problem was found (optional)
    """

    def __init__(self, message: str, location: Optional[RowLocation] = None):
        self.message = message
        self.location = location
        if location:
            super().__init__(f"{location}: error: {message}")
        else:
            super().__init__(f"error: {message}")


# =============================================================================
# Binary Input Exceptions
# =============================================================================

class BinaryOpenError(DisassemblerError):
    """
    The target binary could not be opened or read.

    Attributes:
        path: The path that was requested
        reason: Description of the underlying failure
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot open '{path}': {reason}")


# =============================================================================
# Decode Exceptions
# =============================================================================

class TruncatedInstructionError(DisassemblerError):
    """
    An instruction at the end of the buffer needs bytes that are not there.

    A dangling opcode of a two- or three-byte instruction cannot be completed,
    so decoding stops here rather than reading out of bounds. The bytes that
    were available are kept on the exception as a partial instruction whose
    listing line is marked as truncated, so a caller can still emit it.

    Attributes:
        offset: Buffer offset of the truncated instruction
        address: Display address of the truncated instruction
        required: Bytes the instruction needs
        available: Bytes left in the buffer from offset
        partial: The partial instruction (may be None)
    """

    def __init__(
        self,
        offset: int,
        address: int,
        required: int,
        available: int,
        partial: Optional["DisassembledInstruction"] = None,
    ):
        self.offset = offset
        self.address = address
        self.required = required
        self.available = available
        self.partial = partial
        super().__init__(
            f"truncated instruction at ${address:04X}: needs {required} bytes, "
            f"only {available} available"
        )
