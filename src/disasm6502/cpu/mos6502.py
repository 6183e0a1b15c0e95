"""
MOS 6502 Instruction Set Definition
===================================

This module defines the official MOS 6502 instruction set: every mnemonic,
every addressing mode, and the 151 documented opcode encodings together with
their sizes and base cycle counts.

The 6502 is little-endian: the low byte of a 16-bit operand is stored first,
immediately after the opcode, followed by the high byte.

Addressing Modes
----------------
1. **IMPLIED**: No operand (e.g., CLC, RTS) - 1 byte
2. **ACCUMULATOR**: Operates on A (e.g., ASL A) - 1 byte
3. **IMMEDIATE**: Literal byte (e.g., LDA #$01) - 2 bytes
4. **ZERO_PAGE**: Address $00-$FF (e.g., LDA $10) - 2 bytes
5. **ZERO_PAGE_X / ZERO_PAGE_Y**: Zero page + index (e.g., LDA $10,X) - 2 bytes
6. **ABSOLUTE**: Full 16-bit address (e.g., STA $2000) - 3 bytes
7. **ABSOLUTE_X / ABSOLUTE_Y**: Absolute + index (e.g., LDA $2000,Y) - 3 bytes
8. **INDIRECT**: JMP through a pointer (JMP ($FFFC)) - 3 bytes
9. **INDEXED_INDIRECT**: (zp,X) - 2 bytes
10. **INDIRECT_INDEXED**: (zp),Y - 2 bytes
11. **RELATIVE**: Signed 8-bit branch displacement - 2 bytes

Opcode bytes that have no documented instruction are left undefined here.
The decode table maps them to None so callers can render them as data.

Reference
---------
- MOS MCS6500 Microcomputer Family Programming Manual (1976)
- http://www.6502.org/tutorials/6502opcodes.html

Copyright (c) 2026 disasm6502 Contributors
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    6502 addressing modes.

    Each mode fixes the number of operand bytes that follow the opcode and
    how the operand is written in assembly source.
    """
    IMPLIED = auto()            # CLC
    ACCUMULATOR = auto()        # ASL A
    IMMEDIATE = auto()          # LDA #$nn
    ZERO_PAGE = auto()          # LDA $nn
    ZERO_PAGE_X = auto()        # LDA $nn,X
    ZERO_PAGE_Y = auto()        # LDX $nn,Y
    ABSOLUTE = auto()           # LDA $hhll
    ABSOLUTE_X = auto()         # LDA $hhll,X
    ABSOLUTE_Y = auto()         # LDA $hhll,Y
    INDIRECT = auto()           # JMP ($hhll)
    INDEXED_INDIRECT = auto()   # LDA ($nn,X)
    INDIRECT_INDEXED = auto()   # LDA ($nn),Y
    RELATIVE = auto()           # BNE $nn

    @property
    def operand_size(self) -> int:
        """Number of operand bytes following the opcode (0, 1 or 2)."""
        return _OPERAND_SIZES[self]

    @property
    def size(self) -> int:
        """Total instruction size in bytes, opcode included."""
        return 1 + self.operand_size

    @classmethod
    def from_name(cls, name: str) -> "AddressingMode":
        """
        Look up an addressing mode by a loosely written name.

        Matching ignores case, spaces, underscores and punctuation, so
        "ZeroPageX", "zero_page_x" and "Zero Page,X" all resolve to
        ZERO_PAGE_X. Common aliases ("implicit", "(indirect,x)") are accepted.

        Raises:
            ValueError: If the name does not match any addressing mode
        """
        key = "".join(ch for ch in name.lower() if ch.isalnum())
        try:
            return _MODE_ALIASES[key]
        except KeyError:
            raise ValueError(f"unknown addressing mode '{name}'") from None

    def __str__(self) -> str:
        """Return human-readable name for messages."""
        return self.name.lower().replace("_", " ")


_OPERAND_SIZES = {
    AddressingMode.IMPLIED: 0,
    AddressingMode.ACCUMULATOR: 0,
    AddressingMode.IMMEDIATE: 1,
    AddressingMode.ZERO_PAGE: 1,
    AddressingMode.ZERO_PAGE_X: 1,
    AddressingMode.ZERO_PAGE_Y: 1,
    AddressingMode.ABSOLUTE: 2,
    AddressingMode.ABSOLUTE_X: 2,
    AddressingMode.ABSOLUTE_Y: 2,
    AddressingMode.INDIRECT: 2,
    AddressingMode.INDEXED_INDIRECT: 1,
    AddressingMode.INDIRECT_INDEXED: 1,
    AddressingMode.RELATIVE: 1,
}

_MODE_ALIASES = {
    "implied": AddressingMode.IMPLIED,
    "implicit": AddressingMode.IMPLIED,
    "accumulator": AddressingMode.ACCUMULATOR,
    "immediate": AddressingMode.IMMEDIATE,
    "zeropage": AddressingMode.ZERO_PAGE,
    "zeropagex": AddressingMode.ZERO_PAGE_X,
    "zeropagey": AddressingMode.ZERO_PAGE_Y,
    "absolute": AddressingMode.ABSOLUTE,
    "absolutex": AddressingMode.ABSOLUTE_X,
    "absolutey": AddressingMode.ABSOLUTE_Y,
    "indirect": AddressingMode.INDIRECT,
    "indexedindirect": AddressingMode.INDEXED_INDIRECT,
    "indirectx": AddressingMode.INDEXED_INDIRECT,
    "indirectindexed": AddressingMode.INDIRECT_INDEXED,
    "indirecty": AddressingMode.INDIRECT_INDEXED,
    "relative": AddressingMode.RELATIVE,
}


# =============================================================================
# Mnemonic Enumeration
# =============================================================================

class Mnemonic(Enum):
    """The 56 documented 6502 instruction mnemonics."""
    ADC = "ADC"
    AND = "AND"
    ASL = "ASL"
    BCC = "BCC"
    BCS = "BCS"
    BEQ = "BEQ"
    BIT = "BIT"
    BMI = "BMI"
    BNE = "BNE"
    BPL = "BPL"
    BRK = "BRK"
    BVC = "BVC"
    BVS = "BVS"
    CLC = "CLC"
    CLD = "CLD"
    CLI = "CLI"
    CLV = "CLV"
    CMP = "CMP"
    CPX = "CPX"
    CPY = "CPY"
    DEC = "DEC"
    DEX = "DEX"
    DEY = "DEY"
    EOR = "EOR"
    INC = "INC"
    INX = "INX"
    INY = "INY"
    JMP = "JMP"
    JSR = "JSR"
    LDA = "LDA"
    LDX = "LDX"
    LDY = "LDY"
    LSR = "LSR"
    NOP = "NOP"
    ORA = "ORA"
    PHA = "PHA"
    PHP = "PHP"
    PLA = "PLA"
    PLP = "PLP"
    ROL = "ROL"
    ROR = "ROR"
    RTI = "RTI"
    RTS = "RTS"
    SBC = "SBC"
    SEC = "SEC"
    SED = "SED"
    SEI = "SEI"
    STA = "STA"
    STX = "STX"
    STY = "STY"
    TAX = "TAX"
    TAY = "TAY"
    TSX = "TSX"
    TXA = "TXA"
    TXS = "TXS"
    TYA = "TYA"

    def __str__(self) -> str:
        return self.value


# Conditional branches on carry, zero, negative and overflow, set and clear
BRANCH_INSTRUCTIONS = frozenset({
    Mnemonic.BPL, Mnemonic.BMI,
    Mnemonic.BVC, Mnemonic.BVS,
    Mnemonic.BCC, Mnemonic.BCS,
    Mnemonic.BNE, Mnemonic.BEQ,
})

# Status flags each instruction may change ("-" for none)
FLAG_EFFECTS: dict[Mnemonic, str] = {
    Mnemonic.ADC: "NVZC", Mnemonic.AND: "NZ", Mnemonic.ASL: "NZC",
    Mnemonic.BCC: "-", Mnemonic.BCS: "-", Mnemonic.BEQ: "-",
    Mnemonic.BIT: "NVZ", Mnemonic.BMI: "-", Mnemonic.BNE: "-",
    Mnemonic.BPL: "-", Mnemonic.BRK: "BI", Mnemonic.BVC: "-",
    Mnemonic.BVS: "-", Mnemonic.CLC: "C", Mnemonic.CLD: "D",
    Mnemonic.CLI: "I", Mnemonic.CLV: "V", Mnemonic.CMP: "NZC",
    Mnemonic.CPX: "NZC", Mnemonic.CPY: "NZC", Mnemonic.DEC: "NZ",
    Mnemonic.DEX: "NZ", Mnemonic.DEY: "NZ", Mnemonic.EOR: "NZ",
    Mnemonic.INC: "NZ", Mnemonic.INX: "NZ", Mnemonic.INY: "NZ",
    Mnemonic.JMP: "-", Mnemonic.JSR: "-", Mnemonic.LDA: "NZ",
    Mnemonic.LDX: "NZ", Mnemonic.LDY: "NZ", Mnemonic.LSR: "NZC",
    Mnemonic.NOP: "-", Mnemonic.ORA: "NZ", Mnemonic.PHA: "-",
    Mnemonic.PHP: "-", Mnemonic.PLA: "NZ", Mnemonic.PLP: "NVDIZC",
    Mnemonic.ROL: "NZC", Mnemonic.ROR: "NZC", Mnemonic.RTI: "NVDIZC",
    Mnemonic.RTS: "-", Mnemonic.SBC: "NVZC", Mnemonic.SEC: "C",
    Mnemonic.SED: "D", Mnemonic.SEI: "I", Mnemonic.STA: "-",
    Mnemonic.STX: "-", Mnemonic.STY: "-", Mnemonic.TAX: "NZ",
    Mnemonic.TAY: "NZ", Mnemonic.TSX: "NZ", Mnemonic.TXA: "NZ",
    Mnemonic.TXS: "-", Mnemonic.TYA: "NZ",
}


# =============================================================================
# Instruction Information
# =============================================================================

@dataclass(frozen=True)
class InstructionInfo:
    """
    One documented opcode encoding.

    Attributes:
        opcode: The opcode byte
        mnemonic: Instruction mnemonic
        mode: Addressing mode of this encoding
        cycles: Base cycle count (page crossings and taken branches add more)
    """
    opcode: int
    mnemonic: Mnemonic
    mode: AddressingMode
    cycles: int

    @property
    def size(self) -> int:
        """Total instruction size in bytes."""
        return self.mode.size

    @property
    def operand_size(self) -> int:
        return self.mode.operand_size

    @property
    def is_branch(self) -> bool:
        return self.mnemonic in BRANCH_INSTRUCTIONS

    def __repr__(self) -> str:
        return (
            f"InstructionInfo(opcode=${self.opcode:02X}, mnemonic={self.mnemonic}, "
            f"mode={self.mode.name}, cycles={self.cycles})"
        )


# =============================================================================
# Opcode Table
# =============================================================================
# Key: (mnemonic, addressing_mode)
# Value: (opcode, base cycles)
# =============================================================================

_M = Mnemonic
_A = AddressingMode

_ENCODINGS: dict[tuple[Mnemonic, AddressingMode], tuple[int, int]] = {
    # Load / store
    (_M.LDA, _A.IMMEDIATE): (0xA9, 2),
    (_M.LDA, _A.ZERO_PAGE): (0xA5, 3),
    (_M.LDA, _A.ZERO_PAGE_X): (0xB5, 4),
    (_M.LDA, _A.ABSOLUTE): (0xAD, 4),
    (_M.LDA, _A.ABSOLUTE_X): (0xBD, 4),
    (_M.LDA, _A.ABSOLUTE_Y): (0xB9, 4),
    (_M.LDA, _A.INDEXED_INDIRECT): (0xA1, 6),
    (_M.LDA, _A.INDIRECT_INDEXED): (0xB1, 5),
    (_M.LDX, _A.IMMEDIATE): (0xA2, 2),
    (_M.LDX, _A.ZERO_PAGE): (0xA6, 3),
    (_M.LDX, _A.ZERO_PAGE_Y): (0xB6, 4),
    (_M.LDX, _A.ABSOLUTE): (0xAE, 4),
    (_M.LDX, _A.ABSOLUTE_Y): (0xBE, 4),
    (_M.LDY, _A.IMMEDIATE): (0xA0, 2),
    (_M.LDY, _A.ZERO_PAGE): (0xA4, 3),
    (_M.LDY, _A.ZERO_PAGE_X): (0xB4, 4),
    (_M.LDY, _A.ABSOLUTE): (0xAC, 4),
    (_M.LDY, _A.ABSOLUTE_X): (0xBC, 4),
    (_M.STA, _A.ZERO_PAGE): (0x85, 3),
    (_M.STA, _A.ZERO_PAGE_X): (0x95, 4),
    (_M.STA, _A.ABSOLUTE): (0x8D, 4),
    (_M.STA, _A.ABSOLUTE_X): (0x9D, 5),
    (_M.STA, _A.ABSOLUTE_Y): (0x99, 5),
    (_M.STA, _A.INDEXED_INDIRECT): (0x81, 6),
    (_M.STA, _A.INDIRECT_INDEXED): (0x91, 6),
    (_M.STX, _A.ZERO_PAGE): (0x86, 3),
    (_M.STX, _A.ZERO_PAGE_Y): (0x96, 4),
    (_M.STX, _A.ABSOLUTE): (0x8E, 4),
    (_M.STY, _A.ZERO_PAGE): (0x84, 3),
    (_M.STY, _A.ZERO_PAGE_X): (0x94, 4),
    (_M.STY, _A.ABSOLUTE): (0x8C, 4),

    # Register transfers
    (_M.TAX, _A.IMPLIED): (0xAA, 2),
    (_M.TAY, _A.IMPLIED): (0xA8, 2),
    (_M.TXA, _A.IMPLIED): (0x8A, 2),
    (_M.TYA, _A.IMPLIED): (0x98, 2),
    (_M.TSX, _A.IMPLIED): (0xBA, 2),
    (_M.TXS, _A.IMPLIED): (0x9A, 2),

    # Stack
    (_M.PHA, _A.IMPLIED): (0x48, 3),
    (_M.PHP, _A.IMPLIED): (0x08, 3),
    (_M.PLA, _A.IMPLIED): (0x68, 4),
    (_M.PLP, _A.IMPLIED): (0x28, 4),

    # Logical
    (_M.AND, _A.IMMEDIATE): (0x29, 2),
    (_M.AND, _A.ZERO_PAGE): (0x25, 3),
    (_M.AND, _A.ZERO_PAGE_X): (0x35, 4),
    (_M.AND, _A.ABSOLUTE): (0x2D, 4),
    (_M.AND, _A.ABSOLUTE_X): (0x3D, 4),
    (_M.AND, _A.ABSOLUTE_Y): (0x39, 4),
    (_M.AND, _A.INDEXED_INDIRECT): (0x21, 6),
    (_M.AND, _A.INDIRECT_INDEXED): (0x31, 5),
    (_M.EOR, _A.IMMEDIATE): (0x49, 2),
    (_M.EOR, _A.ZERO_PAGE): (0x45, 3),
    (_M.EOR, _A.ZERO_PAGE_X): (0x55, 4),
    (_M.EOR, _A.ABSOLUTE): (0x4D, 4),
    (_M.EOR, _A.ABSOLUTE_X): (0x5D, 4),
    (_M.EOR, _A.ABSOLUTE_Y): (0x59, 4),
    (_M.EOR, _A.INDEXED_INDIRECT): (0x41, 6),
    (_M.EOR, _A.INDIRECT_INDEXED): (0x51, 5),
    (_M.ORA, _A.IMMEDIATE): (0x09, 2),
    (_M.ORA, _A.ZERO_PAGE): (0x05, 3),
    (_M.ORA, _A.ZERO_PAGE_X): (0x15, 4),
    (_M.ORA, _A.ABSOLUTE): (0x0D, 4),
    (_M.ORA, _A.ABSOLUTE_X): (0x1D, 4),
    (_M.ORA, _A.ABSOLUTE_Y): (0x19, 4),
    (_M.ORA, _A.INDEXED_INDIRECT): (0x01, 6),
    (_M.ORA, _A.INDIRECT_INDEXED): (0x11, 5),
    (_M.BIT, _A.ZERO_PAGE): (0x24, 3),
    (_M.BIT, _A.ABSOLUTE): (0x2C, 4),

    # Arithmetic
    (_M.ADC, _A.IMMEDIATE): (0x69, 2),
    (_M.ADC, _A.ZERO_PAGE): (0x65, 3),
    (_M.ADC, _A.ZERO_PAGE_X): (0x75, 4),
    (_M.ADC, _A.ABSOLUTE): (0x6D, 4),
    (_M.ADC, _A.ABSOLUTE_X): (0x7D, 4),
    (_M.ADC, _A.ABSOLUTE_Y): (0x79, 4),
    (_M.ADC, _A.INDEXED_INDIRECT): (0x61, 6),
    (_M.ADC, _A.INDIRECT_INDEXED): (0x71, 5),
    (_M.SBC, _A.IMMEDIATE): (0xE9, 2),
    (_M.SBC, _A.ZERO_PAGE): (0xE5, 3),
    (_M.SBC, _A.ZERO_PAGE_X): (0xF5, 4),
    (_M.SBC, _A.ABSOLUTE): (0xED, 4),
    (_M.SBC, _A.ABSOLUTE_X): (0xFD, 4),
    (_M.SBC, _A.ABSOLUTE_Y): (0xF9, 4),
    (_M.SBC, _A.INDEXED_INDIRECT): (0xE1, 6),
    (_M.SBC, _A.INDIRECT_INDEXED): (0xF1, 5),
    (_M.CMP, _A.IMMEDIATE): (0xC9, 2),
    (_M.CMP, _A.ZERO_PAGE): (0xC5, 3),
    (_M.CMP, _A.ZERO_PAGE_X): (0xD5, 4),
    (_M.CMP, _A.ABSOLUTE): (0xCD, 4),
    (_M.CMP, _A.ABSOLUTE_X): (0xDD, 4),
    (_M.CMP, _A.ABSOLUTE_Y): (0xD9, 4),
    (_M.CMP, _A.INDEXED_INDIRECT): (0xC1, 6),
    (_M.CMP, _A.INDIRECT_INDEXED): (0xD1, 5),
    (_M.CPX, _A.IMMEDIATE): (0xE0, 2),
    (_M.CPX, _A.ZERO_PAGE): (0xE4, 3),
    (_M.CPX, _A.ABSOLUTE): (0xEC, 4),
    (_M.CPY, _A.IMMEDIATE): (0xC0, 2),
    (_M.CPY, _A.ZERO_PAGE): (0xC4, 3),
    (_M.CPY, _A.ABSOLUTE): (0xCC, 4),

    # Increments / decrements
    (_M.INC, _A.ZERO_PAGE): (0xE6, 5),
    (_M.INC, _A.ZERO_PAGE_X): (0xF6, 6),
    (_M.INC, _A.ABSOLUTE): (0xEE, 6),
    (_M.INC, _A.ABSOLUTE_X): (0xFE, 7),
    (_M.INX, _A.IMPLIED): (0xE8, 2),
    (_M.INY, _A.IMPLIED): (0xC8, 2),
    (_M.DEC, _A.ZERO_PAGE): (0xC6, 5),
    (_M.DEC, _A.ZERO_PAGE_X): (0xD6, 6),
    (_M.DEC, _A.ABSOLUTE): (0xCE, 6),
    (_M.DEC, _A.ABSOLUTE_X): (0xDE, 7),
    (_M.DEX, _A.IMPLIED): (0xCA, 2),
    (_M.DEY, _A.IMPLIED): (0x88, 2),

    # Shifts and rotates
    (_M.ASL, _A.ACCUMULATOR): (0x0A, 2),
    (_M.ASL, _A.ZERO_PAGE): (0x06, 5),
    (_M.ASL, _A.ZERO_PAGE_X): (0x16, 6),
    (_M.ASL, _A.ABSOLUTE): (0x0E, 6),
    (_M.ASL, _A.ABSOLUTE_X): (0x1E, 7),
    (_M.LSR, _A.ACCUMULATOR): (0x4A, 2),
    (_M.LSR, _A.ZERO_PAGE): (0x46, 5),
    (_M.LSR, _A.ZERO_PAGE_X): (0x56, 6),
    (_M.LSR, _A.ABSOLUTE): (0x4E, 6),
    (_M.LSR, _A.ABSOLUTE_X): (0x5E, 7),
    (_M.ROL, _A.ACCUMULATOR): (0x2A, 2),
    (_M.ROL, _A.ZERO_PAGE): (0x26, 5),
    (_M.ROL, _A.ZERO_PAGE_X): (0x36, 6),
    (_M.ROL, _A.ABSOLUTE): (0x2E, 6),
    (_M.ROL, _A.ABSOLUTE_X): (0x3E, 7),
    (_M.ROR, _A.ACCUMULATOR): (0x6A, 2),
    (_M.ROR, _A.ZERO_PAGE): (0x66, 5),
    (_M.ROR, _A.ZERO_PAGE_X): (0x76, 6),
    (_M.ROR, _A.ABSOLUTE): (0x6E, 6),
    (_M.ROR, _A.ABSOLUTE_X): (0x7E, 7),

    # Jumps and calls
    (_M.JMP, _A.ABSOLUTE): (0x4C, 3),
    (_M.JMP, _A.INDIRECT): (0x6C, 5),
    (_M.JSR, _A.ABSOLUTE): (0x20, 6),
    (_M.RTS, _A.IMPLIED): (0x60, 6),

    # Branches (one extra cycle if taken, two if a page is crossed)
    (_M.BPL, _A.RELATIVE): (0x10, 2),
    (_M.BMI, _A.RELATIVE): (0x30, 2),
    (_M.BVC, _A.RELATIVE): (0x50, 2),
    (_M.BVS, _A.RELATIVE): (0x70, 2),
    (_M.BCC, _A.RELATIVE): (0x90, 2),
    (_M.BCS, _A.RELATIVE): (0xB0, 2),
    (_M.BNE, _A.RELATIVE): (0xD0, 2),
    (_M.BEQ, _A.RELATIVE): (0xF0, 2),

    # Status flag changes
    (_M.CLC, _A.IMPLIED): (0x18, 2),
    (_M.CLD, _A.IMPLIED): (0xD8, 2),
    (_M.CLI, _A.IMPLIED): (0x58, 2),
    (_M.CLV, _A.IMPLIED): (0xB8, 2),
    (_M.SEC, _A.IMPLIED): (0x38, 2),
    (_M.SED, _A.IMPLIED): (0xF8, 2),
    (_M.SEI, _A.IMPLIED): (0x78, 2),

    # System
    (_M.BRK, _A.IMPLIED): (0x00, 7),
    (_M.NOP, _A.IMPLIED): (0xEA, 2),
    (_M.RTI, _A.IMPLIED): (0x40, 6),
}

OPCODE_TABLE: dict[tuple[Mnemonic, AddressingMode], InstructionInfo] = {
    (mnemonic, mode): InstructionInfo(opcode, mnemonic, mode, cycles)
    for (mnemonic, mode), (opcode, cycles) in _ENCODINGS.items()
}

del _M, _A


def _build_decode_table() -> tuple[Optional[InstructionInfo], ...]:
    """
    Invert OPCODE_TABLE into a 256-entry tuple indexed by opcode byte.

    Every byte value has an entry; undocumented opcodes map to None.

    Raises:
        ValueError: If two encodings share an opcode byte or an opcode
                    falls outside 0x00-0xFF
    """
    slots: list[Optional[InstructionInfo]] = [None] * 256

    for info in OPCODE_TABLE.values():
        if not 0 <= info.opcode <= 0xFF:
            raise ValueError(f"opcode {info.opcode:#x} out of byte range")
        if slots[info.opcode] is not None:
            raise ValueError(
                f"opcode ${info.opcode:02X} assigned to both "
                f"{slots[info.opcode].mnemonic} and {info.mnemonic}"
            )
        slots[info.opcode] = info

    return tuple(slots)


DECODE_TABLE: tuple[Optional[InstructionInfo], ...] = _build_decode_table()


# =============================================================================
# Lookup Functions
# =============================================================================

def lookup_opcode(opcode: int) -> Optional[InstructionInfo]:
    """
    Return the instruction encoded by an opcode byte, or None if undocumented.

    Raises:
        ValueError: If opcode is not a byte value
    """
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode must be 0-255, got {opcode}")
    return DECODE_TABLE[opcode]


def get_instruction_info(
    mnemonic: Mnemonic,
    mode: AddressingMode
) -> Optional[InstructionInfo]:
    """Return the encoding for a mnemonic/mode pair, or None if invalid."""
    return OPCODE_TABLE.get((mnemonic, mode))


def is_branch_opcode(opcode: int) -> bool:
    """Return True if the opcode is one of the eight relative branches."""
    info = lookup_opcode(opcode)
    return info is not None and info.is_branch


def signed_byte(value: int) -> int:
    """Interpret an unsigned byte as a two's complement value (-128..127)."""
    return value - 0x100 if value & 0x80 else value
