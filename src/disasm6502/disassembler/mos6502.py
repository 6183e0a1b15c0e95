r"""
MOS 6502 Disassembler
=====================

Decodes 6502 machine code into an assembly listing, one line per instruction:

    AAAA OO PP QQ MNEMONIC OPERAND[\t\t; $TTTT]

- AAAA: display address (base address + buffer offset), 4 hex digits
- OO PP QQ: the instruction's raw bytes, blank-padded to three slots
- MNEMONIC OPERAND: assembly text for the addressing mode
- $TTTT: absolute target, appended for the eight conditional branches only

The decoder is static. It starts at offset 0, treats every byte as the start
of an instruction, and advances by each instruction's length. Opcode bytes
with no documented instruction are listed as one-byte data (".db $nn") so
decoding always makes progress. The only failure is an instruction at the
end of the buffer whose operand bytes are missing.

Operand Formatting
------------------
Two-byte operands are stored little-endian. They are printed high byte first
(the second byte read, then the first), giving the conventional $hhll form:

    8D 00 20    STA $2000

Branch operands are printed as the raw displacement byte. The annotation
gives the target, computed with the displacement as a signed 8-bit value
relative to the address after the two-byte branch:

    5000 90 FB    BCC $FB\t\t; $4FFD

Hex digits are upper case throughout, so listings differ in letter case from
lower-case disassemblers fed the same bytes.

Addresses live in the 16-bit address space. Both the displayed instruction
address and branch targets wrap past $FFFF to $0000.

Usage:
    disasm = MOS6502Disassembler(base_address=0x5000)

    line, length = disasm.decode_one(data, 0)

    for line in disasm.disassemble_lines(data):
        print(line)

Copyright (c) 2026 disasm6502 Contributors
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from disasm6502.config import DEFAULT_BASE_ADDRESS
from disasm6502.cpu import AddressingMode, lookup_opcode, signed_byte
from disasm6502.errors import TruncatedInstructionError

logger = logging.getLogger(__name__)

# Pseudo-instruction used for opcode bytes with no documented instruction
DATA_BYTE_DIRECTIVE = ".db"

TRUNCATED_MARKER = "truncated"

# Widest instruction, in bytes; the listing always shows this many byte slots
MAX_INSTRUCTION_SIZE = 3

ADDRESS_MASK = 0xFFFF


# =============================================================================
# Operand Formatting Rules
# =============================================================================
# "{}" is replaced by the operand value: "$nn" for one-byte operands,
# "$hhll" for two-byte operands.

_OPERAND_TEMPLATES = {
    AddressingMode.IMPLIED: "",
    AddressingMode.ACCUMULATOR: "A",
    AddressingMode.IMMEDIATE: "#{}",
    AddressingMode.ZERO_PAGE: "{}",
    AddressingMode.ZERO_PAGE_X: "{},X",
    AddressingMode.ZERO_PAGE_Y: "{},Y",
    AddressingMode.ABSOLUTE: "{}",
    AddressingMode.ABSOLUTE_X: "{},X",
    AddressingMode.ABSOLUTE_Y: "{},Y",
    AddressingMode.INDIRECT: "({})",
    AddressingMode.INDEXED_INDIRECT: "({},X)",
    AddressingMode.INDIRECT_INDEXED: "({}),Y",
    AddressingMode.RELATIVE: "{}",
}


def format_byte(value: int) -> str:
    """Format an 8-bit operand as $nn."""
    return f"${value:02X}"


def format_word(low: int, high: int) -> str:
    """
    Format a little-endian 16-bit operand as $hhll.

    The high byte is the second operand byte in memory and is printed first.
    """
    return f"${high:02X}{low:02X}"


def format_operand(mode: AddressingMode, operand_bytes: bytes) -> str:
    """
    Render the operand text for an addressing mode.

    Args:
        mode: Addressing mode of the instruction
        operand_bytes: The bytes after the opcode (length must match the mode)

    Returns:
        Operand text, empty for implied instructions
    """
    template = _OPERAND_TEMPLATES[mode]
    if mode.operand_size == 0:
        return template
    if mode.operand_size == 1:
        return template.format(format_byte(operand_bytes[0]))
    return template.format(format_word(operand_bytes[0], operand_bytes[1]))


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    Represents a single decoded 6502 instruction.

    Attributes:
        address: Display address of the instruction
        offset: Offset of the opcode byte in the buffer
        opcode: The opcode byte
        mnemonic: Instruction mnemonic, or ".db" for a data byte
        mode: Addressing mode (None for a data byte)
        operand_bytes: Raw operand bytes (0-2)
        operand_str: Formatted operand text
        size: Bytes consumed by this instruction (1, 2 or 3)
        raw_bytes: All bytes of the instruction
        branch_target: Absolute target address, for conditional branches
        truncated: True if the buffer ended before the operand bytes
    """
    address: int
    offset: int
    opcode: int
    mnemonic: str
    mode: Optional[AddressingMode]
    operand_bytes: bytes
    operand_str: str
    size: int
    raw_bytes: bytes
    branch_target: Optional[int] = None
    truncated: bool = False

    @property
    def text(self) -> str:
        """Assembly text: mnemonic and operand."""
        if self.operand_str:
            return f"{self.mnemonic} {self.operand_str}"
        return self.mnemonic

    @property
    def comment(self) -> str:
        """Trailing comment text, empty if there is none."""
        if self.truncated:
            return TRUNCATED_MARKER
        if self.branch_target is not None:
            return f"${self.branch_target:04X}"
        return ""

    @property
    def is_data(self) -> bool:
        return self.mode is None

    def format_line(self) -> str:
        """Format as a listing line: ADDRESS BYTES MNEMONIC OPERAND [; comment]"""
        slots = [f"{b:02X}" for b in self.raw_bytes]
        slots += ["  "] * (MAX_INSTRUCTION_SIZE - len(slots))

        line = f"{self.address:04X} {' '.join(slots)} {self.text}"
        if self.comment:
            line += f"\t\t; {self.comment}"
        return line

    def __str__(self) -> str:
        return self.format_line()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": f"${self.address:04X}",
            "address_int": self.address,
            "offset": self.offset,
            "opcode": f"${self.opcode:02X}",
            "mnemonic": self.mnemonic,
            "mode": str(self.mode) if self.mode else "data",
            "operand": self.operand_str,
            "size": self.size,
            "bytes": [f"${b:02X}" for b in self.raw_bytes],
            "branch_target": self.branch_target,
            "truncated": self.truncated,
        }


# =============================================================================
# 6502 Disassembler
# =============================================================================

class MOS6502Disassembler:
    """
    Disassembler for MOS 6502 machine code.

    Opcode bytes are classified through the 256-entry decode table in
    disasm6502.cpu, so every byte value has exactly one outcome: a documented
    instruction or a one-byte data directive.

    Attributes:
        base_address: Address at which offset 0 of the buffer is displayed
    """

    def __init__(self, base_address: int = DEFAULT_BASE_ADDRESS):
        """
        Initialize the disassembler.

        Args:
            base_address: Display address of the first buffer byte
        """
        self.base_address = base_address

    def branch_target(self, offset: int, size: int, displacement: int) -> int:
        """
        Absolute target of a relative branch.

        Args:
            offset: Buffer offset of the branch opcode
            size: Branch instruction size (2)
            displacement: The raw displacement byte (0-255)

        Returns:
            base + offset + size + signed displacement, in the 16-bit address space
        """
        return (self.base_address + offset + size + signed_byte(displacement)) & ADDRESS_MASK

    def decode_instruction(self, data: bytes, offset: int) -> DisassembledInstruction:
        """
        Decode the instruction starting at a buffer offset.

        Args:
            data: Byte buffer containing machine code
            offset: Offset of the opcode byte

        Returns:
            DisassembledInstruction with decoded information

        Raises:
            ValueError: If offset is not inside the buffer
            TruncatedInstructionError: If the operand bytes run past the end
        """
        if not 0 <= offset < len(data):
            raise ValueError(f"Offset {offset} outside data of length {len(data)}")

        opcode = data[offset]
        address = (self.base_address + offset) & ADDRESS_MASK
        info = lookup_opcode(opcode)

        if info is None:
            # Undocumented opcode - list it as a data byte
            return DisassembledInstruction(
                address=address,
                offset=offset,
                opcode=opcode,
                mnemonic=DATA_BYTE_DIRECTIVE,
                mode=None,
                operand_bytes=bytes(),
                operand_str=format_byte(opcode),
                size=1,
                raw_bytes=bytes([opcode]),
            )

        mnemonic = str(info.mnemonic)
        size = info.size
        available = len(data) - offset

        if size > available:
            partial = DisassembledInstruction(
                address=address,
                offset=offset,
                opcode=opcode,
                mnemonic=mnemonic,
                mode=info.mode,
                operand_bytes=bytes(data[offset + 1:]),
                operand_str="???",
                size=available,
                raw_bytes=bytes(data[offset:]),
                truncated=True,
            )
            logger.debug(f"{mnemonic} at ${address:04X} needs {size} bytes, {available} left")
            raise TruncatedInstructionError(
                offset=offset,
                address=address,
                required=size,
                available=available,
                partial=partial,
            )

        raw_bytes = bytes(data[offset:offset + size])
        operand_bytes = raw_bytes[1:]

        target = None
        if info.is_branch:
            target = self.branch_target(offset, size, operand_bytes[0])

        return DisassembledInstruction(
            address=address,
            offset=offset,
            opcode=opcode,
            mnemonic=mnemonic,
            mode=info.mode,
            operand_bytes=operand_bytes,
            operand_str=format_operand(info.mode, operand_bytes),
            size=size,
            raw_bytes=raw_bytes,
            branch_target=target,
        )

    def decode_one(self, data: bytes, offset: int) -> Tuple[str, int]:
        """
        Decode one instruction into a listing line.

        Returns:
            Tuple of (formatted line, instruction length). The length is what
            the caller must advance the offset by.

        Raises:
            ValueError: If offset is not inside the buffer
            TruncatedInstructionError: If the operand bytes run past the end
        """
        instr = self.decode_instruction(data, offset)
        return instr.format_line(), instr.size

    def iter_instructions(
        self,
        data: bytes,
        count: Optional[int] = None,
        max_bytes: Optional[int] = None
    ) -> Iterator[DisassembledInstruction]:
        """
        Decode instructions sequentially from offset 0.

        Instructions are yielded as they are decoded, so a consumer that
        writes each one out keeps everything before a truncated tail.

        Args:
            data: Byte buffer containing machine code
            count: Maximum number of instructions (None = all)
            max_bytes: Stop once this many bytes have been consumed (None = all)

        Raises:
            TruncatedInstructionError: If the last instruction is incomplete
        """
        offset = 0
        instructions = 0

        while offset < len(data):
            if count is not None and instructions >= count:
                break
            if max_bytes is not None and offset >= max_bytes:
                break

            instr = self.decode_instruction(data, offset)
            yield instr

            offset += instr.size
            instructions += 1

        logger.debug(f"Decoded {instructions} instructions from {offset} bytes")

    def disassemble(
        self,
        data: bytes,
        count: Optional[int] = None,
        max_bytes: Optional[int] = None
    ) -> List[DisassembledInstruction]:
        """
        Disassemble a buffer into a list of instructions.

        Raises:
            TruncatedInstructionError: If the last instruction is incomplete
        """
        return list(self.iter_instructions(data, count=count, max_bytes=max_bytes))

    def disassemble_lines(
        self,
        data: bytes,
        count: Optional[int] = None,
        max_bytes: Optional[int] = None
    ) -> List[str]:
        """Disassemble a buffer into listing lines, in address order."""
        return [
            instr.format_line()
            for instr in self.iter_instructions(data, count=count, max_bytes=max_bytes)
        ]

    def disassemble_to_text(self, data: bytes, count: Optional[int] = None) -> str:
        """
        Disassemble and return the listing as one string.

        Returns:
            Multi-line string with one line per instruction
        """
        return "\n".join(self.disassemble_lines(data, count=count))


# =============================================================================
# Convenience Functions
# =============================================================================

def decode_one(
    data: bytes,
    offset: int,
    base_address: int = DEFAULT_BASE_ADDRESS
) -> Tuple[str, int]:
    """Decode one instruction; see MOS6502Disassembler.decode_one."""
    return MOS6502Disassembler(base_address).decode_one(data, offset)


def disassemble(data: bytes, base_address: int = DEFAULT_BASE_ADDRESS) -> List[str]:
    """Disassemble a whole buffer into listing lines."""
    return MOS6502Disassembler(base_address).disassemble_lines(data)
