"""
Instruction Metadata Table
==========================

Loads the 6502 instruction metadata table from a CSV source. The table is a
readiness gate: a disassembly run requires it to load cleanly, and it is
cross-checked against the built-in instruction set, but decoding itself uses
the closed opcode table in disasm6502.cpu.

CSV Format
----------
A header row followed by one row per opcode encoding:

    opcode,mnemonic,addressing_mode,bytes,cycles,flags
    0xA9,LDA,Immediate,2,2,NZ
    0xBD,LDA,AbsoluteX,3,4*,NZ

- opcode: decimal, 0x-prefixed or $-prefixed hex, 0-255
- mnemonic: instruction mnemonic text
- addressing_mode: addressing mode name (see AddressingMode.from_name)
- bytes: total instruction length, 1-3, consistent with the addressing mode
- cycles: cycle count text ("*" marks a page-crossing penalty)
- flags: status flags changed ("-" for none)

A copy covering all 151 documented opcodes ships with the package.
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from disasm6502.cpu import FLAG_EFFECTS, OPCODE_TABLE, AddressingMode, lookup_opcode
from disasm6502.errors import MetadataLoadError, RowLocation

logger = logging.getLogger(__name__)

METADATA_COLUMNS = ("opcode", "mnemonic", "addressing_mode", "bytes", "cycles", "flags")

DEFAULT_METADATA_PATH = Path(__file__).parent / "data" / "6502ops.csv"


# =============================================================================
# Data Structures
# =============================================================================

@dataclass(frozen=True)
class OpcodeMetadata:
    """
    One row of the metadata table.

    Attributes:
        opcode: Numeric opcode byte
        mnemonic: Mnemonic text as written in the source
        addressing_mode: Parsed addressing mode
        size: Instruction length in bytes (the "bytes" column)
        cycles: Cycle count text
        flags: Flag effect text
    """
    opcode: int
    mnemonic: str
    addressing_mode: AddressingMode
    size: int
    cycles: str
    flags: str


class MetadataTable:
    """
    Read-only view over loaded metadata rows.

    Rows are reachable by mnemonic (the last row seen for a mnemonic wins,
    since most mnemonics have several encodings) and by opcode byte (which
    is unique).
    """

    def __init__(self, records: List[OpcodeMetadata], source: str = "<memory>"):
        self.source = source
        self._records = tuple(records)
        self._by_mnemonic: Dict[str, OpcodeMetadata] = {}
        self._by_opcode: Dict[int, OpcodeMetadata] = {}
        for record in self._records:
            self._by_mnemonic[record.mnemonic] = record
            self._by_opcode[record.opcode] = record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[OpcodeMetadata]:
        return iter(self._records)

    def __contains__(self, mnemonic: object) -> bool:
        return mnemonic in self._by_mnemonic

    def __getitem__(self, mnemonic: str) -> OpcodeMetadata:
        return self._by_mnemonic[mnemonic]

    def get(self, mnemonic: str) -> Optional[OpcodeMetadata]:
        return self._by_mnemonic.get(mnemonic)

    def for_opcode(self, opcode: int) -> Optional[OpcodeMetadata]:
        """Return the row for an opcode byte, or None if absent."""
        return self._by_opcode.get(opcode)

    @property
    def mnemonics(self) -> Dict[str, OpcodeMetadata]:
        """Mnemonic-keyed mapping (copy)."""
        return dict(self._by_mnemonic)

    def __repr__(self) -> str:
        return f"MetadataTable({len(self)} rows from {self.source})"


# =============================================================================
# Loading
# =============================================================================

def parse_number(text: str) -> int:
    """
    Parse a numeric field: decimal, 0x-prefixed hex, or $-prefixed hex.

    Raises:
        ValueError: If the text is not a number
    """
    text = text.strip()
    if text.startswith("$"):
        return int(text[1:], 16)
    if text.lower().startswith("0x"):
        return int(text, 16)
    return int(text, 10)


def _parse_row(row: List[str], location: RowLocation) -> OpcodeMetadata:
    """Convert one CSV row to an OpcodeMetadata, validating its structure."""
    if len(row) != len(METADATA_COLUMNS):
        raise MetadataLoadError(
            f"expected {len(METADATA_COLUMNS)} fields, found {len(row)}",
            location,
        )

    opcode_text, mnemonic, mode_text, size_text, cycles, flags = (
        field.strip() for field in row
    )

    try:
        opcode = parse_number(opcode_text)
    except ValueError:
        raise MetadataLoadError(f"invalid opcode '{opcode_text}'", location) from None
    if not 0 <= opcode <= 0xFF:
        raise MetadataLoadError(f"opcode {opcode_text} out of range 0-255", location)

    try:
        size = parse_number(size_text)
    except ValueError:
        raise MetadataLoadError(f"invalid byte count '{size_text}'", location) from None

    if not mnemonic:
        raise MetadataLoadError("empty mnemonic", location)

    try:
        mode = AddressingMode.from_name(mode_text)
    except ValueError as e:
        raise MetadataLoadError(str(e), location) from None

    if size != mode.size:
        raise MetadataLoadError(
            f"{mnemonic} {mode} must be {mode.size} bytes, table says {size}",
            location,
        )

    return OpcodeMetadata(
        opcode=opcode,
        mnemonic=mnemonic.upper(),
        addressing_mode=mode,
        size=size,
        cycles=cycles,
        flags=flags,
    )


def load_metadata(path: Union[str, Path, None] = None) -> MetadataTable:
    """
    Load the instruction metadata table from a CSV file.

    Args:
        path: CSV file to read (default: the bundled 6502ops.csv)

    Returns:
        MetadataTable with every row of the source

    Raises:
        MetadataLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path) if path is not None else DEFAULT_METADATA_PATH
    filename = str(path)
    records: List[OpcodeMetadata] = []
    seen: Dict[int, int] = {}

    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f)

            header = next(reader, None)
            if header is None:
                raise MetadataLoadError("metadata source is empty", RowLocation(filename, 1))
            columns = tuple(name.strip().lower() for name in header)
            if columns != METADATA_COLUMNS:
                raise MetadataLoadError(
                    f"expected columns {','.join(METADATA_COLUMNS)}, found {','.join(columns)}",
                    RowLocation(filename, 1),
                )

            for row in reader:
                if not any(field.strip() for field in row):
                    continue
                location = RowLocation(filename, reader.line_num)
                record = _parse_row(row, location)

                if record.opcode in seen:
                    raise MetadataLoadError(
                        f"opcode ${record.opcode:02X} already defined on line {seen[record.opcode]}",
                        location,
                    )
                seen[record.opcode] = reader.line_num
                records.append(record)

    except OSError as e:
        raise MetadataLoadError(
            f"cannot read metadata source '{filename}': {e.strerror or e}"
        ) from e
    except UnicodeDecodeError as e:
        raise MetadataLoadError(f"metadata source '{filename}' is not UTF-8 text: {e}") from e
    except csv.Error as e:
        raise MetadataLoadError(f"malformed CSV in '{filename}': {e}") from e

    logger.debug(f"Loaded {len(records)} metadata rows from {filename}")
    return MetadataTable(records, source=filename)


# =============================================================================
# Consistency Check
# =============================================================================

def _cycle_count(text: str) -> Optional[int]:
    digits = "".join(ch for ch in text if ch.isdigit())
    return int(digits) if digits else None


def _flag_set(text: str) -> set:
    return {ch for ch in text.upper() if ch.isalpha()}


def verify_metadata(table: MetadataTable) -> List[str]:
    """
    Compare a loaded table with the built-in instruction set.

    Returns:
        List of discrepancy messages (empty if the table agrees)
    """
    problems = []

    for record in table:
        info = lookup_opcode(record.opcode)
        tag = f"${record.opcode:02X} {record.mnemonic}"

        if info is None:
            problems.append(f"{tag}: not a documented 6502 opcode")
            continue
        if record.mnemonic != info.mnemonic.value:
            problems.append(f"{tag}: built-in mnemonic is {info.mnemonic}")
        if record.addressing_mode != info.mode:
            problems.append(f"{tag}: mode {record.addressing_mode}, built-in is {info.mode}")
        if _cycle_count(record.cycles) != info.cycles:
            problems.append(f"{tag}: {record.cycles} cycles, built-in is {info.cycles}")
        if _flag_set(record.flags) != _flag_set(FLAG_EFFECTS[info.mnemonic]):
            problems.append(
                f"{tag}: flags '{record.flags}', built-in is '{FLAG_EFFECTS[info.mnemonic]}'"
            )

    missing = sorted(
        info.opcode for info in OPCODE_TABLE.values()
        if table.for_opcode(info.opcode) is None
    )
    if missing:
        listed = ", ".join(f"${op:02X}" for op in missing)
        problems.append(f"{len(missing)} documented opcodes missing: {listed}")

    return problems
