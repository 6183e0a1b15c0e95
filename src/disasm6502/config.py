"""
disasm6502 Configuration
========================

Run configuration for a disassembly pass. Values come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

Environment variables (all optional):
    DISASM6502_BASE_ADDRESS: Display base address (hex with 0x/$ or decimal)
    DISASM6502_METADATA: Path to the instruction metadata CSV
    DISASM6502_TARGET: Path to the binary to disassemble
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os

from disasm6502.metadata import DEFAULT_METADATA_PATH

# Load address the listing is displayed at unless configured otherwise
DEFAULT_BASE_ADDRESS = 0x5000

MAX_ADDRESS = 0xFFFF


def parse_address(text: str) -> int:
    """
    Parse an address written as 0x-hex, $-hex or decimal.

    Raises:
        ValueError: If the text is not a number or is outside 0x0000-0xFFFF
    """
    text = text.strip()
    if text.lower().startswith("0x"):
        value = int(text, 16)
    elif text.startswith("$"):
        value = int(text[1:], 16)
    else:
        value = int(text)

    if not 0 <= value <= MAX_ADDRESS:
        raise ValueError(f"address must be 0-65535 (0x0000-0xFFFF), got {text}")
    return value


@dataclass
class DisassemblerConfig:
    """
    Configuration for a disassembly run.

    Attributes:
        base_address: Address of the first byte of the binary (default: $5000)
        metadata_path: Instruction metadata CSV (default: bundled table)
        target_path: Binary to disassemble (default: none, ask the user)
    """

    base_address: int = DEFAULT_BASE_ADDRESS
    metadata_path: Path = field(default_factory=lambda: DEFAULT_METADATA_PATH)
    target_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "DisassemblerConfig":
        """
        Create a DisassemblerConfig from environment variables.

        Invalid values are ignored and the default kept.
        """
        config = cls()

        if address := os.environ.get("DISASM6502_BASE_ADDRESS"):
            try:
                config.base_address = parse_address(address)
            except ValueError:
                pass  # Ignore invalid values

        if metadata := os.environ.get("DISASM6502_METADATA"):
            config.metadata_path = Path(metadata)

        if target := os.environ.get("DISASM6502_TARGET"):
            config.target_path = Path(target)

        return config
