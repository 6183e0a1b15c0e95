"""
disasm6502 - MOS 6502 Disassembler Command-Line Interface
=========================================================

Usage Examples
--------------
Disassemble a ROM image displayed at the default base address ($5000):
    $ disasm6502 rom.bin

With base address:
    $ disasm6502 rom.bin --address 0xC000

Limit number of instructions:
    $ disasm6502 rom.bin --count 20

Output to file:
    $ disasm6502 rom.bin -o listing.asm

Hex dump with disassembly:
    $ disasm6502 rom.bin --hex

Without an INPUT_FILE the target is taken from DISASM6502_TARGET, or asked
for interactively.

Copyright (c) 2026 disasm6502 Contributors
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from disasm6502 import __version__
from disasm6502.binary import read_binary
from disasm6502.cli.errors import ExitCode, handle_cli_exception
from disasm6502.config import MAX_ADDRESS, DisassemblerConfig, parse_address
from disasm6502.disassembler import MOS6502Disassembler
from disasm6502.errors import TruncatedInstructionError
from disasm6502.metadata import load_metadata, verify_metadata

logger = logging.getLogger(__name__)


def _hex_dump(data: bytes, base_address: int) -> List[str]:
    """Format a commented 16-bytes-per-row hex dump."""
    lines = ["; Hex dump:", "; " + "-" * 60]
    for i in range(0, len(data), 16):
        chunk = data[i:i + 16]
        hex_str = " ".join(f"{b:02X}" for b in chunk)
        ascii_str = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        lines.append(f"; ${(base_address + i) & MAX_ADDRESS:04X}: {hex_str:<48} {ascii_str}")
    lines.append("; " + "-" * 60)
    lines.append("")
    return lines


def _write_output(lines: List[str], output: Optional[Path]) -> None:
    result = "\n".join(lines) + "\n"
    if output:
        output.write_text(result, encoding="utf-8")
        logger.info(f"Output written to: {output}")
    else:
        click.echo(result, nl=False)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-a", "--address",
    type=str,
    default=None,
    help="Base address (hex with 0x or $ prefix, or decimal). Default: 0x5000",
)
@click.option(
    "-m", "--metadata",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Instruction metadata CSV (default: bundled 6502 table)",
)
@click.option(
    "-c", "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "--hex",
    "show_hex",
    is_flag=True,
    help="Include hex dump before disassembly",
)
@click.option(
    "--header/--no-header",
    default=False,
    help="Start the listing with a comment header (default: disabled)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="disasm6502")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    address: Optional[str],
    metadata: Optional[Path],
    count: Optional[int],
    show_hex: bool,
    header: bool,
    verbose: bool,
) -> None:
    """
    Disassemble MOS 6502 machine code.

    INPUT_FILE is the binary file to disassemble. Every byte from the start
    of the file is decoded as an instruction stream.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    config = DisassemblerConfig.from_env()

    if address is not None:
        try:
            config.base_address = parse_address(address)
        except ValueError as e:
            handle_cli_exception(click.BadParameter(str(e), param_hint="'--address'"))
    if metadata is not None:
        config.metadata_path = metadata
    if input_file is not None:
        config.target_path = input_file
    if config.target_path is None:
        config.target_path = Path(click.prompt("Binary file to disassemble", err=True))

    try:
        table = load_metadata(config.metadata_path)
        for problem in verify_metadata(table):
            logger.warning(f"{table.source}: {problem}")

        data = read_binary(config.target_path)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    logger.debug(f"Input file: {config.target_path} ({len(data)} bytes)")
    logger.debug(f"Base address: ${config.base_address:04X}")

    output_lines = []

    if header:
        output_lines.append(f"; Disassembly of {config.target_path.name}")
        output_lines.append(f"; Size: {len(data)} bytes")
        output_lines.append(f"; Base address: ${config.base_address:04X}")
        output_lines.append("")

    if show_hex:
        output_lines.extend(_hex_dump(data, config.base_address))

    disasm = MOS6502Disassembler(base_address=config.base_address)
    failure: Optional[Exception] = None
    try:
        for instr in disasm.iter_instructions(data, count=count):
            output_lines.append(instr.format_line())
    except TruncatedInstructionError as e:
        if e.partial is not None:
            output_lines.append(e.partial.format_line())
        failure = e

    try:
        _write_output(output_lines, output)
    except OSError as e:
        click.echo(f"Error writing {output}: {e}", err=True)
        sys.exit(ExitCode.INTERNAL_ERROR)

    if failure is not None:
        handle_cli_exception(failure, verbose=verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
