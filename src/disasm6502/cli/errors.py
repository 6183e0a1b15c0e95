"""
Unified CLI Error Handling
==========================

Maps package exceptions to exit codes and diagnostics. This is the only place
that terminates the process; library code raises and never exits.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from disasm6502.errors import (
    BinaryOpenError,
    DisassemblerError,
    MetadataLoadError,
    TruncatedInstructionError,
)


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    DECODE_ERROR = 1     # Listing ended in a truncated instruction
    INVALID_ARGS = 2     # Invalid arguments
    INTERNAL_ERROR = 3   # Unexpected internal error
    METADATA_ERROR = 4   # Instruction metadata could not be loaded
    BINARY_ERROR = 5     # Target binary could not be opened or read


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, MetadataLoadError):
        click.echo(f"Opcodes failed to load: {error}", err=True)
        sys.exit(ExitCode.METADATA_ERROR)

    elif isinstance(error, BinaryOpenError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.BINARY_ERROR)

    elif isinstance(error, TruncatedInstructionError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DECODE_ERROR)

    elif isinstance(error, DisassemblerError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DECODE_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error.format_message()}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
