"""
Target binary loading.

The whole file is read into an immutable bytes buffer. There is no header or
magic-number check: every byte is treated as part of the instruction stream.
"""

import logging
from pathlib import Path
from typing import Union

from disasm6502.errors import BinaryOpenError

logger = logging.getLogger(__name__)


def read_binary(path: Union[str, Path]) -> bytes:
    """
    Read a target binary into memory.

    Args:
        path: Path to the binary file

    Returns:
        The file contents

    Raises:
        BinaryOpenError: If the file cannot be opened or read
    """
    path = Path(path)
    if path.is_dir():
        raise BinaryOpenError(path, "is a directory")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise BinaryOpenError(path, e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data
