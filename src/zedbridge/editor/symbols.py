"""Minimal readers for .NET assembly and debug-symbol file headers.

Only enough of each format is parsed to answer two questions: is this
DLL a managed assembly, and is this PDB in the portable format the
engine can load.
"""

from __future__ import annotations

import struct
from pathlib import Path

# Metadata root signature that opens every portable PDB.
PORTABLE_PDB_SIGNATURE = b"BSJB"

_PE32_MAGIC = 0x10B
_PE32_PLUS_MAGIC = 0x20B
_CLI_HEADER_INDEX = 14


def is_portable_symbol_file(path: str | Path) -> bool:
    """True when *path* is a portable PDB (as opposed to a Windows PDB)."""
    try:
        with open(path, "rb") as handle:
            return handle.read(4) == PORTABLE_PDB_SIGNATURE
    except OSError:
        return False


def is_assembly(path: str | Path) -> bool:
    """True when *path* is a PE image carrying a CLI (managed) header."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return False
    try:
        return _has_cli_header(data)
    except struct.error:
        return False


def _has_cli_header(data: bytes) -> bool:
    if data[:2] != b"MZ":
        return False
    (pe_offset,) = struct.unpack_from("<I", data, 0x3C)
    if data[pe_offset:pe_offset + 4] != b"PE\0\0":
        return False

    optional = pe_offset + 4 + 20
    (magic,) = struct.unpack_from("<H", data, optional)
    if magic == _PE32_MAGIC:
        count_offset, directories = optional + 92, optional + 96
    elif magic == _PE32_PLUS_MAGIC:
        count_offset, directories = optional + 108, optional + 112
    else:
        return False

    (directory_count,) = struct.unpack_from("<I", data, count_offset)
    if directory_count <= _CLI_HEADER_INDEX:
        return False
    rva, size = struct.unpack_from("<II", data, directories + _CLI_HEADER_INDEX * 8)
    return rva != 0 and size != 0
