"""Cursor-based buffers over real files, memory and the void."""

from .target import (
    EOF,
    MEMORY,
    VOID,
    BufferedTarget,
    InvalidFilename,
    InvalidMode,
    Mode,
    ReadError,
    TargetError,
    WriteError,
)

__all__ = [
    "target",
    "runtime",
    "BufferedTarget",
    "Mode",
    "MEMORY",
    "VOID",
    "TargetError",
    "InvalidFilename",
    "InvalidMode",
    "ReadError",
    "WriteError",
    "EOF",
]

__version__ = "0.1.0"
