"""Buffered targets over real files, memory buffers and the void sink."""

from .errors import EOF, InvalidFilename, InvalidMode, ReadError, TargetError, WriteError
from .identity import MEMORY, VOID, Identity, InMemory, RealFile, Void, resolve_identity
from .modes import Mode, resolve_mode
from .newline import EOL, EOL_LINUX, EOL_OLD_MAC, EOL_WIN, normalize_newlines
from .state import TargetState, default_state
from .target import BufferedTarget

__all__ = [
    "BufferedTarget",
    "TargetState",
    "default_state",
    "Mode",
    "resolve_mode",
    "Identity",
    "RealFile",
    "InMemory",
    "Void",
    "MEMORY",
    "VOID",
    "resolve_identity",
    "EOL",
    "EOL_WIN",
    "EOL_LINUX",
    "EOL_OLD_MAC",
    "normalize_newlines",
    "TargetError",
    "InvalidFilename",
    "InvalidMode",
    "ReadError",
    "WriteError",
    "EOF",
]
