"""Error taxonomy raised by buffered targets."""

from __future__ import annotations

from typing import Any


class TargetError(RuntimeError):
    """Base class for every failure surfaced by a target."""

    def __init__(self, message: str, *, designator: Any = None) -> None:
        super().__init__(message)
        self.designator = designator


class InvalidFilename(TargetError):
    """Raised when no base name can be derived from a file designator."""

    def __init__(self, designator: Any) -> None:
        super().__init__(f'Invalid filename: "{designator}"', designator=designator)


class InvalidMode(TargetError):
    """Raised when a mode masks to neither read nor write."""

    def __init__(self, mode: Any) -> None:
        super().__init__(f'Invalid mode: "{mode}"', designator=mode)
        self.mode = mode


class ReadError(TargetError):
    def __init__(self, designator: Any) -> None:
        super().__init__(f'Could not read from "{designator}"', designator=designator)


class WriteError(TargetError):
    def __init__(self, designator: Any) -> None:
        super().__init__(f'Could not write into "{designator}"', designator=designator)


class EOF(TargetError, EOFError):
    """Raised when reading with the cursor already at the end of content."""

    def __init__(self, designator: Any) -> None:
        super().__init__(f'End Of File "{designator}"', designator=designator)
