"""Access mode bit-set for buffered targets."""

from __future__ import annotations

from enum import IntFlag

from .errors import InvalidMode


class Mode(IntFlag):
    """Bits accepted by :class:`~buffered_target.target.BufferedTarget`.

    ``READ`` and ``WRITE`` gate real-file access; ``BINARY`` keeps content as
    ``bytes`` and disables newline normalization.
    """

    READ = 1
    WRITE = 2
    BINARY = 4
    ALL = READ | WRITE | BINARY


def resolve_mode(mode: int) -> Mode:
    """Mask ``mode`` to the recognized bits, rejecting read/write-less results."""

    try:
        masked = Mode(int(mode) & Mode.ALL)
    except (TypeError, ValueError) as exc:
        raise InvalidMode(mode) from exc
    if not masked & (Mode.READ | Mode.WRITE):
        raise InvalidMode(mode)
    return masked
