"""Mutable record backing a buffered target."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .identity import Identity, RealFile
from .modes import Mode

Content = Union[str, bytes]


@dataclass(slots=True)
class TargetState:
    """Content, cursor, mode and identity of one target.

    ``length`` is a cache of ``len(content)``; only :meth:`replace_content`
    updates it.
    """

    identity: Identity = field(default_factory=lambda: RealFile(path="", name=""))
    mode: Mode = Mode.READ
    content: Content = ""
    length: int = 0
    cursor: int = 0

    def replace_content(self, content: Content) -> None:
        self.content = content
        self.length = len(content)


def default_state() -> TargetState:
    """Fresh empty, path-less, read-only state."""

    return TargetState()
