"""Target identities: which backing kind a buffered target addresses."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from .errors import InvalidFilename

MEMORY = "\1"
VOID = "\0"


@dataclass(frozen=True, slots=True)
class RealFile:
    """A file on disk, split into its directory and base name."""

    path: str
    name: str

    @property
    def location(self) -> str:
        return os.path.join(self.path, self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class InMemory:
    """Scratch buffer living only inside the target object."""

    def __str__(self) -> str:
        return "<memory>"


@dataclass(frozen=True, slots=True)
class Void:
    """Sink that discards writes and always reads empty."""

    def __str__(self) -> str:
        return "<void>"


Identity = Union[RealFile, InMemory, Void]
Designator = Union[str, bytes, "os.PathLike[str]"]


def resolve_identity(designator: Designator) -> Identity:
    """Turn a designator (path or sentinel) into a target identity.

    ``MEMORY`` and ``VOID`` select the non-filesystem identities. Anything else
    is a filesystem path; an empty directory component resolves to the current
    working directory.
    """

    if isinstance(designator, (InMemory, Void, RealFile)):
        return designator

    try:
        raw = os.fsdecode(designator)
    except TypeError as exc:
        raise InvalidFilename(designator) from exc
    if raw == MEMORY:
        return InMemory()
    if raw == VOID:
        return Void()

    directory, name = os.path.split(raw)
    if not name:
        raise InvalidFilename(designator)
    return RealFile(path=directory or os.getcwd(), name=name)
