"""Whole-file filesystem primitives used to load and persist real targets."""

from __future__ import annotations

import errno
import os
import shutil
import tempfile


def load_file(location: str) -> bytes:
    """Read the entire content of ``location``."""

    with open(location, "rb") as handle:
        return handle.read()


def _default_file_mode() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def persist_file(location: str, data: bytes) -> None:
    """Replace the content of ``location`` with ``data``.

    The bytes go to a temporary sibling first and are moved over the target
    with :func:`os.replace`, so readers never see a half-written file. An
    existing file keeps its permissions; a new one gets the same mode a plain
    ``open(location, "wb")`` would give it.
    """

    directory, name = os.path.split(location)
    if not name:
        raise FileNotFoundError(errno.ENOENT, "No file name to write", location)

    fd, tmp = tempfile.mkstemp(prefix=".", suffix=".tmp", dir=directory or os.curdir)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        if os.path.exists(location):
            shutil.copymode(location, tmp)
        else:
            os.chmod(tmp, _default_file_mode())
        os.replace(tmp, location)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
