"""Cursor-based access to real files, in-memory buffers and the void sink."""

from __future__ import annotations

import operator
from typing import Any, List, Optional

from buffered_target.runtime import telemetry

from .errors import EOF, ReadError, WriteError
from .identity import Designator, Identity, InMemory, RealFile, Void, resolve_identity
from .modes import Mode, resolve_mode
from .newline import EOL, match_line, normalize_newlines
from .state import Content, default_state
from .storage import load_file, persist_file

LOGGER_NAME = "buffered_target.target"


class BufferedTarget:
    """Whole-content buffer with a single read/write cursor.

    Real files are loaded in one piece at construction (when the mode allows
    reading) and written back in one piece by :meth:`save`; nothing touches
    the filesystem in between. Text targets hold ``str`` with newlines
    normalized to ``newline``; binary targets hold ``bytes`` untouched.

    Every :meth:`write` rebuilds the buffer from prefix + data + suffix, so a
    write costs O(size).
    """

    def __init__(
        self,
        designator: Designator,
        mode: int = Mode.READ,
        *,
        encoding: str = "utf-8",
        newline: str = EOL,
    ) -> None:
        self._encoding = encoding
        self._newline = newline
        self._state = default_state()
        self._state.mode = resolve_mode(mode)
        self._state.identity = resolve_identity(designator)
        self._state.replace_content(self._empty())

        if isinstance(self._state.identity, RealFile) and self._state.mode & Mode.READ:
            self._load(self._state.identity, designator)

    def _load(self, identity: RealFile, designator: Designator) -> None:
        with telemetry.span(
            "target::load",
            logger_name=LOGGER_NAME,
            component="target",
            metadata={"target": identity.location},
        ) as handle:
            try:
                raw = load_file(identity.location)
                content: Content = raw if self.binary else raw.decode(self._encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise ReadError(designator) from exc

            self._state.replace_content(content)
            if not self.binary:
                self.fix_eol()
            handle.add_metadata("length", self._state.length)

    # -- introspection -------------------------------------------------

    @property
    def identity(self) -> Identity:
        return self._state.identity

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def binary(self) -> bool:
        return bool(self._state.mode & Mode.BINARY)

    @property
    def path(self) -> Optional[str]:
        """Full filesystem location, or ``None`` for memory and void targets."""

        identity = self._state.identity
        if isinstance(identity, RealFile):
            return identity.location
        return None

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def newline(self) -> str:
        return self._newline

    def pos(self) -> int:
        return self._state.cursor

    def size(self) -> int:
        return self._state.length

    def eof(self) -> bool:
        # the void never runs out, it just keeps yielding nothing
        if isinstance(self._state.identity, Void):
            return False
        return self._state.cursor >= self._state.length

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(identity={self._state.identity!r}, "
            f"mode={self._state.mode!r}, pos={self._state.cursor}, "
            f"size={self._state.length})"
        )

    # -- newline handling ----------------------------------------------

    def fix_eol(self) -> "BufferedTarget":
        """Normalize every line terminator in the buffer and rewind to 0."""

        self._state.replace_content(
            normalize_newlines(self._state.content, self._newline)
        )
        self._state.cursor = 0
        return self

    # -- positioning ---------------------------------------------------

    def seek(self, offset: Any) -> "BufferedTarget":
        """Move the cursor.

        Offsets past the end clamp to :meth:`size`. Any negative offset jumps
        to the last unit (``size() - 1``), or to 0 on an empty buffer.
        Non-integer offsets are ignored.
        """

        if isinstance(self._state.identity, Void):
            return self
        if isinstance(offset, bool):
            offset = None
        try:
            offset = operator.index(offset)
        except TypeError:
            telemetry.record_event(
                "target::seek_ignored",
                level="debug",
                data={"offset": offset},
                logger_name=LOGGER_NAME,
            )
            return self

        length = self._state.length
        if offset >= length:
            self._state.cursor = length
        elif offset >= 0:
            self._state.cursor = offset
        else:
            self._state.cursor = max(length - 1, 0)
        return self

    def start(self) -> "BufferedTarget":
        return self.seek(0)

    def end(self) -> "BufferedTarget":
        return self.seek(-1)

    # -- reading -------------------------------------------------------

    def read(self, size: int = -1) -> Content:
        """Return up to ``size`` units from the cursor; negative reads the rest."""

        size = operator.index(size)
        if isinstance(self._state.identity, Void) or size == 0:
            return self._empty()
        self._check_readable()

        state = self._state
        remaining = state.length - state.cursor
        if size < 0 or size > remaining:
            size = remaining

        start = state.cursor
        state.cursor += size
        return state.content[start : start + size]

    def readln(self, trim: bool = True) -> Content:
        """Return the next line, without its terminator when ``trim`` is set.

        CR LF, CR and LF each count as one terminator.
        """

        if isinstance(self._state.identity, Void):
            return self._empty()
        self._check_readable()

        state = self._state
        if not state.content:
            return self._empty()

        matched = match_line(state.content, state.cursor)
        if matched is None:  # pragma: no cover - match_line always matches
            return self._empty()
        line, terminator = matched
        state.cursor += len(line) + len(terminator)
        return line if trim else line + terminator

    def read_bytes(self, size: int = -1) -> List[int]:
        data = self.read(size)
        if isinstance(data, bytes):
            return list(data)
        return [ord(char) for char in data]

    def read_all(self) -> Content:
        return self._state.content

    def _check_readable(self) -> None:
        state = self._state
        if isinstance(state.identity, RealFile) and not state.mode & Mode.READ:
            raise ReadError(str(state.identity))
        if self.eof():
            raise EOF(str(state.identity))

    # -- writing -------------------------------------------------------

    def write(self, data: Content) -> "BufferedTarget":
        """Insert ``data`` at the cursor and move the cursor past it."""

        state = self._state
        if isinstance(state.identity, Void) or not data:
            return self
        if isinstance(state.identity, RealFile) and not state.mode & Mode.WRITE:
            raise WriteError(str(state.identity))

        data = self._coerce(data)
        if not self.binary:
            data = normalize_newlines(data, self._newline)

        prefix = state.content[: state.cursor]
        suffix = state.content[state.cursor :]
        state.replace_content(prefix + data + suffix)
        state.cursor = len(prefix) + len(data)
        return self

    def writeln(self, data: Content = "") -> "BufferedTarget":
        if isinstance(self._state.identity, Void):
            return self
        terminator: Content = self._newline
        if self.binary:
            terminator = self._newline.encode("ascii")
        return self.write(self._coerce(data) + terminator)

    def write_bytes(self, *codes: int) -> "BufferedTarget":
        """Write each code as one unit: an octet in binary mode, ``chr`` otherwise."""

        if self.binary:
            return self.write(bytes(codes))
        return self.write("".join(chr(code) for code in codes))

    def _coerce(self, data: Any) -> Content:
        """Convert ``data`` to the buffer type, str for text and bytes for binary."""

        try:
            if self.binary:
                if isinstance(data, str):
                    return data.encode(self._encoding)
                if isinstance(data, (bytes, bytearray, memoryview)):
                    return bytes(data)
            else:
                if isinstance(data, str):
                    return data
                if isinstance(data, (bytes, bytearray, memoryview)):
                    return bytes(data).decode(self._encoding)
        except UnicodeError as exc:
            raise WriteError(str(self._state.identity)) from exc
        raise TypeError(
            f"{type(self).__name__} cannot write {type(data).__name__!r} data"
        )

    def _empty(self) -> Content:
        return b"" if self.binary else ""

    # -- persistence ---------------------------------------------------

    def save(self) -> bool:
        """Persist the buffer.

        Returns ``False`` for the void (nothing was kept) and ``True`` for
        memory targets (nothing to do) and for real files once written.
        """

        identity = self._state.identity
        if isinstance(identity, Void):
            return False
        if isinstance(identity, InMemory):
            return True

        with telemetry.span(
            "target::save",
            logger_name=LOGGER_NAME,
            component="target",
            metadata={"target": identity.location, "length": self._state.length},
        ):
            content = self._state.content
            try:
                data = content if isinstance(content, bytes) else content.encode(
                    self._encoding
                )
                persist_file(identity.location, data)
            except (OSError, UnicodeEncodeError) as exc:
                raise WriteError(str(identity)) from exc
        return True

    def destroy(self) -> None:
        """Drop content and identity, leaving an empty read-only target."""

        with telemetry.span(
            "target::destroy",
            logger_name=LOGGER_NAME,
            component="target",
            metadata={"target": str(self._state.identity)},
        ):
            self._state = default_state()


__all__ = ["BufferedTarget", "LOGGER_NAME"]
