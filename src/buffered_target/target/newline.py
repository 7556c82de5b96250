"""Line terminator constants and the normalization transform."""

from __future__ import annotations

import os
import re
from typing import AnyStr, Optional, Tuple

EOL = os.linesep
EOL_WIN = "\r\n"
EOL_LINUX = "\n"
EOL_OLD_MAC = "\r"

_TERMINATORS = re.compile(r"\r\n|\r|\n")
_TERMINATORS_BYTES = re.compile(rb"\r\n|\r|\n")
_LINE = re.compile(r"([^\r\n]*)(\r\n?|\n)?")
_LINE_BYTES = re.compile(rb"([^\r\n]*)(\r\n?|\n)?")


def normalize_newlines(data: AnyStr, eol: str = EOL) -> AnyStr:
    """Rewrite every CR LF, lone CR and lone LF in ``data`` to ``eol``."""

    if isinstance(data, bytes):
        return _TERMINATORS_BYTES.sub(eol.encode("ascii"), data)
    return _TERMINATORS.sub(eol, data)


def match_line(data: AnyStr, start: int) -> Optional[Tuple[AnyStr, AnyStr]]:
    """Return ``(line, terminator)`` beginning at ``start``.

    The terminator is empty when the line runs to the end of ``data``.
    """

    pattern = _LINE_BYTES if isinstance(data, bytes) else _LINE
    match = pattern.match(data, start)
    if match is None:  # pragma: no cover - the pattern matches the empty string
        return None
    return match.group(1), match.group(2) or data[:0]
