"""Recover a line/column position from a strict JSON parser error message."""

from __future__ import annotations

import re
from dataclasses import dataclass

# "... at position 12" (classic message form) or "... (char 12)" (Python's
# json module).  Only the offset is used; line/column are recomputed.
_POSITION_RE = re.compile(r"(?:at position|\(char) ([0-9]+)")
_LINE_BREAKS_RE = re.compile(r"[\r\n]+")


@dataclass(frozen=True)
class PositionInfo:
    """Block-relative position of a parse error.

    All fields are ``0`` when the message carried no offset.
    """

    line: int = 0
    column: int = 0
    position: int = 0


def extract_position(message: str, text: str) -> PositionInfo:
    """Translate the character offset embedded in *message* into a line/column in *text*.

    Runs of line-break characters count as a single break, so blank lines
    inside the block do not advance the line count.  Offsets past the end of
    *text* are tolerated and yield a column past the end of the last line.
    """
    match = _POSITION_RE.search(message)
    if match is None:
        return PositionInfo()

    offset = int(match.group(1))
    lines = _LINE_BREAKS_RE.split(text[:offset])
    return PositionInfo(line=len(lines), column=len(lines[-1]) + 1, position=offset)
