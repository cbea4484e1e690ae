"""Adapters around the strict (``json``) and relaxed (``json5``) parsers."""

from __future__ import annotations

import json
import re
from typing import Any

import json5

# Strings are matched first so constants inside them are skipped.
_CONSTANT_RE = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)')

# json5 reports failures as "<string>:3 Unexpected "}" at column 7".
_JSON5_POSITION_RE = re.compile(r":([0-9]+) .* at column ([0-9]+)")


class RelaxedJSONError(ValueError):
    """A JSON5 syntax error with block-relative, 1-based line and column.

    Both numbers are ``0`` when the underlying parser gave no position.
    """

    def __init__(self, message: str, line_number: int = 0, column_number: int = 0) -> None:
        self.message = message
        self.line_number = line_number
        self.column_number = column_number
        super().__init__(message)


def parse_strict(text: str) -> Any:
    """Parse standard JSON.  Raises :class:`json.JSONDecodeError`.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected; the json module
    would otherwise accept them.
    """
    return json.loads(text, parse_constant=lambda name: _reject_constant(name, text))


def _reject_constant(name: str, text: str) -> Any:
    offset = 0
    for match in _CONSTANT_RE.finditer(text):
        if match.group(1) is not None:
            offset = match.start(1)
            break
    raise json.JSONDecodeError(f"Unexpected token {name}", text, offset)


def parse_relaxed(text: str) -> Any:
    """Parse JSON5.  Raises :class:`RelaxedJSONError`."""
    try:
        return json5.loads(text)
    except RelaxedJSONError:
        raise
    except ValueError as exc:
        message = str(exc)
        match = _JSON5_POSITION_RE.search(message)
        if match is None:
            raise RelaxedJSONError(message) from exc
        raise RelaxedJSONError(
            message,
            line_number=int(match.group(1)),
            column_number=int(match.group(2)),
        ) from exc
