"""Per-block syntax validation with the parser matching the block's tag."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mdjsonlint.models.errors import BlockError
from mdjsonlint.models.nodes import Node
from mdjsonlint.parser.json_parsers import RelaxedJSONError, parse_relaxed, parse_strict
from mdjsonlint.parser.position import extract_position

logger = logging.getLogger("mdjsonlint.validator")


class BlockValidator:
    """Parses ``json`` blocks strictly and every other JSON block as JSON5.

    The two parsers report positions differently: the strict parser only
    embeds a character offset in its message, which is translated by
    :func:`extract_position`; the relaxed parser raises
    :class:`RelaxedJSONError` with explicit line and column numbers.  Both
    are reported relative to the file, never raised.  Nesting too deep for
    either parser is reported at the fence line.
    """

    def __init__(
        self,
        strict_parser: Callable[[str], Any] = parse_strict,
        relaxed_parser: Callable[[str], Any] = parse_relaxed,
    ) -> None:
        self._strict_parser = strict_parser
        self._relaxed_parser = relaxed_parser

    def validate(self, block: Node) -> list[BlockError]:
        text = getattr(block, "value", None) or ""
        if getattr(block, "lang", None) == "json":
            return self._validate_strict(block, text)
        return self._validate_relaxed(block, text)

    def _validate_strict(self, block: Node, text: str) -> list[BlockError]:
        try:
            self._strict_parser(text)
        except (ValueError, RecursionError) as exc:
            message = str(exc)
            # Without an offset in the message this falls back to the fence line.
            position = extract_position(message, text)
            logger.debug("json block at line %d failed: %s", _start_line(block), message)
            return [
                BlockError(
                    line=_start_line(block) + position.line,
                    column=max(position.column, 1),
                    message=message,
                )
            ]
        return []

    def _validate_relaxed(self, block: Node, text: str) -> list[BlockError]:
        try:
            self._relaxed_parser(text)
        except (ValueError, RecursionError) as exc:
            error = exc if isinstance(exc, RelaxedJSONError) else RelaxedJSONError(str(exc))
            logger.debug("json5 block at line %d failed: %s", _start_line(block), error.message)
            return [
                BlockError(
                    line=_start_line(block) + error.line_number,
                    column=max(error.column_number, 1),
                    message=error.message,
                )
            ]
        return []


def _start_line(block: Any) -> int:
    position = getattr(block, "position", None)
    return position.start.line if position is not None else 1


_default_validator = BlockValidator()


def validate_block(block: Node) -> list[BlockError]:
    """Validate one extracted block; at most one error is returned."""
    return _default_validator.validate(block)
