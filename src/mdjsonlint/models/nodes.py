"""Immutable document tree nodes produced by the Markdown parser."""

from __future__ import annotations

from dataclasses import dataclass

CODE_BLOCK = "CodeBlock"


@dataclass(frozen=True)
class Point:
    """A 1-based line in the source document."""

    line: int


@dataclass(frozen=True)
class Position:
    """Where a node starts in the source document."""

    start: Point


@dataclass(frozen=True)
class Node:
    """A node of a parsed Markdown document.

    Code blocks use ``type == CODE_BLOCK`` and carry the fence language in
    ``lang`` and the raw fence contents in ``value``.  Every other node type
    leaves both as ``None``.
    """

    type: str
    lang: str | None = None
    value: str | None = None
    position: Position | None = None
    children: tuple[Node, ...] = ()

    @property
    def start_line(self) -> int:
        """1-based start line, or 1 for nodes without position data."""
        return self.position.start.line if self.position is not None else 1

    @classmethod
    def code_block(cls, value: str, lang: str | None = None, line: int = 1) -> Node:
        return cls(
            type=CODE_BLOCK,
            lang=lang,
            value=value,
            position=Position(start=Point(line=line)),
        )
