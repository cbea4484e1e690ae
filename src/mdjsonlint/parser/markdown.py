"""Markdown to :class:`~mdjsonlint.models.nodes.Node` tree conversion.

Built on markdown-it-py's CommonMark preset.  Block structure is kept as-is
(``root``, ``paragraph``, ``blockquote``, ``bullet_list`` ...) except that
fenced and indented code blocks both become ``CodeBlock`` nodes.
"""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdjsonlint.models.nodes import CODE_BLOCK, Node, Point, Position

_CODE_TYPES = frozenset({"fence", "code_block"})


class MarkdownTreeParser:
    """Parses Markdown text into an immutable node tree."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark")

    def parse(self, text: str) -> Node:
        tokens = self._md.parse(text)
        return self._convert(SyntaxTreeNode(tokens))

    def _convert(self, node: SyntaxTreeNode) -> Node:
        position = None
        if not node.is_root and node.map is not None:
            # markdown-it line maps are 0-based
            position = Position(start=Point(line=node.map[0] + 1))

        if node.type in _CODE_TYPES:
            return Node(
                type=CODE_BLOCK,
                lang=_fence_lang(node.info) if node.type == "fence" else None,
                value=_strip_final_newline(node.content),
                position=position,
            )

        return Node(
            type=node.type,
            position=position,
            children=tuple(self._convert(child) for child in node.children),
        )


def _fence_lang(info: str) -> str | None:
    words = info.split()
    return words[0] if words else None


def _strip_final_newline(content: str) -> str:
    if content.endswith("\r\n"):
        return content[:-2]
    if content.endswith("\n"):
        return content[:-1]
    return content


_default_parser: MarkdownTreeParser | None = None


def parse_markdown(text: str) -> Node:
    """Parse *text* with a shared :class:`MarkdownTreeParser`."""
    global _default_parser  # noqa: PLW0603
    if _default_parser is None:
        _default_parser = MarkdownTreeParser()
    return _default_parser.parse(text)
