"""Collect JSON and JSON5 code blocks from a document tree."""

from __future__ import annotations

from typing import Any

from mdjsonlint.models.nodes import CODE_BLOCK

JSON_LANGS = ("json", "json5")


def is_json_block(node: Any) -> bool:
    return getattr(node, "type", None) == CODE_BLOCK and getattr(node, "lang", None) in JSON_LANGS


def find_json_blocks(node: Any) -> list[Any]:
    """Return every JSON(5) code block under *node*, in document order.

    The walk is depth-first and pre-order; a node without a ``children``
    attribute is treated as a leaf.
    """
    blocks: list[Any] = []
    if is_json_block(node):
        blocks.append(node)
    for child in getattr(node, "children", None) or ():
        blocks.extend(find_json_blocks(child))
    return blocks
