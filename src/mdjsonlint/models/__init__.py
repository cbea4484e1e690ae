"""Domain models for mdjsonlint."""

from mdjsonlint.models.errors import BlockError, RunSummary
from mdjsonlint.models.nodes import CODE_BLOCK, Node, Point, Position

__all__ = [
    "BlockError",
    "CODE_BLOCK",
    "Node",
    "Point",
    "Position",
    "RunSummary",
]
