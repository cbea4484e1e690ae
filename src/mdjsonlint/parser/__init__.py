"""Parsing collaborators: Markdown trees, JSON/JSON5 parsers, error positions."""

from mdjsonlint.parser.json_parsers import RelaxedJSONError, parse_relaxed, parse_strict
from mdjsonlint.parser.markdown import MarkdownTreeParser, parse_markdown
from mdjsonlint.parser.position import PositionInfo, extract_position

__all__ = [
    "MarkdownTreeParser",
    "PositionInfo",
    "RelaxedJSONError",
    "extract_position",
    "parse_markdown",
    "parse_relaxed",
    "parse_strict",
]
