"""JSON block checking pipeline: extraction, validation and aggregation."""

from mdjsonlint.checker.check import MarkdownJSONCheck
from mdjsonlint.checker.discovery import find_files
from mdjsonlint.checker.extractor import JSON_LANGS, find_json_blocks
from mdjsonlint.checker.runner import check_file, check_text, run_checks
from mdjsonlint.checker.validator import BlockValidator, validate_block

__all__ = [
    "BlockValidator",
    "JSON_LANGS",
    "MarkdownJSONCheck",
    "check_file",
    "check_text",
    "find_files",
    "find_json_blocks",
    "run_checks",
    "validate_block",
]
