"""Check Runner: parse each file, validate its JSON blocks, aggregate the results."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mdjsonlint.checker.extractor import find_json_blocks
from mdjsonlint.checker.validator import validate_block
from mdjsonlint.models.errors import BlockError, RunSummary
from mdjsonlint.parser.markdown import parse_markdown

logger = logging.getLogger("mdjsonlint.runner")


def check_text(markdown: str) -> list[BlockError]:
    """Validate every JSON(5) block in a Markdown string, in document order."""
    tree = parse_markdown(markdown)
    errors: list[BlockError] = []
    for block in find_json_blocks(tree):
        errors.extend(validate_block(block))
    return errors


def check_file(path: Path) -> list[BlockError]:
    """Read *path* as UTF-8 and validate its blocks.

    Read and Markdown parse failures propagate to the caller.
    """
    with path.open("r", encoding="utf-8") as handle:
        content = handle.read()
    errors = check_text(content)
    logger.debug("checked %s (%d error(s))", path, len(errors))
    return errors


def _relative_path(root: Path, path: Path) -> str:
    # both sides resolved so symlinked roots (e.g. temp dirs) still relate
    return Path(os.path.relpath(path.resolve(), root.resolve())).as_posix()


def run_checks(
    root_path: Path | str,
    file_paths: Sequence[Path | str],
    summary: RunSummary | None = None,
    *,
    max_workers: int = 1,
) -> RunSummary:
    """Check *file_paths* and record each outcome in *summary*.

    A fresh summary is created when none is given; passing one in
    accumulates across runs.  With ``max_workers > 1`` files are checked on a
    thread pool, but outcomes are still recorded in input order.
    """
    root = Path(root_path)
    paths = [Path(p) for p in file_paths]
    if summary is None:
        summary = RunSummary()

    if max_workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="mdjsonlint") as pool:
            outcomes = list(pool.map(check_file, paths))
    else:
        outcomes = [check_file(path) for path in paths]

    for path, errors in zip(paths, outcomes):
        relative = _relative_path(root, path)
        summary.record(relative, errors)
        if errors:
            logger.warning("%s: %d invalid JSON block(s)", relative, len(errors))

    logger.info(
        "checked %d file(s): %d valid, %d invalid",
        summary.checked,
        summary.valid,
        summary.invalid,
    )
    return summary
