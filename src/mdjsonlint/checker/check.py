"""Host-facing check component: selection, discovery and the shared results."""

from __future__ import annotations

import logging
from collections.abc import Collection
from pathlib import Path

from mdjsonlint.checker.discovery import find_files
from mdjsonlint.checker.runner import run_checks
from mdjsonlint.config import CheckConfig
from mdjsonlint.models.errors import RunSummary

logger = logging.getLogger("mdjsonlint.check")


class MarkdownJSONCheck:
    """Ensures all JSON and JSON5 blocks in Markdown files parse.

    ``results`` is shared across calls to :meth:`run_checks`, so repeated
    runs accumulate into the same summary.
    """

    key = "mdjsonlint"

    def __init__(
        self,
        root_path: Path | str,
        config: CheckConfig | None = None,
        *,
        max_workers: int = 1,
    ) -> None:
        self.root_path = Path(root_path)
        self.config = config or CheckConfig()
        self.max_workers = max_workers
        self.results = RunSummary()

    def should_run(self, checks_to_run: Collection[str] | None = None) -> bool:
        """Run when enabled and no selection is given, or when selected by key."""
        if checks_to_run is None:
            return self.config.enabled
        return self.key in checks_to_run

    def find_files(self) -> list[Path]:
        return find_files(self.root_path, self.config.includes, self.config.excludes)

    def run_checks(self, checks_to_run: Collection[str] | None = None) -> RunSummary:
        if not self.should_run(checks_to_run):
            logger.debug("%s skipped", self.key)
            return self.results

        files = self.find_files()
        logger.info("%s: scanning %d file(s) under %s", self.key, len(files), self.root_path)
        return run_checks(self.root_path, files, self.results, max_workers=self.max_workers)
