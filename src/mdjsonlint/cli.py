"""Command-line entry point.

Run via::

    mdjsonlint                          # scan the current directory
    mdjsonlint docs --exclude 'drafts/**'
    MDJSONLINT_LOG_LEVEL=DEBUG mdjsonlint

Defaults come from environment variables / ``.env`` (see
:class:`~mdjsonlint.settings.Settings`) and from the YAML config file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from mdjsonlint import __version__
from mdjsonlint.checker.check import MarkdownJSONCheck
from mdjsonlint.config import ConfigError, load_config
from mdjsonlint.models.errors import RunSummary
from mdjsonlint.settings import Settings

logger = logging.getLogger("mdjsonlint.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdjsonlint",
        description="Check the syntax of JSON and JSON5 code blocks in Markdown files.",
    )
    parser.add_argument("root", nargs="?", default=settings.root_path, help="directory to scan")
    parser.add_argument("--config", default=settings.config_file, help="YAML config file")
    parser.add_argument("--include", action="append", help="glob of files to scan (repeatable)")
    parser.add_argument("--exclude", action="append", help="glob of files to skip (repeatable)")
    parser.add_argument("--workers", type=int, default=settings.max_workers)
    parser.add_argument(
        "--check",
        action="append",
        dest="checks",
        help="run only the named checks, even if disabled in the config",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_summary(summary: RunSummary) -> list[str]:
    lines: list[str] = []
    for path, errors in summary.errors_by_path.items():
        for error in errors:
            lines.append(f"{path}:{error.line}:{error.column}: {error.message}")
    lines.append(
        f"{summary.checked} file(s) checked, {summary.valid} valid, {summary.invalid} invalid"
    )
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run the check and return the process exit status."""
    settings = Settings()
    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("mdjsonlint v%s (root=%s)", __version__, args.root)

    root = Path(args.root)
    config_path = Path(args.config)
    if not config_path.is_absolute():
        config_path = root / config_path
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        print(f"mdjsonlint: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    updates: dict[str, list[str]] = {}
    if args.include:
        updates["includes"] = args.include
    if args.exclude:
        updates["excludes"] = args.exclude
    if updates:
        config = config.model_copy(update=updates)

    check = MarkdownJSONCheck(root, config, max_workers=args.workers)
    summary = check.run_checks(args.checks)
    for line in format_summary(summary):
        print(line)
    return EXIT_OK if summary.passed else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
