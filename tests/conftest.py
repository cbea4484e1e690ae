"""Shared test fixtures for mdjsonlint."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mdjsonlint.checker.validator import BlockValidator
from mdjsonlint.parser.markdown import MarkdownTreeParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DOCS_DIR = FIXTURES_DIR / "docs"

# The fenced block opens on line 5.
TRAILING_COMMA_MD = """\
# Title

Some text.

```json
{"a": 1,}
```
"""

TWO_BLOCKS_MD = """\
```json5
{a: 1}
```

```json
{bad}
```
"""

PYTHON_ONLY_MD = """\
# Code

```python
def broken(:
    return {"a": 1,}
```
"""


@pytest.fixture
def markdown_parser() -> MarkdownTreeParser:
    return MarkdownTreeParser()


@pytest.fixture
def validator() -> BlockValidator:
    return BlockValidator()


@pytest.fixture
def write_markdown(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a Markdown file below ``tmp_path`` and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
