"""Find the files to scan below a root directory using include/exclude globs."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path


def _normalize(pattern: str) -> str:
    return pattern[2:] if pattern.startswith("./") else pattern


def _excluded(relative: str, excludes: list[str]) -> bool:
    for pattern in excludes:
        if fnmatchcase(relative, pattern):
            return True
        # "**/x" also matches "x" at the root
        if pattern.startswith("**/") and fnmatchcase(relative, pattern[3:]):
            return True
    return False


def find_files(root: Path, includes: list[str], excludes: list[str] | None = None) -> list[Path]:
    """Return the sorted absolute paths of files under *root* matching *includes*.

    Patterns are relative to *root* and may start with ``./``.  A file is
    dropped when its root-relative POSIX path matches any of *excludes*.
    """
    root = root.resolve()
    exclude_patterns = [_normalize(p) for p in excludes or []]
    found: set[Path] = set()
    for pattern in includes:
        for path in root.glob(_normalize(pattern)):
            if not path.is_file():
                continue
            relative = path.relative_to(root).as_posix()
            if not _excluded(relative, exclude_patterns):
                found.add(path)
    return sorted(found)
