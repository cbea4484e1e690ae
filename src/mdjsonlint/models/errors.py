"""Structured block errors and the per-run summary."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BlockError(BaseModel):
    """One syntax failure, positioned absolutely within the source file."""

    line: int = Field(ge=1)
    column: int = Field(ge=1)
    message: str


class RunSummary(BaseModel):
    """Counts of checked files plus the errors of every invalid file.

    ``checked == valid + invalid`` holds after every :meth:`record` call, and
    a path is present in ``errors_by_path`` only if it produced errors.
    """

    checked: int = 0
    valid: int = 0
    invalid: int = 0
    errors_by_path: dict[str, list[BlockError]] = {}

    def record(self, path: str, errors: list[BlockError]) -> None:
        """Account for one checked file."""
        self.checked += 1
        if errors:
            self.invalid += 1
            self.errors_by_path[path] = list(errors)
        else:
            self.valid += 1

    @property
    def passed(self) -> bool:
        return self.invalid == 0
