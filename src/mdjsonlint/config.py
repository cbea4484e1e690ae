"""Check configuration: enablement plus include/exclude globs, loadable from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

DEFAULT_INCLUDES = ["**/*.md"]
DEFAULT_EXCLUDES = ["**/node_modules/**", ".git/**"]

_SECTION = "mdjsonlint"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class CheckConfig(BaseModel):
    """Per-check options."""

    enabled: bool = True
    includes: list[str] = DEFAULT_INCLUDES
    excludes: list[str] = DEFAULT_EXCLUDES


def load_config(path: Path) -> CheckConfig:
    """Load a :class:`CheckConfig` from a YAML file.

    A missing or empty file yields the defaults.  Options may sit at the top
    level or under an ``mdjsonlint:`` section.
    """
    if not path.exists():
        return CheckConfig()

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data: Any = yaml.load(handle)
    except YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return CheckConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
    if isinstance(data.get(_SECTION), dict):
        data = data[_SECTION]

    try:
        return CheckConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
