"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the mdjsonlint command.

    Values are read from ``MDJSONLINT_*`` environment variables and from a
    ``.env`` file in the working directory.  Command-line options override
    them.
    """

    model_config = SettingsConfigDict(
        env_prefix="MDJSONLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    root_path: str = "."
    config_file: str = ".mdjsonlint.yaml"
    max_workers: int = 1  # >1 checks files on a thread pool
