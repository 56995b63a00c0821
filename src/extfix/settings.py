"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the extfix command-line tool.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.  CLI flags take precedence where both exist.
    Invalid values raise ``pydantic.ValidationError`` on construction.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "WARNING"

    # Resolution
    resolution_policy: str = "default"  # see extfix.policy.registry

    # Parsing
    skip_files_with_syntax_errors: bool = True

    # Collection
    follow_hidden: bool = False  # collect dot-prefixed files and directories

    # Output
    write_workers: int = Field(default=4, gt=0)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if v.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{v}'")
        return v
