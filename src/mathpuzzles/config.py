"""Ambient settings for the puzzle solvers.

Only diagnostics are configurable here.  Puzzle parameters come from the command
line, so the results never depend on the environment.
"""

import logging
from typing import Literal

from dotenv import find_dotenv
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PuzzleSettings(BaseSettings):
    """Settings read from `MATHPUZZLES_*` environment variables or a `.env` file."""

    log_level: LogLevel = "WARNING"
    """Level of the diagnostics written to stderr. Default: WARNING."""

    log_format: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
    """Format of the diagnostics written to stderr."""

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        logging.Formatter(value)  # Raises ValueError for a malformed format
        return value

    model_config = SettingsConfigDict(
        env_prefix="MATHPUZZLES_",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_settings() -> tuple[PuzzleSettings, ValidationError | None]:
    """Load the settings, falling back to the defaults if they are invalid.

    Returns:
        The settings, and the validation error that forced the fallback (or None).
    """
    # Determine the environment file path, or None if not found
    env_file = find_dotenv(usecwd=True) or None
    try:
        return PuzzleSettings(_env_file=env_file), None
    except ValidationError as e:
        return PuzzleSettings.model_construct(), e
