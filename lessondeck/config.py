"""
Runtime settings for lessondeck.

Values come from, in increasing precedence:
- built-in defaults
- a .env file in the working directory
- process environment variables (LESSONDECK_*)
- command line flags (applied by the CLI)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


ENV_PREFIX = "LESSONDECK_"
DEFAULT_SOURCE = Path("lessons")
DEFAULT_FORMAT = "plain"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class DeckSettings(BaseModel):
    source: Path = DEFAULT_SOURCE
    default_format: str = DEFAULT_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator('log_level')
    @classmethod
    def log_level_known(cls, v):
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "DeckSettings":
        """
        Create settings from environment variables.

        Args:
            env_file: Optional .env path (default: .env in the working directory)
        """
        load_dotenv(env_file or Path(".env"))
        return cls(
            source=Path(os.getenv(f"{ENV_PREFIX}SOURCE", str(DEFAULT_SOURCE))),
            default_format=os.getenv(f"{ENV_PREFIX}FORMAT", DEFAULT_FORMAT),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout stays clean for command output."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
