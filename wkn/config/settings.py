"""
WKN Configuration Settings

Defaults for the store and the shell. Every setting that a user may want
to change per machine can be overridden through a ``WKN_*`` environment
variable; command line flags take precedence over both.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Store and shell configuration settings."""

    # Storage settings
    DB_PATH: str = os.environ.get("WKN_DB_PATH", ".wkn")
    SNAPSHOT_FORMAT: str = "wkn"
    SNAPSHOT_VERSION: int = 1

    # Values are 64-bit signed integers
    INT_MIN: int = -(2 ** 63)
    INT_MAX: int = 2 ** 63 - 1

    # Shell settings
    PROMPT: str = os.environ.get("WKN_PROMPT", "wkn> ")

    # Logging settings
    DEBUG: bool = os.environ.get("WKN_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("WKN_LOG_LEVEL", "WARNING")


# Global settings instance
settings = Settings()
