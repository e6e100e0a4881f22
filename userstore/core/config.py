"""
Configuration helpers for userstore.

Settings is a typed view of the USERSTORE_* environment variables so that
repositories and the CLI do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import logging
import os

DEFAULT_FILE_MODE = 0o644


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    file_mode: int
    log_level: int
    encoding: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _octal(value: str | None, default: int) -> int:
        if not value:
            return default
        try:
            mode = int(value.strip(), 8)
        except (TypeError, ValueError):
            return default
        if mode < 0 or mode > 0o777:
            return default
        return mode

    def _level(value: str | None, default: int = logging.WARNING) -> int:
        if not value:
            return default
        level = logging.getLevelName(value.strip().upper())
        return level if isinstance(level, int) else default

    def _encoding(value: str | None, default: str = "utf-8") -> str:
        candidate = (value or "").strip()
        if not candidate:
            return default
        try:
            "".encode(candidate)
        except LookupError:
            return default
        return candidate

    return Settings(
        file_mode=_octal(os.getenv("USERSTORE_FILE_MODE"), DEFAULT_FILE_MODE),
        log_level=_level(os.getenv("USERSTORE_LOG_LEVEL")),
        encoding=_encoding(os.getenv("USERSTORE_ENCODING")),
    )
