"""
Configuration for claude-pretty-printer.

Settings come from environment variables (case-sensitive). A .env file is
only read when one is named explicitly or through LOAD_ENV_FILE.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='PrinterSettings')


class PrinterSettings(pydantic_settings.BaseSettings):
    """Printer configuration shared by the library and the CLI."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='ignore',  # .env files may carry unrelated variables
    )

    # Application metadata
    APP_NAME: str = 'claude-pretty-printer'
    VERSION: str = '0.1.0'

    # Box width override (otherwise detected from the terminal, 80 when not a TTY)
    PRETTY_PRINTER_WIDTH: int | None = None

    # Show info-level CLI diagnostics (record counts, input source)
    PRETTY_PRINTER_VERBOSE: bool = False

    # Color conventions shared with other terminal tools (https://no-color.org)
    NO_COLOR: str | None = None
    FORCE_COLOR: str | None = None

    @pydantic.field_validator('PRETTY_PRINTER_WIDTH')
    @classmethod
    def validate_width(cls, v: int | None) -> int | None:
        """Validate the width override leaves room for a header line."""
        if v is not None and v < 20:
            raise ValueError('PRETTY_PRINTER_WIDTH must be at least 20')
        return v

    @property
    def color_disabled(self) -> bool:
        return bool(self.NO_COLOR)

    @property
    def color_forced(self) -> bool:
        return bool(self.FORCE_COLOR)


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with optional .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)  # type: ignore[call-arg]


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))


# Module-level singleton (lazy-loaded), used for library defaults
settings: PrinterSettings = lazy_settings(PrinterSettings)
