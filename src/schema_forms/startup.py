"""Centralized initialization for all schema_forms entry points.

This module provides a single point of initialization for:
- Environment variables (.env loading) and settings
- Logging configuration
- The layout source selected by the settings

Both the Streamlit page and the CLI call ensure_initialized().
"""

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from schema_forms.config.settings import FormSettings, load_settings
from schema_forms.runtime.schema_loader import (
    DEFAULT_LAYOUT_PATH,
    SchemaSource,
    fallback_source,
    file_source,
    url_source,
)

# Module-level state
_settings: Optional[FormSettings] = None


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a Rich handler."""
    handler = RichHandler(
        console=None,  # Use default stderr
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Suppress noisy third-party loggers
    for name in ("urllib3", "watchdog", "streamlit"):
        logging.getLogger(name).setLevel(logging.WARNING)


def layout_source(settings: FormSettings) -> SchemaSource:
    """Build the layout source described by ``settings``.

    The layout file (bundled by default) is the primary source; a configured
    URL is used as fallback.
    """
    source = file_source(settings.layout_path or DEFAULT_LAYOUT_PATH)
    if settings.layout_url:
        source = fallback_source(source, url_source(settings.layout_url, settings.request_timeout))
    return source


def ensure_initialized(config_path: Optional[Path] = None, force: bool = False) -> FormSettings:
    """Load settings and configure logging once per process.

    Args:
        config_path: Optional YAML settings file.
        force: Re-initialize even if already initialized.

    Returns:
        The active settings.
    """
    global _settings

    if _settings is not None and not force:
        return _settings

    _settings = load_settings(config_path)
    setup_logging(_settings.log_level)
    logging.getLogger(__name__).debug(f"Initialized with layout {_settings.layout_path or DEFAULT_LAYOUT_PATH}")
    return _settings


def reset_for_testing() -> None:
    """Forget the initialized state."""
    global _settings
    _settings = None
