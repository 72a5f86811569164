"""Form settings schema and loader.

Settings come from three layers, later ones winning:
1. Field defaults
2. An optional YAML file (``SCHEMA_FORMS_CONFIG`` or an explicit path)
3. ``SCHEMA_FORMS_*`` environment variables (``.env`` is loaded first)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "SCHEMA_FORMS_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class FormSettings(BaseModel):
    """Runtime settings for the form page and CLI.

    Attributes:
        layout_path: Layout JSON file; the bundled layout when unset.
        layout_url: Remote layout, used as fallback when the file fails.
        request_timeout: Timeout in seconds for fetching a remote layout.
        collect_extended_types: Also collect toggle, slider and filepicker values.
        log_level: Root log level.
        page_title: Title of the Streamlit page.
    """

    layout_path: Optional[Path] = Field(
        default=None,
        description="Layout JSON file (bundled layout when unset)",
    )
    layout_url: Optional[str] = Field(
        default=None,
        description="Remote layout URL used as fallback source",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout in seconds for remote layouts",
    )
    collect_extended_types: bool = Field(
        default=False,
        description="Collect toggle, slider and filepicker values on submit",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    page_title: str = Field(
        default="Dynamic Form",
        description="Streamlit page title",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{v}'. Valid levels: {sorted(VALID_LOG_LEVELS)}"
            )
        return level


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        logger.debug(f"No settings file found at {config_path}")
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning(f"Empty settings file at {config_path}")
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {config_path} must contain a mapping")
    return data


def _read_env() -> Dict[str, str]:
    values = {}
    for name in FormSettings.model_fields:
        env_name = f"{ENV_PREFIX}{name.upper()}"
        if env_name in os.environ:
            values[name] = os.environ[env_name]
    return values


def load_settings(config_path: Optional[Path] = None, load_env_file: bool = True) -> FormSettings:
    """Load settings from YAML and the environment.

    Args:
        config_path: Optional YAML settings file. Defaults to the path in
            ``SCHEMA_FORMS_CONFIG``, if set.
        load_env_file: Load ``.env`` from the working directory first.

    Returns:
        Validated FormSettings.

    Raises:
        pydantic.ValidationError: If a value is invalid.
        ValueError: If the YAML file is not a mapping.
    """
    if load_env_file:
        load_dotenv()

    if config_path is None and os.environ.get(CONFIG_PATH_ENV):
        config_path = Path(os.environ[CONFIG_PATH_ENV])

    data: Dict[str, Any] = {}
    if config_path is not None:
        data.update(_read_yaml(Path(config_path)))
    data.update(_read_env())

    settings = FormSettings.model_validate(data)
    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings
