"""Shared CLI helpers: logging, registry loading and value parsing."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from schema_forms.config.settings import FormSettings
from schema_forms.runtime.components import Component
from schema_forms.runtime.file_picker import LocalFileSource, load_selection
from schema_forms.runtime.registry import ComponentRegistry
from schema_forms.runtime.schema_loader import (
    DEFAULT_LAYOUT_PATH,
    fallback_source,
    file_source,
    url_source,
)
from schema_forms.schemas.field_descriptor import FieldType
from schema_forms.startup import ensure_initialized, setup_logging as _setup_logging

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for a CLI run."""
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    _setup_logging(level)


def init(ctx_obj: dict) -> FormSettings:
    """Initialize settings from --config, then apply the verbosity flags."""
    config = ctx_obj.get("config")
    settings = ensure_initialized(config, force=config is not None)
    setup_logging(verbose=ctx_obj.get("verbose", False), quiet=ctx_obj.get("quiet", False))
    return settings


def load_registry(
    settings: FormSettings,
    layout: Optional[Path] = None,
    url: Optional[str] = None,
) -> ComponentRegistry:
    """Build a registry from the command-line layout options.

    An explicit ``--url`` without a layout file fetches only the URL.
    Otherwise the file (or settings/bundled default) is primary and any URL
    is used as fallback.
    """
    url = url or settings.layout_url
    if url and layout is None and settings.layout_path is None:
        source = url_source(url, settings.request_timeout)
    else:
        source = file_source(layout or settings.layout_path or DEFAULT_LAYOUT_PATH)
        if url:
            source = fallback_source(source, url_source(url, settings.request_timeout))

    registry = ComponentRegistry()
    registry.load(source)
    return registry


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean: '{raw}'")


def apply_value(component: Component, raw: str) -> None:
    """Set a component's widget model from its string form.

    Args:
        component: Target component
        raw: Value as typed on the command line. Dates use YYYY-MM-DD, times
            HH:MM, booleans true/false, files a local path.

    Raises:
        ValueError: If the component has no model or the value does not parse
    """
    model = component.model
    if model is None:
        raise ValueError(f"Field '{component.unique_id}' does not take a value")

    field_type = component.field_type
    if field_type in (FieldType.FORM_FIELD, FieldType.PICKER):
        model.set(raw)
    elif field_type == FieldType.DATE:
        parsed = datetime.strptime(raw, "%Y-%m-%d")
        model.set(datetime.combine(parsed.date(), model.get().time()))
    elif field_type == FieldType.TIME:
        parsed = datetime.strptime(raw, "%H:%M")
        model.set(datetime.combine(model.get().date(), parsed.time()))
    elif field_type in (FieldType.CHECKBOX, FieldType.TOGGLE):
        model.set(parse_bool(raw))
    elif field_type == FieldType.SLIDER:
        model.set(float(raw))
    elif field_type == FieldType.FILEPICKER:
        if not load_selection([LocalFileSource(raw)], model):
            raise ValueError(f"Cannot read file '{raw}'")
    else:
        raise ValueError(f"Field '{component.unique_id}' does not take a value")


def preview_value(component: Component) -> str:
    """Short display of a component's current value for tables."""
    model = component.model
    if model is None:
        return ""
    value = model.get()
    if component.field_type == FieldType.DATE:
        return value.strftime("%Y-%m-%d")
    if component.field_type == FieldType.TIME:
        return value.strftime("%H:%M")
    if component.field_type == FieldType.FILEPICKER:
        return model.name or ""
    return str(value)
