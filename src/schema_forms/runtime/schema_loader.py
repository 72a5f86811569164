"""
Utility module for loading layout schemas.

A layout is a JSON array of field descriptors. Decoding is strict: a single
invalid element fails the whole load with SchemaLoadError. Callers that must
not fail (the component registry) catch it and render nothing.

Sources are zero-argument callables returning the descriptor list, so the
registry does not care whether the layout is bundled, on disk or remote.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List

import requests
from pydantic import TypeAdapter, ValidationError

from schema_forms.errors import SchemaLoadError
from schema_forms.schemas.field_descriptor import FieldDescriptor

logger = logging.getLogger(__name__)

SchemaSource = Callable[[], List[FieldDescriptor]]

DEFAULT_LAYOUT_PATH = Path(__file__).resolve().parent.parent / "resources" / "layout_file.json"

_DESCRIPTOR_LIST = TypeAdapter(List[FieldDescriptor])


def parse_descriptors(raw: str | bytes) -> List[FieldDescriptor]:
    """
    Decode a layout document.

    Args:
        raw: JSON text or bytes

    Returns:
        Descriptors in document order

    Raises:
        SchemaLoadError: If the document is not valid JSON, not an array, or
            any element does not match the descriptor shape
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Invalid JSON in layout: {e}")

    if not isinstance(data, list):
        raise SchemaLoadError(f"Layout must be a JSON array, got {type(data).__name__}")

    try:
        return _DESCRIPTOR_LIST.validate_python(data)
    except ValidationError as e:
        raise SchemaLoadError(f"Invalid field descriptor in layout: {e}")


def load_descriptors(file_path: str | Path = DEFAULT_LAYOUT_PATH) -> List[FieldDescriptor]:
    """
    Load a layout from a file.

    Args:
        file_path: Path to the layout JSON (defaults to the bundled layout)

    Returns:
        Descriptors in file order

    Raises:
        SchemaLoadError: If the file cannot be read or decoded
    """
    try:
        raw = Path(file_path).read_bytes()
    except FileNotFoundError:
        raise SchemaLoadError(f"Layout file not found: {file_path}")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read layout file {file_path}: {e}")

    descriptors = parse_descriptors(raw)
    logger.debug(f"Loaded {len(descriptors)} descriptors from {file_path}")
    return descriptors


def fetch_descriptors(url: str, timeout: float = 10.0) -> List[FieldDescriptor]:
    """
    Fetch a layout over HTTP.

    Args:
        url: Layout URL
        timeout: Request timeout in seconds

    Returns:
        Descriptors in document order

    Raises:
        SchemaLoadError: On network errors, non-2xx responses or bad content
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SchemaLoadError(f"Cannot fetch layout from {url}: {e}")

    descriptors = parse_descriptors(response.content)
    logger.debug(f"Fetched {len(descriptors)} descriptors from {url}")
    return descriptors


def file_source(file_path: str | Path = DEFAULT_LAYOUT_PATH) -> SchemaSource:
    """Source reading a layout file on every call."""
    return lambda: load_descriptors(file_path)


def url_source(url: str, timeout: float = 10.0) -> SchemaSource:
    """Source fetching a remote layout on every call."""
    return lambda: fetch_descriptors(url, timeout=timeout)


def fallback_source(primary: SchemaSource, secondary: SchemaSource) -> SchemaSource:
    """
    Source that tries ``primary`` and falls back to ``secondary``.

    Only SchemaLoadError triggers the fallback. If both fail, the secondary's
    error is raised.
    """

    def load() -> List[FieldDescriptor]:
        try:
            return primary()
        except SchemaLoadError as e:
            logger.warning(f"Primary layout source failed, trying fallback: {e}")
        return secondary()

    return load
