"""
Runtime components for schema-driven forms.

Flow: schema_loader reads descriptors -> widget_factory builds components ->
registry holds them -> renderer draws them -> collector extracts values on
submit.
"""

from schema_forms.runtime.collector import ValueCollector
from schema_forms.runtime.components import Component
from schema_forms.runtime.registry import ComponentRegistry
from schema_forms.runtime.schema_loader import (
    fetch_descriptors,
    load_descriptors,
    parse_descriptors,
)
from schema_forms.runtime.submission import SubmitAction
from schema_forms.runtime.widget_factory import WidgetFactory

__all__ = [
    "Component",
    "ComponentRegistry",
    "SubmitAction",
    "ValueCollector",
    "WidgetFactory",
    "fetch_descriptors",
    "load_descriptors",
    "parse_descriptors",
]
