"""
Schema Forms - render declarative layouts as interactive forms.

A layout is a list of typed field descriptors. Each descriptor becomes a
stateful widget; on submit the current values are collected into a flat
list of strings.
"""

__version__ = "0.1.0"

from schema_forms.errors import SchemaFormsError, SchemaLoadError
from schema_forms.schemas.field_descriptor import FieldDescriptor, FieldType

__all__ = [
    "FieldDescriptor",
    "FieldType",
    "SchemaFormsError",
    "SchemaLoadError",
]
