"""Pydantic schemas for layout files."""

from schema_forms.schemas.field_descriptor import (
    FieldDescriptor,
    FieldType,
    ID_PREFIXES,
    id_prefix,
)

__all__ = ["FieldDescriptor", "FieldType", "ID_PREFIXES", "id_prefix"]
