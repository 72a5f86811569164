"""Pydantic schema for one entry of a layout file.

A layout file is a JSON array of objects:

    {"uuid": "form_field-1", "type": "form_field",
     "args": {"hint": "Name", "label": "Name"}, "options": null}

The ``uuid`` key is exposed as ``FieldDescriptor.id``. Its prefix (up to the
first ``-``) must name the same field type as ``type``; the value collector
relies on that convention.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, Enum):
    """Closed set of field kinds the widget factory knows how to build."""

    TEXT = "text"
    FORM_FIELD = "form_field"
    DATE = "date"
    TIME = "time"
    PICKER = "picker"
    CHECKBOX = "checkbox"
    TOGGLE = "toggle"
    FILEPICKER = "filepicker"
    SLIDER = "slider"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "FieldType":
        """Resolve a schema ``type`` tag; anything unrecognized is UNKNOWN."""
        try:
            field_type = cls(tag)
        except ValueError:
            return cls.UNKNOWN
        return field_type

    @classmethod
    def from_prefix(cls, prefix: str) -> Optional["FieldType"]:
        """Resolve an id prefix to a field type, or None if unrecognized."""
        return ID_PREFIXES.get(prefix)


# id prefix -> field type. "form" is accepted for ids written as "form-<n>".
ID_PREFIXES: Dict[str, FieldType] = {
    field_type.value: field_type
    for field_type in FieldType
    if field_type is not FieldType.UNKNOWN
}
ID_PREFIXES["form"] = FieldType.FORM_FIELD


def id_prefix(field_id: str) -> str:
    """Return the part of an id before the first '-' (the whole id if none)."""
    return field_id.split("-", 1)[0]


class FieldDescriptor(BaseModel):
    """
    One parsed layout entry.

    Attributes:
        id: Globally unique field id, "<type>-<suffix>" (``uuid`` in JSON)
        type: Raw type tag from the schema
        args: Free-form string arguments; keys depend on the type
        options: Ordered option list (pickers only)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="uuid", description="Unique field id")
    type: str = Field(..., description="Field type tag")
    args: Dict[str, str] = Field(..., description="Type-specific arguments")
    options: Optional[List[str]] = Field(default=None, description="Picker options")

    @property
    def field_type(self) -> FieldType:
        return FieldType.from_tag(self.type)

    @property
    def id_prefix(self) -> str:
        return id_prefix(self.id)

    def arg(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get an argument value, falling back to ``default``."""
        return self.args.get(key, default)
