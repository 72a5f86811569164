"""Error taxonomy for schema-driven forms.

None of these errors is fatal to the page. Each one is caught at the
boundary where it happens and degrades to rendering or collecting less.
"""


class SchemaFormsError(Exception):
    """Base class for all schema_forms errors."""
    pass


class SchemaLoadError(SchemaFormsError):
    """Raised when a layout schema cannot be read or decoded."""
    pass


class UnknownFieldTypeError(SchemaFormsError):
    """Raised inside the widget factory for an unrecognized field type.

    Never propagates out of the factory: it is turned into a diagnostic
    text component.
    """

    def __init__(self, field_id: str, field_type: str):
        self.field_id = field_id
        self.field_type = field_type
        super().__init__(f"Unsupported field type '{field_type}' for field '{field_id}'")


class ResourceAccessError(SchemaFormsError):
    """Raised when a picked file cannot be accessed or read."""
    pass
