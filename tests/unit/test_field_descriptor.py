"""Unit tests for FieldDescriptor and FieldType."""

import pytest
from pydantic import ValidationError

from schema_forms.schemas.field_descriptor import (
    FieldDescriptor,
    FieldType,
    id_prefix,
)


class TestFieldType:
    def test_known_tags(self):
        assert FieldType.from_tag("form_field") is FieldType.FORM_FIELD
        assert FieldType.from_tag("filepicker") is FieldType.FILEPICKER

    def test_unknown_tag(self):
        assert FieldType.from_tag("bogus") is FieldType.UNKNOWN

    def test_unknown_literal_is_not_a_prefix(self):
        assert FieldType.from_prefix("unknown") is None

    def test_prefix_matches_tag(self):
        for field_type in FieldType:
            if field_type is FieldType.UNKNOWN:
                continue
            assert FieldType.from_prefix(field_type.value) is field_type

    def test_form_prefix_alias(self):
        assert FieldType.from_prefix("form") is FieldType.FORM_FIELD

    def test_unrecognized_prefix(self):
        assert FieldType.from_prefix("bogus") is None


class TestIdPrefix:
    def test_prefix_up_to_first_dash(self):
        assert id_prefix("form_field-1") == "form_field"
        assert id_prefix("date-2-b") == "date"

    def test_id_without_dash(self):
        assert id_prefix("checkbox") == "checkbox"


class TestFieldDescriptorDecoding:
    def test_uuid_maps_to_id(self):
        d = FieldDescriptor.model_validate(
            {"uuid": "picker-1", "type": "picker", "args": {"label": "Pet"}, "options": ["cat"]}
        )
        assert d.id == "picker-1"
        assert d.field_type is FieldType.PICKER
        assert d.options == ["cat"]
        assert d.arg("label") == "Pet"

    def test_null_options(self):
        d = FieldDescriptor.model_validate({"uuid": "text-1", "type": "text", "args": {}, "options": None})
        assert d.options is None

    def test_missing_args_rejected(self):
        with pytest.raises(ValidationError):
            FieldDescriptor.model_validate({"uuid": "text-1", "type": "text"})

    def test_missing_options_allowed(self):
        d = FieldDescriptor.model_validate({"uuid": "text-1", "type": "text", "args": {}})
        assert d.options is None

    def test_missing_uuid_rejected(self):
        with pytest.raises(ValidationError):
            FieldDescriptor.model_validate({"type": "text", "args": {}})

    def test_non_string_arg_rejected(self):
        with pytest.raises(ValidationError):
            FieldDescriptor.model_validate({"uuid": "slider-1", "type": "slider", "args": {"min": 5}})

    def test_immutable(self):
        d = FieldDescriptor.model_validate({"uuid": "text-1", "type": "text", "args": {}})
        with pytest.raises(ValidationError):
            d.type = "date"

    def test_unknown_type_kept_raw(self):
        d = FieldDescriptor.model_validate({"uuid": "bogus-1", "type": "bogus", "args": {}})
        assert d.type == "bogus"
        assert d.field_type is FieldType.UNKNOWN
        assert d.id_prefix == "bogus"
