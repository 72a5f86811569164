"""
Pytest fixtures for schema_forms tests.
Provides layout files, descriptors and loaded registries.
"""

import json

import pytest

from schema_forms.runtime.registry import ComponentRegistry
from schema_forms.schemas.field_descriptor import FieldDescriptor
from schema_forms import startup


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SCHEMA_FORMS_* variables and startup state out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("SCHEMA_FORMS_"):
            monkeypatch.delenv(name, raising=False)
    startup.reset_for_testing()
    yield
    startup.reset_for_testing()


@pytest.fixture
def layout_entries():
    """Raw layout entries covering every field type."""
    return [
        {"uuid": "text-1", "type": "text", "args": {"text": "Welcome", "fontType": ".title"}, "options": None},
        {"uuid": "form_field-1", "type": "form_field", "args": {"hint": "Name", "label": "Name"}, "options": None},
        {"uuid": "date-1", "type": "date", "args": {"label": "Birthday"}, "options": None},
        {"uuid": "time-1", "type": "time", "args": {"label": "Call at"}, "options": None},
        {"uuid": "picker-1", "type": "picker", "args": {"label": "Pet"}, "options": ["cat", "dog"]},
        {"uuid": "checkbox-1", "type": "checkbox", "args": {"label": "Agree"}, "options": None},
        {"uuid": "toggle-1", "type": "toggle", "args": {"label": "Newsletter"}, "options": None},
        {"uuid": "filepicker-1", "type": "filepicker", "args": {"label": "CV", "buttonText": "Pick"}, "options": None},
        {"uuid": "slider-1", "type": "slider", "args": {"label": "Years", "min": "0", "max": "10"}, "options": None},
    ]


@pytest.fixture
def layout_file(tmp_path, layout_entries):
    """Layout JSON file on disk."""
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(layout_entries), encoding="utf-8")
    return path


@pytest.fixture
def descriptors(layout_entries):
    return [FieldDescriptor.model_validate(entry) for entry in layout_entries]


@pytest.fixture
def registry(descriptors):
    """Registry loaded with one component of every type."""
    reg = ComponentRegistry()
    reg.load(lambda: descriptors)
    return reg
