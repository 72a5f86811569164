"""Tests for ValueCollector extraction rules."""

from datetime import datetime

from schema_forms.runtime.collector import ValueCollector, format_number
from schema_forms.runtime.registry import ComponentRegistry
from tests.factories import make_component, make_descriptor


def build_registry(*descriptors):
    registry = ComponentRegistry()
    registry.load(lambda: list(descriptors))
    return registry


class TestExtractionRules:
    def test_date_format(self):
        c = make_component("date-1", "date")
        c.model.set(datetime(2023, 6, 15, 9, 30))
        assert ValueCollector().collect([c]) == ["2023-06-15"]

    def test_time_format(self):
        c = make_component("time-1", "time")
        c.model.set(datetime(2023, 6, 15, 14, 5))
        assert ValueCollector().collect([c]) == ["14:05"]

    def test_checkbox_true(self):
        c = make_component("checkbox-1", "checkbox")
        c.model.set(True)
        assert ValueCollector().collect([c]) == ["true"]

    def test_checkbox_false(self):
        c = make_component("checkbox-1", "checkbox")
        c.model.set(False)
        assert ValueCollector().collect([c]) == ["false"]

    def test_picker_verbatim(self):
        c = make_component("picker-1", "picker", options=["cat", "dog"])
        c.model.set("dog")
        assert ValueCollector().collect([c]) == ["dog"]

    def test_form_field_raw_string(self):
        c = make_component("form_field-1", "form_field")
        c.model.set("  Alice ")
        assert ValueCollector().collect([c]) == ["  Alice "]

    def test_empty_form_field_still_collected(self):
        c = make_component("form_field-1", "form_field")
        assert ValueCollector().collect([c]) == [""]


class TestSkippedComponents:
    def test_text_not_collected(self):
        assert ValueCollector().collect([make_component("text-1", "text", {"text": "x"})]) == []

    def test_toggle_filepicker_slider_not_collected_by_default(self):
        components = [
            make_component("toggle-1", "toggle"),
            make_component("filepicker-1", "filepicker"),
            make_component("slider-1", "slider"),
        ]
        assert ValueCollector().collect(components) == []

    def test_unknown_type_contributes_nothing(self):
        registry = build_registry(make_descriptor("bogus-1", "bogus"))
        assert len(registry) == 1
        assert ValueCollector().collect(registry) == []

    def test_unrecognized_prefix_skipped(self):
        c = make_component("name-1", "form_field")
        c.model.set("Alice")
        assert ValueCollector().collect([c]) == []

    def test_prefix_type_mismatch_skipped(self):
        c = make_component("checkbox-1", "toggle")
        assert ValueCollector().collect([c]) == []

    def test_form_prefix_alias(self):
        c = make_component("form-1", "form_field")
        c.model.set("Bob")
        assert ValueCollector().collect([c]) == ["Bob"]


class TestExtendedTypes:
    def test_extended_rules(self, tmp_path):
        toggle = make_component("toggle-1", "toggle")
        toggle.model.set(False)
        slider = make_component("slider-1", "slider")
        slider.model.set(7.0)
        picker = make_component("filepicker-1", "filepicker")
        picker.model.select(b"data", "cv.pdf")
        empty_picker = make_component("filepicker-2", "filepicker")

        values = ValueCollector(collect_extended_types=True).collect(
            [toggle, slider, picker, empty_picker]
        )
        assert values == ["false", "7", "cv.pdf"]

    def test_format_number(self):
        assert format_number(3.0) == "3"
        assert format_number(2.5) == "2.5"


class TestCollectScenarios:
    def test_name_and_agree(self):
        registry = build_registry(
            make_descriptor("form_field-1", "form_field", {"hint": "Name"}),
            make_descriptor("checkbox-1", "checkbox", {"label": "Agree"}),
        )
        registry.get("form_field-1").model.set("Alice")
        registry.get("checkbox-1").model.set(True)
        assert ValueCollector().collect(registry) == ["Alice", "true"]

    def test_order_follows_registry(self, registry):
        registry.get("date-1").model.set(datetime(2024, 1, 2, 3, 4))
        registry.get("time-1").model.set(datetime(2024, 1, 2, 3, 4))
        registry.get("form_field-1").model.set("Zed")
        registry.get("picker-1").model.set("dog")
        registry.get("checkbox-1").model.set(False)
        assert ValueCollector().collect(registry) == ["Zed", "2024-01-02", "03:04", "dog", "false"]

    def test_collect_is_idempotent(self, registry):
        registry.get("form_field-1").model.set("Alice")
        collector = ValueCollector()
        assert collector.collect(registry) == collector.collect(registry)
