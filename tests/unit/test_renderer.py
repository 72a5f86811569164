"""Unit tests for Streamlit rendering, with Streamlit mocked out."""

from datetime import date, datetime, time
from unittest.mock import MagicMock, Mock, patch

import pytest

from schema_forms.runtime.collector import ValueCollector
from schema_forms.runtime.renderer import hex_to_css, render_component
from tests.factories import make_component


@pytest.fixture
def st():
    with patch("schema_forms.runtime.renderer.st") as mock_st:
        mock_st.columns.return_value = [MagicMock(), MagicMock()]
        yield mock_st


class TestHexToCss:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#f00", "rgba(255, 0, 0, 1)"),
            ("00ff00", "rgba(0, 255, 0, 1)"),
            ("80FF0000", "rgba(255, 0, 0, 0.502)"),
            ("00000000", "rgba(0, 0, 0, 0)"),
        ],
    )
    def test_valid(self, value, expected):
        assert hex_to_css(value) == expected

    @pytest.mark.parametrize("value", [None, "", "12345", "zzz", "#"])
    def test_invalid_renders_black(self, value):
        assert hex_to_css(value) == "rgba(0, 0, 0, 1)"


class TestRenderText:
    def test_title(self, st):
        render_component(make_component("text-1", "text", {"text": "Hi <b>", "fontType": ".title"}))
        html = st.markdown.call_args.args[0]
        assert html.startswith("<h1")
        assert "Hi &lt;b&gt;" in html

    def test_body_with_color(self, st):
        render_component(make_component("text-1", "text", {"text": "x", "fontColor": "0000ff"}))
        html = st.markdown.call_args.args[0]
        assert html.startswith("<span")
        assert "rgba(0, 0, 255, 1)" in html

    def test_fallback_component_renders_diagnostic(self, st):
        render_component(make_component("bogus-1", "bogus"))
        assert "bogus-1" in st.markdown.call_args.args[0]


class TestRenderInputs:
    def test_form_field_writes_model(self, st):
        st.text_input.return_value = "Alice"
        c = make_component("form_field-1", "form_field", {"hint": "Name", "label": "Name"})
        c.render()
        assert c.model.get() == "Alice"
        assert st.text_input.call_args.kwargs["key"] == "form_field-1"

    def test_date_keeps_time_of_day(self, st):
        st.date_input.return_value = date(2023, 6, 15)
        c = make_component("date-1", "date")
        c.model.set(datetime(2020, 1, 1, 8, 30))
        c.render()
        assert c.model.get() == datetime(2023, 6, 15, 8, 30)

    def test_time_keeps_date(self, st):
        st.time_input.return_value = time(14, 5)
        c = make_component("time-1", "time")
        c.model.set(datetime(2020, 1, 1, 8, 30))
        c.render()
        assert c.model.get() == datetime(2020, 1, 1, 14, 5)

    def test_labelled_picker_is_segmented(self, st):
        st.radio.return_value = "dog"
        c = make_component("picker-1", "picker", {"label": "Pet"}, ["cat", "dog"])
        c.render()
        assert st.radio.call_args.kwargs["horizontal"] is True
        assert c.model.get() == "dog"

    def test_unlabelled_picker_is_selectbox(self, st):
        st.selectbox.return_value = "dog"
        c = make_component("picker-1", "picker", options=["cat", "dog"])
        c.render()
        st.radio.assert_not_called()
        assert c.model.get() == "dog"

    def test_empty_picker_keeps_model(self, st):
        st.selectbox.return_value = None
        c = make_component("picker-1", "picker")
        c.render()
        assert c.model.get() == ""

    def test_checkbox_and_toggle(self, st):
        st.checkbox.return_value = False
        st.toggle.return_value = False
        checkbox = make_component("checkbox-1", "checkbox", {"label": "Agree"})
        toggle = make_component("toggle-1", "toggle", {"label": "On"})
        checkbox.render()
        toggle.render()
        assert checkbox.model.get() is False
        assert toggle.model.get() is False

    def test_slider(self, st):
        st.slider.return_value = 12.0
        c = make_component("slider-1", "slider", {"min": "0", "max": "20", "step": "2"})
        c.render()
        kwargs = st.slider.call_args.kwargs
        assert (kwargs["min_value"], kwargs["max_value"], kwargs["step"]) == (0.0, 20.0, 2.0)
        assert c.model.get() == 12.0

    def test_filepicker_reads_first_upload(self, st):
        first = Mock()
        first.name = "a.txt"
        first.getvalue.return_value = b"a"
        second = Mock()
        second.name = "b.txt"
        st.file_uploader.return_value = [first, second]

        c = make_component("filepicker-1", "filepicker", {"label": "Doc", "buttonText": "Pick"})
        c.render()

        assert st.file_uploader.call_args.kwargs["accept_multiple_files"] is True
        assert (c.model.name, c.model.data) == ("a.txt", b"a")
        st.caption.assert_called_with("a.txt")

    def test_filepicker_without_upload(self, st):
        st.file_uploader.return_value = []
        c = make_component("filepicker-1", "filepicker", {"buttonText": "Pick"})
        c.render()
        assert c.model.get() is None
        st.caption.assert_not_called()

    def test_filepicker_cleared_upload_drops_selection(self, st):
        upload = Mock()
        upload.name = "a.txt"
        upload.getvalue.return_value = b"a"
        st.file_uploader.return_value = [upload]
        c = make_component("filepicker-1", "filepicker", {"buttonText": "Pick"})
        c.render()
        assert c.model.name == "a.txt"

        st.file_uploader.return_value = []
        st.caption.reset_mock()
        c.render()

        assert c.model.get() is None
        st.caption.assert_not_called()
        assert ValueCollector(collect_extended_types=True).collect([c]) == []
