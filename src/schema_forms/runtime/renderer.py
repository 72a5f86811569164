"""
Streamlit rendering of components.

Every draw call writes the widget's current value back into the
component's widget model, so the models always hold what the user sees.
Widget keys are the component ids, which keeps Streamlit's own widget
state stable across script reruns.
"""

import html
import logging
import string
from datetime import datetime
from typing import Any, Callable, Dict, Optional

import streamlit as st

from schema_forms.runtime.components import (
    CheckboxSpec,
    Component,
    DatePickerSpec,
    FilePickerSpec,
    FormFieldSpec,
    PickerSpec,
    SliderSpec,
    TextSpec,
    TimePickerSpec,
    ToggleSpec,
)
from schema_forms.runtime.file_picker import load_selection, picked_sources

logger = logging.getLogger(__name__)

TITLE_FONT = ".title"
DEFAULT_COLOR = "rgba(0, 0, 0, 1)"


def hex_to_css(hex_color: Optional[str]) -> str:
    """
    Convert a hex color to a CSS rgba() string.

    Accepts RGB (3 digits), RRGGBB (6) and AARRGGBB (8), with or without a
    leading '#'. Anything else renders black.

    >>> hex_to_css("#f00")
    'rgba(255, 0, 0, 1)'
    >>> hex_to_css("80FF0000")
    'rgba(255, 0, 0, 0.502)'
    """
    if not hex_color:
        return DEFAULT_COLOR

    digits = "".join(c for c in hex_color if c.isalnum())
    if not digits or any(c not in string.hexdigits for c in digits):
        return DEFAULT_COLOR
    value = int(digits, 16)

    if len(digits) == 3:
        a, r, g, b = 255, (value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17
    elif len(digits) == 6:
        a, r, g, b = 255, value >> 16, value >> 8 & 0xFF, value & 0xFF
    elif len(digits) == 8:
        a, r, g, b = value >> 24, value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF
    else:
        return DEFAULT_COLOR

    alpha = round(a / 255, 3)
    alpha_text = "1" if alpha == 1 else f"{alpha:g}"
    return f"rgba({r}, {g}, {b}, {alpha_text})"


def _labelled(label: Optional[str]):
    """Return the column to draw the input into, drawing the label beside it."""
    if not label:
        return st.container()
    label_col, input_col = st.columns([1, 3])
    with label_col:
        st.markdown(html.escape(label))
    return input_col


def render_text(component: Component, spec: TextSpec) -> Any:
    tag = "h1" if spec.font_type == TITLE_FONT else "span"
    color = hex_to_css(spec.font_color)
    return st.markdown(
        f"<{tag} style='color: {color}'>{html.escape(spec.text)}</{tag}>",
        unsafe_allow_html=True,
    )


def render_form_field(component: Component, spec: FormFieldSpec) -> Any:
    with _labelled(spec.label):
        value = st.text_input(
            spec.label or spec.hint or component.unique_id,
            value=spec.model.get(),
            placeholder=spec.hint,
            key=component.unique_id,
            label_visibility="collapsed",
        )
    spec.model.set(value or "")
    return value


def render_date(component: Component, spec: DatePickerSpec) -> Any:
    current = spec.model.get()
    selected = st.date_input(spec.label, value=current.date(), key=component.unique_id)
    if selected is not None:
        spec.model.set(datetime.combine(selected, current.time()))
    return selected


def render_time(component: Component, spec: TimePickerSpec) -> Any:
    current = spec.model.get()
    selected = st.time_input(spec.label, value=current.time(), key=component.unique_id)
    if selected is not None:
        spec.model.set(datetime.combine(current.date(), selected))
    return selected


def render_picker(component: Component, spec: PickerSpec) -> Any:
    if not spec.options:
        logger.debug(f"Picker '{component.unique_id}' has no options")
    current = spec.model.get()
    index = spec.options.index(current) if current in spec.options else 0

    if spec.label:
        with _labelled(spec.label):
            selected = st.radio(
                spec.label,
                spec.options,
                index=index if spec.options else None,
                horizontal=True,
                key=component.unique_id,
                label_visibility="collapsed",
            )
    else:
        selected = st.selectbox(
            component.unique_id,
            spec.options,
            index=index if spec.options else None,
            key=component.unique_id,
            label_visibility="collapsed",
        )

    if selected is not None:
        spec.model.set(selected)
    return selected


def render_checkbox(component: Component, spec: CheckboxSpec) -> Any:
    value = st.checkbox(spec.label, value=spec.model.get(), key=component.unique_id)
    spec.model.set(bool(value))
    return value


def render_toggle(component: Component, spec: ToggleSpec) -> Any:
    value = st.toggle(spec.label, value=spec.model.get(), key=component.unique_id)
    spec.model.set(bool(value))
    return value


def render_slider(component: Component, spec: SliderSpec) -> Any:
    current = min(max(float(spec.model.get()), spec.min_value), spec.max_value)
    value = st.slider(
        spec.label or component.unique_id,
        min_value=float(spec.min_value),
        max_value=float(spec.max_value),
        value=current,
        step=spec.step,
        key=component.unique_id,
        label_visibility="visible" if spec.label else "collapsed",
    )
    spec.model.set(value)
    return value


def render_filepicker(component: Component, spec: FilePickerSpec) -> Any:
    with _labelled(spec.label):
        uploaded = st.file_uploader(
            spec.button_text or "Choose file",
            accept_multiple_files=True,
            key=component.unique_id,
        )

    sources = picked_sources(uploaded)
    if not sources:
        spec.model.clear()
    elif sources[0].name != spec.model.name:
        load_selection(sources, spec.model)

    if spec.model.name is not None:
        st.caption(spec.model.name)
    return uploaded


_RENDERERS: Dict[type, Callable[[Component, Any], Any]] = {
    TextSpec: render_text,
    FormFieldSpec: render_form_field,
    DatePickerSpec: render_date,
    TimePickerSpec: render_time,
    PickerSpec: render_picker,
    CheckboxSpec: render_checkbox,
    ToggleSpec: render_toggle,
    SliderSpec: render_slider,
    FilePickerSpec: render_filepicker,
}


def render_component(component: Component) -> Any:
    """Draw one component according to its render spec."""
    renderer = _RENDERERS[type(component.spec)]
    return renderer(component, component.spec)
