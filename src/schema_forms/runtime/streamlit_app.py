"""
Dynamic Form Page - renders a layout and collects its values.

The layout is loaded once per session into a component registry. Every
script rerun draws the components top to bottom, then a SUBMIT button that
disables itself after the first submission, then the collected values.

Usage:
    streamlit run src/schema_forms/runtime/streamlit_app.py
"""

import streamlit as st

from schema_forms.runtime.collector import ValueCollector
from schema_forms.runtime.registry import ComponentRegistry
from schema_forms.runtime.submission import SubmitAction
from schema_forms.startup import ensure_initialized, layout_source


def init_page_state() -> None:
    """Load the registry and submit action into session state once."""
    settings = ensure_initialized()

    if "registry" not in st.session_state:
        registry = ComponentRegistry()
        registry.load(layout_source(settings))
        st.session_state.registry = registry
    if "submit_action" not in st.session_state:
        collector = ValueCollector(collect_extended_types=settings.collect_extended_types)
        st.session_state.submit_action = SubmitAction(st.session_state.registry, collector)


def on_submit() -> None:
    st.session_state.submit_action.submit()


def main() -> None:
    settings = ensure_initialized()
    st.set_page_config(page_title=settings.page_title, layout="centered")

    init_page_state()
    registry = st.session_state.registry
    submit_action = st.session_state.submit_action

    for component in registry:
        component.render()

    st.button(
        "SUBMIT",
        on_click=on_submit,
        disabled=not submit_action.enabled,
        type="primary",
        key="__submit__",
    )

    for value in submit_action.results:
        st.text(value)


main()
