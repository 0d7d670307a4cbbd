"""
Render `Form` elements as Streamlit widgets.
"""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from setup_ui.forms.base import Form, FormElement, Note, SelectElement


def _widget_key(key_prefix: str, name: str) -> str:
    return f"{key_prefix}_{name}"


def current_form_data(key_prefix: str) -> Dict[str, Any]:
    """Collect values of previously rendered widgets from session_state."""
    prefix = f"{key_prefix}_"
    return {
        key[len(prefix):]: value
        for key, value in st.session_state.items()
        if isinstance(key, str) and key.startswith(prefix)
    }


def _render_element(element: FormElement, key_prefix: str) -> Any:
    key = _widget_key(key_prefix, element.name)
    if isinstance(element, Note):
        st.caption(str(element.value or ""))
        return None
    if isinstance(element, SelectElement):
        options = list(element.options)
        index = options.index(element.value) if element.value in options else 0
        return st.selectbox(
            element.label or element.name,
            options=options,
            index=index,
            format_func=lambda v: element.options.get(v, v),
            help=element.description or None,
            key=key,
        )
    return st.text_input(
        element.label or element.name,
        value="" if element.value is None else str(element.value),
        help=element.description or None,
        key=key,
    )


def render_form(form: Form, key_prefix: str) -> Dict[str, Any]:
    """Render every element of `form` and return the current widget values."""
    values: Dict[str, Any] = {}
    for element in form.get_elements():
        value = _render_element(element, key_prefix)
        if not element.ignore:
            values[element.name] = value
    return values


def render_errors(form: Form) -> None:
    for name, messages in form.errors.items():
        element = form.get_element(name)
        label = element.label if element is not None and element.label else name
        for message in messages:
            st.error(f"{label}: {message}")
