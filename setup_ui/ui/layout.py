"""
Layout helpers for the Streamlit application (page config, wizard tab bar).
"""

from __future__ import annotations

import streamlit as st

from setup_ui.web.view import RenderContext
from setup_ui.web.widgets.tabs import Tabs


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="Setup Wizard",
        layout="centered",
        page_icon=":gear:",
    )
    _inject_tab_bar_styles()


def render_tab_bar(tabs: Tabs, context: RenderContext) -> None:
    """Emit the server-rendered tab list as raw HTML."""
    markup = tabs.render(context)
    if not markup:
        return
    st.markdown(markup, unsafe_allow_html=True)


def _inject_tab_bar_styles() -> None:
    """Style the `<ul class="tabs">` markup as a horizontal step bar.

    Notes:
    - Scoped to `ul.tabs` so lists rendered by other markdown stay untouched.
    - Icon classes (`icon-*`) have no font attached; they only reserve space.
    """
    st.markdown(
        """
        <style>
        ul.tabs {
            display: flex;
            gap: 0.25rem;
            list-style: none;
            margin: 0 0 1rem 0;
            padding: 0;
            border-bottom: 1px solid #d0d7de;
        }
        ul.tabs li {
            margin: 0;
            padding: 0.4rem 0.8rem;
            color: #57606a;
        }
        ul.tabs li a {
            color: inherit;
            text-decoration: none;
        }
        ul.tabs li.active {
            color: #0969da;
            border-bottom: 2px solid #0969da;
            font-weight: 600;
        }
        ul.tabs li i[class^="icon-"] {
            display: inline-block;
            width: 0.5rem;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
