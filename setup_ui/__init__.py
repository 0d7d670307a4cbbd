"""
Core package for the setup wizard user interface.

Submodules provide the tab navigation widget, form building blocks, the
general configuration wizard page and the Streamlit rendering helpers that
are orchestrated by the top-level `app.py`.
"""
