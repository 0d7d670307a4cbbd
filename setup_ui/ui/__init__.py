"""
Streamlit rendering helpers for the setup wizard.
"""
