"""
Form building blocks: elements, the base form and field selection.
"""

from setup_ui.forms.base import Form, FormElement, Note, SelectElement, TextElement
from setup_ui.forms.selection import select_elements

__all__ = ["Form", "FormElement", "Note", "SelectElement", "TextElement", "select_elements"]
