"""
Minimal form model: ordered, named elements populated from submitted data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional


@dataclass
class FormElement:
    name: str
    label: str = ""
    value: Any = None
    description: str = ""
    required: bool = False
    ignore: bool = False  # excluded from Form.get_values()

    def validate(self) -> List[str]:
        if self.required and (self.value is None or self.value == ""):
            return [f"{self.label or self.name} is required"]
        return []


@dataclass
class Note(FormElement):
    ignore: bool = True


@dataclass
class TextElement(FormElement):
    pattern: Optional[str] = None
    pattern_message: str = "Invalid value"

    def validate(self) -> List[str]:
        errors = super().validate()
        if errors or not self.pattern or self.value in (None, ""):
            return errors
        if re.fullmatch(self.pattern, str(self.value)) is None:
            return [self.pattern_message]
        return []


@dataclass
class SelectElement(FormElement):
    options: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> List[str]:
        errors = super().validate()
        if errors or self.value in (None, ""):
            return errors
        if self.value not in self.options:
            return [f"{self.value!r} is not a valid choice"]
        return []


class Form:
    """
    Base form.

    Subclasses build their elements in `create_elements`, which may depend on
    already submitted data (e.g. a select switching dependent fields).
    `init` runs once from the constructor.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name
        self._elements: Dict[str, FormElement] = {}
        self.errors: Dict[str, List[str]] = {}
        self.init()

    def init(self) -> None:
        pass

    def set_name(self, name: str) -> "Form":
        self._name = name
        return self

    def get_name(self) -> Optional[str]:
        return self._name

    def add_element(self, element: FormElement) -> "Form":
        # Re-adding a name replaces the element in place
        self._elements[element.name] = element
        return self

    def add_elements(self, elements: Iterable[FormElement]) -> "Form":
        for element in elements:
            self.add_element(element)
        return self

    def get_element(self, name: str) -> Optional[FormElement]:
        return self._elements.get(name)

    def get_elements(self) -> List[FormElement]:
        return list(self._elements.values())

    def create_elements(self, form_data: Mapping[str, Any]) -> "Form":
        return self

    def populate(self, form_data: Mapping[str, Any]) -> "Form":
        for element in self._elements.values():
            if not element.ignore and element.name in form_data:
                element.value = form_data[element.name]
        return self

    def is_valid(self, form_data: Mapping[str, Any]) -> bool:
        """Rebuild the elements for `form_data`, populate and validate them."""
        self._elements.clear()
        self.create_elements(form_data)
        self.populate(form_data)
        self.errors = {}
        for element in self._elements.values():
            messages = element.validate()
            if messages:
                self.errors[element.name] = messages
        return not self.errors

    def get_values(self) -> Dict[str, Any]:
        return {el.name: el.value for el in self._elements.values() if not el.ignore}
