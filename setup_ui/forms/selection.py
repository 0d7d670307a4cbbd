"""
Pick a subset of elements out of another form.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from setup_ui.exceptions import ConfigurationError
from setup_ui.forms.base import Form, FormElement


def select_elements(form: Form, names: Optional[Iterable[str]] = None) -> List[FormElement]:
    """
    Return the elements of `form` whose name is in `names`, in form order.

    `names=None` keeps every element. Asking for a name the form does not
    have raises `ConfigurationError`.
    """
    elements = form.get_elements()
    if names is None:
        return elements
    wanted = set(names)
    missing = wanted.difference(el.name for el in elements)
    if missing:
        raise ConfigurationError(
            f"Form {form.get_name()!r} has no element(s): {', '.join(sorted(missing))}"
        )
    return [el for el in elements if el.name in wanted]
