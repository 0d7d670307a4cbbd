# -*- coding: utf-8 -*-
"""
Tests for the form model.

Tests cover:
- Element ordering and replacement
- Element validation
- Form validation and value collection
"""

import pytest

from setup_ui.forms.base import Form, FormElement, Note, SelectElement, TextElement


class TwoFieldForm(Form):
    def init(self):
        self.set_name("two_fields")

    def create_elements(self, form_data):
        self.add_element(Note("intro", value="Hello"))
        self.add_element(TextElement("port", label="Port", value="5665", required=True, pattern=r"\d+"))
        self.add_element(SelectElement("mode", value="a", options={"a": "A", "b": "B"}))
        return self


@pytest.fixture
def form():
    return TwoFieldForm()


class TestElements:
    """Test element level validation."""

    def test_required_empty(self):
        assert TextElement("host", label="Host", required=True, value="").validate() == ["Host is required"]

    def test_optional_empty_is_fine(self):
        assert TextElement("host", pattern=r"\w+").validate() == []

    def test_pattern_mismatch(self):
        element = TextElement("port", value="abc", pattern=r"\d+", pattern_message="Digits only")

        assert element.validate() == ["Digits only"]

    def test_select_rejects_unknown_option(self):
        element = SelectElement("mode", value="c", options={"a": "A"})

        assert element.validate() == ["'c' is not a valid choice"]

    def test_note_is_ignored(self):
        assert Note("n").ignore is True
        assert FormElement("x").ignore is False


class TestForm:
    """Test form composition and validation."""

    def test_init_runs_on_construction(self, form):
        assert form.get_name() == "two_fields"

    def test_base_form_has_no_elements(self):
        base = Form("plain")

        assert base.create_elements({}) is base
        assert base.get_elements() == []

    def test_order_is_kept(self, form):
        form.create_elements({})

        assert [el.name for el in form.get_elements()] == ["intro", "port", "mode"]

    def test_add_element_replaces_in_place(self, form):
        form.create_elements({})
        form.add_element(TextElement("port", value="1"))

        assert [el.name for el in form.get_elements()] == ["intro", "port", "mode"]
        assert form.get_element("port").value == "1"

    def test_get_element_missing(self, form):
        assert form.get_element("nope") is None

    def test_is_valid(self, form):
        assert form.is_valid({"port": "80", "mode": "b"}) is True
        assert form.errors == {}
        assert form.get_values() == {"port": "80", "mode": "b"}

    def test_is_invalid(self, form):
        assert form.is_valid({"port": "eighty", "mode": "z"}) is False
        assert set(form.errors) == {"port", "mode"}

    def test_is_valid_does_not_duplicate_elements(self, form):
        form.create_elements({})
        form.is_valid({})

        assert len(form.get_elements()) == 3

    def test_note_value_not_overwritten(self, form):
        form.is_valid({"intro": "changed"})

        assert form.get_element("intro").value == "Hello"
