# -*- coding: utf-8 -*-
"""
Tests for the general configuration wizard page.
"""

import pytest

from setup_ui.forms.base import Note
from setup_ui.forms.config.logging import LoggingConfigForm
from setup_ui.setup.general_config_page import GeneralConfigPage


@pytest.fixture
def page():
    return GeneralConfigPage()


class TestGeneralConfigPage:

    def test_name(self, page):
        assert page.get_name() == "setup_general_config"

    def test_init_is_idempotent(self, page):
        page.init()
        page.init()

        assert page.get_name() == "setup_general_config"

    @pytest.mark.parametrize("form_data", [{}, {"logging_log": "file"}, {"logging_log": "none"}])
    def test_element_order(self, page, form_data):
        page.create_elements(form_data)
        names = [el.name for el in page.get_elements()]
        logging_names = [el.name for el in LoggingConfigForm().create_elements(form_data).get_elements()]

        assert names == ["description", "global_filemode"] + logging_names
        assert names.count("global_filemode") == 1

    def test_description_note(self, page):
        page.create_elements({})
        note = page.get_element("description")

        assert isinstance(note, Note)
        assert note.value.startswith("Now please adjust all application and logging")

    def test_other_application_fields_are_dropped(self, page):
        page.create_elements({})

        assert page.get_element("global_modulepath") is None
        assert page.get_element("preferences_type") is None

    def test_create_elements_returns_page(self, page):
        assert page.create_elements({}) is page

    def test_values(self, page):
        data = {
            "global_filemode": "0660",
            "logging_log": "syslog",
            "logging_level": "WARNING",
            "logging_application": "setup",
        }

        assert page.is_valid(data) is True
        assert page.get_values() == data
