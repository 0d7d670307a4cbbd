# -*- coding: utf-8 -*-
"""
Tests for the Tabs container.
"""

import pytest

from setup_ui.config import WIZARD_TABS, TabConfig
from setup_ui.exceptions import ConfigurationError
from setup_ui.web.widgets.tab import Tab
from setup_ui.web.widgets.tabs import Tabs


@pytest.fixture
def tabs():
    return Tabs([
        {"name": "one", "title": "One"},
        Tab(name="two", title="Two"),
        {"name": "three", "title": "Three"},
    ])


class TestTabs:
    """Test tab group management."""

    def test_keeps_insertion_order(self, tabs):
        assert tabs.names() == ["one", "two", "three"]
        assert len(tabs) == 3

    def test_duplicate_name_rejected(self, tabs):
        with pytest.raises(ConfigurationError, match="Duplicate"):
            tabs.add({"name": "two"})

    def test_activate_leaves_single_active_tab(self, tabs):
        tabs.activate("one").activate("three")

        assert [tab.active for tab in tabs] == [False, False, True]
        assert tabs.get_active_name() == "three"

    def test_activate_unknown_tab(self, tabs):
        with pytest.raises(ConfigurationError):
            tabs.activate("four")

    def test_no_active_tab(self, tabs):
        assert tabs.get_active_name() is None

    def test_get(self, tabs):
        assert tabs.get("two").title == "Two"
        assert tabs.get("missing") is None

    def test_render(self, tabs, recording_context):
        tabs.activate("two")

        assert tabs.render(recording_context) == (
            '<ul class="tabs">\n'
            "<li >One</li>\n"
            '<li class="active">Two</li>\n'
            "<li >Three</li>\n"
            "</ul>\n"
        )

    def test_render_empty(self, recording_context):
        assert Tabs().render(recording_context) == ""

    def test_from_config(self):
        tabs = Tabs.from_config([TabConfig("a", "A", url="x", icon_cls="cog")])
        tab = tabs.get("a")

        assert tab.title == "A"
        assert tab.url == "x"

    def test_wizard_tabs(self):
        tabs = Tabs.from_config(WIZARD_TABS)

        assert tabs.names() == [cfg.key for cfg in WIZARD_TABS]
        assert "general" in tabs.names()
