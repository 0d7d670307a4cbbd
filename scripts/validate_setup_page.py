"""Quick validation script for the general configuration wizard page.

Run with `python scripts/validate_setup_page.py` to ensure the page merges
the expected fields and renders the wizard tab bar.
"""

from __future__ import annotations

from setup_ui import config
from setup_ui.setup.general_config_page import GeneralConfigPage
from setup_ui.web.view import RenderContext
from setup_ui.web.widgets.tabs import Tabs


def main() -> None:
    page = GeneralConfigPage()
    page.create_elements({"logging_log": "file"})
    names = [el.name for el in page.get_elements()]

    expected = ["description", "global_filemode", "logging_log", "logging_level", "logging_file"]
    if names != expected:
        raise SystemExit(f"Unexpected elements: {names}")

    assert page.is_valid({"global_filemode": "0660", "logging_log": "file", "logging_level": "DEBUG",
                          "logging_file": "/tmp/setup.log"}), page.errors
    assert not page.is_valid({"global_filemode": "rw-rw----"}), "Non-octal file mode should be rejected"

    markup = Tabs.from_config(config.WIZARD_TABS).activate("general").render(RenderContext())
    assert '<li class="active">' in markup, "Active tab should carry the active class"

    print("Setup page validation passed. Elements:", ", ".join(names))


if __name__ == "__main__":
    main()
