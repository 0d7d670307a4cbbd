from __future__ import annotations

from typing import Any, Mapping

from setup_ui import config
from setup_ui.forms.base import Form, SelectElement, TextElement
from setup_ui.i18n import mt

PREFERENCE_BACKENDS = {
    "ini": "File System (INI Files)",
    "db": "Database",
    "none": "Don't Store Preferences",
}


class ApplicationConfigForm(Form):
    """General application settings."""

    def init(self) -> None:
        self.set_name("form_config_general_application")

    def create_elements(self, form_data: Mapping[str, Any]) -> "ApplicationConfigForm":
        self.add_element(
            TextElement(
                "global_filemode",
                label=mt("config", "Default File Mode"),
                value=config.DEFAULT_FILEMODE,
                description=mt(
                    "config",
                    "This is the global default file mode for new configuration files created by the application.",
                ),
                required=True,
                pattern=r"^[0-7]{3,4}$",
                pattern_message=mt("config", "Must be an octal file mode, e.g. 2664"),
            )
        )
        self.add_element(
            TextElement(
                "global_modulepath",
                label=mt("config", "Module Path"),
                value=config.DEFAULT_MODULE_PATH,
                description=mt(
                    "config",
                    "Contains the directories that will be searched for available modules, separated by colons.",
                ),
            )
        )
        self.add_element(
            SelectElement(
                "preferences_type",
                label=mt("config", "User Preference Storage Type"),
                value="ini",
                required=True,
                options={key: mt("config", label) for key, label in PREFERENCE_BACKENDS.items()},
            )
        )
        return self
