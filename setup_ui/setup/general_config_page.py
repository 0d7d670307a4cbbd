"""
Wizard page to define the application and logging configuration.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from setup_ui.forms.base import Form, Note
from setup_ui.forms.config.application import ApplicationConfigForm
from setup_ui.forms.config.logging import LoggingConfigForm
from setup_ui.forms.selection import select_elements
from setup_ui.i18n import mt

logger = logging.getLogger(__name__)

PAGE_NAME = "setup_general_config"

# Only these application settings are asked for during setup
APPLICATION_FIELDS = ("global_filemode",)


class GeneralConfigPage(Form):
    def init(self) -> None:
        self.set_name(PAGE_NAME)

    def create_elements(self, form_data: Mapping[str, Any]) -> "GeneralConfigPage":
        self.add_element(
            Note(
                "description",
                value=mt(
                    "setup",
                    "Now please adjust all application and logging related configuration options to fit your needs.",
                ),
            )
        )

        app_form = ApplicationConfigForm().create_elements(form_data)
        app_elements = select_elements(app_form, APPLICATION_FIELDS)
        self.add_elements(app_elements)

        logging_form = LoggingConfigForm().create_elements(form_data)
        logging_elements = select_elements(logging_form)
        self.add_elements(logging_elements)

        logger.debug(
            "Merged %d application and %d logging element(s) into %s",
            len(app_elements),
            len(logging_elements),
            self.get_name(),
        )
        return self
