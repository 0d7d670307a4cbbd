from __future__ import annotations

from typing import Any, Mapping

from setup_ui import config
from setup_ui.forms.base import Form, SelectElement, TextElement
from setup_ui.i18n import mt

LOG_TYPES = {
    "syslog": "Syslog",
    "file": "File",
    "none": "None",
}

LOG_LEVELS = {
    "ERROR": "Error",
    "WARNING": "Warning",
    "INFO": "Information",
    "DEBUG": "Debug",
}


class LoggingConfigForm(Form):
    """
    Logging settings.

    Which fields exist depends on the submitted `logging_log` type: syslog asks
    for an application prefix, file for a path, none for nothing further.
    """

    def init(self) -> None:
        self.set_name("form_config_general_logging")

    def create_elements(self, form_data: Mapping[str, Any]) -> "LoggingConfigForm":
        log_type = form_data.get("logging_log") or "syslog"

        self.add_element(
            SelectElement(
                "logging_log",
                label=mt("config", "Logging Type"),
                value=log_type,
                description=mt("config", "The type of logging to utilize."),
                required=True,
                options={key: mt("config", label) for key, label in LOG_TYPES.items()},
            )
        )

        if log_type == "none":
            return self

        self.add_element(
            SelectElement(
                "logging_level",
                label=mt("config", "Logging Level"),
                value="ERROR",
                description=mt("config", "The maximum logging level to emit."),
                required=True,
                options={key: mt("config", label) for key, label in LOG_LEVELS.items()},
            )
        )

        if log_type == "syslog":
            self.add_element(
                TextElement(
                    "logging_application",
                    label=mt("config", "Application Prefix"),
                    value=config.DEFAULT_LOG_APPLICATION,
                    description=mt("config", "The name of the application by which to prefix syslog messages."),
                    required=True,
                    pattern=r"^\S+$",
                    pattern_message=mt("config", "The application prefix cannot contain any whitespaces."),
                )
            )
        elif log_type == "file":
            self.add_element(
                TextElement(
                    "logging_file",
                    label=mt("config", "File path"),
                    value=config.DEFAULT_LOG_FILE,
                    description=mt("config", "The full path to the log file to write messages to."),
                    required=True,
                )
            )
        return self
