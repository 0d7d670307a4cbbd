"""
Exceptions raised by the setup UI package.
"""


class ConfigurationError(Exception):
    """Raised when a widget or form is wired up incorrectly by its caller."""
