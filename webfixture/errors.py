"""
================================================================================
Fixture Exceptions
================================================================================

Exception hierarchy shared by the configuration parser, the widget layer and
the fixture surface.

    FixtureError
     +-- ConfigurationError
     |    +-- UnknownFormError
     |    +-- UnknownWidgetError
     +-- UnsupportedActionError

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations


class FixtureError(Exception):
    """Base class for all errors raised by the fixture framework."""
    pass


class ConfigurationError(FixtureError):
    """Raised when a layout map or settings file is invalid or inconsistent."""
    pass


class UnknownFormError(ConfigurationError):
    """Raised when switching to a form the layout map does not declare."""

    def __init__(self, ui_name: str, form_name: str):
        self.ui_name = ui_name
        self.form_name = form_name
        super().__init__(
            f"UI '{ui_name}' does not contain a popup form named '{form_name}'."
        )


class UnknownWidgetError(ConfigurationError):
    """Raised when a widget name is not defined on the active form."""

    def __init__(self, ui_name: str, widget_name: str, form_name: str):
        self.ui_name = ui_name
        self.widget_name = widget_name
        self.form_name = form_name
        where = "main form" if not form_name else f"'{form_name}' form"
        super().__init__(
            f"UI '{ui_name}' does not contain widget '{widget_name}' on its {where}."
        )


class UnsupportedActionError(FixtureError):
    """Raised when a widget variant does not support the requested action."""

    def __init__(self, widget_name: str, friendly_type: str, action: str):
        self.widget_name = widget_name
        self.friendly_type = friendly_type
        self.action = action
        super().__init__(
            f"'{widget_name}' is a '{friendly_type}' which does not support '{action}'"
        )


__all__ = [
    "FixtureError",
    "ConfigurationError",
    "UnknownFormError",
    "UnknownWidgetError",
    "UnsupportedActionError",
]
