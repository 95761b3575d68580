"""
Constants relating to layout map (fixture configuration) file contents.
"""

from enum import Enum


class Tags:
    """XML element tag names."""

    UI = "ui"
    FORM = "form"
    WIDGET = "widget"


class Attributes:
    """XML attribute names."""

    APPLICATION = "application"
    APPLICATION_FULL_NAME = "applicationfullname"
    CATEGORY = "category"
    DEFINITION_ID = "definitionID"
    EXISTENCE_VALIDATION_WIDGET = "existenceValidationWidget"
    ID = "id"
    MENU_NAME = "menuName"
    NAME = "name"
    TYPE = "type"


class FormType(str, Enum):
    """Values of a form element's `type` attribute."""

    MAIN = "main"
    POPUP = "popup"


# Form key of the main UI.
MAIN_FORM = ""

# Joins a form's definition id and a widget id into a locator.
ID_BASE_SEPARATOR = "_"
