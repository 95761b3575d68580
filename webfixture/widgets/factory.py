"""
================================================================================
Widget Factory
================================================================================

Turns a (name, id, type, id base) tuple from a layout map into a typed
widget.

The type tag is resolved through the closed `WidgetType` enumeration and a
total mapping from tag to widget class. A tag that is empty or not in the
enumeration is not an error: layout maps are shared with tooling that
declares structural elements automation has no use for. For those the
factory logs a warning and returns the `UNSUPPORTED` sentinel.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Type, Union

from loguru import logger

from webfixture.browser.driver import Browser

from .base import FixtureWidget
from .variants import (
    Button,
    CheckBox,
    ComboBox,
    DateBox,
    Label,
    ListBox,
    NumberTextBox,
    OnePageTable,
    PasswordTextBox,
    RadioButton,
    Tab,
    Table,
    TextBox,
)


class WidgetType(str, Enum):
    """Widget type tags understood by the factory, as written in layout maps."""

    BUTTON = "genericButton"
    CHECKBOX = "genericCheckBox"
    COMBO_BOX = "cnaListBox"
    DATE_BOX = "genericDateBox"
    LABEL = "genericLabel"
    LIST_BOX = "genericListBox"
    NUMBER_TEXT_BOX = "NumberTextBox"
    ONE_PAGE_TABLE = "genericOnePageTable"
    PASSWORD_TEXT_BOX = "genericPasswordTextBox"
    RADIO_BUTTON = "genericRadioButton"
    TAB = "cnaTab"
    TABLE = "genericTable"
    TEXT_BOX = "genericTextBox"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> Optional["WidgetType"]:
        """Return the matching member, or None for an empty or unknown tag."""
        if not tag:
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


class Unsupported(Enum):
    """Sentinel type returned for widget types the factory does not build."""

    TOKEN = "unsupported"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSUPPORTED"


UNSUPPORTED = Unsupported.TOKEN


def _build_creators() -> Mapping[WidgetType, Type[FixtureWidget]]:
    # NOTE: For proper maintenance, please keep these in alphabetical order.
    creators = {
        WidgetType.BUTTON: Button,
        WidgetType.CHECKBOX: CheckBox,
        WidgetType.COMBO_BOX: ComboBox,
        WidgetType.DATE_BOX: DateBox,
        WidgetType.LABEL: Label,
        WidgetType.LIST_BOX: ListBox,
        WidgetType.NUMBER_TEXT_BOX: NumberTextBox,
        WidgetType.ONE_PAGE_TABLE: OnePageTable,
        WidgetType.PASSWORD_TEXT_BOX: PasswordTextBox,
        WidgetType.RADIO_BUTTON: RadioButton,
        WidgetType.TAB: Tab,
        WidgetType.TABLE: Table,
        WidgetType.TEXT_BOX: TextBox,
    }

    missing = set(WidgetType) - set(creators)
    if missing:
        raise RuntimeError(f"No widget class registered for: {sorted(m.value for m in missing)}")

    return MappingProxyType(creators)


CREATORS_BY_TYPE: Mapping[WidgetType, Type[FixtureWidget]] = _build_creators()


class WidgetFactory:
    """
    Creates widgets bound to one browser driver.

    Usage:
        >>> factory = WidgetFactory(browser)
        >>> factory.create("saveButton", "btnSave", "genericButton", "GL1200_")
        <Button name='saveButton' locator='GL1200_btnSave'>
        >>> factory.create("panel", "pnlMain", "genericPanel", "GL1200_")
        UNSUPPORTED
    """

    def __init__(self, browser: Browser):
        if browser is None:
            raise ValueError("The automation browser object must be non-null.")
        self._browser = browser

    @property
    def browser(self) -> Browser:
        return self._browser

    def create(
        self,
        name: str,
        widget_id: str,
        widget_type: Optional[str],
        id_base: str,
    ) -> Union[FixtureWidget, Unsupported]:
        """
        Create the widget for one layout map entry.

        Args:
            name: Descriptive widget name
            widget_id: Widget id used to build the locator
            widget_type: Type tag from the layout map (may be empty or unknown)
            id_base: Form-wide locator prefix

        Returns:
            The new widget, or UNSUPPORTED when the type tag has no widget class

        Raises:
            ValueError: name, widget_id or id_base is empty
        """
        if not name:
            raise ValueError("The widget name must be non-empty.")
        if not widget_id:
            raise ValueError("The widget ID must be non-empty.")

        kind = WidgetType.from_tag(widget_type)
        if kind is None:
            logger.warning(
                f"Widget '{name}' is of type '{widget_type}' which is not supported "
                f"for fixture tests; skipping it."
            )
            return UNSUPPORTED

        return CREATORS_BY_TYPE[kind](name, widget_id, id_base, self._browser)


__all__ = [
    "CREATORS_BY_TYPE",
    "UNSUPPORTED",
    "Unsupported",
    "WidgetFactory",
    "WidgetType",
]
