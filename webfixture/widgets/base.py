"""
================================================================================
Fixture Widget Base
================================================================================

Base class for the fixture-friendly representation of a UI widget.

The base class exposes every widget action the fixture knows about. Each
variant overrides the actions it supports; the rest raise
`UnsupportedActionError` naming the widget, its type and the action. A few
actions that only need the locator (existence, visibility, waits) are
implemented here for all variants.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, NoReturn

from webfixture.browser.driver import Browser
from webfixture.errors import UnsupportedActionError


class FixtureWidget:
    """
    A named, typed widget bound to one locator on one form.

    Widgets do not hold references to their parent or children; the
    owning `WidgetRegistry` records the tree.

    Attributes:
        name: Descriptive widget name used by tests
        locator: Driver locator, the form's ID base followed by the widget id
    """

    FRIENDLY_TYPE: str = "Widget"

    def __init__(self, name: str, widget_id: str, id_base: str, browser: Browser):
        """
        Args:
            name: Descriptive widget name, unique within its form
            widget_id: Widget id from the layout map
            id_base: Form-wide locator prefix (definition id plus separator)
            browser: Driver the widget forwards its actions to

        Raises:
            ValueError: An argument is empty or missing
        """
        if not name:
            raise ValueError("The widget name must be non-empty.")
        if not widget_id:
            raise ValueError("The widget ID must be non-empty.")
        if not id_base:
            raise ValueError("The form-wide ID base must be non-empty.")
        if browser is None:
            raise ValueError("The automation browser object must be non-null.")

        self._name = name
        self._widget_id = widget_id
        self._browser = browser
        self._locator = self._create_locator(widget_id, id_base)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self._name!r} locator={self._locator!r}>"

    @staticmethod
    def _create_locator(widget_id: str, id_base: str) -> str:
        return f"{id_base}{widget_id}"

    @property
    def name(self) -> str:
        return self._name

    @property
    def widget_id(self) -> str:
        return self._widget_id

    @property
    def locator(self) -> str:
        return self._locator

    @property
    def wait_target_locator(self) -> str:
        """
        Locator to wait on when this widget is the target of a wait.

        Usually the widget's own locator; variants whose visible part is a
        sub-element override it.
        """
        return self._locator

    @property
    def friendly_type(self) -> str:
        return self.FRIENDLY_TYPE

    @property
    def browser(self) -> Browser:
        return self._browser

    def _unsupported(self, action: str) -> NoReturn:
        raise UnsupportedActionError(self._name, self.friendly_type, action)

    # =========================================================================
    # Actions supported by every widget
    # =========================================================================

    def exists(self) -> bool:
        return self._browser.exists(self._locator)

    def is_visible(self) -> bool:
        return self._browser.is_visible(self._locator)

    def is_disabled(self) -> bool:
        return not self._browser.is_enabled(self._locator)

    def wait_for(self) -> bool:
        return self._browser.wait_for_element(self.wait_target_locator)

    def wait_for_not_visible(self) -> bool:
        return self._browser.wait_for_no_element(self.wait_target_locator)

    # =========================================================================
    # Variant-specific actions (unsupported unless overridden)
    # =========================================================================

    def click(self) -> bool:
        self._unsupported("click")

    def clear(self) -> bool:
        self._unsupported("clear")

    def type(self, value: str) -> bool:
        self._unsupported("type")

    def type_without_clear(self, value: str) -> bool:
        self._unsupported("type_without_clear")

    def get_text(self) -> str:
        self._unsupported("get_text")

    def check(self) -> bool:
        self._unsupported("check")

    def uncheck(self) -> bool:
        self._unsupported("uncheck")

    def is_checked(self) -> bool:
        self._unsupported("is_checked")

    def select(self) -> bool:
        self._unsupported("select")

    def is_selected(self) -> bool:
        self._unsupported("is_selected")

    def select_option(self, option: str) -> bool:
        self._unsupported("select_option")

    def get_all_options(self) -> List[str]:
        self._unsupported("get_all_options")

    def get_selected_options(self) -> List[str]:
        self._unsupported("get_selected_options")

    def get_cell_text(self, row: int, column: int) -> str:
        self._unsupported("get_cell_text")

    def get_row_count(self) -> int:
        self._unsupported("get_row_count")

    def get_header_cell_text(self, column: int) -> str:
        self._unsupported("get_header_cell_text")

    def get_column_index(self, column_locator: str) -> int:
        self._unsupported("get_column_index")

    def click_cell(self, row: int, column: int) -> bool:
        self._unsupported("click_cell")

    def set_date(self, value: str) -> bool:
        self._unsupported("set_date")
