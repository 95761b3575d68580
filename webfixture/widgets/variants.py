"""
Widget variants.

One class per widget kind the layout maps can declare. Each forwards the
actions it supports to the browser driver.
"""

from __future__ import annotations

from typing import List, Union

from loguru import logger

from .base import FixtureWidget


class Button(FixtureWidget):
    FRIENDLY_TYPE = "Button"

    def click(self) -> bool:
        return self.browser.click(self.locator)

    def get_text(self) -> str:
        return self.browser.get_text(self.locator)


class Label(FixtureWidget):
    FRIENDLY_TYPE = "Label"

    def click(self) -> bool:
        return self.browser.click(self.locator)

    def get_text(self) -> str:
        return self.browser.get_text(self.locator)


class CheckBox(FixtureWidget):
    FRIENDLY_TYPE = "CheckBox"

    def is_checked(self) -> bool:
        return self.browser.is_checked(self.locator)

    def check(self) -> bool:
        if not self.is_checked():
            self.browser.click(self.locator)
        return self.is_checked()

    def uncheck(self) -> bool:
        if self.is_checked():
            self.browser.click(self.locator)
        return not self.is_checked()

    def click(self) -> bool:
        return self.browser.click(self.locator)


class RadioButton(FixtureWidget):
    FRIENDLY_TYPE = "RadioButton"

    def is_selected(self) -> bool:
        return self.browser.is_checked(self.locator)

    def select(self) -> bool:
        if not self.is_selected():
            self.browser.click(self.locator)
        return self.is_selected()


class Tab(FixtureWidget):
    """A tab header; selection state is read from `aria-selected`."""

    FRIENDLY_TYPE = "Tab"

    def is_selected(self) -> bool:
        return self.browser.get_attribute(self.locator, "aria-selected") == "true"

    def select(self) -> bool:
        if not self.is_selected():
            self.browser.click(self.locator)
        return self.is_selected()


class ListBox(FixtureWidget):
    FRIENDLY_TYPE = "ListBox"

    def get_text(self) -> str:
        selected = self.browser.get_selected_options(self.locator)
        return selected[0] if selected else ""

    def select_option(self, option: str) -> bool:
        return self.browser.select_option(self.locator, option)

    def get_all_options(self) -> List[str]:
        return list(self.browser.get_all_options(self.locator))

    def get_selected_options(self) -> List[str]:
        return list(self.browser.get_selected_options(self.locator))


class Table(FixtureWidget):
    """A data grid. Rows and columns are 1-based."""

    FRIENDLY_TYPE = "Table"

    def get_row_count(self) -> int:
        return self.browser.get_row_count(self.locator)

    @staticmethod
    def _check_cell(row: int, column: int) -> None:
        if row < 1 or column < 1:
            raise ValueError(f"Row and column indexes are 1-based, got ({row}, {column}).")

    def get_cell_text(self, row: int, column: int) -> str:
        self._check_cell(row, column)
        return self.browser.get_cell_text(self.locator, row, column)

    def click_cell(self, row: int, column: int) -> bool:
        self._check_cell(row, column)
        return self.browser.click_cell(self.locator, row, column)

    def get_header_cell_text(self, column: int) -> str:
        self._check_cell(1, column)
        return self.browser.get_header_cell_text(self.locator, column)

    def get_column_index(self, column_locator: str) -> int:
        """
        Position of the column whose header carries the given id.

        Raises:
            ValueError: No header cell has that id
        """
        index = self.browser.get_column_index(self.locator, column_locator)
        if index < 1:
            raise ValueError(f"Table '{self.name}' has no column header with id '{column_locator}'.")
        return index


class OnePageTable(Table):
    """A table that shows all of its rows at once (no pager)."""

    FRIENDLY_TYPE = "OnePageTable"


class ComboBox(FixtureWidget):
    """An editable drop-down; its text is whatever the input shows."""

    FRIENDLY_TYPE = "ComboBox"

    def click(self) -> bool:
        return self.browser.click(self.locator)

    def get_text(self) -> str:
        return self.browser.get_text(self.locator)

    def select_option(self, option: str) -> bool:
        return self.browser.select_option(self.locator, option)

    def get_all_options(self) -> List[str]:
        return list(self.browser.get_all_options(self.locator))


class TextBox(FixtureWidget):
    FRIENDLY_TYPE = "TextBox"

    def click(self) -> bool:
        return self.browser.click(self.locator)

    def clear(self) -> bool:
        return self.browser.clear(self.locator)

    def type(self, value: str) -> bool:
        return self.browser.type(self.locator, value)

    def type_without_clear(self, value: str) -> bool:
        return self.browser.type_without_clear(self.locator, value)

    def get_text(self) -> str:
        return self.browser.get_text(self.locator)


class PasswordTextBox(TextBox):
    """A text box whose content is never read back."""

    FRIENDLY_TYPE = "PasswordTextBox"

    def get_text(self) -> str:
        self._unsupported("get_text")


class NumberTextBox(TextBox):
    FRIENDLY_TYPE = "NumberTextBox"

    def type(self, value: Union[str, int, float]) -> bool:
        return super().type(str(value))

    def type_without_clear(self, value: Union[str, int, float]) -> bool:
        return super().type_without_clear(str(value))


class DateBox(TextBox):
    FRIENDLY_TYPE = "DateBox"

    def set_date(self, value: str) -> bool:
        self.clear()
        self.type(value)
        actual = self.get_text()
        if actual != value:
            logger.warning(f"Date box '{self.name}' shows '{actual}' after typing '{value}'")
            return False
        return True


__all__ = [
    "Button",
    "CheckBox",
    "ComboBox",
    "DateBox",
    "Label",
    "ListBox",
    "NumberTextBox",
    "OnePageTable",
    "PasswordTextBox",
    "RadioButton",
    "Tab",
    "Table",
    "TextBox",
]
