"""
================================================================================
Generic Web Fixture
================================================================================

Name-based test surface over one UI.

A fixture is built from a layout map and a browser driver. Tests address
widgets by the names the layout map gives them; every call is resolved
against the active form only, so a popup's widgets are reachable only after
`switch_form_context("<popup>")` and the main form's only after switching
back.

    fixture = GenericWebFixture("gl_batch_list.xml", browser, settings)
    fixture.open()
    fixture.type("description", "Month end accruals")
    fixture.click("detailButton")
    fixture.switch_form_context("batchDetail")
    fixture.wait_for_form()
    fixture.click("closeButton")
    fixture.switch_form_context()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Tuple, Union

import allure
from loguru import logger

from webfixture.browser.driver import Browser
from webfixture.common.settings import FixtureSettings
from webfixture.configuration.parser import ConfigurationParser
from webfixture.configuration.properties import FixtureProperties
from webfixture.errors import ConfigurationError
from webfixture.widgets.base import FixtureWidget
from webfixture.widgets.factory import WidgetFactory

from .form_context import FormContext


LayoutMap = Union[str, os.PathLike, FixtureProperties]


class GenericWebFixture:
    """
    Drives one UI through the widgets declared in its layout map.

    Widget-name operations raise `UnknownWidgetError` when the name is not
    on the active form, and `UnsupportedActionError` when the widget's kind
    does not support the action. Driver failures propagate unchanged.
    """

    def __init__(
        self,
        configuration: LayoutMap,
        browser: Browser,
        settings: Optional[FixtureSettings] = None,
        parser: Optional[ConfigurationParser] = None,
    ):
        """
        Args:
            configuration: Layout map path, or already parsed properties
            browser: Driver all widget actions are forwarded to
            settings: Run-time settings (defaults to `FixtureSettings()`)
            parser: Parser for layout map paths (defaults to one using a
                `WidgetFactory` bound to `browser`)
        """
        if browser is None:
            raise ValueError("The automation browser object must be non-null.")

        self.browser = browser
        self.settings = settings or FixtureSettings()
        self.parser = parser or ConfigurationParser(WidgetFactory(browser))
        self.context = FormContext(self._load(configuration))

    def __repr__(self) -> str:
        return f"<GenericWebFixture ui={self.properties.ui_name!r} form={self.current_form!r}>"

    def _load(self, configuration: LayoutMap) -> FixtureProperties:
        if isinstance(configuration, FixtureProperties):
            return configuration
        return self.parser.parse(self._resolve_path(configuration))

    def _resolve_path(self, path: Union[str, os.PathLike]) -> Path:
        if not os.fspath(path):
            raise ValueError("The configuration path must be non-empty.")
        layout_path = Path(path)
        if not layout_path.is_absolute() and self.settings.layout_map_dir:
            layout_path = Path(self.settings.layout_map_dir) / layout_path
        return layout_path

    # =========================================================================
    # Configuration and context
    # =========================================================================

    @property
    def properties(self) -> FixtureProperties:
        return self.context.properties

    @property
    def current_form(self) -> str:
        return self.context.current_form

    def change_layout_map(self, configuration: LayoutMap) -> FixtureProperties:
        """
        Point the fixture at another UI.

        The context returns to the main form with no iframe selected. On a
        configuration error the previous layout map stays in effect.
        """
        properties = self._load(configuration)
        with allure.step(f"Change layout map to UI '{properties.ui_name}'"):
            self.browser.switch_to_default_content()
            self.context = FormContext(properties)
            logger.info(f"Layout map changed to UI '{properties.ui_name}'")
        return properties

    def switch_form_context(self, form_name: Optional[str] = None) -> None:
        """Select the form that widget names resolve against; no name means main."""
        self.context.switch_form_context(form_name)

    def get_widget(self, widget_name: str) -> FixtureWidget:
        """Resolve a widget name on the active form."""
        return self.context.resolve(widget_name)

    # =========================================================================
    # Navigation
    # =========================================================================

    def url(self, url_parameters: str = "") -> str:
        return f"{self.settings.base_url}{self.properties.url_path()}{url_parameters}"

    def open(self, url_parameters: str = "") -> bool:
        """
        Navigate to the UI and wait for its main form.

        Args:
            url_parameters: Appended verbatim to the UI's URL, e.g. "?batch=12"

        Returns:
            True once the main form's existence validation widget is visible
        """
        url = self.url(url_parameters)
        with allure.step(f"Open UI '{self.properties.ui_name}'"):
            self.browser.switch_to_default_content()
            self.context.reset()
            self.browser.navigate(url)
            opened = self.browser.wait_for_element(self.properties.sign_in_validation_locator)
            if not opened:
                logger.warning(f"UI '{self.properties.ui_name}' did not open at {url}")
            return opened

    def wait_for_form(self, form_name: Optional[str] = None) -> bool:
        """Wait for a form's existence validation widget (default: the active form)."""
        widget = self.context.existence_validation_widget(form_name)
        target = form_name if form_name is not None else self.current_form
        with allure.step(f"Wait for form '{target or '<main>'}'"):
            return widget.wait_for()

    def switch_to_frame(self, frame_id: str) -> bool:
        self.context.set_iframe(frame_id)
        try:
            return self.browser.switch_to_frame(frame_id)
        except Exception:
            self.context.clear_iframe()
            raise

    def switch_to_default_content(self) -> bool:
        self.context.clear_iframe()
        return self.browser.switch_to_default_content()

    # =========================================================================
    # Widget actions
    # =========================================================================

    def click(self, widget_name: str) -> bool:
        with allure.step(f"Click '{widget_name}'"):
            return self.get_widget(widget_name).click()

    def clear(self, widget_name: str) -> bool:
        with allure.step(f"Clear '{widget_name}'"):
            return self.get_widget(widget_name).clear()

    def type(self, widget_name: str, value: str) -> bool:
        with allure.step(f"Type into '{widget_name}'"):
            return self.get_widget(widget_name).type(value)

    def type_without_clear(self, widget_name: str, value: str) -> bool:
        with allure.step(f"Append to '{widget_name}'"):
            return self.get_widget(widget_name).type_without_clear(value)

    def get_text(self, widget_name: str) -> str:
        return self.get_widget(widget_name).get_text()

    def check(self, widget_name: str) -> bool:
        with allure.step(f"Check '{widget_name}'"):
            return self.get_widget(widget_name).check()

    def uncheck(self, widget_name: str) -> bool:
        with allure.step(f"Uncheck '{widget_name}'"):
            return self.get_widget(widget_name).uncheck()

    def is_checked(self, widget_name: str) -> bool:
        return self.get_widget(widget_name).is_checked()

    def select(self, widget_name: str) -> bool:
        with allure.step(f"Select '{widget_name}'"):
            return self.get_widget(widget_name).select()

    def is_selected(self, widget_name: str) -> bool:
        return self.get_widget(widget_name).is_selected()

    def select_option(self, widget_name: str, option: str) -> bool:
        with allure.step(f"Select '{option}' in '{widget_name}'"):
            return self.get_widget(widget_name).select_option(option)

    def get_all_options(self, widget_name: str) -> List[str]:
        return self.get_widget(widget_name).get_all_options()

    def get_selected_options(self, widget_name: str) -> List[str]:
        return self.get_widget(widget_name).get_selected_options()

    def is_visible(self, widget_name: str) -> bool:
        return self.get_widget(widget_name).is_visible()

    def exists(self, widget_name: str) -> bool:
        return self.get_widget(widget_name).exists()

    def is_disabled(self, widget_name: str) -> bool:
        return self.get_widget(widget_name).is_disabled()

    def wait_for(self, widget_name: str) -> bool:
        with allure.step(f"Wait for '{widget_name}'"):
            return self.get_widget(widget_name).wait_for()

    def wait_for_not_visible(self, widget_name: str) -> bool:
        with allure.step(f"Wait for '{widget_name}' to disappear"):
            return self.get_widget(widget_name).wait_for_not_visible()

    def get_cell_text(self, widget_name: str, row: int, column: int) -> str:
        return self.get_widget(widget_name).get_cell_text(row, column)

    def _column_index(self, table_name: str, column_name: str) -> Tuple[FixtureWidget, int]:
        """
        Resolve a column widget declared inside a table to its 1-based position.

        Raises:
            ConfigurationError: The column widget is not a child of the table
                in the layout map
        """
        table = self.get_widget(table_name)
        column = self.get_widget(column_name)
        if self.context.registry.parent_of(column_name) is not table:
            raise ConfigurationError(
                f"Widget '{column_name}' is not declared as a column of table "
                f"'{table_name}' on form '{self.current_form or '<main>'}' "
                f"of UI '{self.properties.ui_name}'."
            )
        return table, table.get_column_index(column.wait_target_locator)

    def get_cell_text_by_column(self, table_name: str, column_name: str, row: int) -> str:
        """Text of the cell in `row` under the column widget `column_name`."""
        table, column = self._column_index(table_name, column_name)
        return table.get_cell_text(row, column)

    def click_cell(self, table_name: str, column_name: str, row: int) -> bool:
        with allure.step(f"Click '{table_name}' cell '{column_name}' in row {row}"):
            table, column = self._column_index(table_name, column_name)
            return table.click_cell(row, column)

    def get_header_cell_text(self, table_name: str, column_name: str) -> str:
        table, column = self._column_index(table_name, column_name)
        return table.get_header_cell_text(column)

    def get_row_count(self, widget_name: str) -> int:
        return self.get_widget(widget_name).get_row_count()

    def set_date(self, widget_name: str, value: str) -> bool:
        with allure.step(f"Set date '{value}' in '{widget_name}'"):
            return self.get_widget(widget_name).set_date(value)


__all__ = [
    "GenericWebFixture",
    "LayoutMap",
]
