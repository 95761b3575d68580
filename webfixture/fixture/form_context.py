"""
================================================================================
Form Context
================================================================================

Per-fixture run-time state: which form widget names resolve against, and
which iframe (if any) the browser is currently scoped to.

The properties object produced by the parser is never mutated; everything
that changes while a test runs lives here.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from webfixture.configuration.constants import MAIN_FORM
from webfixture.configuration.properties import FixtureProperties
from webfixture.errors import UnknownFormError, UnknownWidgetError
from webfixture.widgets.base import FixtureWidget
from webfixture.widgets.registry import WidgetRegistry


class FormContext:
    """
    Current form and current iframe of one fixture instance.

    Not thread-safe: a context belongs to the single thread driving its
    fixture.

    Usage:
        >>> context = FormContext(properties)
        >>> context.switch_form_context("batchDetail")
        >>> context.resolve("closeButton")
        <Button name='closeButton' locator='GL0031_btnClose'>
        >>> context.switch_form_context()    # back to the main form
    """

    def __init__(self, properties: FixtureProperties):
        if properties is None:
            raise ValueError("The fixture properties must be non-null.")
        self._properties = properties
        self._current_form = MAIN_FORM
        self._iframe: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"<FormContext ui={self._properties.ui_name!r} "
            f"form={self._current_form!r} iframe={self._iframe!r}>"
        )

    @property
    def properties(self) -> FixtureProperties:
        return self._properties

    @property
    def current_form(self) -> str:
        """Key of the active form; "" is the main form."""
        return self._current_form

    @property
    def is_main_form(self) -> bool:
        return self._current_form == MAIN_FORM

    @property
    def iframe(self) -> Optional[str]:
        return self._iframe

    # =========================================================================
    # Form switching
    # =========================================================================

    def switch_form_context(self, form_name: Optional[str] = None) -> None:
        """
        Make a form the target of widget-name lookups.

        Args:
            form_name: Popup form name; None or "" selects the main form

        Raises:
            UnknownFormError: The UI declares no such form (state unchanged)
        """
        target = form_name or MAIN_FORM
        if not self._properties.has_form(target):
            raise UnknownFormError(self._properties.ui_name, target)

        if target != self._current_form:
            logger.info(
                f"Form context: '{self._current_form or '<main>'}' -> '{target or '<main>'}'"
            )
        self._current_form = target

    @property
    def registry(self) -> WidgetRegistry:
        """Widget registry of the active form."""
        return self._properties.get_registry(self._current_form)

    def resolve(self, widget_name: str) -> FixtureWidget:
        """
        Look a widget up on the active form only.

        Raises:
            UnknownWidgetError: The active form has no widget of that name
        """
        widget = self.registry.get(widget_name) if widget_name else None
        if widget is None:
            raise UnknownWidgetError(self._properties.ui_name, widget_name, self._current_form)
        return widget

    def existence_validation_widget(self, form_name: Optional[str] = None) -> FixtureWidget:
        """
        Return the existence validation widget of a form (default: the active one).

        Raises:
            UnknownFormError: The UI declares no such form
        """
        target = self._current_form if form_name is None else form_name
        widget = self._properties.get_existence_validation_widget(target)
        if widget is None:
            raise UnknownFormError(self._properties.ui_name, target)
        return widget

    # =========================================================================
    # Frame state
    # =========================================================================

    def set_iframe(self, frame_id: str) -> None:
        if not frame_id:
            raise ValueError("The iframe ID must be non-empty.")
        self._iframe = frame_id

    def clear_iframe(self) -> None:
        self._iframe = None

    def reset(self) -> None:
        """Return to the main form with no iframe selected."""
        self._current_form = MAIN_FORM
        self._iframe = None


__all__ = [
    "FormContext",
]
