"""
================================================================================
UI and Fixture Properties
================================================================================

The validated result of parsing a layout map.

    UIProperties       - UI-level metadata (name, application, category, ...)
    FixtureProperties  - UIProperties plus the per-form widget registries and
                         existence validation widgets

Both are immutable. Run-time state such as the current form or the current
iframe belongs to the fixture's `FormContext`, not to these objects.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from webfixture.errors import ConfigurationError
from webfixture.widgets.base import FixtureWidget
from webfixture.widgets.registry import WidgetRegistry

from .constants import MAIN_FORM


REDIRECTED = "redirected"


def _form_key(form_name: Optional[str]) -> str:
    return form_name if form_name is not None else MAIN_FORM


@dataclass(frozen=True, eq=False)
class UIProperties:
    """
    Descriptive properties of the UI under test.

    Attributes:
        ui_name: UI name as used in its URL, e.g. "BatchList"
        application: Short application id, e.g. "GL"
        ui_menu_name: Menu caption in the portal, e.g. "Batch List"
        category: Menu category, e.g. "G/L Setup"
        application_full_name: e.g. "General Ledger"
    """
    ui_name: str
    application: str
    ui_menu_name: str = ""
    category: str = ""
    application_full_name: str = ""

    def __post_init__(self) -> None:
        if not self.ui_name:
            raise ConfigurationError("The UI name must be non-empty.")
        if not self.application:
            raise ConfigurationError("The application name must be non-empty.")

    def url_path(self) -> str:
        """
        Path of the UI relative to the application root.

        Returns "/<application>/<ui name>", or "" when the UI is reached
        through a redirect (application or UI name is "redirected").
        """
        if REDIRECTED in (self.application.lower(), self.ui_name.lower()):
            return ""
        return f"/{self.application}/{self.ui_name}"


@dataclass(frozen=True, eq=False)
class FixtureProperties(UIProperties):
    """
    UI properties plus the widget namespaces of every form.

    Attributes:
        existence_validation_widgets: Form key -> widget whose presence shows
            the form has opened ("" is the main form)
        widget_registries: Form key -> that form's WidgetRegistry
        sign_in_validation_locator: Wait target locator of the main form's
            existence validation widget (derived)
    """
    existence_validation_widgets: Mapping[str, FixtureWidget] = field(default_factory=dict)
    widget_registries: Mapping[str, WidgetRegistry] = field(default_factory=dict)
    sign_in_validation_locator: str = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()

        if not self.widget_registries:
            raise ConfigurationError("The fixture widget map must be non-empty.")
        if not self.existence_validation_widgets:
            raise ConfigurationError("The existence validation widget map must be non-empty.")
        if set(self.existence_validation_widgets) != set(self.widget_registries):
            raise ConfigurationError(
                "Every form must have exactly one existence validation widget."
            )

        for form_name, widget in self.existence_validation_widgets.items():
            if self.widget_registries[form_name].get(widget.name) is not widget:
                raise ConfigurationError(
                    f"The existence validation widget '{widget.name}' is not registered "
                    f"on form '{form_name}'."
                )

        main_widget = self.existence_validation_widgets.get(MAIN_FORM)
        if main_widget is None:
            raise ConfigurationError("The main form must have an existence validation widget.")
        if not main_widget.wait_target_locator:
            raise ConfigurationError(
                "The sign-in validation widget must have a non-empty wait target locator."
            )

        # Frozen dataclass: freeze the maps and set the derived field directly.
        object.__setattr__(
            self,
            "existence_validation_widgets",
            MappingProxyType(dict(self.existence_validation_widgets)),
        )
        object.__setattr__(
            self, "widget_registries", MappingProxyType(dict(self.widget_registries))
        )
        object.__setattr__(self, "sign_in_validation_locator", main_widget.wait_target_locator)

    @property
    def form_names(self) -> List[str]:
        """Declared form keys, main form ("") first."""
        return sorted(self.widget_registries, key=lambda name: (name != MAIN_FORM, name))

    def has_form(self, form_name: Optional[str]) -> bool:
        return _form_key(form_name) in self.widget_registries

    def get_registry(self, form_name: Optional[str]) -> Optional[WidgetRegistry]:
        return self.widget_registries.get(_form_key(form_name))

    def get_existence_validation_widget(self, form_name: Optional[str]) -> Optional[FixtureWidget]:
        """Return the form's existence validation widget, or None for an unknown form."""
        return self.existence_validation_widgets.get(_form_key(form_name))

    def get_fixture_widget(self, form_name: Optional[str], widget_name: str) -> Optional[FixtureWidget]:
        """Return the named widget on the given form, or None if either is unknown."""
        registry = self.get_registry(form_name)
        if registry is None:
            return None
        return registry.get(widget_name)


__all__ = [
    "FixtureProperties",
    "UIProperties",
]
