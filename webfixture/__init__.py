"""
================================================================================
Web Fixture
================================================================================

Layout-map driven UI automation.

A layout map (one XML file per UI) names every automatable widget of the
UI's main form and popups. The configuration parser turns it into immutable
FixtureProperties; GenericWebFixture then lets tests drive the UI by widget
name, one form at a time.

Packages:
    - configuration: layout map parsing and the properties model
    - widgets: widget variants, the type-tag factory, per-form registries
    - fixture: form context and the name-based fixture
    - browser: browser driver protocol and its Playwright implementation
    - common: settings and logging

Author: Automation Team
License: MIT
================================================================================
"""

from .configuration import ConfigurationParser, FixtureProperties, UIProperties
from .errors import (
    ConfigurationError,
    FixtureError,
    UnknownFormError,
    UnknownWidgetError,
    UnsupportedActionError,
)
from .fixture import FormContext, GenericWebFixture
from .widgets import UNSUPPORTED, WidgetFactory, WidgetType

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ConfigurationParser",
    "FixtureError",
    "FixtureProperties",
    "FormContext",
    "GenericWebFixture",
    "UIProperties",
    "UNSUPPORTED",
    "UnknownFormError",
    "UnknownWidgetError",
    "UnsupportedActionError",
    "WidgetFactory",
    "WidgetType",
    "__version__",
]
