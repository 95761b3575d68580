"""
Widget layer: variants, the type-tag factory and the per-form registry.
"""

from .base import FixtureWidget
from .factory import CREATORS_BY_TYPE, UNSUPPORTED, Unsupported, WidgetFactory, WidgetType
from .registry import WidgetNode, WidgetRegistry, WidgetRegistryBuilder
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

__all__ = [
    "Button",
    "CheckBox",
    "ComboBox",
    "CREATORS_BY_TYPE",
    "DateBox",
    "FixtureWidget",
    "Label",
    "ListBox",
    "NumberTextBox",
    "OnePageTable",
    "PasswordTextBox",
    "RadioButton",
    "Tab",
    "Table",
    "TextBox",
    "UNSUPPORTED",
    "Unsupported",
    "WidgetFactory",
    "WidgetNode",
    "WidgetRegistry",
    "WidgetRegistryBuilder",
    "WidgetType",
]
