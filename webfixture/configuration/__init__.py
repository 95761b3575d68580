"""
Layout map parsing and the properties it produces.
"""

from .constants import ID_BASE_SEPARATOR, MAIN_FORM, Attributes, FormType, Tags
from .descriptor import WidgetDescriptor
from .parser import ConfigurationParser, create_id_base
from .properties import FixtureProperties, UIProperties

__all__ = [
    "Attributes",
    "ConfigurationParser",
    "FixtureProperties",
    "FormType",
    "ID_BASE_SEPARATOR",
    "MAIN_FORM",
    "Tags",
    "UIProperties",
    "WidgetDescriptor",
    "create_id_base",
]
