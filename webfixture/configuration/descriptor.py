"""
Parsed view of one `widget` element.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lxml import etree

from webfixture.errors import ConfigurationError

from .constants import Attributes, Tags


@dataclass(frozen=True)
class WidgetDescriptor:
    """
    One widget element, read and validated but not yet turned into a widget.

    Attributes:
        name: Descriptive widget name, unique within its form
        id: Widget id used to build the locator
        type: Widget type tag
        parent: Arena index of the nearest registered ancestor widget, if any
    """
    name: str
    id: str
    type: str
    parent: Optional[int] = None

    @classmethod
    def from_element(
        cls, element: etree._Element, parent: Optional[int] = None
    ) -> "WidgetDescriptor":
        """
        Read the name, id and type attributes of a widget element.

        Raises:
            ConfigurationError: One of the attributes is missing or empty
        """
        values = {}
        for attribute in (Attributes.NAME, Attributes.ID, Attributes.TYPE):
            value = element.get(attribute)
            if not value:
                raise ConfigurationError(
                    f"All '{Tags.WIDGET}' elements must have '{attribute}' attributes "
                    f"with non-empty values (line {element.sourceline})."
                )
            values[attribute] = value

        return cls(
            name=values[Attributes.NAME],
            id=values[Attributes.ID],
            type=values[Attributes.TYPE],
            parent=parent,
        )
