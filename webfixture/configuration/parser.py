"""
================================================================================
Configuration Parser
================================================================================

Parses a layout map (the XML descriptor of one UI) into FixtureProperties.

Layout map shape:

    <ui name="BatchList" application="GL" applicationfullname="General Ledger"
        category="G/L Transactions" menuName="Batch List">
        <form type="main" definitionID="GL0030" existenceValidationWidget="batchNumber">
            <widget name="batchNumber" id="txtBatch" type="genericTextBox"/>
            <widget name="toolbar" id="pnlToolbar" type="genericPanel">
                <widget name="saveButton" id="btnSave" type="genericButton"/>
            </widget>
        </form>
        <form type="popup" name="batchDetail" definitionID="GL0031"
              existenceValidationWidget="closeButton">
            <widget name="closeButton" id="btnClose" type="genericButton"/>
        </form>
    </ui>

Rules enforced here:
    - exactly one main form (form key ""), popups keyed by their name
    - widget names unique per form; the same name may be reused across forms
    - each form's existence validation widget is one of its own widgets
    - widget elements whose type the factory does not support are skipped,
      and their children attach to the nearest supported ancestor

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Dict, Optional, Union

from loguru import logger
from lxml import etree

from webfixture.errors import ConfigurationError
from webfixture.widgets.base import FixtureWidget
from webfixture.widgets.factory import UNSUPPORTED, WidgetFactory
from webfixture.widgets.registry import WidgetRegistry, WidgetRegistryBuilder

from .constants import ID_BASE_SEPARATOR, MAIN_FORM, Attributes, FormType, Tags
from .descriptor import WidgetDescriptor
from .properties import FixtureProperties


LayoutSource = Union[str, os.PathLike, IO, etree._ElementTree, etree._Element]


def create_id_base(definition_id: str) -> str:
    """Build the locator prefix shared by all widgets of a form."""
    if not definition_id:
        raise ValueError("The form's definition ID must be non-empty.")
    return f"{definition_id}{ID_BASE_SEPARATOR}"


class ConfigurationParser:
    """
    Builds FixtureProperties from layout maps using a widget factory.

    The parser keeps no state between calls; parsing the same document twice
    yields equal but independent properties objects.

    Usage:
        >>> parser = ConfigurationParser(WidgetFactory(browser))
        >>> properties = parser.parse("layoutmaps/gl_batch_list.xml")
        >>> properties.form_names
        ['', 'batchDetail']
    """

    def __init__(self, factory: WidgetFactory):
        if factory is None:
            raise ValueError("The fixture widget factory must be non-null.")
        self.factory = factory

    # =========================================================================
    # Document loading
    # =========================================================================

    def parse(self, source: LayoutSource) -> FixtureProperties:
        """
        Parse a layout map.

        Args:
            source: Path to the layout map, an open file object, a parsed
                lxml tree, or its root element

        Returns:
            Validated FixtureProperties

        Raises:
            ValueError: source is None or an empty path
            ConfigurationError: The document is missing, unparseable or invalid
        """
        if source is None:
            raise ValueError("The layout map source must be non-null.")

        if isinstance(source, etree._ElementTree):
            root = source.getroot()
        elif isinstance(source, etree._Element):
            root = source
        elif isinstance(source, (str, os.PathLike)):
            root = self._load_file(source)
        elif hasattr(source, "read"):
            root = self._load_stream(source, getattr(source, "name", "<stream>"))
        else:
            raise TypeError(f"Unsupported layout map source type: {type(source).__name__}")

        return self._parse_root(root)

    def _load_file(self, path: Union[str, os.PathLike]) -> etree._Element:
        if not os.fspath(path):
            raise ValueError("The configuration path must be non-empty.")

        layout_path = Path(path)
        if not layout_path.is_file():
            raise ConfigurationError(f"'{layout_path}' is not the path to an existing file.")

        with open(layout_path, "rb") as f:
            return self._load_stream(f, str(layout_path))

    @staticmethod
    def _load_stream(stream: IO, description: str) -> etree._Element:
        parser = etree.XMLParser(remove_comments=True, resolve_entities=False, no_network=True)
        try:
            return etree.parse(stream, parser).getroot()
        except etree.XMLSyntaxError as e:
            raise ConfigurationError(
                f"The layout map '{description}' could not be parsed: {e}"
            ) from e

    # =========================================================================
    # Validation and registry assembly
    # =========================================================================

    def _parse_root(self, ui_elem: etree._Element) -> FixtureProperties:
        if ui_elem is None:
            raise ConfigurationError("The layout map must contain a root element.")
        if ui_elem.tag != Tags.UI:
            raise ConfigurationError(
                f"The layout map must contain a root '{Tags.UI}' element, found '{ui_elem.tag}'."
            )

        ui_name = self._required_attribute(ui_elem, Attributes.NAME)
        application = self._required_attribute(ui_elem, Attributes.APPLICATION)

        registries: Dict[str, WidgetRegistry] = {}
        existence_widgets: Dict[str, FixtureWidget] = {}
        found_main_form = False

        for form_elem in ui_elem.iterchildren(Tags.FORM):
            definition_id = form_elem.get(Attributes.DEFINITION_ID)
            if not definition_id:
                raise ConfigurationError(
                    f"All '{Tags.FORM}' elements must have '{Attributes.DEFINITION_ID}' "
                    f"attributes with non-empty values."
                )

            existence_widget_name = form_elem.get(Attributes.EXISTENCE_VALIDATION_WIDGET)
            if not existence_widget_name:
                raise ConfigurationError(
                    f"The '{Tags.FORM}' element '{definition_id}' must contain an "
                    f"'{Attributes.EXISTENCE_VALIDATION_WIDGET}' attribute with a non-empty value."
                )

            form_type = form_elem.get(Attributes.TYPE)
            if form_type == FormType.MAIN.value:
                if found_main_form:
                    raise ConfigurationError(
                        f"There can only be one '{Tags.FORM}' element whose "
                        f"'{Attributes.TYPE}' attribute has a value of '{FormType.MAIN.value}'."
                    )
                found_main_form = True
                form_key = MAIN_FORM
            elif form_type == FormType.POPUP.value:
                form_key = form_elem.get(Attributes.NAME)
                if not form_key:
                    raise ConfigurationError(
                        f"Each '{Tags.FORM}' element whose '{Attributes.TYPE}' is "
                        f"'{FormType.POPUP.value}' must have a '{Attributes.NAME}' "
                        f"attribute with a non-empty value."
                    )
                if form_key in registries:
                    raise ConfigurationError(
                        f"There can only be one popup '{Tags.FORM}' named '{form_key}'."
                    )
            else:
                raise ConfigurationError(
                    f"Each '{Tags.FORM}' element must have a '{Attributes.TYPE}' attribute "
                    f"whose value is either '{FormType.MAIN.value}' or '{FormType.POPUP.value}', "
                    f"got '{form_type}'."
                )

            builder = WidgetRegistryBuilder(form_key)
            self._populate_widgets(builder, create_id_base(definition_id), None, form_elem)
            if not len(builder):
                raise ConfigurationError(
                    f"The '{Tags.FORM}' element with a '{Attributes.DEFINITION_ID}' of "
                    f"'{definition_id}' must contain at least one supported "
                    f"'{Tags.WIDGET}' element."
                )

            registry = builder.build()
            existence_widget = registry.get(existence_widget_name)
            if existence_widget is None:
                raise ConfigurationError(
                    f"An existence validation widget with a '{Attributes.NAME}' of "
                    f"'{existence_widget_name}' must exist among the '{Tags.WIDGET}' "
                    f"elements of the form whose '{Attributes.DEFINITION_ID}' is "
                    f"'{definition_id}'."
                )

            registries[form_key] = registry
            existence_widgets[form_key] = existence_widget
            logger.debug(
                f"Form '{form_key or '<main>'}' ({definition_id}): {len(registry)} widgets"
            )

        if not found_main_form:
            raise ConfigurationError(
                f"There must be one '{Tags.FORM}' element whose '{Attributes.TYPE}' "
                f"attribute has a value of '{FormType.MAIN.value}'."
            )

        properties = FixtureProperties(
            ui_name=ui_name,
            application=application,
            ui_menu_name=ui_elem.get(Attributes.MENU_NAME, ""),
            category=ui_elem.get(Attributes.CATEGORY, ""),
            application_full_name=ui_elem.get(Attributes.APPLICATION_FULL_NAME, ""),
            existence_validation_widgets=existence_widgets,
            widget_registries=registries,
        )
        logger.info(
            f"Parsed layout map for UI '{ui_name}' ({application}): "
            f"forms={properties.form_names}"
        )
        return properties

    def _populate_widgets(
        self,
        builder: WidgetRegistryBuilder,
        id_base: str,
        parent: Optional[int],
        element: etree._Element,
    ) -> None:
        """
        Register the widget elements below `element`, depth first.

        Args:
            builder: Registry of the form being parsed (filled in place)
            id_base: Form-wide locator prefix
            parent: Arena index of the nearest registered ancestor, or None
            element: Form element or widget element whose children are processed
        """
        for widget_elem in element.iterchildren(Tags.WIDGET):
            descriptor = WidgetDescriptor.from_element(widget_elem, parent)
            if descriptor.name in builder:
                raise ConfigurationError(
                    f"The form can only contain one '{Tags.WIDGET}' element whose "
                    f"'{Attributes.NAME}' attribute has the value of '{descriptor.name}'."
                )

            widget = self.factory.create(descriptor.name, descriptor.id, descriptor.type, id_base)
            if widget is UNSUPPORTED:
                # Children of a skipped element hang off our own parent.
                self._populate_widgets(builder, id_base, descriptor.parent, widget_elem)
            else:
                index = builder.add(widget, descriptor.parent)
                self._populate_widgets(builder, id_base, index, widget_elem)

    @staticmethod
    def _required_attribute(element: etree._Element, attribute: str) -> str:
        value = element.get(attribute)
        if not value:
            raise ConfigurationError(
                f"The '{element.tag}' element must contain a '{attribute}' attribute "
                f"with a non-empty value."
            )
        return value


__all__ = [
    "ConfigurationParser",
    "LayoutSource",
    "create_id_base",
]
