"""
================================================================================
Widget Registry
================================================================================

Per-form, read-only map from widget name to widget, plus the widget tree.

The tree is kept in an arena: every registered widget gets a stable integer
index, and parent/child links are stored as indexes on `WidgetNode` records
rather than as references between widget objects.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .base import FixtureWidget


@dataclass(frozen=True)
class WidgetNode:
    """
    Position of one widget in its form's widget tree.

    Attributes:
        index: Stable arena index of the widget
        name: Widget name
        parent: Arena index of the parent widget, or None for top-level widgets
        children: Arena indexes of direct children, in document order
    """
    index: int
    name: str
    parent: Optional[int]
    children: Tuple[int, ...] = ()


class WidgetRegistryBuilder:
    """Mutable builder used while one form is being parsed."""

    def __init__(self, form_name: str = ""):
        self.form_name = form_name
        self._widgets: List[FixtureWidget] = []
        self._parents: List[Optional[int]] = []
        self._children: List[List[int]] = []
        self._index_by_name: Dict[str, int] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._index_by_name

    def __len__(self) -> int:
        return len(self._widgets)

    def add(self, widget: FixtureWidget, parent: Optional[int] = None) -> int:
        """
        Register a widget under an optional parent.

        Args:
            widget: Widget to register
            parent: Arena index returned by an earlier `add`, or None

        Returns:
            The arena index assigned to the widget

        Raises:
            ValueError: The name is already registered or the parent index is unknown
        """
        if widget.name in self._index_by_name:
            raise ValueError(
                f"Form '{self.form_name}' already contains a widget named '{widget.name}'."
            )
        if parent is not None and not 0 <= parent < len(self._widgets):
            raise ValueError(f"Unknown parent index: {parent}")

        index = len(self._widgets)
        self._widgets.append(widget)
        self._parents.append(parent)
        self._children.append([])
        self._index_by_name[widget.name] = index

        if parent is not None:
            self._children[parent].append(index)

        return index

    def build(self) -> "WidgetRegistry":
        nodes = tuple(
            WidgetNode(
                index=i,
                name=widget.name,
                parent=self._parents[i],
                children=tuple(self._children[i]),
            )
            for i, widget in enumerate(self._widgets)
        )
        return WidgetRegistry(self.form_name, tuple(self._widgets), nodes)


class WidgetRegistry(Mapping[str, FixtureWidget]):
    """
    Immutable widget namespace of one form.

    Behaves as a read-only mapping of widget name to widget; iteration
    follows document order.
    """

    def __init__(
        self,
        form_name: str,
        widgets: Tuple[FixtureWidget, ...],
        nodes: Tuple[WidgetNode, ...],
    ):
        self._form_name = form_name
        self._widgets = widgets
        self._nodes = nodes
        self._index_by_name = MappingProxyType({w.name: i for i, w in enumerate(widgets)})

    def __getitem__(self, name: str) -> FixtureWidget:
        return self._widgets[self._index_by_name[name]]

    def __iter__(self) -> Iterator[str]:
        return (w.name for w in self._widgets)

    def __len__(self) -> int:
        return len(self._widgets)

    def __repr__(self) -> str:
        return f"<WidgetRegistry form={self._form_name!r} widgets={list(self)}>"

    @property
    def form_name(self) -> str:
        return self._form_name

    def node(self, name: str) -> WidgetNode:
        return self._nodes[self._index_by_name[name]]

    def parent_of(self, name: str) -> Optional[FixtureWidget]:
        """Return the parent widget, or None for a top-level widget."""
        parent = self.node(name).parent
        return None if parent is None else self._widgets[parent]

    def children_of(self, name: str) -> Mapping[str, FixtureWidget]:
        """Return the direct children of a widget keyed by name."""
        return MappingProxyType(
            {self._widgets[i].name: self._widgets[i] for i in self.node(name).children}
        )

    def top_level(self) -> List[FixtureWidget]:
        return [self._widgets[n.index] for n in self._nodes if n.parent is None]


__all__ = [
    "WidgetNode",
    "WidgetRegistry",
    "WidgetRegistryBuilder",
]
