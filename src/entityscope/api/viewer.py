"""GUI-independent entity viewer session.

:class:`EntityViewer` ties the filter engine, value normalizer, exporter and
resolver together the way an entity browser uses them: a grid of filtered
rows, a properties panel for the displayed entity, "jump to target" from an
output's target column, and export of the selected rows. Hosts render the
state it exposes and forward user input to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from entityscope.api.entity import Connection, Entity
from entityscope.api.export import ExportDocument, build_export
from entityscope.api.filters import EntityRow, FilterCriteria, filter_rows
from entityscope.api.resolve import resolve_by_targetname
from entityscope.api.values import flatten_properties

logger = logging.getLogger(__name__)

PANEL_TITLE = "Entity Properties"

# The world entity is listed but never handed to the focus callback.
UNFOCUSABLE_CLASSNAMES = frozenset({"worldspawn"})


class ViewerTab(str, Enum):
    PROPERTIES = "properties"
    OUTPUTS = "outputs"


@dataclass(frozen=True)
class ConnectionRow:
    """One line of the outputs panel."""

    output: str
    target: str
    input: str
    parameter: str
    delay: float
    times_to_fire: int

    @classmethod
    def from_connection(cls, connection: Connection) -> "ConnectionRow":
        return cls(
            output=connection.output_name or "",
            target=connection.target_name or "",
            input=connection.input_name or "",
            parameter=connection.override_param or "",
            delay=connection.delay if connection.delay is not None else 0.0,
            times_to_fire=connection.times_to_fire if connection.times_to_fire is not None else 0,
        )


@dataclass(frozen=True)
class EntityDetails:
    """Flattened content of the properties panel for one entity."""

    entity: Entity
    title: str
    properties: Tuple[Tuple[str, str], ...]
    connections: Tuple[ConnectionRow, ...]

    @property
    def outputs_visible(self) -> bool:
        return bool(self.connections)


def panel_title(entity: Entity) -> str:
    """Title of the properties panel: name (or class) and source lump."""
    title = PANEL_TITLE
    if entity.targetname:
        title += f" - {entity.targetname}"
    elif entity.classname:
        title += f" - {entity.classname}"
    if entity.parent_container_name:
        title += f" - Entity Lump: {entity.parent_container_name}"
    return title


def describe(entity: Entity) -> EntityDetails:
    return EntityDetails(
        entity=entity,
        title=panel_title(entity),
        properties=tuple(flatten_properties(entity)),
        connections=tuple(ConnectionRow.from_connection(c) for c in entity.iter_connections()),
    )


class EntityViewer:
    """Filterable view over a fixed entity collection.

    Args:
        entities: The full collection; it is never modified.
        criteria: Filter state. The viewer reads it on every refresh and only
            changes it through :meth:`set_filter`.
        on_focus: Called with an entity when the host asks to focus it.
    """

    def __init__(
        self,
        entities: Iterable[Entity],
        criteria: Optional[FilterCriteria] = None,
        on_focus: Optional[Callable[[Entity], Any]] = None,
    ) -> None:
        self._entities: Tuple[Entity, ...] = tuple(entities)
        self.criteria = criteria if criteria is not None else FilterCriteria()
        self._on_focus = on_focus
        self.rows: List[EntityRow] = []
        self.details: Optional[EntityDetails] = None
        self.active_tab = ViewerTab.PROPERTIES
        self.refresh()

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return self._entities

    def refresh(self) -> List[EntityRow]:
        """Re-run the filter; the first surviving entity becomes the displayed one."""
        self.rows = filter_rows(self._entities, self.criteria)
        if self.rows:
            self.show(self.rows[0].entity)
        return self.rows

    def set_filter(self, **changes: Any) -> List[EntityRow]:
        """Update filter fields by name and refresh.

        Raises:
            AttributeError: If a field name is not part of :class:`FilterCriteria`.
        """
        for name, value in changes.items():
            if not hasattr(self.criteria, name):
                raise AttributeError(f"FilterCriteria has no field {name!r}")
            setattr(self.criteria, name, value)
        return self.refresh()

    def entity_at(self, index: int) -> Entity:
        """Return the entity shown in grid row ``index``.

        Raises:
            IndexError: If ``index`` is not a row of the current grid. Negative
                indices are rejected rather than counted from the end.
        """
        if not 0 <= index < len(self.rows):
            raise IndexError(f"Row {index} is out of range (0-{len(self.rows) - 1})")
        return self.rows[index].entity

    def show(self, entity: Entity) -> EntityDetails:
        self.details = describe(entity)
        return self.details

    def select(self, index: int) -> EntityDetails:
        return self.show(self.entity_at(index))

    def activate(self, index: int) -> bool:
        """Ask the host to focus the entity at ``index``.

        Returns:
            True if the focus callback was invoked.
        """
        entity = self.entity_at(index)
        if entity.classname in UNFOCUSABLE_CLASSNAMES:
            return False
        if self._on_focus is None:
            return False
        self._on_focus(entity)
        return True

    def follow_reference(self, name: str) -> Optional[Entity]:
        """Display the entity an output targets, searching the whole collection.

        On a miss nothing changes.
        """
        entity = resolve_by_targetname(self._entities, name)
        if entity is None:
            return None
        self.show(entity)
        self.active_tab = ViewerTab.PROPERTIES
        return entity

    def selected_entities(self, indices: Sequence[int]) -> List[Entity]:
        return [self.entity_at(index) for index in dict.fromkeys(indices)]

    def selection_export(
        self,
        indices: Sequence[int],
        exported_at: Optional[datetime] = None,
    ) -> ExportDocument:
        """Export the rows at ``indices``.

        Raises:
            EmptySelectionError: If no row is selected.
        """
        document = build_export(self.selected_entities(indices), exported_at=exported_at)
        logger.info("Exported %d selected entities", document["entityCount"])
        return document


__all__ = [
    "ConnectionRow",
    "EntityDetails",
    "EntityViewer",
    "PANEL_TITLE",
    "ViewerTab",
    "describe",
    "panel_title",
]
