"""Multi-criteria entity filtering.

Filtering is a pure function of an entity collection and a host-owned
:class:`FilterCriteria`. Only the criteria that are set take part: they are
composed into one predicate whose checks run in a fixed order (class, object
kind, key/value) and stop at the first failure.

Examples:
    criteria = FilterCriteria(class_filter="prop", key_filter="target")
    rows = filter_rows(entities, criteria)
    for row in rows:
        print(row.classname, row.targetname)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from entityscope.api.entity import Entity
from entityscope.api.values import display_value

logger = logging.getLogger(__name__)

Predicate = Callable[[Entity], bool]


class ObjectKind(str, Enum):
    EVERYTHING = "everything"
    MESH_ENTITIES = "mesh"
    POINT_ENTITIES = "point"


@dataclass
class FilterCriteria:
    """Active filter state, owned and mutated by the host.

    Empty strings mean "no constraint". ``match_whole_value`` switches value
    comparison from case-insensitive containment to exact equality.
    """

    object_kind: ObjectKind = ObjectKind.EVERYTHING
    class_filter: str = ""
    key_filter: str = ""
    value_filter: str = ""
    match_whole_value: bool = False

    @property
    def is_empty(self) -> bool:
        return (
            self.object_kind == ObjectKind.EVERYTHING
            and not self.class_filter
            and not self.key_filter
            and not self.value_filter
        )

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)


@dataclass(frozen=True)
class EntityRow:
    """A filtered entity with the two columns shown in the entity grid."""

    entity: Entity
    classname: str
    targetname: str


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def value_matches(value: str, expected: str, match_whole_value: bool) -> bool:
    """Compare a stringified property value against the value filter."""
    if match_whole_value:
        return value == expected
    return _contains(value, expected)


def contains_key(entity: Entity, key: str) -> bool:
    return any(_contains(name, key) for name in entity.properties)


def contains_value(entity: Entity, value: str, match_whole_value: bool) -> bool:
    return any(
        value_matches(display_value(raw), value, match_whole_value)
        for raw in entity.properties.values()
    )


def contains_key_value(entity: Entity, key: str, value: str, match_whole_value: bool) -> bool:
    """True when one property satisfies both the key and the value filter."""
    for name, raw in entity.properties.items():
        if _contains(name, key) and value_matches(display_value(raw), value, match_whole_value):
            return True
    return False


def _class_predicate(class_filter: str) -> Predicate:
    return lambda entity: _contains(entity.classname, class_filter)


def _kind_predicate(kind: ObjectKind) -> Optional[Predicate]:
    if kind == ObjectKind.MESH_ENTITIES:
        return lambda entity: entity.is_mesh
    if kind == ObjectKind.POINT_ENTITIES:
        return lambda entity: entity.is_point
    return None


def _key_value_predicate(criteria: FilterCriteria) -> Optional[Predicate]:
    key, value, whole = criteria.key_filter, criteria.value_filter, criteria.match_whole_value
    if key and value:
        return lambda entity: contains_key_value(entity, key, value, whole)
    if key:
        return lambda entity: contains_key(entity, key)
    if value:
        return lambda entity: contains_value(entity, value, whole)
    return None


def build_predicate(criteria: FilterCriteria) -> Predicate:
    """Compose the active criteria into a single predicate.

    The criteria are read once, here; later changes to ``criteria`` do not
    affect the returned predicate.
    """
    checks: List[Predicate] = []
    if criteria.class_filter:
        checks.append(_class_predicate(criteria.class_filter))
    kind_check = _kind_predicate(ObjectKind(criteria.object_kind))
    if kind_check is not None:
        checks.append(kind_check)
    key_value_check = _key_value_predicate(criteria)
    if key_value_check is not None:
        checks.append(key_value_check)

    if not checks:
        return lambda entity: True
    return lambda entity: all(check(entity) for check in checks)


def entity_matches(entity: Entity, criteria: FilterCriteria) -> bool:
    return build_predicate(criteria)(entity)


def iter_filtered(entities: Iterable[Entity], criteria: FilterCriteria) -> Iterator[Entity]:
    """Lazily yield matching entities in input order.

    Each call starts a fresh pass, so the result can be restarted by calling
    again.
    """
    predicate = build_predicate(criteria)
    return (entity for entity in entities if predicate(entity))


def filter_entities(entities: Iterable[Entity], criteria: FilterCriteria) -> List[Entity]:
    """Return the matching entities in their original order.

    The returned list holds the original objects, not copies.
    """
    matched = list(iter_filtered(entities, criteria))
    logger.debug("Filter pass kept %d entities", len(matched))
    return matched


def filter_rows(entities: Iterable[Entity], criteria: FilterCriteria) -> List[EntityRow]:
    """Filter and compute the classname/targetname grid columns in one pass."""
    rows = [
        EntityRow(entity=entity, classname=entity.classname, targetname=entity.targetname)
        for entity in iter_filtered(entities, criteria)
    ]
    logger.debug("Filter pass kept %d rows", len(rows))
    return rows


__all__ = [
    "EntityRow",
    "FilterCriteria",
    "ObjectKind",
    "Predicate",
    "build_predicate",
    "contains_key",
    "contains_key_value",
    "contains_value",
    "entity_matches",
    "filter_entities",
    "filter_rows",
    "iter_filtered",
    "value_matches",
]
