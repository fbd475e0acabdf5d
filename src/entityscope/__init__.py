"""
entityscope: query, flatten, export and cross-reference entity lumps
=====================================================================

entityscope works on already-parsed entity records (classname, targetname,
arbitrary key/value properties and output connections) and provides:

- Multi-criteria filtering (class, mesh/point kind, key, value, key+value)
- Display and export projections of property values
- JSON export documents for a selection of entities
- "Jump to entity" resolution of output targets

Examples:
    from entityscope.api import Entity, FilterCriteria, filter_entities

    entities = [
        Entity.from_properties({"classname": "prop_door", "targetname": "door01"}),
        Entity.from_properties({"classname": "light", "model": "*12"}),
    ]
    doors = filter_entities(entities, FilterCriteria(class_filter="door"))
"""

from __future__ import annotations

__version__ = "0.1.0"

from entityscope.api import (
    Entity,
    EntityViewer,
    FilterCriteria,
    ObjectKind,
    build_export,
    dump_export,
    filter_entities,
    normalize,
    resolve_by_targetname,
)
from entityscope.core.exceptions import (
    EmptySelectionError,
    EntityDataError,
    EntityScopeError,
)

__all__ = [
    "__version__",
    "Entity",
    "EntityViewer",
    "FilterCriteria",
    "ObjectKind",
    "build_export",
    "dump_export",
    "filter_entities",
    "normalize",
    "resolve_by_targetname",
    "EntityScopeError",
    "EmptySelectionError",
    "EntityDataError",
]
