"""Public API for querying, flattening, exporting and resolving entities.

Examples:
    from entityscope.api import FilterCriteria, ObjectKind, filter_entities

    criteria = FilterCriteria(object_kind=ObjectKind.MESH_ENTITIES, class_filter="door")
    doors = filter_entities(entities, criteria)

    from entityscope.api import build_export, dump_export
    text = dump_export(build_export(doors))
"""

from entityscope.api.entity import (
    ABSENT,
    Absent,
    ArrayValue,
    Connection,
    Entity,
    PropertyValue,
    Scalar,
    SourceLump,
    property_value,
)
from entityscope.api.export import (
    DEFAULT_EXPORT_FILENAME,
    NO_SELECTION_MESSAGE,
    ExportDocument,
    build_export,
    dump_export,
    export_connection,
    export_entity,
)
from entityscope.api.filters import (
    EntityRow,
    FilterCriteria,
    ObjectKind,
    build_predicate,
    entity_matches,
    filter_entities,
    filter_rows,
    iter_filtered,
)
from entityscope.api.loader import load_entities, parse_entities
from entityscope.api.resolve import find_all_by_targetname, resolve_by_targetname
from entityscope.api.values import (
    NormalizedValue,
    display_value,
    export_value,
    flatten_properties,
    normalize,
)
from entityscope.api.viewer import (
    ConnectionRow,
    EntityDetails,
    EntityViewer,
    ViewerTab,
    panel_title,
)

__all__ = [
    # Entity model
    "ABSENT",
    "Absent",
    "ArrayValue",
    "Connection",
    "Entity",
    "PropertyValue",
    "Scalar",
    "SourceLump",
    "property_value",
    # Value normalization
    "NormalizedValue",
    "display_value",
    "export_value",
    "flatten_properties",
    "normalize",
    # Filtering
    "EntityRow",
    "FilterCriteria",
    "ObjectKind",
    "build_predicate",
    "entity_matches",
    "filter_entities",
    "filter_rows",
    "iter_filtered",
    # Export
    "DEFAULT_EXPORT_FILENAME",
    "NO_SELECTION_MESSAGE",
    "ExportDocument",
    "build_export",
    "dump_export",
    "export_connection",
    "export_entity",
    # Resolution
    "find_all_by_targetname",
    "resolve_by_targetname",
    # Loading
    "load_entities",
    "parse_entities",
    # Viewer session
    "ConnectionRow",
    "EntityDetails",
    "EntityViewer",
    "ViewerTab",
    "panel_title",
]
