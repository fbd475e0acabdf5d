"""Export of selected entities into a self-contained JSON document.

The document holds only strings, numbers, lists and dicts, so it always
serializes. Optional parts of an entity record (connections, source lump) are
omitted when missing rather than written as ``null``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence, TypedDict, Union

from entityscope.api.entity import Connection, Entity
from entityscope.api.values import ExportValue, export_value
from entityscope.core.exceptions import EmptySelectionError

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "entities_export.json"
NO_SELECTION_MESSAGE = "No entities selected. Please select one or more entities to export."


class ConnectionRecord(TypedDict):
    output: str
    target: str
    input: str
    parameter: str
    delay: Union[int, float]
    timesToFire: int


class _EntityRecordBase(TypedDict):
    properties: Dict[str, ExportValue]


class EntityRecord(_EntityRecordBase, total=False):
    connections: List[ConnectionRecord]
    sourceLump: str


class ExportDocument(TypedDict):
    entityCount: int
    exportDate: str
    entities: List[EntityRecord]


def export_connection(connection: Connection) -> ConnectionRecord:
    return {
        "output": connection.output_name or "",
        "target": connection.target_name or "",
        "input": connection.input_name or "",
        "parameter": connection.override_param or "",
        "delay": connection.delay if connection.delay is not None else 0,
        "timesToFire": connection.times_to_fire if connection.times_to_fire is not None else 0,
    }


def export_entity(entity: Entity) -> EntityRecord:
    record: EntityRecord = {
        "properties": {key: export_value(value) for key, value in entity.properties.items()},
    }
    if entity.has_connections:
        record["connections"] = [export_connection(c) for c in entity.iter_connections()]
    if entity.parent_container_name:
        record["sourceLump"] = entity.parent_container_name
    return record


def build_export(
    entities: Sequence[Entity],
    exported_at: Optional[datetime] = None,
) -> ExportDocument:
    """Project a selection of entities into an export document.

    Args:
        entities: The selected entities, in selection order.
        exported_at: Timestamp recorded as ``exportDate``; defaults to the
            current local time.

    Returns:
        The export document.

    Raises:
        EmptySelectionError: If ``entities`` is empty. Hosts are expected to
            check the selection first and show :data:`NO_SELECTION_MESSAGE`.
    """
    if not entities:
        raise EmptySelectionError(NO_SELECTION_MESSAGE)

    timestamp = exported_at if exported_at is not None else datetime.now().astimezone()
    document: ExportDocument = {
        "entityCount": len(entities),
        "exportDate": timestamp.isoformat(),
        "entities": [export_entity(entity) for entity in entities],
    }
    logger.debug("Built export document with %d entities", len(entities))
    return document


def dump_export(document: ExportDocument, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize an export document as indented, human-readable JSON."""
    return json.dumps(document, indent=indent, ensure_ascii=ensure_ascii)


__all__ = [
    "ConnectionRecord",
    "DEFAULT_EXPORT_FILENAME",
    "EntityRecord",
    "ExportDocument",
    "NO_SELECTION_MESSAGE",
    "build_export",
    "dump_export",
    "export_connection",
    "export_entity",
]
