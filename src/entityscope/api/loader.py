"""Loading entity collections from JSON.

Two document shapes are accepted: a bare list of entity mappings, or an object
with an ``entities`` list (which includes export documents written by
:func:`entityscope.api.export.dump_export`).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Union

from entityscope.api.entity import Entity
from entityscope.core.exceptions import EntityDataError

logger = logging.getLogger(__name__)


def parse_entities(payload: Any) -> List[Entity]:
    """Build entities from a decoded JSON document.

    Raises:
        EntityDataError: If the document or one of its entities has the wrong shape.
    """
    if isinstance(payload, Mapping):
        if "entities" not in payload:
            raise EntityDataError("Entity document has no 'entities' list")
        payload = payload["entities"]

    if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
        raise EntityDataError(
            f"Expected a list of entities; got {type(payload).__name__}"
        )

    entities: List[Entity] = []
    for index, item in enumerate(payload):
        try:
            entities.append(Entity.from_dict(item))
        except EntityDataError as e:
            raise EntityDataError(f"Entity #{index}: {e}") from e
    return entities


def load_entities(path: Union[str, Path]) -> List[Entity]:
    """Read and parse an entity collection from a JSON file.

    Raises:
        EntityDataError: If the file is not valid JSON or has the wrong shape.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise EntityDataError(f"Invalid JSON in {path}: {e}") from e

    entities = parse_entities(payload)
    logger.info("Loaded %d entities from %s", len(entities), path)
    return entities


__all__ = ["load_entities", "parse_entities"]
