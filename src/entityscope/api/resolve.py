"""Cross-reference resolution by targetname.

Resolution is a plain linear scan over the full collection in original order,
so duplicate targetnames always resolve to the same, first, entity.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from entityscope.api.entity import Entity

logger = logging.getLogger(__name__)


def resolve_by_targetname(entities: Iterable[Entity], name: str) -> Optional[Entity]:
    """Return the first entity whose targetname equals ``name``, or ``None``.

    The comparison is exact and case-sensitive. Entities without a targetname
    never match, and an empty ``name`` returns ``None`` without scanning.
    """
    if not name:
        return None

    for entity in entities:
        targetname = entity.targetname
        if targetname and targetname == name:
            return entity

    logger.debug("No entity named %r", name)
    return None


def find_all_by_targetname(entities: Iterable[Entity], name: str) -> List[Entity]:
    """Return every entity whose targetname equals ``name``, in original order."""
    if not name:
        return []
    return [entity for entity in entities if entity.targetname and entity.targetname == name]


__all__ = ["find_all_by_targetname", "resolve_by_targetname"]
