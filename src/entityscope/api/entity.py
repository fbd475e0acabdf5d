"""Read-only entity records and their property values.

An entity is an ordered bag of named properties plus an optional list of
output connections, read from a parent container ("entity lump"). Property
values are lifted into a small tagged union so that every consumer handles the
absent, scalar and array shapes explicitly.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from entityscope.core.exceptions import EntityDataError

logger = logging.getLogger(__name__)


def stringify(value: Any) -> str:
    """Return ``str(value)``, or ``""`` when the value is ``None`` or cannot be converted."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        logger.debug("Could not stringify value of type %s", type(value).__name__)
        return ""


class Absent:
    """Marker for a property that exists without a value."""

    __slots__ = ()
    _instance: Optional["Absent"] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def text(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()


@dataclass(frozen=True, slots=True)
class Scalar:
    """Single string, number or boolean, kept in its string form."""

    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ArrayValue:
    """Ordered sequence of scalars (an "array property")."""

    items: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(self.items)


PropertyValue = Union[Absent, Scalar, ArrayValue]


def property_value(raw: Any) -> PropertyValue:
    """Lift a raw Python value into a :data:`PropertyValue`.

    ``None`` becomes :data:`ABSENT`, lists and tuples become :class:`ArrayValue`
    with each element stringified, and anything else becomes a :class:`Scalar`.
    Values that are already a ``PropertyValue`` are returned unchanged.
    """
    if isinstance(raw, (Absent, Scalar, ArrayValue)):
        return raw
    if raw is None:
        return ABSENT
    if isinstance(raw, (list, tuple)):
        return ArrayValue(tuple(stringify(item) for item in raw))
    return Scalar(stringify(raw))


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return stringify(value)


def _optional_number(value: Any, kind: type) -> Any:
    if value is None or value == "":
        return None
    try:
        number = kind(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring non-numeric connection field value %r", value)
        return None
    # NaN and infinities have no JSON representation.
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite connection field value %r", value)
        return None
    return number


# Raw entity-lump keys first, export document keys second.
_CONNECTION_KEYS = {
    "output_name": ("m_outputName", "output"),
    "target_name": ("m_targetName", "target"),
    "input_name": ("m_inputName", "input"),
    "override_param": ("m_overrideParam", "parameter"),
    "delay": ("m_flDelay", "delay"),
    "times_to_fire": ("m_nTimesToFire", "timesToFire"),
}


def _first_present(payload: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return None


@dataclass(frozen=True)
class Connection:
    """One output of an entity: fires ``input_name`` on ``target_name``.

    Every field is optional. ``times_to_fire`` conventions such as ``-1`` are
    preserved as-is.
    """

    output_name: Optional[str] = None
    target_name: Optional[str] = None
    input_name: Optional[str] = None
    override_param: Optional[str] = None
    delay: Optional[float] = None
    times_to_fire: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Connection":
        """Build a connection from raw ``m_*`` keys or export document keys."""
        if not isinstance(payload, Mapping):
            raise EntityDataError(
                f"Connection must be a mapping; got {type(payload).__name__}"
            )
        values = {name: _first_present(payload, keys) for name, keys in _CONNECTION_KEYS.items()}
        return cls(
            output_name=_optional_text(values["output_name"]),
            target_name=_optional_text(values["target_name"]),
            input_name=_optional_text(values["input_name"]),
            override_param=_optional_text(values["override_param"]),
            delay=_optional_number(values["delay"], float),
            times_to_fire=_optional_number(values["times_to_fire"], int),
        )


@dataclass(frozen=True)
class SourceLump:
    """Provenance of an entity: the container it was read from."""

    name: str


@dataclass(frozen=True, eq=False)
class Entity:
    """Immutable view over one entity record.

    Entities compare and hash by identity: two records with the same data are
    still two entities.
    """

    properties: Mapping[str, PropertyValue] = field(default_factory=dict)
    connections: Optional[Tuple[Connection, ...]] = None
    source: Optional[SourceLump] = None

    def __post_init__(self) -> None:
        lifted: Dict[str, PropertyValue] = {
            stringify(key): property_value(value) for key, value in self.properties.items()
        }
        object.__setattr__(self, "properties", MappingProxyType(lifted))
        if self.connections is not None:
            object.__setattr__(self, "connections", tuple(self.connections))

    @property
    def classname(self) -> str:
        return self.get_property("classname")

    @property
    def targetname(self) -> str:
        return self.get_property("targetname")

    @property
    def parent_container_name(self) -> Optional[str]:
        return self.source.name if self.source is not None else None

    @property
    def is_mesh(self) -> bool:
        """True when the entity carries a ``model`` property."""
        return self.has_property("model")

    @property
    def is_point(self) -> bool:
        return not self.has_property("model")

    @property
    def has_connections(self) -> bool:
        return bool(self.connections)

    def iter_connections(self) -> Iterator[Connection]:
        return iter(self.connections or ())

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def get_property(self, name: str, default: str = "") -> str:
        """Return the property's display string, or ``default`` when missing or absent."""
        value = self.properties.get(name)
        if value is None or isinstance(value, Absent):
            return default
        return value.text

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        connections: Optional[Sequence[Connection]] = None,
        source: Optional[str] = None,
    ) -> "Entity":
        return cls(
            properties=properties,
            connections=tuple(connections) if connections is not None else None,
            source=SourceLump(source) if source else None,
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Entity":
        """Build an entity from a JSON-style mapping.

        Accepts ``properties`` (mapping), ``connections`` (list of mappings) and
        ``sourceLump``/``source_lump`` (string). This is also the shape of an
        entity record in an export document.

        Raises:
            EntityDataError: If a field has the wrong container type.
        """
        if not isinstance(payload, Mapping):
            raise EntityDataError(f"Entity must be a mapping; got {type(payload).__name__}")

        properties = payload.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise EntityDataError("Entity properties must be a mapping")

        raw_connections = payload.get("connections")
        connections: Optional[Tuple[Connection, ...]] = None
        if raw_connections is not None:
            if isinstance(raw_connections, (str, bytes)) or not isinstance(
                raw_connections, Sequence
            ):
                raise EntityDataError("Entity connections must be a list")
            connections = tuple(Connection.from_dict(item) for item in raw_connections)

        source_name = payload.get("sourceLump", payload.get("source_lump"))
        return cls(
            properties=properties,
            connections=connections,
            source=SourceLump(stringify(source_name)) if source_name else None,
        )

    def __repr__(self) -> str:
        label = self.targetname or self.classname or "?"
        return f"Entity({label!r}, properties={len(self.properties)})"


__all__ = [
    "ABSENT",
    "Absent",
    "ArrayValue",
    "Connection",
    "Entity",
    "PropertyValue",
    "Scalar",
    "SourceLump",
    "property_value",
    "stringify",
]
