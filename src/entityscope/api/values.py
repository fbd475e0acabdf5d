"""Display and export projections of property values.

Each property value has two projections:

* ``display``: one string for on-screen panels, with array elements joined by
  a single space.
* ``export_value``: a string, or for array properties the ordered list of
  per-element strings, for structured export.

Examples:
    >>> normalize(["a", "b", "c"])
    NormalizedValue(display='a b c', export_value=['a', 'b', 'c'])
    >>> normalize(None)
    NormalizedValue(display='', export_value='')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

from entityscope.api.entity import Absent, ArrayValue, Entity, Scalar, property_value

ExportValue = Union[str, List[str]]


@dataclass(frozen=True)
class NormalizedValue:
    display: str
    export_value: ExportValue


def display_value(value: Any) -> str:
    """Return the single-string projection of a raw or lifted property value."""
    lifted = property_value(value)
    if isinstance(lifted, Absent):
        return ""
    if isinstance(lifted, ArrayValue):
        return " ".join(lifted.items)
    if isinstance(lifted, Scalar):
        return lifted.value
    raise TypeError(f"Unhandled property value {lifted!r}")


def export_value(value: Any) -> ExportValue:
    """Return the export projection: a string, or a list of strings for arrays."""
    lifted = property_value(value)
    if isinstance(lifted, Absent):
        return ""
    if isinstance(lifted, ArrayValue):
        return list(lifted.items)
    if isinstance(lifted, Scalar):
        return lifted.value
    raise TypeError(f"Unhandled property value {lifted!r}")


def normalize(value: Any) -> NormalizedValue:
    """Compute both projections of ``value`` at once."""
    return NormalizedValue(display=display_value(value), export_value=export_value(value))


def flatten_properties(entity: Entity) -> List[Tuple[str, str]]:
    """Return ``(key, display value)`` pairs in the entity's property order."""
    return [(key, display_value(value)) for key, value in entity.properties.items()]


__all__ = [
    "ExportValue",
    "NormalizedValue",
    "display_value",
    "export_value",
    "flatten_properties",
    "normalize",
]
