"""Classify raw shape definitions from a service description.

A service keeps its shapes in a name-indexed mapping and shapes refer to
each other by name only, so the graph may be cyclic. This module only
looks shapes up and tags them with a ShapeKind; rendering lives in
shape_doc.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class ShapeKind(enum.Enum):
    STRUCTURE = "structure"
    LIST = "list"
    MAP = "map"
    STRING_ENUM = "enum"
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    BOOLEAN = "boolean"
    OTHER = "other"


_KINDS_BY_TYPE: dict[str, ShapeKind] = {
    "structure": ShapeKind.STRUCTURE,
    "list": ShapeKind.LIST,
    "map": ShapeKind.MAP,
    "string": ShapeKind.STRING,
    "integer": ShapeKind.INTEGER,
    "long": ShapeKind.LONG,
    "boolean": ShapeKind.BOOLEAN,
}


@dataclass(frozen=True)
class Shape:
    """A named shape with its kind resolved. ``raw`` is never modified."""

    name: str
    kind: ShapeKind
    type_name: str
    raw: dict[str, Any]

    @property
    def members(self) -> dict[str, dict[str, Any]]:
        """Structure members, in declaration order."""
        return self.raw.get("members", {})

    @property
    def required(self) -> frozenset[str]:
        return frozenset(self.raw.get("required", ()))

    @property
    def member(self) -> dict[str, Any]:
        """Element reference of a list shape."""
        return self.raw["member"]

    @property
    def enum(self) -> tuple[str, ...]:
        return tuple(str(v) for v in self.raw.get("enum", ()))

    def is_required(self, member: str) -> bool:
        return member in self.required


def classify(name: str, raw: dict[str, Any]) -> Shape:
    """Tag a raw shape definition with its kind."""
    type_name = raw.get("type", "")
    kind = _KINDS_BY_TYPE.get(type_name, ShapeKind.OTHER)
    if kind is ShapeKind.STRING and raw.get("enum"):
        kind = ShapeKind.STRING_ENUM
    return Shape(name=name, kind=kind, type_name=type_name, raw=raw)


def get_shapes(service: dict[str, Any]) -> dict[str, Any]:
    """Extract the shape definitions from a service description."""
    return service.get("shapes", {})


def get_shape(service: dict[str, Any], name: str) -> Shape:
    """Look up a shape by name. Unknown names raise KeyError."""
    return classify(name, get_shapes(service)[name])
