"""Declarative schema nodes.

Architecture:
    A schema is a tree of immutable node objects drawn from a closed set of
    kinds. The transformer dispatches on the node type; nodes themselves hold
    no validation logic beyond describing themselves for error messages.

Node Kinds:
    - Primitive: str / int / float / bool runtime type check
    - AnyValue, Never: accept everything / nothing
    - Null, Absent: JSON ``null`` and "property not present" respectively
    - Enumeration: closed set of literal strings
    - Array: homogeneous sequence
    - Union: ordered alternatives, first match wins
    - Object: declared properties with key remapping plus a catch-all
    - Reference: named indirection resolved through a SchemaRegistry

Design Decisions:
    - Absence is a sentinel (MISSING), distinct from None, so an optional
      property and an explicit JSON null never collapse into each other.
    - Object remapping tables are computed lazily and cached per node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Union as TypingUnion


class PrimitiveKind(str, Enum):
    """Runtime types a Primitive node can require."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def matches(self, value: Any) -> bool:
        """Check the runtime type of ``value``. ``bool`` is never numeric."""
        if self is PrimitiveKind.STRING:
            return isinstance(value, str)
        if self is PrimitiveKind.BOOLEAN:
            return isinstance(value, bool)
        if isinstance(value, bool):
            return False
        if self is PrimitiveKind.INTEGER:
            return isinstance(value, int)
        return isinstance(value, (int, float))


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind

    def describe(self) -> Any:
        return self.kind.value


@dataclass(frozen=True)
class AnyValue:
    def describe(self) -> Any:
        return "any"


@dataclass(frozen=True)
class Never:
    def describe(self) -> Any:
        return "never"


@dataclass(frozen=True)
class Null:
    def describe(self) -> Any:
        return None


@dataclass(frozen=True)
class Absent:
    def describe(self) -> Any:
        return "absent"


@dataclass(frozen=True)
class Enumeration:
    cases: tuple[str, ...]

    def __init__(self, *cases: str) -> None:
        object.__setattr__(self, "cases", tuple(cases))

    def describe(self) -> Any:
        return list(self.cases)


@dataclass(frozen=True)
class Array:
    items: SchemaNode

    def describe(self) -> Any:
        return {"array": self.items.describe()}


@dataclass(frozen=True)
class Union:
    """Ordered alternatives. The first member that validates wins."""

    members: tuple[SchemaNode, ...]

    def __init__(self, *members: SchemaNode) -> None:
        object.__setattr__(self, "members", tuple(members))

    def describe(self) -> Any:
        return [member.describe() for member in self.members]


@dataclass(frozen=True)
class Reference:
    name: str

    def describe(self) -> Any:
        return {"ref": self.name}


@dataclass(frozen=True)
class Property:
    """A declared object property.

    ``json`` is the key on the wire, ``model`` the key on the typed side.
    """

    json: str
    model: str
    schema: SchemaNode

    @classmethod
    def same(cls, name: str, schema: SchemaNode) -> Property:
        """Property whose wire and model keys are identical."""
        return cls(json=name, model=name, schema=schema)


@dataclass(frozen=True)
class Object:
    """Object with declared properties and a catch-all for everything else."""

    props: tuple[Property, ...]
    additional: SchemaNode = field(default_factory=AnyValue)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", tuple(self.props))

    @cached_property
    def json_to_model(self) -> dict[str, tuple[str, SchemaNode]]:
        """JSON key -> (model key, schema)."""
        return {prop.json: (prop.model, prop.schema) for prop in self.props}

    @cached_property
    def model_to_json(self) -> dict[str, tuple[str, SchemaNode]]:
        """Model key -> (JSON key, schema)."""
        return {prop.model: (prop.json, prop.schema) for prop in self.props}

    def describe(self) -> Any:
        return "object"


def mapping(additional: SchemaNode) -> Object:
    """Object with no declared properties: a homogeneous string-keyed map."""
    return Object(props=(), additional=additional)


def optional(schema: SchemaNode) -> Union:
    """Property that may be left out entirely."""
    return Union(Absent(), schema)


STRING = Primitive(PrimitiveKind.STRING)
INTEGER = Primitive(PrimitiveKind.INTEGER)
NUMBER = Primitive(PrimitiveKind.NUMBER)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)

SchemaNode = TypingUnion[
    Primitive,
    AnyValue,
    Never,
    Null,
    Absent,
    Enumeration,
    Array,
    Union,
    Reference,
    Object,
]
