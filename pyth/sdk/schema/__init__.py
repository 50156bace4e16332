"""Schema-driven JSON validation and key remapping."""

from ..core.missing import MISSING
from .nodes import (
    BOOLEAN,
    INTEGER,
    NUMBER,
    STRING,
    Absent,
    AnyValue,
    Array,
    Enumeration,
    Never,
    Null,
    Object,
    Primitive,
    PrimitiveKind,
    Property,
    Reference,
    SchemaNode,
    Union,
    mapping,
    optional,
)
from .registry import SchemaRegistry
from .transform import (
    cast,
    json_to_model_props,
    model_to_json_props,
    transform,
    uncast,
)

__all__ = [
    "MISSING",
    "STRING",
    "INTEGER",
    "NUMBER",
    "BOOLEAN",
    "Absent",
    "AnyValue",
    "Array",
    "Enumeration",
    "Never",
    "Null",
    "Object",
    "Primitive",
    "PrimitiveKind",
    "Property",
    "Reference",
    "SchemaNode",
    "Union",
    "mapping",
    "optional",
    "SchemaRegistry",
    "cast",
    "uncast",
    "transform",
    "json_to_model_props",
    "model_to_json_props",
]
