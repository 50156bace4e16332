"""Recursive schema-driven transformer.

One algorithm serves both directions. The direction is chosen by a key
selector (``props_of``) that returns, for an Object node, the table of
input key -> (output key, schema):

- ``cast``   uses ``Object.json_to_model`` (JSON -> typed)
- ``uncast`` uses ``Object.model_to_json`` (typed -> JSON)

Validation is fail-fast: the first mismatch raises MalformedInputError and
nothing partial is returned.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from ..core.exceptions import MalformedInputError
from ..core.missing import MISSING
from .nodes import (
    Absent,
    AnyValue,
    Array,
    Enumeration,
    Never,
    Null,
    Object,
    Primitive,
    SchemaNode,
    Union,
)
from .registry import SchemaRegistry

PropsSelector = Callable[[Object], Mapping[str, tuple[str, SchemaNode]]]


def json_to_model_props(node: Object) -> Mapping[str, tuple[str, SchemaNode]]:
    return node.json_to_model


def model_to_json_props(node: Object) -> Mapping[str, tuple[str, SchemaNode]]:
    return node.model_to_json


def transform(
    value: Any,
    schema: SchemaNode,
    props_of: PropsSelector,
    registry: SchemaRegistry,
    path: tuple[str | int, ...] = (),
) -> Any:
    """Validate ``value`` against ``schema`` and return the converted value.

    Args:
        value: Value to check. ``MISSING`` stands for an absent property.
        schema: Node to check against; references resolve through ``registry``.
        props_of: Key selector picking the remapping direction for objects.
        registry: Named schemas for Reference nodes.
        path: Keys leading to ``value``, used in error messages.

    Returns:
        The converted value. ``MISSING`` when an Absent member accepted it.

    Raises:
        MalformedInputError: On the first value that does not match.
        SchemaError: If a Reference cannot be resolved.
    """
    schema = registry.resolve(schema)

    if isinstance(schema, AnyValue):
        return value
    if isinstance(schema, Never):
        raise MalformedInputError(schema.describe(), value, path)
    if isinstance(schema, Null):
        if value is None:
            return value
        raise MalformedInputError(schema.describe(), value, path)
    if isinstance(schema, Absent):
        if value is MISSING:
            return value
        raise MalformedInputError(schema.describe(), value, path)
    if isinstance(schema, Primitive):
        if value is not MISSING and schema.kind.matches(value):
            return value
        raise MalformedInputError(schema.describe(), value, path)
    if isinstance(schema, Enumeration):
        return _transform_enum(schema, value, path)
    if isinstance(schema, Union):
        return _transform_union(schema, value, props_of, registry, path)
    if isinstance(schema, Array):
        return _transform_array(schema, value, props_of, registry, path)
    if isinstance(schema, Object):
        return _transform_object(schema, value, props_of, registry, path)
    raise MalformedInputError(repr(schema), value, path)


def _transform_enum(schema: Enumeration, value: Any, path: tuple[str | int, ...]) -> Any:
    if isinstance(value, str):
        for case in schema.cases:
            if value == case:
                return case
    raise MalformedInputError(schema.describe(), value, path)


def _transform_union(
    schema: Union,
    value: Any,
    props_of: PropsSelector,
    registry: SchemaRegistry,
    path: tuple[str | int, ...],
) -> Any:
    for member in schema.members:
        try:
            return transform(value, member, props_of, registry, path)
        except MalformedInputError:
            continue
    raise MalformedInputError(schema.describe(), value, path)


def _transform_array(
    schema: Array,
    value: Any,
    props_of: PropsSelector,
    registry: SchemaRegistry,
    path: tuple[str | int, ...],
) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise MalformedInputError("array", value, path)
    return [
        transform(item, schema.items, props_of, registry, (*path, index))
        for index, item in enumerate(value)
    ]


def _transform_object(
    schema: Object,
    value: Any,
    props_of: PropsSelector,
    registry: SchemaRegistry,
    path: tuple[str | int, ...],
) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedInputError("object", value, path)

    props = props_of(schema)
    result: dict[str, Any] = {}
    for key, (out_key, prop_schema) in props.items():
        converted = transform(value.get(key, MISSING), prop_schema, props_of, registry, (*path, key))
        # Absent optional properties are left out rather than set to None
        if converted is not MISSING:
            result[out_key] = converted
    for key, item in value.items():
        if key not in props:
            result[key] = transform(item, schema.additional, props_of, registry, (*path, key))
    return result


def cast(value: Any, schema: SchemaNode, registry: SchemaRegistry) -> Any:
    """Validate JSON-shaped ``value`` and rename keys to their model names."""
    return transform(value, schema, json_to_model_props, registry)


def uncast(value: Any, schema: SchemaNode, registry: SchemaRegistry) -> Any:
    """Validate typed ``value`` and rename keys back to their JSON names."""
    return transform(value, schema, model_to_json_props, registry)
