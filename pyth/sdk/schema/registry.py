"""Named schema registry used to resolve Reference nodes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from ..core.exceptions import SchemaError
from .nodes import Reference, SchemaNode


class SchemaRegistry(Mapping[str, SchemaNode]):
    """Read-only mapping of schema name -> node.

    References are resolved lazily at transform time, so schemas may refer
    to each other (or to themselves) regardless of registration order.
    """

    def __init__(self, schemas: Mapping[str, SchemaNode] | None = None) -> None:
        self._schemas: dict[str, SchemaNode] = dict(schemas or {})

    def __getitem__(self, name: str) -> SchemaNode:
        return self._schemas[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"SchemaRegistry({sorted(self._schemas)!r})"

    def ref(self, name: str) -> Reference:
        """Reference to a registered schema. Raises SchemaError if unknown."""
        if name not in self._schemas:
            raise SchemaError(f"Unknown schema reference '{name}'")
        return Reference(name)

    def resolve(self, node: SchemaNode) -> SchemaNode:
        """Follow Reference chains until a concrete node is reached."""
        seen: set[str] = set()
        while isinstance(node, Reference):
            if node.name in seen:
                raise SchemaError(f"Circular schema reference '{node.name}'")
            seen.add(node.name)
            try:
                node = self._schemas[node.name]
            except KeyError:
                raise SchemaError(f"Unknown schema reference '{node.name}'") from None
        return node
