"""Custom exception hierarchy."""

from __future__ import annotations

import json
from typing import Any

from .missing import MISSING


def _describe(value: Any) -> str:
    """Render a value for error messages the way it would appear in JSON.

    An absent property renders as a bare ``absent`` so it cannot be confused
    with a string value.
    """
    if value is MISSING:
        return "absent"
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError):
        return repr(value)


class PythError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(PythError):
    """Data validation failure."""

    pass


class MalformedInputError(ValidationError):
    """Input does not satisfy the schema it was checked against.

    Raised on the first mismatch found: wrong primitive type, a value outside
    an enumeration, a bad array element or a union with no matching member.
    ``path`` holds the keys (and list indices) leading to the offending value.
    """

    def __init__(
        self,
        expected: Any,
        actual: Any,
        path: tuple[str | int, ...] = (),
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.path = path
        if path:
            message = (
                f'Invalid value for key "{self.key}". '
                f"Expected type {_describe(expected)} but got {_describe(actual)}"
            )
        else:
            message = f"Invalid value {_describe(actual)} for type {_describe(expected)}"
        super().__init__(message)

    @property
    def key(self) -> str:
        """Dotted key path, e.g. ``metadata.emitter_chain`` or ``items[2]``."""
        rendered = ""
        for part in self.path:
            if isinstance(part, int):
                rendered += f"[{part}]"
            elif rendered:
                rendered += f".{part}"
            else:
                rendered = part
        return rendered


class SchemaError(PythError):
    """Schema definition is broken (e.g. reference to an unregistered name)."""

    pass
