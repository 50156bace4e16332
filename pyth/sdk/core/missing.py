"""Marker for properties that are not present at all."""

from __future__ import annotations

from typing import Any


class _Missing:
    """Singleton standing in for an absent property. Distinct from None."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()
