"""Core components."""

from .enums import PriceStatus
from .exceptions import (
    MalformedInputError,
    PythError,
    SchemaError,
    ValidationError,
)

__all__ = [
    "PriceStatus",
    "PythError",
    "ValidationError",
    "MalformedInputError",
    "SchemaError",
]
