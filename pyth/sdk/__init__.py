"""Pyth SDK - typed models for Pyth Network price feed payloads."""

from .core import (
    MalformedInputError,
    PriceStatus,
    PythError,
    SchemaError,
    ValidationError,
)
from .models import (
    DurationInSeconds,
    HexString,
    Price,
    PriceFeed,
    PriceFeedMetadata,
    UnixTimestamp,
)

__version__ = "1.2.0"

__all__ = [
    # Models
    "Price",
    "PriceFeed",
    "PriceFeedMetadata",
    "PriceStatus",
    # Type aliases
    "DurationInSeconds",
    "HexString",
    "UnixTimestamp",
    # Exceptions
    "PythError",
    "ValidationError",
    "MalformedInputError",
    "SchemaError",
]
