"""Data models for Pyth price feeds.

Architecture:
    This module exports the Pydantic v2 models built on top of the schema
    transformer. All models are immutable (frozen=True); accessors hand out
    fresh value objects rather than references into a feed.

Model Categories:
    - Values: Price
    - Feeds: PriceFeed, PriceFeedMetadata
    - Wire schemas: PRICE_FEED_SCHEMAS

See Also:
    - pyth.sdk.schema: Validation and key remapping engine
"""

from .metadata import PriceFeedMetadata
from .price import Price
from .price_feed import DurationInSeconds, HexString, PriceFeed, UnixTimestamp
from .schemas import PRICE_FEED, PRICE_FEED_METADATA, PRICE_FEED_SCHEMAS

__all__ = [
    "DurationInSeconds",
    "HexString",
    "PRICE_FEED",
    "PRICE_FEED_METADATA",
    "PRICE_FEED_SCHEMAS",
    "Price",
    "PriceFeed",
    "PriceFeedMetadata",
    "UnixTimestamp",
]
