"""Pyth price feed wire schemas.

These nodes describe the exact JSON shape served for a price feed before
conversion to the PriceFeed model. Keys are snake_case on both sides.
"""

from __future__ import annotations

from ..config import (
    PRICE_FEED_METADATA_SCHEMA,
    PRICE_FEED_SCHEMA,
    PRICE_STATUS_SCHEMA,
    PRICE_STATUS_VALUES,
)
from ..schema import (
    INTEGER,
    STRING,
    AnyValue,
    Enumeration,
    Object,
    Property,
    Reference,
    SchemaRegistry,
    optional,
)

PRICE_FEED_METADATA = Object(
    props=(
        Property.same("attestation_time", INTEGER),
        Property.same("emitter_chain", INTEGER),
        Property.same("sequence_number", INTEGER),
    ),
    additional=AnyValue(),
)

PRICE_FEED = Object(
    props=(
        Property.same("conf", STRING),
        Property.same("ema_conf", STRING),
        Property.same("ema_price", STRING),
        Property.same("expo", INTEGER),
        Property.same("id", STRING),
        Property.same("max_num_publishers", INTEGER),
        Property.same("metadata", optional(Reference(PRICE_FEED_METADATA_SCHEMA))),
        Property.same("num_publishers", INTEGER),
        Property.same("prev_conf", STRING),
        Property.same("prev_price", STRING),
        Property.same("prev_publish_time", INTEGER),
        Property.same("price", STRING),
        Property.same("product_id", STRING),
        Property.same("publish_time", INTEGER),
        Property.same("status", Reference(PRICE_STATUS_SCHEMA)),
    ),
    additional=AnyValue(),
)

PRICE_FEED_SCHEMAS = SchemaRegistry(
    {
        PRICE_FEED_SCHEMA: PRICE_FEED,
        PRICE_FEED_METADATA_SCHEMA: PRICE_FEED_METADATA,
        PRICE_STATUS_SCHEMA: Enumeration(*PRICE_STATUS_VALUES),
    }
)
