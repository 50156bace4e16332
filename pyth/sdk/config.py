"""Shared price feed constants.

This module centralizes the schema names and the clock used by the models
so the schema definitions and the price feed class stay small and focused.
"""

from __future__ import annotations

import time

from pyth.sdk.core import PriceStatus

# Names under which the price feed schemas are registered
PRICE_FEED_SCHEMA = "PriceFeed"
PRICE_FEED_METADATA_SCHEMA = "PriceFeedMetadata"
PRICE_STATUS_SCHEMA = "PriceStatus"

# Literal status values accepted on the wire, in declaration order
PRICE_STATUS_VALUES = tuple(status.value for status in PriceStatus)


def current_unix_time() -> int:
    """Current wall-clock time in whole unix seconds (floored)."""
    return int(time.time())
