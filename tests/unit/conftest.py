"""Shared fixtures for unit tests."""

import pytest


@pytest.fixture
def price_feed_json():
    """A valid Trading price feed payload without metadata."""
    return {
        "conf": "1",
        "ema_conf": "2",
        "ema_price": "3",
        "expo": 4,
        "id": "abcdef0123456789",
        "max_num_publishers": 6,
        "num_publishers": 5,
        "prev_conf": "7",
        "prev_price": "8",
        "prev_publish_time": 9,
        "price": "10",
        "product_id": "0123456789abcdef",
        "publish_time": 11,
        "status": "Trading",
    }


@pytest.fixture
def metadata_json():
    """Metadata block as served alongside a price feed."""
    return {
        "attestation_time": 7,
        "emitter_chain": 8,
        "sequence_number": 9,
    }
