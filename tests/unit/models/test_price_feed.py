"""Unit tests for PriceFeed model."""

import logging

import pytest
from pydantic import ValidationError

from pyth.sdk import config
from pyth.sdk.core import MalformedInputError, PriceStatus
from pyth.sdk.models import Price, PriceFeed, PriceFeedMetadata


def _with(payload, **changes):
    updated = dict(payload)
    updated.update(changes)
    return updated


def test_from_json_fields(price_feed_json):
    """Test fields are copied from the payload."""
    feed = PriceFeed.from_json(price_feed_json)
    assert feed.id == "abcdef0123456789"
    assert feed.product_id == "0123456789abcdef"
    assert feed.expo == 4
    assert feed.num_publishers == 5
    assert feed.max_num_publishers == 6
    assert feed.publish_time == 11
    assert feed.prev_publish_time == 9
    assert feed.status is PriceStatus.TRADING
    assert feed.metadata is None


def test_trading_accessors(price_feed_json):
    """Test accessors of a Trading feed."""
    feed = PriceFeed.from_json(price_feed_json)
    assert feed.get_current_price() == Price(price="10", conf="1", expo=4)
    assert feed.get_ema_price() == Price(price="3", conf="2", expo=4)
    assert feed.get_latest_available_price_unchecked() == (
        Price(price="10", conf="1", expo=4),
        11,
    )


@pytest.mark.parametrize("status", ["Unknown", "Halted", "Auction"])
def test_not_trading_accessors(price_feed_json, status):
    """Test a feed that is not Trading falls back to the previous price."""
    feed = PriceFeed.from_json(_with(price_feed_json, status=status))
    assert feed.get_current_price() is None
    assert feed.get_ema_price() == Price(price="3", conf="2", expo=4)
    assert feed.get_latest_available_price_unchecked() == (
        Price(price="8", conf="7", expo=4),
        9,
    )


def test_round_trip_without_metadata(price_feed_json):
    """Test to_json restores the payload and leaves metadata out."""
    output = PriceFeed.from_json(price_feed_json).to_json()
    assert output == price_feed_json
    assert "metadata" not in output


def test_round_trip_with_metadata(price_feed_json, metadata_json):
    """Test to_json restores the payload including metadata."""
    payload = _with(price_feed_json, metadata=metadata_json)
    assert PriceFeed.from_json(payload).to_json() == payload


def test_round_trip_preserves_unknown_keys(price_feed_json, metadata_json):
    """Test undeclared keys survive a round trip at every level."""
    payload = _with(
        price_feed_json,
        vaa="AQAAAA==",
        extra_info={"source": ["a", "b"]},
        metadata=_with(metadata_json, price_service_receive_time=12),
    )
    feed = PriceFeed.from_json(payload)
    assert feed.model_extra == {"vaa": "AQAAAA==", "extra_info": {"source": ["a", "b"]}}
    assert feed.to_json() == payload


def test_to_json_status_is_plain_string(price_feed_json):
    """Test serialized status is the wire literal."""
    output = PriceFeed.from_json(price_feed_json).to_json()
    assert type(output["status"]) is str
    assert output["status"] == "Trading"


def test_metadata(price_feed_json, metadata_json):
    """Test metadata is parsed and handed out as a copy."""
    feed = PriceFeed.from_json(_with(price_feed_json, metadata=metadata_json))
    metadata = feed.get_metadata()
    assert metadata == PriceFeedMetadata(attestation_time=7, emitter_chain=8, sequence_number=9)
    assert metadata is not feed.metadata


def test_metadata_absent(price_feed_json):
    """Test get_metadata returns None when the payload has none."""
    assert PriceFeed.from_json(price_feed_json).get_metadata() is None


def test_metadata_copy_is_deep(price_feed_json, metadata_json):
    """Test changing nested values on returned metadata leaves the feed alone."""
    payload = _with(price_feed_json, metadata=_with(metadata_json, source={"chain": 1}))
    feed = PriceFeed.from_json(payload)
    metadata = feed.get_metadata()
    metadata.source["chain"] = 99
    assert feed.metadata.source == {"chain": 1}
    assert feed.to_json() == payload


def test_feed_detached_from_payload(price_feed_json, metadata_json):
    """Test changing the source payload after parsing leaves the feed alone."""
    extra = {"a": [1]}
    nested = {"b": [2]}
    payload = _with(price_feed_json, extra=extra, metadata=_with(metadata_json, nested=nested))
    feed = PriceFeed.from_json(payload)
    extra["a"].append(3)
    nested["b"].append(4)
    output = feed.to_json()
    assert output["extra"] == {"a": [1]}
    assert output["metadata"]["nested"] == {"b": [2]}


def test_returned_prices_are_fresh(price_feed_json):
    """Test each accessor call returns a new Price value."""
    feed = PriceFeed.from_json(price_feed_json)
    first = feed.get_current_price()
    second = feed.get_current_price()
    assert first == second
    assert first is not second


def test_feed_frozen(price_feed_json):
    """Test feed is immutable."""
    feed = PriceFeed.from_json(price_feed_json)
    with pytest.raises(ValidationError):
        feed.price = "99"


def test_direct_construction(price_feed_json):
    """Test a feed built from explicit fields equals the parsed one."""
    feed = PriceFeed(
        conf="1",
        ema_conf="2",
        ema_price="3",
        expo=4,
        id="abcdef0123456789",
        max_num_publishers=6,
        num_publishers=5,
        prev_conf="7",
        prev_price="8",
        prev_publish_time=9,
        price="10",
        product_id="0123456789abcdef",
        publish_time=11,
        status=PriceStatus.TRADING,
    )
    assert feed == PriceFeed.from_json(price_feed_json)
    assert feed.to_json() == price_feed_json


@pytest.mark.parametrize(
    "changes,key",
    [
        ({"status": "Bogus"}, "status"),
        ({"expo": "4"}, "expo"),
        ({"price": 10}, "price"),
        ({"publish_time": 11.5}, "publish_time"),
        ({"num_publishers": True}, "num_publishers"),
        ({"metadata": None}, "metadata"),
    ],
)
def test_malformed_input(price_feed_json, changes, key):
    """Test malformed payloads raise MalformedInputError naming the key."""
    with pytest.raises(MalformedInputError) as excinfo:
        PriceFeed.from_json(_with(price_feed_json, **changes))
    assert excinfo.value.key == key
    assert f'"{key}"' in str(excinfo.value)


def test_malformed_metadata(price_feed_json, metadata_json):
    """Test a bad metadata field is reported through the optional union."""
    payload = _with(price_feed_json, metadata=_with(metadata_json, emitter_chain="8"))
    with pytest.raises(MalformedInputError) as excinfo:
        PriceFeed.from_json(payload)
    assert excinfo.value.key == "metadata"


def test_missing_field(price_feed_json):
    """Test a missing required field is rejected."""
    payload = dict(price_feed_json)
    del payload["ema_price"]
    with pytest.raises(MalformedInputError) as excinfo:
        PriceFeed.from_json(payload)
    assert excinfo.value.key == "ema_price"


def test_non_object_payload():
    """Test a payload that is not an object is rejected."""
    with pytest.raises(MalformedInputError):
        PriceFeed.from_json(["not", "a", "feed"])


def test_malformed_input_is_logged(price_feed_json, caplog):
    """Test rejected payloads are logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="pyth.sdk.models.price_feed"):
        with pytest.raises(MalformedInputError):
            PriceFeed.from_json(_with(price_feed_json, status="Bogus"))
    assert any(record.getMessage() == "Rejected malformed price feed" for record in caplog.records)


# Duration checks: publish_time 11 when Trading, prev_publish_time 9 otherwise


@pytest.mark.parametrize(
    "now,duration,expected",
    [
        (11, 0, True),
        (21, 10, True),
        (22, 10, False),
        (1, 10, True),
        (0, 10, False),
    ],
)
def test_within_duration_trading(price_feed_json, now, duration, expected):
    """Test staleness uses the absolute distance in both directions."""
    feed = PriceFeed.from_json(price_feed_json)
    price = feed.get_latest_available_price_within_duration(duration, now=now)
    if expected:
        assert price == Price(price="10", conf="1", expo=4)
    else:
        assert price is None


def test_within_duration_uses_previous_timestamp(price_feed_json):
    """Test the window is measured from prev_publish_time when not Trading."""
    feed = PriceFeed.from_json(_with(price_feed_json, status="Halted"))
    assert feed.get_latest_available_price_within_duration(10, now=19) == Price(
        price="8", conf="7", expo=4
    )
    assert feed.get_latest_available_price_within_duration(10, now=20) is None


def test_within_duration_wall_clock(price_feed_json, monkeypatch):
    """Test the wall clock is used when now is not given."""
    monkeypatch.setattr(config, "current_unix_time", lambda: 1_000)
    stale = PriceFeed.from_json(price_feed_json)
    fresh = PriceFeed.from_json(_with(price_feed_json, publish_time=995))
    future = PriceFeed.from_json(_with(price_feed_json, publish_time=1_100))
    assert stale.get_latest_available_price_within_duration(60) is None
    assert fresh.get_latest_available_price_within_duration(60) == Price(
        price="10", conf="1", expo=4
    )
    assert future.get_latest_available_price_within_duration(60) is None


def test_current_unix_time_is_whole_seconds(monkeypatch):
    """Test the clock floors fractional seconds."""
    monkeypatch.setattr(config.time, "time", lambda: 1_700_000_000.9)
    assert config.current_unix_time() == 1_700_000_000
