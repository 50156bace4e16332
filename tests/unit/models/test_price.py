"""Unit tests for Price model."""

import pytest
from pydantic import ValidationError

from pyth.sdk.models import Price


def test_price_valid():
    """Test valid price creation."""
    price = Price(price="10", conf="1", expo=4)
    assert price.price == "10"
    assert price.conf == "1"
    assert price.expo == 4


def test_price_frozen():
    """Test price is immutable."""
    price = Price(price="10", conf="1", expo=4)
    with pytest.raises(ValidationError):
        price.price = "11"


def test_price_value_equality():
    """Test prices compare by value."""
    assert Price(price="10", conf="1", expo=-2) == Price(price="10", conf="1", expo=-2)
    assert Price(price="10", conf="1", expo=-2) != Price(price="10", conf="2", expo=-2)


def test_price_as_number_unchecked():
    """Test lossy float conversion of the price."""
    price = Price(price="123456", conf="250", expo=-2)
    assert price.get_price_as_number_unchecked() == pytest.approx(1234.56)
    assert price.get_conf_as_number_unchecked() == pytest.approx(2.5)


def test_price_as_number_positive_exponent():
    """Test float conversion with a positive exponent."""
    price = Price(price="10", conf="1", expo=4)
    assert price.get_price_as_number_unchecked() == 100000.0
    assert price.get_conf_as_number_unchecked() == 10000.0


def test_price_as_number_negative_mantissa():
    """Test float conversion of a negative price."""
    price = Price(price="-5", conf="0", expo=0)
    assert price.get_price_as_number_unchecked() == -5.0
    assert price.get_conf_as_number_unchecked() == 0.0
