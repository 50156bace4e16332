"""Core enumerations."""

from enum import Enum


class PriceStatus(str, Enum):
    """Availability status of a price feed.

    Reflects the upstream oracle state at publish time. Only ``TRADING``
    makes the current aggregate price authoritative.
    """

    AUCTION = "Auction"
    HALTED = "Halted"
    TRADING = "Trading"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def is_trading(self) -> bool:
        return self is PriceStatus.TRADING
