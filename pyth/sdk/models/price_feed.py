"""Pyth price feed model."""

from __future__ import annotations

import copy
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from ..core.enums import PriceStatus
from ..core.exceptions import MalformedInputError
from ..schema import cast, uncast
from .metadata import PriceFeedMetadata
from .price import Price
from .schemas import PRICE_FEED_SCHEMAS

logger = logging.getLogger(__name__)

UnixTimestamp = int
DurationInSeconds = int
HexString = str


class PriceFeed(BaseModel):
    """Current aggregate price published from Pyth publisher feeds.

    Architecture:
        Instances are built from validated JSON (``from_json``) or from
        explicit fields, and are immutable afterwards. ``expo`` is shared by
        every price and confidence field. Keys that the schema does not
        declare are kept as pydantic extras and re-emitted by ``to_json``.

    Prices are not read directly from the fields: use the accessors, which
    take ``status`` into account and return fresh ``Price`` values.
    """

    conf: str = Field(..., description="Confidence interval around the current aggregate price")
    ema_conf: str = Field(..., description="Exponentially moving average confidence interval")
    ema_price: str = Field(..., description="Exponentially moving average price")
    expo: int = Field(..., description="Price exponent")
    id: HexString = Field(..., description="Unique identifier for this price")
    max_num_publishers: int = Field(..., description="Maximum number of contributing publishers")
    metadata: PriceFeedMetadata | None = Field(None, description="Metadata about the price")
    num_publishers: int = Field(..., description="Number of publishers in the current aggregate")
    prev_conf: str = Field(..., description="Confidence of the previous Trading aggregate")
    prev_price: str = Field(..., description="Price of the previous Trading aggregate")
    prev_publish_time: UnixTimestamp = Field(
        ..., description="Publish time of the previous Trading aggregate"
    )
    price: str = Field(..., description="Current aggregate price")
    product_id: HexString = Field(..., description="Product account key")
    publish_time: UnixTimestamp = Field(..., description="Current aggregate publish time")
    status: PriceStatus = Field(..., description="Status of price (Trading is valid)")

    model_config = ConfigDict(frozen=True, extra="allow")

    @classmethod
    def from_json(cls, data: Any) -> PriceFeed:
        """Validate a decoded JSON payload and build a PriceFeed from it.

        Raises:
            MalformedInputError: If the payload does not match the price feed
                schema. The error names the first offending key.
        """
        schema = PRICE_FEED_SCHEMAS.ref(config.PRICE_FEED_SCHEMA)
        try:
            fields = cast(data, schema, PRICE_FEED_SCHEMAS)
        except MalformedInputError as exc:
            logger.debug("Rejected malformed price feed", extra={"path": exc.key})
            raise

        # Extras still reference containers owned by ``data``
        feed = cls.model_validate(copy.deepcopy(fields))
        logger.debug(
            "Parsed price feed",
            extra={"feed_id": feed.id, "status": feed.status.value},
        )
        return feed

    def to_json(self) -> dict[str, Any]:
        """Serialize back to the wire shape. Absent metadata is left out."""
        data = self.model_dump(mode="json")
        if self.metadata is None:
            del data["metadata"]
        return uncast(data, PRICE_FEED_SCHEMAS.ref(config.PRICE_FEED_SCHEMA), PRICE_FEED_SCHEMAS)

    def get_current_price(self) -> Price | None:
        """Get the current price and confidence interval as fixed-point numbers.

        This is the best estimate of the price at ``publish_time``. Returns
        None if the oracle could not determine a price at that time, e.g.
        because the market only trades during certain hours.
        """
        if not self.status.is_trading:
            return None
        return Price(price=self.price, conf=self.conf, expo=self.expo)

    def get_ema_price(self) -> Price:
        """Get the exponentially-weighted moving average price and confidence.

        The EMA confidence interval is computed upstream in a somewhat
        questionable way; do not rely on it for high-value applications.
        """
        return Price(price=self.ema_price, conf=self.ema_conf, expo=self.expo)

    def get_latest_available_price_unchecked(self) -> tuple[Price, UnixTimestamp]:
        """Get the latest available price along with the time it was published.

        Same as ``get_current_price`` while the feed is Trading. Otherwise
        returns the price of the last Trading aggregate, which can be
        arbitrarily old. Callers must check the returned timestamp, or use
        ``get_latest_available_price_within_duration`` instead.
        """
        if self.status.is_trading:
            return Price(price=self.price, conf=self.conf, expo=self.expo), self.publish_time
        return (
            Price(price=self.prev_price, conf=self.prev_conf, expo=self.expo),
            self.prev_publish_time,
        )

    def get_latest_available_price_within_duration(
        self,
        duration: DurationInSeconds,
        now: UnixTimestamp | None = None,
    ) -> Price | None:
        """Get the latest price if it was published within ``duration`` seconds of now.

        Args:
            duration: Maximum allowed distance in seconds between now and the
                publish time of the returned price.
            now: Current unix time in seconds. Defaults to the wall clock.

        Returns:
            The latest available price, or None if it falls outside the window.
        """
        price, timestamp = self.get_latest_available_price_unchecked()
        current_time = config.current_unix_time() if now is None else now

        # Absolute difference: a publish time in the future is rejected too
        age = abs(current_time - timestamp)
        if age > duration:
            logger.debug(
                "Latest price outside allowed duration",
                extra={"feed_id": self.id, "age": age, "duration": duration},
            )
            return None
        return price

    def get_metadata(self) -> PriceFeedMetadata | None:
        """Get a copy of the feed metadata, or None if the payload had none."""
        if self.metadata is None:
            return None
        return self.metadata.model_copy(deep=True)
