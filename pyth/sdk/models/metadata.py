"""Price feed metadata model."""

from pydantic import BaseModel, ConfigDict


class PriceFeedMetadata(BaseModel):
    """Attestation details attached to a price feed.

    Only present when the source payload carries it. Unknown keys from the
    payload are kept so they survive a round trip.
    """

    attestation_time: int
    emitter_chain: int
    sequence_number: int

    model_config = ConfigDict(frozen=True, extra="allow")
