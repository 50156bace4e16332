"""Fixed-point price data model."""

from pydantic import BaseModel, ConfigDict, Field


class Price(BaseModel):
    """A Pyth price represented as ``price ± conf * 10^expo``.

    ``price`` and ``conf`` are kept as the decimal strings served by the
    oracle so no precision is lost on the way through.
    """

    price: str = Field(..., description="Price mantissa")
    conf: str = Field(..., description="Confidence interval mantissa")
    expo: int = Field(..., description="Power-of-ten exponent shared by price and conf")

    model_config = ConfigDict(frozen=True)

    def get_price_as_number_unchecked(self) -> float:
        """Get price as a float.

        Warning: this conversion might be inaccurate. Prices and confidences
        are stored by the oracle at 64-bit integer precision, which a float
        cannot always represent exactly.
        """
        return float(self.price) * 10.0**self.expo

    def get_conf_as_number_unchecked(self) -> float:
        """Get confidence interval as a float. Same caveat as the price."""
        return float(self.conf) * 10.0**self.expo
