"""Pydantic models for the priced route handed over by route discovery.

Only the first entry of ``bestRoute`` is ever compiled; choosing between
alternative routes happens upstream.
"""

from pydantic import BaseModel, Field

from executor.models.types import Address, Uint256


class Leg(BaseModel):
    """One parallel portion of a route.

    Each leg swaps ``percent`` of the route's input through a single exchange.
    """

    src_token: Address = Field(alias="srcToken", description="Token sold by this leg.")
    dest_token: Address = Field(alias="destToken", description="Token bought by this leg.")
    src_amount: Uint256 = Field(alias="srcAmount", description="Amount of srcToken sold.")
    dest_amount: Uint256 = Field(alias="destAmount", description="Expected destToken output.")
    percent: float = Field(gt=0, le=100, description="Share of the route input, in percent.")
    exchange: str | None = Field(default=None, description="Exchange key, informational only.")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def src_amount_int(self) -> int:
        """Source amount as integer."""
        return int(self.src_amount)

    @property
    def dest_amount_int(self) -> int:
        """Destination amount as integer."""
        return int(self.dest_amount)


class Route(BaseModel):
    """A single path made of parallel legs."""

    percent: float = Field(default=100, gt=0, le=100)
    legs: list[Leg] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def total_percent(self) -> float:
        """Sum of leg percentages (100 for a well-formed route)."""
        return sum(leg.percent for leg in self.legs)


class PriceRoute(BaseModel):
    """Route discovery output: candidate paths, best first."""

    src_token: Address = Field(alias="srcToken")
    dest_token: Address = Field(alias="destToken")
    src_amount: Uint256 = Field(alias="srcAmount")
    dest_amount: Uint256 = Field(alias="destAmount")
    best_route: list[Route] = Field(default_factory=list, alias="bestRoute")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def legs(self) -> list[Leg]:
        """Legs of the first best route, or an empty list if there is none."""
        if not self.best_route:
            return []
        return list(self.best_route[0].legs)
