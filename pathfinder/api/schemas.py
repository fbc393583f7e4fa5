"""Request and response models for the quote API."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from pathfinder.models.route import DiscoveryStatus, PathFinderOptions, QuotedPath, SwapParameters
from pathfinder.models.token import Token
from pathfinder.models.types import Address, Uint256


class QuoteRequest(BaseModel):
    """A route discovery request.

    `tokens` is the caller's token list: the universe of admissible
    intermediate hops. Source and destination must be in it.
    """

    source: Address
    destination: Address
    amount_in: Decimal = Field(gt=0, alias="amountIn", description="Human amount of source token")
    tokens: list[Token] = Field(min_length=2)
    options: PathFinderOptions | None = None
    recipient: Address | None = Field(
        default=None,
        description="If set, swap parameters are built for the best path.",
    )

    model_config = {"populate_by_name": True}


class PathQuote(BaseModel):
    """A ranked path as returned to the caller."""

    path: list[Address]
    symbols: list[str]
    display: str
    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    expected_output: str = Field(alias="expectedOutput")
    price_impact: str = Field(alias="priceImpact", description="Percent, within [0, 100]")
    hops: int
    gas_estimate: int = Field(alias="gasEstimate")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_quoted(cls, path: QuotedPath) -> PathQuote:
        return cls(
            path=path.path,
            symbols=[token.symbol for token in path.tokens],
            display=path.display,
            amount_in=path.amount_in,
            amount_out=path.amount_out,
            expected_output=str(path.expected_output),
            price_impact=str(path.price_impact),
            hops=path.hops,
            gas_estimate=path.gas_estimate,
        )


class SwapPayload(BaseModel):
    """Swap parameters for the best path, with router calldata when configured."""

    parameters: SwapParameters
    router: Address | None = None
    calldata: str | None = None


class QuoteResponse(BaseModel):
    """Ranked paths for a quote request.

    `no_route` means discovery completed and no liquidity was found;
    `cancelled` means discovery did not finish and no path is recommended.
    """

    status: DiscoveryStatus
    paths: list[PathQuote] = Field(default_factory=list)
    swap: SwapPayload | None = None
