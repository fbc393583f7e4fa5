"""Route discovery options, quoted paths and discovery results."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from pathfinder.constants import (
    DEFAULT_MAX_HOPS,
    DEFAULT_MAX_PATHS,
    DEFAULT_SLIPPAGE_TOLERANCE,
    MAX_HOPS_CEILING,
    MAX_SLIPPAGE_TOLERANCE,
    POOL_SWAP_GAS_COST,
)
from pathfinder.errors import CancelledOperation, NoRouteFound
from pathfinder.models.token import Token
from pathfinder.models.types import Address, Uint256
from pathfinder.units import format_units


class PathFinderOptions(BaseModel):
    """Per-call options for route discovery."""

    max_hops: int = Field(default=DEFAULT_MAX_HOPS, ge=1, le=MAX_HOPS_CEILING, alias="maxHops")
    max_paths: int = Field(default=DEFAULT_MAX_PATHS, ge=1, alias="maxPaths")
    slippage_tolerance: Decimal = Field(
        default=DEFAULT_SLIPPAGE_TOLERANCE,
        gt=0,
        le=MAX_SLIPPAGE_TOLERANCE,
        alias="slippageTolerance",
        description="Slippage tolerance in percent (0.5 = 0.5%)",
    )

    model_config = {"frozen": True, "populate_by_name": True}


@dataclass(frozen=True)
class QuotedPath:
    """A candidate path with the amounts the oracle quoted along it.

    `amounts[0]` is the raw input and `amounts[i]` the raw output after hop i.
    Quoted paths belong to a single discovery call and go stale with the
    reserves they were quoted against.
    """

    tokens: tuple[Token, ...]
    amounts: tuple[int, ...]
    price_impact: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        if len(self.tokens) < 2:
            raise ValueError("A path needs at least two tokens")
        if len(self.amounts) != len(self.tokens):
            raise ValueError(
                f"Expected {len(self.tokens)} amounts for the path, got {len(self.amounts)}"
            )

    @property
    def path(self) -> list[str]:
        """Token addresses in swap order."""
        return [token.address for token in self.tokens]

    @property
    def source(self) -> Token:
        return self.tokens[0]

    @property
    def destination(self) -> Token:
        return self.tokens[-1]

    @property
    def amount_in(self) -> int:
        return self.amounts[0]

    @property
    def amount_out(self) -> int:
        """Raw expected output in destination-token units."""
        return self.amounts[-1]

    @property
    def expected_output(self) -> Decimal:
        """Human-readable expected output."""
        return format_units(self.amount_out, self.destination.decimals)

    @property
    def hops(self) -> int:
        return len(self.tokens) - 1

    @property
    def is_multihop(self) -> bool:
        return self.hops > 1

    @property
    def gas_estimate(self) -> int:
        return self.hops * POOL_SWAP_GAS_COST

    @property
    def display(self) -> str:
        return format_path_display(self)


def format_path_display(path: QuotedPath) -> str:
    """Render a path as its token symbols, e.g. "WETH → USDC → DAI"."""
    return " → ".join(token.symbol for token in path.tokens)


class ImpactReference(str, Enum):
    """Which route the unit reference quote for price impact is taken along."""

    # The direct source -> destination pool, even for multi-hop paths
    DIRECT = "direct"
    # The path being evaluated
    PATH = "path"


class DiscoveryStatus(str, Enum):
    """Outcome of a route discovery call."""

    OK = "ok"
    NO_ROUTE = "no_route"
    CANCELLED = "cancelled"


@dataclass
class DiscoveryResult:
    """Ranked paths for one discovery call.

    A cancelled call never carries paths, so an incompletely evaluated route
    cannot be mistaken for the best one.
    """

    status: DiscoveryStatus
    source: Token
    destination: Token
    paths: list[QuotedPath] = field(default_factory=list)

    @classmethod
    def from_ranked(
        cls, source: Token, destination: Token, paths: list[QuotedPath]
    ) -> DiscoveryResult:
        status = DiscoveryStatus.OK if paths else DiscoveryStatus.NO_ROUTE
        return cls(status=status, source=source, destination=destination, paths=paths)

    @classmethod
    def cancelled(cls, source: Token, destination: Token) -> DiscoveryResult:
        return cls(status=DiscoveryStatus.CANCELLED, source=source, destination=destination)

    @property
    def best(self) -> QuotedPath | None:
        return self.paths[0] if self.paths else None

    @property
    def is_empty(self) -> bool:
        return not self.paths

    def raise_for_status(self) -> None:
        """Raise NoRouteFound or CancelledOperation for non-OK outcomes."""
        if self.status is DiscoveryStatus.CANCELLED:
            raise CancelledOperation(
                f"Route discovery {self.source.symbol} -> {self.destination.symbol} was cancelled"
            )
        if self.status is DiscoveryStatus.NO_ROUTE:
            raise NoRouteFound(self.source.address, self.destination.address)

    def require_best(self) -> QuotedPath:
        """Return the best path, raising if discovery found none."""
        self.raise_for_status()
        assert self.best is not None
        return self.best


class SwapParameters(BaseModel):
    """Fields consumed by the execution collaborator to submit a swap."""

    path: list[Address]
    amount_in: Uint256 = Field(alias="amountIn")
    min_output: Uint256 = Field(alias="minOutput")
    recipient: Address
    deadline: int = Field(ge=0, description="Unix timestamp after which the swap reverts")

    model_config = {"frozen": True, "populate_by_name": True}


__all__ = [
    "DiscoveryResult",
    "DiscoveryStatus",
    "ImpactReference",
    "PathFinderOptions",
    "QuotedPath",
    "SwapParameters",
    "format_path_display",
]
