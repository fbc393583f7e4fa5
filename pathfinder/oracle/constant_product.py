"""In-memory constant-product pool oracle.

Pools use the UniswapV2 formula x * y = k with a proportional fee on input:

    amount_out = (in * fee * reserve_out) / (reserve_in * 10000 + in * fee)

where fee = 10000 - fee_bps (9970 for the standard 0.3%). Answers the same
questions as the on-chain factory and router, against a fixed snapshot of
reserves.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import structlog

from pathfinder.constants import DEFAULT_FEE_BPS, FEE_BASIS
from pathfinder.errors import InsufficientLiquidity, OracleError
from pathfinder.models.types import normalize_address

logger = structlog.get_logger()


@dataclass
class ConstantProductPool:
    """Represents a UniswapV2-style liquidity pool."""

    token0: str
    token1: str
    reserve0: int
    reserve1: int
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = DEFAULT_FEE_BPS
    address: str | None = None

    def __post_init__(self) -> None:
        self.token0 = normalize_address(self.token0)
        self.token1 = normalize_address(self.token1)
        if self.token0 == self.token1:
            raise ValueError("token0 and token1 must be different")
        if self.reserve0 < 0 or self.reserve1 < 0:
            raise ValueError("reserves must be non-negative")
        if not 0 <= self.fee_bps < FEE_BASIS:
            raise ValueError(f"fee_bps must be in [0, {FEE_BASIS})")

    @property
    def key(self) -> frozenset[str]:
        return frozenset((self.token0, self.token1))

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for AMM math (10000 - fee_bps), 9970 for 30 bps."""
        return FEE_BASIS - self.fee_bps

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == self.token0:
            return self.reserve0, self.reserve1
        elif token_in_norm == self.token1:
            return self.reserve1, self.reserve0
        else:
            raise ValueError(f"Token {token_in} not in pool")


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_multiplier: int = FEE_BASIS - DEFAULT_FEE_BPS,
) -> int:
    """Calculate output amount using the constant product formula.

    Matches the router's integer math exactly (floor division).

    Raises:
        InsufficientLiquidity: If amount_in or either reserve is not positive
    """
    if amount_in <= 0:
        raise InsufficientLiquidity("Insufficient input amount")
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity("Insufficient liquidity")

    amount_in_with_fee = amount_in * fee_multiplier
    numerator = amount_in_with_fee * reserve_out
    denominator = reserve_in * FEE_BASIS + amount_in_with_fee
    return numerator // denominator


class ConstantProductOracle:
    """PoolOracle over a fixed set of in-memory constant-product pools.

    Usage:
        oracle = ConstantProductOracle([
            ConstantProductPool(WETH, USDC, 1000 * 10**18, 2_000_000 * 10**6),
        ])
        amounts = await oracle.get_amounts_out(10**18, [WETH, USDC])
    """

    def __init__(self, pools: Iterable[ConstantProductPool] = ()) -> None:
        self._pools: dict[frozenset[str], ConstantProductPool] = {}
        for pool in pools:
            self.add_pool(pool)

    def add_pool(self, pool: ConstantProductPool) -> None:
        """Add or replace the pool for a token pair."""
        self._pools[pool.key] = pool

    def get_pool(self, token_a: str, token_b: str) -> ConstantProductPool | None:
        key = frozenset((normalize_address(token_a), normalize_address(token_b)))
        return self._pools.get(key)

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    async def pair_exists(self, token_a: str, token_b: str) -> bool:
        return self.get_pool(token_a, token_b) is not None

    async def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> list[int]:
        if len(path) < 2:
            raise OracleError(f"Invalid path: need at least 2 tokens, got {len(path)}")

        amounts = [amount_in]
        for i in range(len(path) - 1):
            pool = self.get_pool(path[i], path[i + 1])
            if pool is None:
                raise InsufficientLiquidity(f"No pool for {path[i]} -> {path[i + 1]} at hop {i}")
            reserve_in, reserve_out = pool.get_reserves(path[i])
            amounts.append(
                get_amount_out(amounts[-1], reserve_in, reserve_out, pool.fee_multiplier)
            )

        logger.debug(
            "constant_product_quote",
            path=list(path),
            amount_in=amount_in,
            amount_out=amounts[-1],
        )
        return amounts


__all__ = ["ConstantProductOracle", "ConstantProductPool", "get_amount_out"]
