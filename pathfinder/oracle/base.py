"""PoolOracle protocol: the read-only view of the ledger used for discovery."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class PoolOracle(Protocol):
    """Protocol for pool oracle implementations.

    This allows swapping between the RPC-backed oracle and an in-memory
    oracle for testing. Implementations never mutate ledger state.
    """

    async def pair_exists(self, token_a: str, token_b: str) -> bool:
        """Check whether a liquidity pool exists for the unordered pair.

        Args:
            token_a: First token address
            token_b: Second token address

        Returns:
            True iff a pool exists for the pair

        Raises:
            OracleError: If the lookup itself fails
        """
        ...

    async def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> list[int]:
        """Quote a multi-hop swap along `path`, mirroring the router.

        Args:
            amount_in: Raw input amount of path[0]
            path: Token addresses, at least two

        Returns:
            Amounts where amounts[0] == amount_in and amounts[i] is the
            output after hop i

        Raises:
            OracleError: If any hop lacks liquidity or the path is malformed
        """
        ...


__all__ = ["PoolOracle"]
