"""PoolOracle backed by UniswapV2-style factory and router contracts via RPC."""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from web3 import AsyncHTTPProvider, AsyncWeb3

from pathfinder.constants import ZERO_ADDRESS
from pathfinder.errors import OracleError
from pathfinder.models.types import normalize_address

logger = structlog.get_logger()

# Factory ABI - minimal, just getPair
FACTORY_ABI = [
    {
        "name": "getPair",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "tokenA", "type": "address"},
            {"name": "tokenB", "type": "address"},
        ],
        "outputs": [{"name": "pair", "type": "address"}],
    },
]

# Router02 ABI - minimal, just getAmountsOut
ROUTER_ABI = [
    {
        "name": "getAmountsOut",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "amountIn", "type": "uint256"},
            {"name": "path", "type": "address[]"},
        ],
        "outputs": [{"name": "amounts", "type": "uint256[]"}],
    },
]


class Web3PoolOracle:
    """Oracle that makes eth_call requests to the factory and router.

    Both calls are read-only simulations; no transaction is ever sent.
    """

    def __init__(self, web3_provider: str, factory_address: str, router_address: str) -> None:
        """Initialize the oracle with an HTTP RPC provider.

        Args:
            web3_provider: HTTP RPC URL (e.g., "https://eth.llamarpc.com")
            factory_address: UniswapV2-style factory contract address
            router_address: UniswapV2-style Router02 contract address
        """
        self.w3 = AsyncWeb3(AsyncHTTPProvider(web3_provider))
        self.factory = self.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(factory_address),
            abi=FACTORY_ABI,
        )
        self.router = self.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(router_address),
            abi=ROUTER_ABI,
        )

    async def pair_exists(self, token_a: str, token_b: str) -> bool:
        try:
            pair_address = await self.factory.functions.getPair(
                AsyncWeb3.to_checksum_address(token_a),
                AsyncWeb3.to_checksum_address(token_b),
            ).call()
        except Exception as e:
            logger.warning(
                "pair_lookup_failed",
                token_a=token_a,
                token_b=token_b,
                error=str(e),
            )
            raise OracleError(f"getPair({token_a}, {token_b}) failed: {e}") from e

        return normalize_address(str(pair_address)) != ZERO_ADDRESS

    async def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> list[int]:
        try:
            amounts = await self.router.functions.getAmountsOut(
                amount_in,
                [AsyncWeb3.to_checksum_address(token) for token in path],
            ).call()
        except Exception as e:
            logger.debug(
                "get_amounts_out_failed",
                path=list(path),
                amount_in=amount_in,
                error=str(e),
            )
            raise OracleError(f"getAmountsOut failed along {list(path)}: {e}") from e

        return [int(amount) for amount in amounts]


__all__ = ["FACTORY_ABI", "ROUTER_ABI", "Web3PoolOracle"]
