"""Pytest configuration and fixtures."""

import pytest

from pathfinder.config import PathFinderConfig
from pathfinder.oracle.constant_product import ConstantProductOracle, ConstantProductPool
from pathfinder.routing.finder import PathFinder
from pathfinder.routing.graph import TokenGraph, TokenRegistry
from tests.helpers import (
    DAI,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    USDC,
    WBTC,
    WETH,
    MockPoolOracle,
)

# =============================================================================
# Token universe fixtures
# =============================================================================


@pytest.fixture
def letter_tokens():
    """Four synthetic 18-decimal tokens A, B, C, D in registry order."""
    return [TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D]


@pytest.fixture
def mainnet_tokens():
    """WETH, USDC, DAI, WBTC in registry order."""
    return [WETH, USDC, DAI, WBTC]


@pytest.fixture
def letter_graph(letter_tokens) -> TokenGraph:
    return TokenGraph(TokenRegistry(letter_tokens))


# =============================================================================
# Oracle fixtures
# =============================================================================


@pytest.fixture
def triangle_oracle() -> MockPoolOracle:
    """A-B, B-C and A-C pools: direct A->C gives 19.7 C, A->B->C gives 18.5 C."""
    return MockPoolOracle(
        pairs=[(TOKEN_A, TOKEN_B), (TOKEN_B, TOKEN_C), (TOKEN_A, TOKEN_C)],
        outputs={
            (TOKEN_A, TOKEN_C): 19_700_000_000_000_000_000,
            (TOKEN_A, TOKEN_B, TOKEN_C): 18_500_000_000_000_000_000,
        },
    )


@pytest.fixture
def empty_oracle() -> MockPoolOracle:
    """Oracle with no pools at all."""
    return MockPoolOracle()


@pytest.fixture
def mainnet_pools() -> list[ConstantProductPool]:
    """Constant-product pools shaped like mainnet UniswapV2.

    WETH is the hub. The direct USDC/DAI pool is shallow, so larger trades
    are better routed through WETH.
    """
    return [
        # 1000 WETH / 2.5M USDC
        ConstantProductPool(WETH.address, USDC.address, 1000 * 10**18, 2_500_000 * 10**6),
        # 1000 WETH / 2.5M DAI
        ConstantProductPool(WETH.address, DAI.address, 1000 * 10**18, 2_500_000 * 10**18),
        # 10K USDC / 10K DAI
        ConstantProductPool(USDC.address, DAI.address, 10_000 * 10**6, 10_000 * 10**18),
        # 50 WBTC / 1000 WETH
        ConstantProductPool(WBTC.address, WETH.address, 50 * 10**8, 1000 * 10**18),
    ]


@pytest.fixture
def mainnet_oracle(mainnet_pools) -> ConstantProductOracle:
    return ConstantProductOracle(mainnet_pools)


# =============================================================================
# Finder fixtures
# =============================================================================


@pytest.fixture
def config() -> PathFinderConfig:
    """Config with a generous timeout and a known router."""
    return PathFinderConfig(
        timeout_seconds=5.0,
        router_address="0x7a250d5630b4cf539739df2c5dacb4c659f2488d",
    )


@pytest.fixture
def triangle_finder(triangle_oracle, config) -> PathFinder:
    return PathFinder(triangle_oracle, [TOKEN_A, TOKEN_B, TOKEN_C], config)


@pytest.fixture
def mainnet_finder(mainnet_oracle, mainnet_tokens, config) -> PathFinder:
    return PathFinder(mainnet_oracle, mainnet_tokens, config)
