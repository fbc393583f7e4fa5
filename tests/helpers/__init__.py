"""Test helpers.

Usage:
    from tests.helpers import WETH, USDC, MockPoolOracle
"""

from tests.helpers.constants import (
    DAI,
    FACTORY,
    RECIPIENT,
    ROUTER,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    TOKEN_E,
    TOKEN_F,
    USDC,
    WBTC,
    WETH,
    make_token,
)
from tests.helpers.oracles import MockPoolOracle, pair_key, path_key

__all__ = [
    "DAI",
    "FACTORY",
    "MockPoolOracle",
    "RECIPIENT",
    "ROUTER",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "TOKEN_E",
    "TOKEN_F",
    "USDC",
    "WBTC",
    "WETH",
    "make_token",
    "pair_key",
    "path_key",
]
