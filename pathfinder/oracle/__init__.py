"""Pool oracles: read-only access to pool existence and router quotes."""

from pathfinder.oracle.base import PoolOracle
from pathfinder.oracle.constant_product import (
    ConstantProductOracle,
    ConstantProductPool,
    get_amount_out,
)

__all__ = [
    "ConstantProductOracle",
    "ConstantProductPool",
    "PoolOracle",
    "get_amount_out",
]
