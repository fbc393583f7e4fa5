"""Protocol constants for route discovery.

Centralizes AMM parameters and the defaults applied to discovery options.
"""

from decimal import Decimal

# The zero address returned by the factory when no pair exists
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Constant-product fee (30 bps = 0.3%), expressed against a 10000 basis
DEFAULT_FEE_BPS = 30
FEE_BASIS = 10_000

# Per-hop gas cost for UniswapV2-style pools (advisory only)
POOL_SWAP_GAS_COST = 60_000

# Discovery defaults (match the swap UI defaults)
DEFAULT_MAX_HOPS = 3
DEFAULT_MAX_PATHS = 5
DEFAULT_SLIPPAGE_TOLERANCE = Decimal("0.5")

# Hard ceilings. Every edge check is a paid remote call, so hop depth is bounded.
MAX_HOPS_CEILING = 6
MAX_SLIPPAGE_TOLERANCE = Decimal("50")

# In-flight oracle calls per discovery call
DEFAULT_MAX_CONCURRENCY = 16

# Transactions expire 20 minutes after the parameters are built
DEFAULT_DEADLINE_SECONDS = 20 * 60

# Price impact is reported with six decimal places
PRICE_IMPACT_QUANTUM = Decimal("0.000001")
MAX_PRICE_IMPACT = Decimal(100)

# swapExactTokensForTokens(uint256,uint256,address[],address,uint256)
SWAP_EXACT_TOKENS_SELECTOR = "0x38ed1739"
