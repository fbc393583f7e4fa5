"""Route discovery.

Module structure:
- graph.py: TokenRegistry and the implicit TokenGraph
- gate.py: OracleGate, the per-call bounded/cancellable oracle gateway
- enumerator.py: PathEnumerator for bounded-depth simple paths
- quoter.py: Quoter for per-path multi-hop quotes
- impact.py: PriceImpactEstimator
- ranking.py: PathRanker
- execution.py: ExecutionParameterizer (minimum output, swap parameters)
- finder.py: PathFinder facade
"""

from pathfinder.routing.enumerator import PathEnumerator, ensure_simple_path
from pathfinder.routing.execution import ExecutionParameterizer, min_output
from pathfinder.routing.finder import PathFinder
from pathfinder.routing.gate import OracleGate
from pathfinder.routing.graph import TokenGraph, TokenRegistry
from pathfinder.routing.impact import PriceImpactEstimator, price_impact
from pathfinder.routing.quoter import Quoter
from pathfinder.routing.ranking import PathRanker

__all__ = [
    "ExecutionParameterizer",
    "OracleGate",
    "PathEnumerator",
    "PathFinder",
    "PathRanker",
    "PriceImpactEstimator",
    "Quoter",
    "TokenGraph",
    "TokenRegistry",
    "ensure_simple_path",
    "min_output",
    "price_impact",
]
