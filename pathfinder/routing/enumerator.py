"""Bounded-depth enumeration of simple token paths.

Paths are grown one hop at a time from the source. At each depth every
frontier path is tested for a closing edge to the destination and extended
through every unvisited intermediate with an edge; all edge checks of a depth
are issued concurrently. Branches whose edge check fails or returns False
are pruned, so the number of checks stays proportional to the live frontier.

Path types by hops:
- Direct (1 hop): [source, destination]
- 2-hop: [source, m, destination]
- 3-hop: [source, m1, m2, destination]
"""

from __future__ import annotations

import asyncio

import structlog

from pathfinder.errors import CancelledOperation, InvariantViolation
from pathfinder.models.token import Token
from pathfinder.routing.gate import OracleGate
from pathfinder.routing.graph import TokenGraph

logger = structlog.get_logger()

# A partial path plus the addresses it has visited
_Partial = tuple[list[Token], frozenset[str]]


def ensure_simple_path(
    tokens: list[Token] | tuple[Token, ...],
    source: Token | None = None,
    destination: Token | None = None,
) -> None:
    """Check that a path has no repeated token and joins the expected endpoints.

    Raises:
        InvariantViolation: If the path would revert on-chain
    """
    addresses = [token.address for token in tokens]
    if len(addresses) < 2:
        raise InvariantViolation(addresses, "fewer than two tokens")
    if len(set(addresses)) != len(addresses):
        raise InvariantViolation(addresses, "token repeated")
    if source is not None and addresses[0] != source.address:
        raise InvariantViolation(addresses, "does not start at source")
    if destination is not None and addresses[-1] != destination.address:
        raise InvariantViolation(addresses, "does not end at destination")


class PathEnumerator:
    """Enumerates candidate paths (not yet quoted) between two tokens."""

    def __init__(self, graph: TokenGraph) -> None:
        self._graph = graph

    async def enumerate(
        self,
        gate: OracleGate,
        source: Token,
        destination: Token,
        max_hops: int,
    ) -> list[list[Token]]:
        """Find candidate paths from source to destination.

        Shorter paths are returned first; within a depth, order follows the
        token registry order.

        Args:
            gate: Oracle gateway for edge checks
            source: Starting token
            destination: Target token
            max_hops: Maximum number of swaps allowed

        Returns:
            Candidate paths, each a list of tokens. Empty if none found.
        """
        if max_hops < 1:
            raise ValueError("max_hops must be at least 1")
        if source.address == destination.address:
            return []

        intermediates = self._graph.intermediates(source, destination)
        candidates: list[list[Token]] = []
        frontier: list[_Partial] = [([source], frozenset([source.address]))]

        for depth in range(1, max_hops + 1):
            if not frontier:
                break

            extensions: list[tuple[_Partial, Token]] = []
            if depth < max_hops:
                extensions = [
                    ((path, visited), token)
                    for path, visited in frontier
                    for token in intermediates
                    if token.address not in visited
                ]

            checks = [self._edge(gate, path[-1], destination) for path, _ in frontier]
            checks += [self._edge(gate, partial[0][-1], token) for partial, token in extensions]
            results = await asyncio.gather(*checks)

            closing, extended = results[: len(frontier)], results[len(frontier) :]

            found = 0
            for (path, _), exists in zip(frontier, closing):
                if exists and self._emit(candidates, path + [destination], source, destination):
                    found += 1

            frontier = [
                (path + [token], visited | frozenset([token.address]))
                for ((path, visited), token), exists in zip(extensions, extended)
                if exists
            ]

            logger.debug(
                "paths_enumerated",
                source=source.symbol,
                destination=destination.symbol,
                hops=depth,
                found=found,
                frontier=len(frontier),
            )

        return candidates

    async def _edge(self, gate: OracleGate, token_a: Token, token_b: Token) -> bool:
        """Edge check that treats any oracle failure as a missing pool."""
        try:
            return bool(await gate.pair_exists(token_a.address, token_b.address))
        except CancelledOperation:
            raise
        except Exception as e:
            logger.debug(
                "pair_check_failed",
                token_a=token_a.symbol,
                token_b=token_b.symbol,
                error=str(e),
            )
            return False

    def _emit(
        self,
        candidates: list[list[Token]],
        path: list[Token],
        source: Token,
        destination: Token,
    ) -> bool:
        try:
            ensure_simple_path(path, source, destination)
        except InvariantViolation as e:
            logger.error("invariant_violation", path=e.path, reason=e.reason)
            return False
        candidates.append(path)
        return True


__all__ = ["PathEnumerator", "ensure_simple_path"]
