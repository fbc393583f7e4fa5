"""PathFinder: route discovery facade.

Control flow for one discovery call:

    enumerate candidate paths (edge checks)
      -> quote each candidate (dropping failures)
      -> estimate price impact for survivors
      -> rank by expected output and truncate

All oracle traffic for the call goes through a single OracleGate, which caps
concurrency and stops issuing calls once the call is cancelled. Ranking only
happens after every outstanding query has resolved, so the result does not
depend on completion order.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Iterable, Sequence
from decimal import Decimal

import structlog

from pathfinder.config import DEFAULT_CONFIG, PathFinderConfig
from pathfinder.errors import CancelledOperation
from pathfinder.models.route import (
    DiscoveryResult,
    PathFinderOptions,
    QuotedPath,
    SwapParameters,
)
from pathfinder.models.token import Token
from pathfinder.oracle.base import PoolOracle
from pathfinder.routing.enumerator import PathEnumerator
from pathfinder.routing.execution import ExecutionParameterizer
from pathfinder.routing.gate import OracleGate
from pathfinder.routing.graph import TokenGraph, TokenRegistry
from pathfinder.routing.impact import PriceImpactEstimator
from pathfinder.routing.quoter import Quoter
from pathfinder.routing.ranking import PathRanker
from pathfinder.units import parse_units

logger = structlog.get_logger()


class PathFinder:
    """Discovers, quotes and ranks swap routes between two tokens.

    Collaborators can be injected for testing; by default they are built
    from the config.

    Usage:
        finder = PathFinder(oracle, tokens)
        result = await finder.find_all_paths(WETH, USDC, "1.5")
        best = result.best
    """

    def __init__(
        self,
        oracle: PoolOracle,
        tokens: TokenRegistry | Iterable[Token],
        config: PathFinderConfig | None = None,
        *,
        enumerator: PathEnumerator | None = None,
        quoter: Quoter | None = None,
        estimator: PriceImpactEstimator | None = None,
        ranker: PathRanker | None = None,
        parameterizer: ExecutionParameterizer | None = None,
    ) -> None:
        self._oracle = oracle
        self._config = config or DEFAULT_CONFIG
        registry = tokens if isinstance(tokens, TokenRegistry) else TokenRegistry(tokens)
        self._graph = TokenGraph(registry)
        self._enumerator = enumerator or PathEnumerator(self._graph)
        self._quoter = quoter or Quoter()
        self._estimator = estimator or PriceImpactEstimator(self._config.impact_reference)
        self._ranker = ranker or PathRanker()
        self._parameterizer = parameterizer or ExecutionParameterizer(
            self._config.deadline_seconds
        )

    @property
    def config(self) -> PathFinderConfig:
        return self._config

    @property
    def graph(self) -> TokenGraph:
        return self._graph

    def _new_gate(self, cancel_events: Sequence[asyncio.Event] = ()) -> OracleGate:
        return OracleGate(self._oracle, self._config.max_concurrency, cancel_events)

    async def find_all_paths(
        self,
        source: Token | str,
        destination: Token | str,
        amount_in: str | int | Decimal,
        options: PathFinderOptions | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DiscoveryResult:
        """Find and rank every route from source to destination.

        Args:
            source: Token (or registry address) to sell
            destination: Token (or registry address) to buy
            amount_in: Human amount of source token (e.g. "1.5")
            options: Hop/path limits; defaults from config
            cancel_event: Set by the caller to abandon the call
            timeout: Seconds before the call is abandoned; defaults from config

        Returns:
            DiscoveryResult with status OK (ranked paths), NO_ROUTE, or
            CANCELLED (never with partial paths)

        Raises:
            ValueError: If an address is unknown or amount_in is not positive
        """
        options = options or self._config.default_options()
        timeout = self._config.timeout_seconds if timeout is None else timeout
        src = self._graph.resolve(source)
        dst = self._graph.resolve(destination)
        raw_amount_in = parse_units(amount_in, src.decimals)
        if raw_amount_in <= 0:
            raise ValueError(f"amount_in must be positive: {amount_in}")

        if src.address == dst.address:
            logger.info("route_discovery_same_token", token=src.symbol)
            return DiscoveryResult.from_ranked(src, dst, [])
        if cancel_event is not None and cancel_event.is_set():
            return DiscoveryResult.cancelled(src, dst)

        stop = asyncio.Event()
        events = (stop,) if cancel_event is None else (stop, cancel_event)
        gate = self._new_gate(events)
        started = time.perf_counter()

        logger.info(
            "route_discovery_started",
            source=src.symbol,
            destination=dst.symbol,
            amount_in=raw_amount_in,
            max_hops=options.max_hops,
            max_paths=options.max_paths,
        )

        discovery = asyncio.ensure_future(self._discover(gate, src, dst, raw_amount_in, options))
        waiters: set[asyncio.Future] = {discovery}
        cancel_waiter: asyncio.Future | None = None
        if cancel_event is not None:
            cancel_waiter = asyncio.ensure_future(cancel_event.wait())
            waiters.add(cancel_waiter)

        try:
            done, _ = await asyncio.wait(
                waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            stop.set()
            discovery.cancel()
            gate.close()
            raise
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()

        try:
            if discovery in done and not gate.cancelled:
                try:
                    paths = discovery.result()
                except CancelledOperation:
                    pass
                else:
                    result = DiscoveryResult.from_ranked(src, dst, paths)
                    logger.info(
                        "route_discovery_finished",
                        source=src.symbol,
                        destination=dst.symbol,
                        status=result.status.value,
                        paths=len(paths),
                        best_output=str(result.best.expected_output) if result.best else None,
                        oracle_calls=gate.calls_issued,
                        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                    )
                    return result

            reason = "timeout" if not gate.cancelled else "cancelled"
            stop.set()
            discovery.cancel()
            with contextlib.suppress(asyncio.CancelledError, CancelledOperation):
                await discovery
        finally:
            # Also reached when discovery fails unexpectedly
            stop.set()
            gate.close()

        logger.warning(
            "route_discovery_cancelled",
            source=src.symbol,
            destination=dst.symbol,
            reason=reason,
            oracle_calls=gate.calls_issued,
        )
        return DiscoveryResult.cancelled(src, dst)

    async def _discover(
        self,
        gate: OracleGate,
        source: Token,
        destination: Token,
        amount_in: int,
        options: PathFinderOptions,
    ) -> list[QuotedPath]:
        candidates = await self._enumerator.enumerate(gate, source, destination, options.max_hops)
        evaluated = await asyncio.gather(
            *(self._evaluate(gate, tokens, amount_in) for tokens in candidates)
        )
        quoted = [path for path in evaluated if path is not None]

        logger.debug(
            "candidates_quoted",
            candidates=len(candidates),
            quoted=len(quoted),
            dropped=len(candidates) - len(quoted),
        )
        return self._ranker.rank(quoted, options.max_paths)

    async def _evaluate(
        self,
        gate: OracleGate,
        tokens: list[Token],
        amount_in: int,
    ) -> QuotedPath | None:
        amounts = await self._quoter.quote_amounts(gate, tokens, amount_in)
        if amounts is None:
            return None
        impact = await self._estimator.estimate(gate, tokens, amount_in, amounts[-1])
        return QuotedPath(tokens=tuple(tokens), amounts=tuple(amounts), price_impact=impact)

    async def get_best_path(
        self,
        source: Token | str,
        destination: Token | str,
        amount_in: str | int | Decimal,
        options: PathFinderOptions | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> QuotedPath | None:
        """Return the highest-output route, or None if there is none."""
        result = await self.find_all_paths(
            source,
            destination,
            amount_in,
            options,
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return result.best

    async def check_path_liquidity(
        self,
        path: QuotedPath,
        amount_in: str | int | Decimal | None = None,
    ) -> bool:
        """Re-quote a path and report whether it can still be executed.

        Args:
            path: A previously quoted path
            amount_in: Human amount to test; defaults to the quoted amount
        """
        raw_amount_in = (
            path.amount_in if amount_in is None else parse_units(amount_in, path.source.decimals)
        )
        gate = self._new_gate()
        amounts = await self._quoter.quote_amounts(gate, path.tokens, raw_amount_in)
        return amounts is not None

    def build_swap_parameters(
        self,
        path: QuotedPath,
        recipient: str,
        slippage_tolerance: Decimal | str | int | None = None,
        deadline: int | None = None,
    ) -> SwapParameters:
        """Swap parameters for `path` with the minimum output under slippage."""
        slippage = (
            self._config.slippage_tolerance if slippage_tolerance is None else slippage_tolerance
        )
        return self._parameterizer.build_swap_parameters(
            path, slippage, recipient, deadline=deadline
        )

    def encode_swap(self, params: SwapParameters) -> tuple[str, str]:
        """Router calldata for swap parameters, using the configured router."""
        if self._config.router_address is None:
            raise ValueError("No router address configured")
        return self._parameterizer.encode_swap(params, self._config.router_address)


__all__ = ["PathFinder"]
