"""Per-call gateway to the pool oracle.

An OracleGate is created for each discovery call. It caps the number of
in-flight oracle calls, refuses to issue new calls once cancelled, and
de-duplicates identical queries within the call. Nothing is shared across
calls, so every discovery re-reads the ledger.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

import structlog

from pathfinder.constants import DEFAULT_MAX_CONCURRENCY
from pathfinder.errors import CancelledOperation
from pathfinder.models.types import normalize_address
from pathfinder.oracle.base import PoolOracle

logger = structlog.get_logger()

T = TypeVar("T")


class OracleGate:
    """Bounded, cancellable, single-flight access to a PoolOracle."""

    def __init__(
        self,
        oracle: PoolOracle,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        cancel_events: Sequence[asyncio.Event] = (),
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._oracle = oracle
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._cancel_events = tuple(cancel_events)
        self._pairs: dict[frozenset[str], asyncio.Future[bool]] = {}
        self._quotes: dict[tuple[int, tuple[str, ...]], asyncio.Future[list[int]]] = {}
        # Number of calls actually sent to the oracle
        self.calls_issued = 0

    @property
    def cancelled(self) -> bool:
        return any(event.is_set() for event in self._cancel_events)

    def _ensure_active(self) -> None:
        if self.cancelled:
            raise CancelledOperation("Route discovery cancelled")

    async def _issue(self, call: Callable[[], Awaitable[T]]) -> T:
        self._ensure_active()
        async with self._semaphore:
            # Re-check: cancellation may have happened while queued
            self._ensure_active()
            self.calls_issued += 1
            return await call()

    async def pair_exists(self, token_a: str, token_b: str) -> bool:
        key = frozenset((normalize_address(token_a), normalize_address(token_b)))
        future = self._pairs.get(key)
        if future is None:
            future = asyncio.ensure_future(
                self._issue(lambda: self._oracle.pair_exists(token_a, token_b))
            )
            self._pairs[key] = future
        return await future

    async def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> list[int]:
        key = (amount_in, tuple(normalize_address(token) for token in path))
        future = self._quotes.get(key)
        if future is None:
            future = asyncio.ensure_future(
                self._issue(lambda: self._oracle.get_amounts_out(amount_in, list(path)))
            )
            self._quotes[key] = future
        return list(await future)

    def close(self) -> None:
        """Cancel any oracle calls still outstanding."""
        pending = [f for f in (*self._pairs.values(), *self._quotes.values()) if not f.done()]
        for future in pending:
            future.cancel()
        if pending:
            logger.debug("oracle_gate_closed", cancelled_calls=len(pending))


__all__ = ["OracleGate"]
