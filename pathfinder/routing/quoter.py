"""Quoting candidate paths through the oracle."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from pathfinder.errors import CancelledOperation
from pathfinder.models.token import Token
from pathfinder.routing.enumerator import ensure_simple_path
from pathfinder.routing.gate import OracleGate

logger = structlog.get_logger()


class Quoter:
    """Asks the oracle for the amounts produced at every hop of a path.

    The oracle's multi-hop quote covers the whole path in one call. Any
    failure drops the path: quote errors are per-path, never fatal.
    """

    async def quote_amounts(
        self,
        gate: OracleGate,
        tokens: Sequence[Token],
        amount_in: int,
    ) -> list[int] | None:
        """Quote every hop of a path.

        Args:
            gate: Oracle gateway for the current call
            tokens: Path tokens, source first
            amount_in: Raw input amount in source-token units

        Returns:
            Raw amounts per token (amounts[0] == amount_in), or None if the
            path cannot be quoted or produces no output

        Raises:
            InvariantViolation: If the path repeats a token
        """
        ensure_simple_path(list(tokens))
        path = [token.address for token in tokens]

        try:
            amounts = await gate.get_amounts_out(amount_in, path)
        except CancelledOperation:
            raise
        except Exception as e:
            logger.debug("quote_failed", path=[t.symbol for t in tokens], error=str(e))
            return None

        if len(amounts) != len(tokens):
            logger.warning(
                "quote_malformed",
                path=[t.symbol for t in tokens],
                expected=len(tokens),
                received=len(amounts),
            )
            return None
        if amounts[-1] <= 0:
            logger.debug("quote_zero_output", path=[t.symbol for t in tokens])
            return None

        return amounts

    async def quote(
        self,
        gate: OracleGate,
        tokens: Sequence[Token],
        amount_in: int,
    ) -> int | None:
        """Raw expected output in destination-token units, or None."""
        amounts = await self.quote_amounts(gate, tokens, amount_in)
        return amounts[-1] if amounts is not None else None


__all__ = ["Quoter"]
