"""Price impact estimation.

Price impact compares the realized rate of a trade (output / input) with a
reference marginal rate, obtained by quoting one whole source token:

    impact = |spot - realized| / spot * 100, clamped to [0, 100]

Impact is advisory. If the reference quote fails there is nothing to measure
against and the impact is reported as 0.
"""

from __future__ import annotations

import decimal
from collections.abc import Sequence
from decimal import Decimal

import structlog

from pathfinder.constants import MAX_PRICE_IMPACT, PRICE_IMPACT_QUANTUM
from pathfinder.errors import CancelledOperation
from pathfinder.models.route import ImpactReference
from pathfinder.models.token import Token
from pathfinder.routing.gate import OracleGate
from pathfinder.units import DECIMAL_HIGH_PREC_CONTEXT, format_units

logger = structlog.get_logger()


def price_impact(spot_rate: Decimal, realized_rate: Decimal) -> Decimal:
    """Percentage deviation of the realized rate from the spot rate."""
    if spot_rate <= 0:
        return Decimal(0)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        impact = abs(spot_rate - realized_rate) / spot_rate * 100
        impact = min(max(impact, Decimal(0)), MAX_PRICE_IMPACT)
        return impact.quantize(PRICE_IMPACT_QUANTUM)


class PriceImpactEstimator:
    """Annotates quoted paths with their price impact."""

    def __init__(self, reference: ImpactReference = ImpactReference.DIRECT) -> None:
        self.reference = reference

    async def estimate(
        self,
        gate: OracleGate,
        tokens: Sequence[Token],
        amount_in: int,
        amount_out: int,
    ) -> Decimal:
        """Estimate price impact for a quoted path.

        Args:
            gate: Oracle gateway for the current call
            tokens: Path tokens, source first
            amount_in: Raw input amount
            amount_out: Raw quoted output

        Returns:
            Impact in percent, within [0, 100]
        """
        source, destination = tokens[0], tokens[-1]
        if amount_in <= 0:
            return Decimal(0)

        if self.reference is ImpactReference.DIRECT:
            reference_path = [source.address, destination.address]
        else:
            reference_path = [token.address for token in tokens]

        try:
            amounts = await gate.get_amounts_out(10**source.decimals, reference_path)
        except CancelledOperation:
            raise
        except Exception as e:
            logger.debug(
                "impact_reference_unavailable",
                source=source.symbol,
                destination=destination.symbol,
                reference=self.reference.value,
                error=str(e),
            )
            return Decimal(0)

        if len(amounts) != len(reference_path) or amounts[-1] <= 0:
            logger.debug(
                "impact_reference_unavailable",
                source=source.symbol,
                destination=destination.symbol,
                reference=self.reference.value,
                error=f"malformed reference quote: {amounts}",
            )
            return Decimal(0)

        spot_rate = format_units(amounts[-1], destination.decimals)
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            realized_rate = format_units(amount_out, destination.decimals) / format_units(
                amount_in, source.decimals
            )
        return price_impact(spot_rate, realized_rate)


__all__ = ["ImpactReference", "PriceImpactEstimator", "price_impact"]
