"""Execution parameters for a chosen path.

Converts expected output and slippage tolerance into the integer minimum
output the router will enforce, and packages the fields the execution
collaborator submits. All arithmetic is exact: the tolerance is taken as a
rational number and the result floored, never rounded through floats.
"""

from __future__ import annotations

import time
from decimal import Decimal

from eth_abi import encode  # type: ignore[attr-defined]

from pathfinder.constants import DEFAULT_DEADLINE_SECONDS, SWAP_EXACT_TOKENS_SELECTOR
from pathfinder.models.route import QuotedPath, SwapParameters
from pathfinder.models.types import is_valid_address
from pathfinder.units import parse_units, to_decimal


def min_output(
    expected_output: int | Decimal | str,
    slippage_tolerance_percent: int | Decimal | str,
    decimals: int,
) -> int:
    """Minimum acceptable output after slippage.

    Computes floor(expected * (1 - slippage / 100)) at `decimals` precision.

    Args:
        expected_output: Raw integer amount, or a human Decimal/str amount
            that is scaled by `decimals`
        slippage_tolerance_percent: Tolerance in percent (0.5 = 0.5%)
        decimals: Destination token decimals

    Returns:
        Raw minimum output, 0 <= result <= expected output

    Raises:
        ValueError: If the tolerance is outside [0, 100] or the output is negative
    """
    if isinstance(expected_output, int) and not isinstance(expected_output, bool):
        raw = expected_output
    else:
        raw = parse_units(expected_output, decimals)
    if raw < 0:
        raise ValueError(f"Expected output cannot be negative: {expected_output}")

    slippage = to_decimal(slippage_tolerance_percent)
    if slippage < 0 or slippage > 100:
        raise ValueError(f"Slippage tolerance must be within [0, 100]: {slippage}")

    numerator, denominator = slippage.as_integer_ratio()
    scale = 100 * denominator
    return raw * (scale - numerator) // scale


class ExecutionParameterizer:
    """Builds swap parameters and router calldata for a quoted path."""

    def __init__(self, deadline_seconds: int = DEFAULT_DEADLINE_SECONDS) -> None:
        if deadline_seconds <= 0:
            raise ValueError("deadline_seconds must be positive")
        self.deadline_seconds = deadline_seconds

    def min_output(
        self,
        expected_output: int | Decimal | str,
        slippage_tolerance_percent: int | Decimal | str,
        decimals: int,
    ) -> int:
        return min_output(expected_output, slippage_tolerance_percent, decimals)

    def build_swap_parameters(
        self,
        path: QuotedPath,
        slippage_tolerance_percent: int | Decimal | str,
        recipient: str,
        deadline: int | None = None,
        now: float | None = None,
    ) -> SwapParameters:
        """Build the fields the execution collaborator submits for `path`.

        Args:
            path: The chosen quoted path
            slippage_tolerance_percent: Tolerance in percent
            recipient: Address to receive output tokens
            deadline: Explicit unix deadline; defaults to now + deadline window
            now: Current unix time (defaults to time.time())

        Returns:
            SwapParameters ready for submission
        """
        if deadline is None:
            current = time.time() if now is None else now
            deadline = int(current) + self.deadline_seconds

        return SwapParameters(
            path=path.path,
            amount_in=path.amount_in,
            min_output=self.min_output(
                path.amount_out, slippage_tolerance_percent, path.destination.decimals
            ),
            recipient=recipient,
            deadline=deadline,
        )

    def encode_swap(self, params: SwapParameters, router_address: str) -> tuple[str, str]:
        """Encode swapExactTokensForTokens calldata for the router.

        Returns:
            Tuple of (router_address, calldata)

        Raises:
            ValueError: If the router address is invalid
        """
        if not is_valid_address(router_address):
            raise ValueError(f"Invalid router address: {router_address}")

        path_bytes = [bytes.fromhex(address[2:]) for address in params.path]
        recipient_bytes = bytes.fromhex(params.recipient[2:])

        encoded_args = encode(
            ["uint256", "uint256", "address[]", "address", "uint256"],
            [params.amount_in, params.min_output, path_bytes, recipient_bytes, params.deadline],
        )

        return router_address, SWAP_EXACT_TOKENS_SELECTOR + encoded_args.hex()


__all__ = ["ExecutionParameterizer", "min_output"]
