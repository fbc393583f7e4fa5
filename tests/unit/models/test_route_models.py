"""Tests for options, quoted paths, discovery results and swap parameters."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from pathfinder.errors import CancelledOperation, NoRouteFound
from pathfinder.models.route import (
    DiscoveryResult,
    DiscoveryStatus,
    PathFinderOptions,
    QuotedPath,
    SwapParameters,
    format_path_display,
)
from tests.helpers import DAI, RECIPIENT, USDC, WETH


def make_path(*tokens, amounts=None) -> QuotedPath:
    amounts = amounts or [10**18] * len(tokens)
    return QuotedPath(tokens=tuple(tokens), amounts=tuple(amounts))


class TestPathFinderOptions:
    """Tests for per-call options."""

    def test_defaults(self):
        options = PathFinderOptions()
        assert options.max_hops == 3
        assert options.max_paths == 5
        assert options.slippage_tolerance == Decimal("0.5")

    def test_camel_case_aliases(self):
        options = PathFinderOptions.model_validate(
            {"maxHops": 2, "maxPaths": 3, "slippageTolerance": "1"}
        )
        assert (options.max_hops, options.max_paths) == (2, 3)
        assert options.slippage_tolerance == Decimal(1)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("max_hops", 0),
            ("max_hops", 7),
            ("max_paths", 0),
            ("slippage_tolerance", Decimal(0)),
            ("slippage_tolerance", Decimal(51)),
        ],
    )
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            PathFinderOptions(**{field: value})


class TestQuotedPath:
    """Tests for QuotedPath."""

    def test_properties(self):
        path = make_path(WETH, USDC, DAI, amounts=[10**18, 2_490 * 10**6, 2_480 * 10**18])
        assert path.path == [WETH.address, USDC.address, DAI.address]
        assert path.source == WETH
        assert path.destination == DAI
        assert path.amount_in == 10**18
        assert path.amount_out == 2_480 * 10**18
        assert path.expected_output == Decimal(2480)
        assert path.hops == 2
        assert path.is_multihop
        assert path.gas_estimate == 120_000

    def test_direct_path_not_multihop(self):
        assert not make_path(WETH, USDC).is_multihop

    def test_display(self):
        path = make_path(WETH, USDC, DAI)
        assert path.display == "WETH → USDC → DAI"
        assert format_path_display(path) == path.display

    def test_too_short(self):
        with pytest.raises(ValueError, match="at least two"):
            QuotedPath(tokens=(WETH,), amounts=(1,))

    def test_amounts_length_mismatch(self):
        with pytest.raises(ValueError, match="Expected 2 amounts"):
            QuotedPath(tokens=(WETH, USDC), amounts=(1,))


class TestDiscoveryResult:
    """Tests for DiscoveryResult outcomes."""

    def test_ok(self):
        path = make_path(WETH, USDC)
        result = DiscoveryResult.from_ranked(WETH, USDC, [path])
        assert result.status is DiscoveryStatus.OK
        assert result.best is path
        assert not result.is_empty
        assert result.require_best() is path

    def test_no_route(self):
        result = DiscoveryResult.from_ranked(WETH, USDC, [])
        assert result.status is DiscoveryStatus.NO_ROUTE
        assert result.best is None
        with pytest.raises(NoRouteFound) as exc_info:
            result.raise_for_status()
        assert exc_info.value.source == WETH.address
        assert exc_info.value.destination == USDC.address

    def test_cancelled_has_no_paths(self):
        result = DiscoveryResult.cancelled(WETH, USDC)
        assert result.status is DiscoveryStatus.CANCELLED
        assert result.is_empty
        with pytest.raises(CancelledOperation):
            result.require_best()


class TestSwapParameters:
    """Tests for SwapParameters serialization."""

    def test_json_uses_aliases_and_string_amounts(self):
        params = SwapParameters(
            path=[WETH.address, USDC.address],
            amount_in=10**18,
            min_output=99_500_000,
            recipient=RECIPIENT,
            deadline=1_700_001_200,
        )
        data = params.model_dump(mode="json", by_alias=True)
        assert data == {
            "path": [WETH.address, USDC.address],
            "amountIn": "1000000000000000000",
            "minOutput": "99500000",
            "recipient": RECIPIENT,
            "deadline": 1_700_001_200,
        }

    def test_recipient_validated(self):
        with pytest.raises(ValidationError):
            SwapParameters(
                path=[WETH.address, USDC.address],
                amount_in=1,
                min_output=1,
                recipient="0xnotanaddress",
                deadline=0,
            )
