"""API endpoints for route discovery."""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, HTTPException

from pathfinder.api.schemas import PathQuote, QuoteRequest, QuoteResponse, SwapPayload
from pathfinder.config import PathFinderConfig
from pathfinder.models.route import DiscoveryStatus
from pathfinder.oracle.base import PoolOracle
from pathfinder.routing.finder import PathFinder
from pathfinder.routing.graph import TokenRegistry

logger = structlog.get_logger()

router = APIRouter()


@lru_cache(maxsize=1)
def get_config() -> PathFinderConfig:
    """Dependency provider for the configuration (read once from the environment)."""
    return PathFinderConfig.from_env()


@lru_cache(maxsize=1)
def _default_oracle(rpc_url: str, factory_address: str, router_address: str) -> PoolOracle:
    from pathfinder.oracle.rpc import Web3PoolOracle

    return Web3PoolOracle(rpc_url, factory_address, router_address)


def get_oracle(config: PathFinderConfig = Depends(get_config)) -> PoolOracle:
    """Dependency provider for the pool oracle.

    Override this in tests to inject an in-memory oracle:
        app.dependency_overrides[get_oracle] = lambda: oracle

    Raises:
        HTTPException: 503 if no RPC endpoint is configured
    """
    if config.rpc_url is None or config.factory_address is None or config.router_address is None:
        raise HTTPException(status_code=503, detail="Ledger oracle is not configured")
    return _default_oracle(config.rpc_url, config.factory_address, config.router_address)


@router.post("/quote", response_model_exclude_none=True)
async def quote(
    request: QuoteRequest,
    oracle: PoolOracle = Depends(get_oracle),
    config: PathFinderConfig = Depends(get_config),
) -> QuoteResponse:
    """Discover and rank routes for a swap.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Unknown source/destination token: 400
        - No liquidity anywhere: 200 with status "no_route"
        - Timeout: 200 with status "cancelled" and no paths
        - Unexpected failure: logged, 500
    """
    logger.info(
        "received_quote_request",
        source=request.source,
        destination=request.destination,
        amount_in=str(request.amount_in),
        token_count=len(request.tokens),
    )

    finder = PathFinder(oracle, TokenRegistry(request.tokens), config)
    try:
        result = await finder.find_all_paths(
            request.source,
            request.destination,
            request.amount_in,
            request.options,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.exception(
            "quote_error",
            source=request.source,
            destination=request.destination,
        )
        raise HTTPException(status_code=500, detail="Route discovery failed") from e

    response = QuoteResponse(
        status=result.status,
        paths=[PathQuote.from_quoted(path) for path in result.paths],
    )

    if request.recipient is not None and result.status is DiscoveryStatus.OK:
        best = result.require_best()
        options = request.options or config.default_options()
        parameters = finder.build_swap_parameters(
            best, request.recipient, options.slippage_tolerance
        )
        payload = SwapPayload(parameters=parameters)
        if config.router_address is not None:
            router_address, calldata = finder.encode_swap(parameters)
            payload = SwapPayload(parameters=parameters, router=router_address, calldata=calldata)
        response.swap = payload

    logger.info(
        "returning_quote",
        status=result.status.value,
        path_count=len(result.paths),
        has_swap=response.swap is not None,
    )
    return response
