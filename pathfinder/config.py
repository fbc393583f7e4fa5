"""Configuration for the path finder."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from pathfinder.constants import (
    DEFAULT_DEADLINE_SECONDS,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_MAX_HOPS,
    DEFAULT_MAX_PATHS,
    DEFAULT_SLIPPAGE_TOLERANCE,
)
from pathfinder.models.route import ImpactReference, PathFinderOptions

ENV_PREFIX = "PATHFINDER_"


@dataclass(frozen=True)
class PathFinderConfig:
    """Centralized configuration for route discovery.

    Attributes:
        max_hops: Default hop ceiling for discovery calls
        max_paths: Default number of ranked paths returned
        slippage_tolerance: Default slippage tolerance, in percent
        max_concurrency: Maximum in-flight oracle calls per discovery call
        timeout_seconds: Discovery timeout; None waits indefinitely
        deadline_seconds: Validity window for built swap parameters
        impact_reference: Reference route for price impact
        rpc_url: HTTP RPC endpoint for the ledger oracle
        factory_address: Pair factory contract address
        router_address: Router contract address
    """

    max_hops: int = DEFAULT_MAX_HOPS
    max_paths: int = DEFAULT_MAX_PATHS
    slippage_tolerance: Decimal = DEFAULT_SLIPPAGE_TOLERANCE
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    timeout_seconds: float | None = 10.0
    deadline_seconds: int = DEFAULT_DEADLINE_SECONDS
    impact_reference: ImpactReference = ImpactReference.DIRECT
    rpc_url: str | None = None
    factory_address: str | None = None
    router_address: str | None = None

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.deadline_seconds <= 0:
            raise ValueError("deadline_seconds must be positive")
        # Validates hop/path/slippage bounds
        self.default_options()

    def default_options(self) -> PathFinderOptions:
        return PathFinderOptions(
            max_hops=self.max_hops,
            max_paths=self.max_paths,
            slippage_tolerance=self.slippage_tolerance,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PathFinderConfig:
        """Build a config from PATHFINDER_* environment variables.

        Recognized variables (all optional):
        - PATHFINDER_MAX_HOPS, PATHFINDER_MAX_PATHS, PATHFINDER_SLIPPAGE_TOLERANCE
        - PATHFINDER_MAX_CONCURRENCY, PATHFINDER_TIMEOUT_SECONDS ("none" disables)
        - PATHFINDER_DEADLINE_SECONDS, PATHFINDER_IMPACT_REFERENCE (direct|path)
        - PATHFINDER_RPC_URL, PATHFINDER_FACTORY_ADDRESS, PATHFINDER_ROUTER_ADDRESS
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value if value not in (None, "") else None

        timeout_raw = get("TIMEOUT_SECONDS")
        if timeout_raw is None:
            timeout_seconds: float | None = cls.timeout_seconds
        elif timeout_raw.lower() == "none":
            timeout_seconds = None
        else:
            timeout_seconds = float(timeout_raw)

        return cls(
            max_hops=int(get("MAX_HOPS") or DEFAULT_MAX_HOPS),
            max_paths=int(get("MAX_PATHS") or DEFAULT_MAX_PATHS),
            slippage_tolerance=Decimal(get("SLIPPAGE_TOLERANCE") or DEFAULT_SLIPPAGE_TOLERANCE),
            max_concurrency=int(get("MAX_CONCURRENCY") or DEFAULT_MAX_CONCURRENCY),
            timeout_seconds=timeout_seconds,
            deadline_seconds=int(get("DEADLINE_SECONDS") or DEFAULT_DEADLINE_SECONDS),
            impact_reference=ImpactReference(
                (get("IMPACT_REFERENCE") or ImpactReference.DIRECT.value).lower()
            ),
            rpc_url=get("RPC_URL"),
            factory_address=get("FACTORY_ADDRESS"),
            router_address=get("ROUTER_ADDRESS"),
        )


# Default configuration instance
DEFAULT_CONFIG = PathFinderConfig()
