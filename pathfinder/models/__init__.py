"""Data models for route discovery."""

from pathfinder.models.route import (
    DiscoveryResult,
    DiscoveryStatus,
    ImpactReference,
    PathFinderOptions,
    QuotedPath,
    SwapParameters,
    format_path_display,
)
from pathfinder.models.token import Token
from pathfinder.models.types import Address, Uint256, is_valid_address, normalize_address

__all__ = [
    "Address",
    "DiscoveryResult",
    "DiscoveryStatus",
    "ImpactReference",
    "PathFinderOptions",
    "QuotedPath",
    "SwapParameters",
    "Token",
    "Uint256",
    "format_path_display",
    "is_valid_address",
    "normalize_address",
]
