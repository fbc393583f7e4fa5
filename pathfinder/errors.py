"""Error taxonomy for route discovery.

Per-path failures (OracleError) are recovered inside the engine by dropping
the affected path. The remaining errors are caller-visible outcomes.
"""

from __future__ import annotations


class PathFinderError(Exception):
    """Base class for route discovery errors."""

    pass


class OracleError(PathFinderError):
    """A pool existence check or quote against the ledger failed."""

    pass


class InsufficientLiquidity(OracleError):
    """A hop along the path has no pool or empty reserves."""

    pass


class NoRouteFound(PathFinderError):
    """No valid path survived enumeration and quoting."""

    def __init__(self, source: str, destination: str) -> None:
        super().__init__(f"No route found from {source} to {destination}")
        self.source = source
        self.destination = destination


class InvariantViolation(PathFinderError):
    """A path revisits a token or does not join source to destination."""

    def __init__(self, path: list[str], reason: str) -> None:
        super().__init__(f"Invalid path {path}: {reason}")
        self.path = path
        self.reason = reason


class CancelledOperation(PathFinderError):
    """Route discovery was cancelled before every query resolved."""

    pass


__all__ = [
    "CancelledOperation",
    "InsufficientLiquidity",
    "InvariantViolation",
    "NoRouteFound",
    "OracleError",
    "PathFinderError",
]
