"""DEX route discovery and ranking - Python Implementation."""

from pathfinder.config import PathFinderConfig
from pathfinder.routing.finder import PathFinder

__version__ = "0.1.0"
__all__ = ["PathFinder", "PathFinderConfig", "__version__"]
