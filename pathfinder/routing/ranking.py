"""Ranking of quoted paths."""

from __future__ import annotations

from collections.abc import Iterable

from pathfinder.models.route import QuotedPath


class PathRanker:
    """Orders quoted paths by expected output, best first."""

    def rank(self, paths: Iterable[QuotedPath], max_paths: int) -> list[QuotedPath]:
        """Sort paths by raw expected output (descending) and truncate.

        Paths with no output are dropped. The sort is stable, so equal
        outputs keep their enumeration order (shorter paths first).

        Args:
            paths: Quoted paths from one discovery call
            max_paths: Maximum number of paths to return

        Returns:
            Up to max_paths paths. Empty if none has positive output.
        """
        if max_paths < 1:
            raise ValueError("max_paths must be at least 1")
        valid = [path for path in paths if path.amount_out > 0]
        valid.sort(key=lambda path: path.amount_out, reverse=True)
        return valid[:max_paths]


__all__ = ["PathRanker"]
