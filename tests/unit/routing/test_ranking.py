"""Tests for path ranking."""

import pytest

from pathfinder.models.route import QuotedPath
from pathfinder.routing.ranking import PathRanker
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D, TOKEN_E


def quoted(*tokens, out: int) -> QuotedPath:
    return QuotedPath(
        tokens=tuple(tokens),
        amounts=(10**18, *([1] * (len(tokens) - 2)), out),
    )


@pytest.fixture
def candidates() -> list[QuotedPath]:
    return [
        quoted(TOKEN_A, TOKEN_E, out=500),
        quoted(TOKEN_A, TOKEN_B, TOKEN_E, out=900),
        quoted(TOKEN_A, TOKEN_C, TOKEN_E, out=700),
        quoted(TOKEN_A, TOKEN_D, TOKEN_E, out=700),
        quoted(TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_E, out=0),
    ]


class TestPathRanker:
    """Tests for PathRanker."""

    def test_sorted_descending(self, candidates):
        ranked = PathRanker().rank(candidates, 10)
        assert [path.amount_out for path in ranked] == [900, 700, 700, 500]

    def test_zero_output_dropped(self, candidates):
        ranked = PathRanker().rank(candidates, 10)
        assert all(path.amount_out > 0 for path in ranked)

    def test_ties_keep_enumeration_order(self, candidates):
        ranked = PathRanker().rank(candidates, 10)
        assert ranked[1].tokens[1] == TOKEN_C
        assert ranked[2].tokens[1] == TOKEN_D

    @pytest.mark.parametrize("max_paths,expected", [(1, 1), (2, 2), (4, 4), (5, 4)])
    def test_truncated_to_max_paths(self, candidates, max_paths, expected):
        assert len(PathRanker().rank(candidates, max_paths)) == expected

    def test_best_first(self, candidates):
        assert PathRanker().rank(candidates, 1)[0].tokens == (TOKEN_A, TOKEN_B, TOKEN_E)

    def test_empty(self):
        assert PathRanker().rank([], 5) == []

    def test_invalid_max_paths(self, candidates):
        with pytest.raises(ValueError, match="max_paths"):
            PathRanker().rank(candidates, 0)
