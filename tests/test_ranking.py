"""Tests for ranking and top-N selection."""

import pytest

from terroir.ranking import select_top
from terroir.schema import ScoredRegion

from conftest import make_region


def scored(region_id, score):
    return ScoredRegion(entity=make_region(region_id), score=score)


class TestSelectTop:
    """Test descending sort and truncation."""

    def test_sorts_descending(self):
        items = [scored("a", 10.0), scored("b", 90.0), scored("c", 50.0)]
        result = select_top(items, 3)
        assert [s.entity.id for s in result] == ["b", "c", "a"]

    def test_truncates_to_limit(self):
        items = [scored(f"r{i}", float(i)) for i in range(10)]
        result = select_top(items, 5)
        assert len(result) == 5
        assert [s.score for s in result] == [9.0, 8.0, 7.0, 6.0, 5.0]

    def test_short_input_returns_everything(self):
        """Length is min(limit, len(items))."""
        items = [scored("a", 1.0), scored("b", 2.0)]
        assert len(select_top(items, 5)) == 2

    def test_ties_keep_input_order(self):
        """Equal scores stay in catalog order."""
        items = [scored("first", 82.4), scored("top", 97.0), scored("second", 82.4), scored("third", 82.4)]
        result = select_top(items, 3)
        assert [s.entity.id for s in result] == ["top", "first", "second"]

    def test_zero_limit(self):
        assert select_top([scored("a", 1.0)], 0) == []

    def test_negative_limit_raises(self):
        with pytest.raises(ValueError):
            select_top([scored("a", 1.0)], -1)

    def test_does_not_mutate_input(self):
        items = [scored("a", 10.0), scored("b", 90.0)]
        select_top(items, 2)
        assert [s.entity.id for s in items] == ["a", "b"]
