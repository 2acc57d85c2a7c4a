"""Tests for sort_polars – caller-side ordering of list results."""

import pytest

from polar_store import Order, SortKey, sort_polars


@pytest.fixture
def polars(make_polar):
    return [
        make_polar(id="b", _id=1),
        make_polar(id="c", _id=9),
        make_polar(id="a", _id=5),
    ]


class TestSortPolars:
    def test_by_id_ascending(self, polars):
        assert [p.id for p in sort_polars(polars, "id")] == ["a", "b", "c"]

    def test_by_id_descending(self, polars):
        assert [p.id for p in sort_polars(polars, SortKey.ID, Order.DESC)] == ["c", "b", "a"]

    def test_by_secondary_id(self, polars):
        assert [p.polar_id for p in sort_polars(polars, "_id")] == [1, 5, 9]
        assert [p.polar_id for p in sort_polars(polars, "_id", "desc")] == [9, 5, 1]

    def test_unknown_key_falls_back_to_id(self, polars):
        assert [p.id for p in sort_polars(polars, "label")] == ["a", "b", "c"]

    def test_order_is_case_insensitive(self, polars):
        assert [p.id for p in sort_polars(polars, "id", "DESC")] == ["c", "b", "a"]

    def test_unknown_order_rejected(self, polars):
        with pytest.raises(ValueError):
            sort_polars(polars, "id", "sideways")

    def test_missing_id_sorts_first(self, make_polar):
        ps = [make_polar(id="z"), make_polar(id=None)]
        assert [p.id for p in sort_polars(ps, "id")] == [None, "z"]

    def test_input_untouched(self, polars):
        sort_polars(polars, "id")
        assert [p.id for p in polars] == ["b", "c", "a"]
