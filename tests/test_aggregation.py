"""Tests for group-level size aggregation."""

from kv_browse.index import IndexQueryParams, RowStats, aggregate_rows
from kv_browse.keys import KeyRange

ENTRIES = [
    (("a", "b.txt"), 10),
    (("a", "c", "d.txt"), 20),
    (("a", "c", "e", "f.txt"), 5),
    (("ab", "x.txt"), 7),
    (("z.txt",), 1),
]


def _params(path, group_level):
    return IndexQueryParams(group_level=group_level, key_range=KeyRange.for_path(path))


class TestAggregateRows:
    """Test grouped rows."""

    def test_group_one_level_below_prefix(self):
        rows = aggregate_rows(ENTRIES, _params("a", 2))

        assert [row.key for row in rows] == [("a", "b.txt"), ("a", "c")]
        assert rows[0].value == RowStats(count=1, sum=10, min=10, max=10)
        assert rows[1].value == RowStats(count=2, sum=25, min=5, max=20)

    def test_short_keys_bucket_as_themselves(self):
        rows = aggregate_rows(ENTRIES, _params("a", 3))

        assert [row.key for row in rows] == [
            ("a", "b.txt"),
            ("a", "c", "d.txt"),
            ("a", "c", "e"),
        ]

    def test_root_listing(self):
        rows = aggregate_rows(ENTRIES, _params("", 1))

        assert [row.key for row in rows] == [("a",), ("ab",), ("z.txt",)]
        assert rows[0].value.count == 3

    def test_group_level_zero_collapses_everything(self):
        rows = aggregate_rows(ENTRIES, _params("", 0))

        assert len(rows) == 1
        assert rows[0].key == ()
        assert rows[0].value == RowStats(count=5, sum=43, min=1, max=20)

    def test_empty_input(self):
        assert aggregate_rows([], _params("a", 2)) == []
