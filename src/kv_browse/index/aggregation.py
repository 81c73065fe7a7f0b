"""Group-level aggregation of object sizes.

Implements the ``_stats`` reduce of a view keyed by path segments: every
object emits ``(segments, size)`` and rows are bucketed by their first
``group_level`` segments.
"""

from typing import Iterable, Sequence

from kv_browse.index.base import IndexQueryParams, IndexRow, Number, RowStats


def aggregate_rows(
    entries: Iterable[tuple[Sequence[str], Number]], params: IndexQueryParams
) -> list[IndexRow]:
    """Aggregate ``(key_segments, size)`` pairs into grouped index rows.

    Keys outside the query range are skipped. Keys with fewer segments than
    the group level form their own bucket.

    Args:
        entries: Key segments and object size for each stored object
        params: Grouped query parameters

    Returns:
        Rows ordered by grouped key
    """
    level = max(params.group_level, 0)
    buckets: dict[tuple[str, ...], list[Number]] = {}

    for segments, size in entries:
        if not params.key_range.contains(segments):
            continue
        group_key = tuple(segments[:level])
        stats = buckets.get(group_key)
        if stats is None:
            buckets[group_key] = [1, size, size, size]
        else:
            stats[0] += 1
            stats[1] += size
            stats[2] = min(stats[2], size)
            stats[3] = max(stats[3], size)

    return [
        IndexRow(
            key=group_key,
            value=RowStats(count=count, sum=total, min=low, max=high),
        )
        for group_key, (count, total, low, high) in sorted(buckets.items())
    ]
