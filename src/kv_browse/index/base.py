"""Contracts for the storage collaborators used by listings.

Two collaborators back every listing: a grouped index that aggregates object
sizes per key prefix, and a bulk getter that fetches stored payloads for a
set of keys. Both are plain protocols so that any store can provide them.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol, Union

from kv_browse.keys import Key, KeyRange

Number = Union[int, float]


@dataclass(frozen=True)
class RowStats:
    """Aggregated sizes of every object sharing a grouped key.

    Values arrive from the index as JSON numbers, so they may be floats.
    """

    count: Number
    sum: Number
    min: Number
    max: Number


@dataclass(frozen=True)
class IndexRow:
    """One row of a grouped index query."""

    key: Key
    value: RowStats


@dataclass(frozen=True)
class IndexQueryParams:
    """Parameters of a grouped range scan."""

    group_level: int
    key_range: KeyRange

    @property
    def start_key(self) -> Key:
        return self.key_range.start_key

    @property
    def end_key(self) -> Key:
        return self.key_range.end_key


class GroupedIndex(Protocol):
    """Sorted range scan aggregated at a group level."""

    def query(self, index_name: str, params: IndexQueryParams) -> list[IndexRow]:
        """Return grouped rows ordered by key."""
        ...


class BulkGetter(Protocol):
    """Multi-key fetch of stored payloads."""

    def get_bulk(self, keys: Iterable[str]) -> dict[str, bytes]:
        """Return payloads for the keys that exist; missing keys are absent."""
        ...
