"""Grouped index and bulk get collaborators."""

from .aggregation import aggregate_rows
from .base import BulkGetter, GroupedIndex, IndexQueryParams, IndexRow, RowStats
from .memory import InMemoryStore

__all__ = [
    "BulkGetter",
    "GroupedIndex",
    "IndexQueryParams",
    "IndexRow",
    "RowStats",
    "InMemoryStore",
    "aggregate_rows",
]
