"""Listing data models."""

from typing import Any

from pydantic import BaseModel, Field

from kv_browse.index.base import RowStats


class DirAggregate(BaseModel):
    """Statistics for every object beneath a synthetic directory.

    Attributes:
        descendants: Number of stored objects under the directory
        size: Total size in bytes of those objects
        smallest: Size of the smallest object
        largest: Size of the largest object
    """

    descendants: int
    size: int
    smallest: int
    largest: int

    @classmethod
    def from_stats(cls, stats: RowStats) -> "DirAggregate":
        """Build from index stats, truncating wire floats to byte counts."""
        return cls(
            descendants=int(stats.count),
            size=int(stats.sum),
            smallest=int(stats.min),
            largest=int(stats.max),
        )


class Listing(BaseModel):
    """Directory listing synthesized from the key namespace."""

    path: str = Field(..., description="Listed path, always starting with '/'")
    files: dict[str, dict[str, Any]] = Field(default_factory=dict)
    dirs: dict[str, DirAggregate] = Field(default_factory=dict)
