"""Directory listings synthesized over a flat, path-like key namespace.

Stores that only hold leaf objects (no directory markers) can still be
browsed as a tree: directories are inferred at query time from common key
prefixes, using a grouped index query for per-prefix size statistics and a
bulk get to tell stored objects apart from synthetic directories.

Recommended Usage:
    >>> from kv_browse import InMemoryStore, build_listing
    >>> store = InMemoryStore()
    >>> store.put("a/b.txt", {"length": 10})
    >>> store.put("a/c/d.txt", {"length": 20})
    >>> listing = build_listing("a", store, depth=1)
    >>> sorted(listing.files), sorted(listing.dirs)
    (['b.txt'], ['c'])

Advanced Usage:
    Wire your own collaborators into the builder:

    >>> from kv_browse.listing import ListingBuilder
    >>> builder = ListingBuilder(index=my_index, bulk_getter=my_store)
"""

__version__ = "0.1.0"

from .index import (
    BulkGetter,
    GroupedIndex,
    IndexQueryParams,
    IndexRow,
    InMemoryStore,
    RowStats,
)
from .keys import KEY_MAX, KeyRange
from .listing import DirAggregate, Listing, ListingBuilder, build_listing
from .objectstorage import S3ClientConfig, S3Store
from .schemas import MemoryStorageConfig, S3StorageConfig, StorageConfig, open_store
from .transport import InflightRequest, InflightTracker

__all__ = [
    # Listings
    "DirAggregate",
    "Listing",
    "ListingBuilder",
    "build_listing",
    # Collaborator contracts
    "BulkGetter",
    "GroupedIndex",
    "IndexQueryParams",
    "IndexRow",
    "RowStats",
    "KEY_MAX",
    "KeyRange",
    # Stores
    "InMemoryStore",
    "S3ClientConfig",
    "S3Store",
    "MemoryStorageConfig",
    "S3StorageConfig",
    "StorageConfig",
    "open_store",
    # Request tracking
    "InflightRequest",
    "InflightTracker",
]
