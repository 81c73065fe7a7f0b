"""Listing builder that infers directories from flat object keys.

No directory objects exist in storage. A listing is assembled from two
collaborators:

1. A grouped index query over the listed prefix, aggregated at
   ``len(prefix) + depth`` segments. Each row is either a stored object
   or a bucket of everything sharing that grouped key.
2. A bulk get over the keys of those rows. Keys that come back are files,
   keys that do not are synthetic directories.

The builder holds no state between calls, so one instance can serve
concurrent listings.
"""

from typing import Any, Optional, Protocol

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from kv_browse.core import get_logger, get_tracer, settings
from kv_browse.index.base import BulkGetter, GroupedIndex, IndexQueryParams
from kv_browse.keys import KeyRange, display_name, join_key, normalize_depth
from kv_browse.listing.models import DirAggregate, Listing

logger = get_logger(__name__)
tracer = get_tracer(__name__)

_metadata_adapter = TypeAdapter(dict[str, Any])


class ListingStore(GroupedIndex, BulkGetter, Protocol):
    """A store providing both collaborators."""


class ListingBuilder:
    """Builds directory listings from a grouped index and a bulk getter."""

    def __init__(
        self,
        index: GroupedIndex,
        bulk_getter: BulkGetter,
        index_name: Optional[str] = None,
    ):
        """Initialize listing builder.

        Args:
            index: Grouped index collaborator
            bulk_getter: Bulk get collaborator
            index_name: Name of the grouped index (defaults to settings)
        """
        self.index = index
        self.bulk_getter = bulk_getter
        self.index_name = index_name or settings.index_name

    def build(self, path: str, include_metadata: bool = True, depth: int = 1) -> Listing:
        """Build the listing of ``path``.

        Args:
            path: Slash-delimited path, empty for the root
            include_metadata: Publish file metadata, or only file existence
            depth: Path segments below ``path`` resolved into names

        Returns:
            Listing of files and synthetic directories

        Raises:
            Exception: Whatever the grouped index query raises, unchanged
        """
        depth = normalize_depth(depth)
        key_range = KeyRange.for_path(path)
        params = IndexQueryParams(
            group_level=len(key_range.prefix) + depth, key_range=key_range
        )

        with tracer.start_as_current_span("kv_browse.build_listing") as span:
            span.set_attribute("kv_browse.path", path)
            span.set_attribute("kv_browse.depth", depth)
            span.set_attribute("kv_browse.group_level", params.group_level)

            logger.info(
                "Building listing",
                path=path,
                depth=depth,
                group_level=params.group_level,
            )

            rows = self.index.query(self.index_name, params)
            keys = [join_key(row.key) for row in rows]
            stored = self.bulk_getter.get_bulk(set(keys))

            files: dict[str, dict[str, Any]] = {}
            dirs: dict[str, DirAggregate] = {}
            for row, key in zip(rows, keys):
                name = display_name(row.key, depth)
                payload = stored.get(key)
                if payload is None:
                    if name in files:
                        logger.warning(
                            "Directory name shadowed by file", key=key, name=name
                        )
                        continue
                    dirs[name] = DirAggregate.from_stats(row.value)
                    continue

                try:
                    metadata = _metadata_adapter.validate_json(payload)
                except PydanticValidationError as e:
                    logger.warning(
                        "Error deserializing file metadata, ignoring",
                        key=key,
                        error=str(e),
                    )
                    continue
                # Names of shallow keys can coincide with deeper ones
                if dirs.pop(name, None) is not None:
                    logger.warning(
                        "Directory name shadowed by file", key=key, name=name
                    )
                elif name in files:
                    logger.warning(
                        "File name shadowed by file", key=key, name=name
                    )
                files[name] = metadata if include_metadata else {}

            logger.info(
                "Listing built",
                path=path,
                file_count=len(files),
                dir_count=len(dirs),
            )
            return Listing(path="/" + path, files=files, dirs=dirs)


def build_listing(
    path: str,
    store: ListingStore,
    include_metadata: bool = True,
    depth: int = 1,
    index_name: Optional[str] = None,
) -> Listing:
    """Convenience function to list a path of a store.

    Args:
        path: Slash-delimited path, empty for the root
        store: Store providing both the grouped index and bulk get
        include_metadata: Publish file metadata, or only file existence
        depth: Path segments below ``path`` resolved into names
        index_name: Name of the grouped index (defaults to settings)

    Returns:
        Listing of files and synthetic directories
    """
    builder = ListingBuilder(store, store, index_name=index_name)
    return builder.build(path, include_metadata=include_metadata, depth=depth)
