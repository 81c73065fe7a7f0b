"""In-memory store providing both listing collaborators."""

import json
import threading
from typing import Any, Iterable, Mapping, Optional, Union

from kv_browse.core import get_logger, settings
from kv_browse.core.exceptions import IndexQueryError
from kv_browse.index.aggregation import aggregate_rows
from kv_browse.index.base import IndexQueryParams, IndexRow
from kv_browse.keys import split_path

logger = get_logger(__name__)


class InMemoryStore:
    """Dict-backed key-value store with a grouped size index.

    Each stored object keeps its raw payload and the size the index emits
    for it. Payloads given as mappings are serialized to JSON and, unless a
    size is passed explicitly, indexed by their ``length`` field.
    """

    def __init__(self, index_name: Optional[str] = None):
        self.index_name = index_name or settings.index_name
        self._objects: dict[str, tuple[bytes, int]] = {}
        self._lock = threading.Lock()

    def put(
        self,
        key: str,
        payload: Union[Mapping[str, Any], bytes],
        size: Optional[int] = None,
    ) -> None:
        """Store an object under ``key``."""
        if isinstance(payload, bytes):
            body = payload
            indexed_size = size or 0
        else:
            body = json.dumps(dict(payload)).encode("utf-8")
            indexed_size = size if size is not None else int(payload.get("length", 0))

        with self._lock:
            self._objects[key] = (body, indexed_size)
        logger.debug("Object stored", key=key, size=indexed_size)

    def delete(self, key: str) -> None:
        """Remove an object; unknown keys are ignored."""
        with self._lock:
            self._objects.pop(key, None)

    def __len__(self) -> int:
        return len(self._objects)

    def query(self, index_name: str, params: IndexQueryParams) -> list[IndexRow]:
        """Run a grouped range scan over the stored objects.

        Raises:
            IndexQueryError: If the index name is unknown
        """
        if index_name != self.index_name:
            raise IndexQueryError(f"Unknown index '{index_name}'")

        with self._lock:
            entries = [
                (split_path(key), size) for key, (_, size) in self._objects.items()
            ]
        return aggregate_rows(entries, params)

    def get_bulk(self, keys: Iterable[str]) -> dict[str, bytes]:
        """Fetch payloads for every key that exists."""
        with self._lock:
            return {
                key: self._objects[key][0] for key in keys if key in self._objects
            }
