"""S3 bucket exposed as a grouped index and bulk getter.

Objects in the bucket are the leaf entries of the key namespace. The
grouped index is computed from a paginated listing of the queried prefix,
aggregating object sizes. Bulk get returns a JSON metadata document per
existing object, built from its HEAD response.
"""

import json
from contextlib import nullcontext
from typing import Iterable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from kv_browse.core import get_logger, settings
from kv_browse.core.exceptions import IndexQueryError, StorageError
from kv_browse.index.aggregation import aggregate_rows
from kv_browse.index.base import IndexQueryParams, IndexRow
from kv_browse.keys import SEPARATOR, join_key, split_path
from kv_browse.objectstorage.clients import S3ClientConfig, S3ClientManager
from kv_browse.transport import InflightTracker

logger = get_logger(__name__)

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class S3Store:
    """Listing collaborators backed by one S3 bucket."""

    def __init__(
        self,
        bucket: str,
        config: S3ClientConfig,
        tracker: Optional[InflightTracker] = None,
        index_name: Optional[str] = None,
    ):
        """Initialize S3 store.

        Args:
            bucket: Bucket holding the objects
            config: S3 client configuration
            tracker: Optional tracker notified of every S3 request
            index_name: Name answered by the grouped index (defaults to settings)
        """
        self.bucket = bucket
        self.client_manager = S3ClientManager(config)
        self.tracker = tracker
        self.index_name = index_name or settings.index_name
        logger.info("S3 store initialized", bucket=bucket)

    def _track(self, label: str):
        if self.tracker is None:
            return nullcontext()
        return self.tracker.track(f"s3://{self.bucket}/{label}")

    def query(self, index_name: str, params: IndexQueryParams) -> list[IndexRow]:
        """Aggregate object sizes under the queried prefix.

        Raises:
            IndexQueryError: If the index name is unknown or S3 listing fails
        """
        if index_name != self.index_name:
            raise IndexQueryError(f"Unknown index '{index_name}'")

        prefix = join_key(params.key_range.prefix)
        logger.info(
            "Querying S3 grouped index",
            bucket=self.bucket,
            prefix=prefix,
            group_level=params.group_level,
        )

        entries = []
        try:
            client = self.client_manager.client
            paginator = client.get_paginator("list_objects_v2")
            with self._track(prefix):
                for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                    for obj in page.get("Contents", []):
                        key = obj["Key"]
                        # Folder placeholders are not objects of the namespace
                        if key.endswith(SEPARATOR):
                            logger.debug("Skipping folder marker", key=key)
                            continue
                        entries.append((split_path(key), obj.get("Size", 0)))
        except Exception as e:
            error_msg = f"Failed to query S3 prefix '{prefix}' in '{self.bucket}': {e}"
            logger.error(error_msg, error=str(e))
            raise IndexQueryError(error_msg) from e

        rows = aggregate_rows(entries, params)
        logger.info(
            "S3 grouped index queried",
            bucket=self.bucket,
            prefix=prefix,
            object_count=len(entries),
            row_count=len(rows),
        )
        return rows

    def get_bulk(self, keys: Iterable[str]) -> dict[str, bytes]:
        """Fetch metadata documents for the keys that exist.

        Raises:
            StorageError: If S3 fails for a reason other than a missing key
        """
        client = self.client_manager.client
        found: dict[str, bytes] = {}

        for key in sorted(keys):
            # S3 keys are never empty; a leading slash groups to an empty segment
            if not key:
                continue
            try:
                with self._track(key):
                    head = client.head_object(Bucket=self.bucket, Key=key)
            except ClientError as e:
                code = str(e.response.get("Error", {}).get("Code", ""))
                if code in _MISSING_CODES:
                    continue
                error_msg = f"Failed to fetch S3 object '{key}' in '{self.bucket}': {e}"
                logger.error(error_msg, error=str(e))
                raise StorageError(error_msg) from e
            except BotoCoreError as e:
                error_msg = f"Failed to fetch S3 object '{key}' in '{self.bucket}': {e}"
                logger.error(error_msg, error=str(e))
                raise StorageError(error_msg) from e

            found[key] = self._metadata_document(head)

        logger.debug("S3 bulk get completed", bucket=self.bucket, found=len(found))
        return found

    @staticmethod
    def _metadata_document(head: dict) -> bytes:
        modified = head.get("LastModified")
        document = {
            "length": head.get("ContentLength", 0),
            "etag": head.get("ETag", "").strip('"'),
            "type": head.get("ContentType"),
            "modified": modified.isoformat() if modified is not None else None,
            "userdata": head.get("Metadata", {}),
        }
        return json.dumps(document).encode("utf-8")
