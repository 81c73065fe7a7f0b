"""Exception hierarchy for kv-browse."""


class KVBrowseError(Exception):
    """Base exception for all kv-browse errors."""

    pass


class ValidationError(KVBrowseError):
    """Raised when validation fails."""

    pass


class IndexQueryError(KVBrowseError):
    """Raised when a grouped index query fails."""

    pass


class StorageError(KVBrowseError):
    """Raised when fetching stored objects fails."""

    pass
