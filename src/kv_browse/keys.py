"""Key helpers for the path-like key namespace.

Stored keys are slash-delimited strings. The grouped index sees them as
ordered sequences of segments, so every range and every grouping in this
package works on tuples of segments.

The upper bound of a prefix range is expressed with ``KEY_MAX``, a segment
that collates after every string segment. This mirrors the ``{}`` marker
used by view engines for "everything under this prefix" and avoids picking
a literal sentinel string that real segments could sort past.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from kv_browse.core import get_logger

logger = get_logger(__name__)

SEPARATOR = "/"

Key = tuple[Any, ...]


class _KeyMax:
    """Segment that sorts after every other segment."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __lt__(self, other: object) -> bool:
        return False

    def __le__(self, other: object) -> bool:
        return other is self

    def __gt__(self, other: object) -> bool:
        return other is not self

    def __ge__(self, other: object) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return other is self

    def __hash__(self) -> int:
        return hash(_KeyMax)

    def __repr__(self) -> str:
        return "KEY_MAX"


KEY_MAX = _KeyMax()


def split_path(path: str) -> Key:
    """Split a slash-delimited path into key segments.

    The empty path is the root and has no segments.
    """
    if not path:
        return ()
    return tuple(path.split(SEPARATOR))


def join_key(segments: Sequence[str]) -> str:
    """Join key segments back into the stored key string."""
    return SEPARATOR.join(segments)


@dataclass(frozen=True)
class KeyRange:
    """Half-open range ``[start_key, end_key)`` covering one key prefix.

    Attributes:
        prefix: Leading segments shared by every key in the range
    """

    prefix: Key

    @property
    def start_key(self) -> Key:
        return self.prefix

    @property
    def end_key(self) -> Key:
        return self.prefix + (KEY_MAX,)

    def contains(self, key: Sequence[str]) -> bool:
        """Check whether a key lies inside the range."""
        return tuple(key[: len(self.prefix)]) == self.prefix

    @classmethod
    def for_path(cls, path: str) -> "KeyRange":
        return cls(prefix=split_path(path))


def display_name(key: Sequence[str], depth: int) -> str:
    """Shape the display name of a grouped key.

    Keeps the last ``depth`` segments, or the whole key when it is shorter.
    """
    if len(key) > depth:
        key = key[len(key) - depth :]
    return join_key(key)


def normalize_depth(depth: int) -> int:
    """Clamp a requested listing depth to at least one segment."""
    if depth < 1:
        logger.warning("Listing depth below 1, clamping", requested_depth=depth)
        return 1
    return depth
