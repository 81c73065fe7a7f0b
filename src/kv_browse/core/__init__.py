"""Core utilities and shared components for kv-browse."""

from .config import settings
from .exceptions import KVBrowseError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "KVBrowseError", "ValidationError", "get_logger", "get_tracer"]
