"""Transport-level helpers."""

from .inflight import InflightRequest, InflightTracker

__all__ = ["InflightRequest", "InflightTracker"]
