"""Tracking of in-flight storage requests.

A tracker records every outstanding request with its start time so that an
operator can ask a running process what it is waiting on. Trackers are
plain objects handed to the clients that should report to them.
"""

import itertools
import signal
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

from kv_browse.core import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class InflightRequest:
    """A request that has been registered but not yet finished.

    Attributes:
        label: Request description, usually its URL
        elapsed: Seconds since the request was registered
    """

    label: str
    elapsed: float


class InflightTracker:
    """Lock-guarded table of in-flight requests."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._inflight: dict[int, tuple[str, float]] = {}
        self._tokens = itertools.count(1)

    def register(self, label: str) -> int:
        """Record the start of a request and return its token."""
        with self._lock:
            token = next(self._tokens)
            self._inflight[token] = (label, self._clock())
        return token

    def unregister(self, token: int) -> None:
        """Forget a finished request. Unknown tokens are ignored."""
        with self._lock:
            self._inflight.pop(token, None)

    def snapshot(self) -> list[InflightRequest]:
        """Return the outstanding requests, oldest first."""
        with self._lock:
            now = self._clock()
            entries = sorted(self._inflight.items())
            return [
                InflightRequest(label=label, elapsed=now - started)
                for _, (label, started) in entries
            ]

    @contextmanager
    def track(self, label: str) -> Iterator[None]:
        """Register a request for the duration of the block."""
        token = self.register(label)
        try:
            yield
        finally:
            self.unregister(token)

    def report(self) -> None:
        """Log every in-flight request."""
        requests = self.snapshot()
        logger.info("In-flight requests", count=len(requests))
        for request in requests:
            logger.info(
                "Servicing request",
                label=request.label,
                elapsed_seconds=round(request.elapsed, 3),
            )

    def install_signal_handler(self, signum: int) -> None:
        """Report in-flight requests whenever ``signum`` is delivered.

        Must be called from the main thread.
        """
        signal.signal(signum, lambda _signum, _frame: self.report())
        logger.info("In-flight report handler installed", signal=signum)
