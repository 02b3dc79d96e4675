from __future__ import annotations

"""
Cooperative Cancellation Signal.

Thin wrapper over threading.Event shared between the controlling thread
and the traversal worker. The worker polls it at its own check points;
nothing is interrupted preemptively.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class CancellationSignal:
    """Flag raised by the caller and polled by the traversal worker."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def request(self) -> bool:
        """
        Ask the worker to stop at its next check point.

        Returns:
            bool: False if cancellation had already been requested.
        """
        if self._event.is_set():
            return False
        self._event.set()
        logger.info("Cancellation requested.")
        return True

    @property
    def is_requested(self) -> bool:
        return self._event.is_set()

    def reset(self) -> None:
        self._event.clear()

    def wait(self, timeout: float) -> bool:
        """Block up to `timeout` seconds until cancellation is requested."""
        return self._event.wait(timeout)
