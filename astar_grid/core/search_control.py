"""Cooperative pause and cancellation for a running search."""

from __future__ import annotations

import logging
import threading


logger = logging.getLogger(__name__)


class SearchCancelled(Exception):
    """Raised inside the search loop after :meth:`SearchControl.cancel`."""


class SearchControl:
    """Flags polled by the search loop between node expansions.

    The search thread only ever stops at :meth:`checkpoint`, where no node
    or frontier mutation is half done.
    """

    def __init__(self) -> None:
        self._running = threading.Event()
        self._running.set()
        self._cancelled = threading.Event()

    @property
    def paused(self) -> bool:
        return not self._running.is_set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def pause(self) -> None:
        if not self._cancelled.is_set():
            self._running.clear()
            logger.debug("Search paused")

    def resume(self) -> None:
        self._running.set()
        logger.debug("Search resumed")

    def cancel(self) -> None:
        self._cancelled.set()
        # Wake a thread blocked in checkpoint()
        self._running.set()
        logger.debug("Search cancelled")

    def checkpoint(self) -> None:
        """Block while paused; raise :class:`SearchCancelled` once cancelled."""

        if self._cancelled.is_set():
            raise SearchCancelled()
        self._running.wait()
        if self._cancelled.is_set():
            raise SearchCancelled()

    def sleep(self, seconds: float) -> bool:
        """Wait up to ``seconds``. Returns ``True`` if cut short by cancel."""

        if seconds <= 0:
            return self._cancelled.is_set()
        return self._cancelled.wait(seconds)


__all__ = ["SearchCancelled", "SearchControl"]
