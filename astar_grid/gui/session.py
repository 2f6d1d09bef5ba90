"""Editing and search state shared by the viewer's input and rendering."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import List, Optional

from ..core.node import Node, NodeType
from ..core.pathfinder import Pathfinder
from ..core.search_control import SearchCancelled, SearchControl


logger = logging.getLogger(__name__)


class Status(Enum):
    EDITING = "Editing"
    RUNNING = "Running"
    PAUSED = "Paused"
    COMPLETED = "Path found"
    FAILED = "No path found"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_active(self) -> bool:
        return self in (Status.RUNNING, Status.PAUSED)


class Session:
    """Own a :class:`Pathfinder` and drive searches on a worker thread.

    Every node reports updates to :meth:`_on_node_update`, which slows the
    search down by ``update_delay_ms`` so each step can be watched.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        diagonal: bool = True,
        update_delay_ms: int = 100,
        max_update_delay_ms: int = 200,
    ) -> None:
        self.rows = rows
        self.columns = columns
        self.max_update_delay_ms = max_update_delay_ms
        self.update_delay_ms = max(0, min(update_delay_ms, max_update_delay_ms))
        self.status: Status = Status.EDITING
        self.path: Optional[List[Node]] = None
        self._diagonal = diagonal
        self._control = SearchControl()
        self._worker: Optional[threading.Thread] = None
        self.pathfinder = Pathfinder(rows, columns, diagonal)
        self._bind_listeners()

    # ------------------------------------------------------------------
    # Pathfinder wiring
    # ------------------------------------------------------------------
    def _bind_listeners(self) -> None:
        for node in self.pathfinder.nodes():
            node.set_listener(self._on_node_update)

    def _on_node_update(self, node: Node) -> None:
        if self.update_delay_ms > 0 and self.status.is_active:
            self._control.sleep(self.update_delay_ms / 1000.0)

    def _replace_pathfinder(self, pathfinder: Pathfinder) -> None:
        self._stop_worker()
        self.pathfinder = pathfinder
        self.path = None
        self._bind_listeners()
        self.status = Status.EDITING

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    @property
    def diagonal(self) -> bool:
        return self._diagonal

    def set_diagonal(self, diagonal: bool) -> None:
        if self.status is not Status.EDITING:
            return
        self._diagonal = diagonal
        self.pathfinder.diagonal = diagonal

    def toggle_diagonal(self) -> bool:
        self.set_diagonal(not self._diagonal)
        return self._diagonal

    def adjust_delay(self, delta_ms: int) -> int:
        self.update_delay_ms = max(0, min(self.update_delay_ms + delta_ms, self.max_update_delay_ms))
        return self.update_delay_ms

    def edit(self, x: int, y: int, node_type: NodeType) -> None:
        """Classify a cell; only allowed before a search has been started."""

        if self.status is not Status.EDITING:
            return
        self.pathfinder.set_node_type(x, y, node_type)

    def reset(self) -> None:
        """Drop search results but keep start, end and barriers."""

        self._replace_pathfinder(self.pathfinder.reset())
        logger.info("Grid reset")

    def clear(self) -> None:
        self._replace_pathfinder(Pathfinder(self.rows, self.columns, self._diagonal))
        logger.info("Grid cleared")

    # ------------------------------------------------------------------
    # Search lifecycle
    # ------------------------------------------------------------------
    def toggle(self) -> Status:
        """Start, pause or resume the search depending on the status."""

        if self.status is Status.EDITING:
            self._start()
        elif self.status is Status.RUNNING:
            self._control.pause()
            self.status = Status.PAUSED
        elif self.status is Status.PAUSED:
            self.status = Status.RUNNING
            self._control.resume()
        return self.status

    def _start(self) -> None:
        if self.pathfinder.start_node is None or self.pathfinder.end_node is None:
            logger.warning("Set a start and an end node before starting the search")
            return

        self._control = SearchControl()
        self.status = Status.RUNNING
        self._worker = threading.Thread(
            target=self._run,
            args=(self.pathfinder, self._control),
            daemon=True,
            name="PathfinderThread",
        )
        self._worker.start()
        logger.info("Search started")

    def _run(self, pathfinder: Pathfinder, control: SearchControl) -> None:
        try:
            path = pathfinder.find_path(control)
        except SearchCancelled:
            logger.debug("Search thread cancelled")
            return
        except Exception:
            logger.exception("Search failed")
            self.status = Status.FAILED
            return

        self.path = path
        if path is None:
            self.status = Status.FAILED
            logger.info("No path found")
        else:
            self.status = Status.COMPLETED
            logger.info("Path found with %d nodes (cost %d)", len(path), path[-1].g_cost)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the worker thread. Returns ``True`` once it has finished."""

        worker = self._worker
        if worker is None:
            return True
        worker.join(timeout)
        return not worker.is_alive()

    def _stop_worker(self) -> None:
        self._control.cancel()
        if self._worker is not None:
            self._worker.join()
            self._worker = None

    def shutdown(self) -> None:
        self._stop_worker()


__all__ = ["Session", "Status"]
