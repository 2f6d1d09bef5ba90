"""A* search over a fixed grid of :class:`Node` cells."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from .frontier import OpenFrontier
from .node import Coord, Node, NodeType
from .search_control import SearchControl


logger = logging.getLogger(__name__)

# Cost of a horizontal or vertical step
HORIZONTAL_COST = 10
# Cost of a diagonal step, sqrt(2) scaled by ten
DIAGONAL_COST = 14

# Scanned from the top-left to the bottom-right neighbour
_OFFSETS: Tuple[Coord, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class PathfinderError(Exception):
    """Base class for pathfinder failures."""


class MissingEndpointError(PathfinderError):
    """Raised when a search is started without a start or end node."""


def octile_distance(a: Coord, b: Coord) -> int:
    """Return the movement cost between ``a`` and ``b`` on an open grid."""

    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if dx > dy:
        return DIAGONAL_COST * dy + HORIZONTAL_COST * (dx - dy)
    return DIAGONAL_COST * dx + HORIZONTAL_COST * (dy - dx)


def path_cost(path: Sequence[Node]) -> int:
    """Sum of step costs along ``path``."""

    return sum(octile_distance(a.coords, b.coords) for a, b in zip(path, path[1:]))


class Pathfinder:
    """Grid of nodes on which A* runs once a start and an end are set.

    Coordinates are zero based: a grid with 10 rows and 10 columns has its
    last cell at ``(9, 9)``. ``x`` indexes rows and ``y`` indexes columns.
    """

    def __init__(self, rows: int, columns: int, diagonal: bool = True) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{columns}")
        self.diagonal: bool = diagonal
        self._rows = rows
        self._columns = columns
        self._grid: List[List[Node]] = [
            [Node(x, y) for y in range(columns)] for x in range(rows)
        ]
        self._start_node: Optional[Node] = None
        self._end_node: Optional[Node] = None

    # ------------------------------------------------------------------
    # Grid access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def grid(self) -> List[List[Node]]:
        return self._grid

    @property
    def start_node(self) -> Optional[Node]:
        return self._start_node

    @property
    def end_node(self) -> Optional[Node]:
        return self._end_node

    def nodes(self) -> Iterator[Node]:
        for column in self._grid:
            yield from column

    def is_inside_grid(self, x: int, y: int) -> bool:
        return 0 <= x < self._rows and 0 <= y < self._columns

    def node_at(self, x: int, y: int) -> Optional[Node]:
        if not self.is_inside_grid(x, y):
            return None
        return self._grid[x][y]

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def set_node_type(self, x: int, y: int, node_type: NodeType) -> None:
        """Classify the cell at ``(x, y)``. Ignored outside the grid."""

        node = self.node_at(x, y)
        if node is None:
            return
        self.designate(node, node_type)

    def designate(self, node: Node, node_type: NodeType) -> None:
        """Classify ``node`` while keeping a single start and a single end."""

        if node_type is NodeType.START:
            if self._start_node is not None and self._start_node is not node:
                self.designate(self._start_node, NodeType.UNEVALUATED)
            if self._end_node is node:
                self._end_node = None
            self._start_node = node
        elif node_type is NodeType.END:
            if self._end_node is not None and self._end_node is not node:
                self.designate(self._end_node, NodeType.UNEVALUATED)
            if self._start_node is node:
                self._start_node = None
            self._end_node = node
        elif self._start_node is node:
            self._start_node = None
        elif self._end_node is node:
            self._end_node = None

        logger.debug("Cell %s -> %s", node.coords, node_type.name)
        node.set_node_type(node_type)

    def set_barrier(self, x: int, y: int) -> None:
        self.set_node_type(x, y, NodeType.BARRIER)

    def set_start_node(self, x: int, y: int) -> None:
        """Mark ``(x, y)`` as the start. A previous start becomes unevaluated."""
        self.set_node_type(x, y, NodeType.START)

    def set_end_node(self, x: int, y: int) -> None:
        """Mark ``(x, y)`` as the end. A previous end becomes unevaluated."""
        self.set_node_type(x, y, NodeType.END)

    def clear_node(self, x: int, y: int) -> None:
        self.set_node_type(x, y, NodeType.UNEVALUATED)

    def reset(self) -> "Pathfinder":
        """Return a fresh grid keeping only start, end and barrier cells."""

        fresh = Pathfinder(self._rows, self._columns, self.diagonal)
        for node in self.nodes():
            if node.node_type in (NodeType.START, NodeType.END, NodeType.BARRIER):
                fresh.set_node_type(node.x, node.y, node.node_type)
        return fresh

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    @staticmethod
    def distance(a: Node, b: Node) -> int:
        return octile_distance(a.coords, b.coords)

    def neighbours(self, node: Node) -> Iterator[Node]:
        """Yield the grid cells adjacent to ``node`` under the current mode."""

        for dx, dy in _OFFSETS:
            if not self.diagonal and dx != 0 and dy != 0:
                continue
            neighbour = self.node_at(node.x + dx, node.y + dy)
            if neighbour is not None:
                yield neighbour

    def find_path(self, control: Optional[SearchControl] = None) -> Optional[List[Node]]:
        """Search for the cheapest path from the start to the end node.

        Returns the nodes from start to end, both included, or ``None`` when
        the end cannot be reached. ``control`` is polled before every
        expansion so another thread can pause or cancel the search.
        """

        start, end = self._start_node, self._end_node
        if start is None or end is None:
            raise MissingEndpointError(
                "Start and end node have to be set before starting the algorithm"
            )

        logger.debug(
            "Searching %s -> %s (diagonal=%s)", start.coords, end.coords, self.diagonal
        )
        # The start may carry costs from an earlier run on this grid
        start.set_g_cost(0)
        start.set_parent(None)

        open_nodes = OpenFrontier()
        closed: Set[Coord] = set()
        open_nodes.push(start)

        while open_nodes:
            if control is not None:
                control.checkpoint()

            current = open_nodes.pop()
            closed.add(current.coords)

            if current is end:
                path = self._retrace_path(start, end)
                logger.debug(
                    "Path found: %d nodes, cost %d, %d expanded",
                    len(path), end.g_cost, len(closed),
                )
                return path

            current.set_node_type(NodeType.CLOSED)

            for neighbour in self.neighbours(current):
                if neighbour.node_type is NodeType.BARRIER or neighbour.coords in closed:
                    continue

                tentative_g = current.g_cost + self.distance(current, neighbour)
                queued = neighbour in open_nodes
                if tentative_g < neighbour.g_cost or not queued:
                    neighbour.set_g_cost(tentative_g)
                    neighbour.set_h_cost(self.distance(neighbour, end))
                    neighbour.set_parent(current)

                    if queued:
                        open_nodes.update(neighbour)
                    else:
                        open_nodes.push(neighbour)
                        neighbour.set_node_type(NodeType.OPEN)

        logger.debug("No path found after expanding %d nodes", len(closed))
        return None

    def _retrace_path(self, start: Node, end: Node) -> List[Node]:
        path: List[Node] = []
        current = end
        while current is not start:
            path.append(current)
            assert current.parent is not None
            current = current.parent
        path.append(start)
        path.reverse()

        for node in path:
            if node is start or node is end:
                continue
            node.set_node_type(NodeType.PATH)
        return path


__all__ = [
    "DIAGONAL_COST",
    "HORIZONTAL_COST",
    "MissingEndpointError",
    "Pathfinder",
    "PathfinderError",
    "octile_distance",
    "path_cost",
]
