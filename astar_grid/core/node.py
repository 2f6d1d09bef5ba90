"""Grid cells and their search state."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Tuple


Coord = Tuple[int, int]


class NodeType(Enum):
    """Classification of a cell. ``START`` and ``END`` are anchors."""

    UNEVALUATED = "unevaluated"
    OPEN = "open"
    CLOSED = "closed"
    START = "start"
    END = "end"
    BARRIER = "barrier"
    PATH = "path"


_ANCHORS = (NodeType.START, NodeType.END)
_FRONTIER_MARKS = (NodeType.OPEN, NodeType.CLOSED)


NodeUpdateListener = Callable[["Node"], None]


class Node:
    """One cell of a :class:`~astar_grid.core.pathfinder.Pathfinder` grid.

    ``f_cost`` is derived from ``g_cost`` and ``h_cost`` and can only change
    through :meth:`set_g_cost` and :meth:`set_h_cost`. A single listener may
    be attached; it is called synchronously whenever the classification or
    a cost changes.
    """

    def __init__(self, x: int, y: int, node_type: NodeType = NodeType.UNEVALUATED) -> None:
        self._x = x
        self._y = y
        self._node_type = node_type
        self._g_cost = 0
        self._h_cost = 0
        self._f_cost = 0
        self._parent: Optional[Node] = None
        self._listener: Optional[NodeUpdateListener] = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coords(self) -> Coord:
        return (self._x, self._y)

    @property
    def node_type(self) -> NodeType:
        return self._node_type

    @property
    def g_cost(self) -> int:
        return self._g_cost

    @property
    def h_cost(self) -> int:
        return self._h_cost

    @property
    def f_cost(self) -> int:
        return self._f_cost

    @property
    def parent(self) -> Optional[Node]:
        return self._parent

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def set_listener(self, listener: Optional[NodeUpdateListener]) -> None:
        """Replace the update listener. ``None`` detaches it."""

        self._listener = listener

    def set_g_cost(self, value: int) -> None:
        if value == self._g_cost:
            return
        self._g_cost = value
        self._recalculate_f_cost()

    def set_h_cost(self, value: int) -> None:
        if value == self._h_cost:
            return
        self._h_cost = value
        self._recalculate_f_cost()

    def set_node_type(self, node_type: NodeType) -> None:
        """Change the classification and notify the listener.

        ``START`` and ``END`` cells ignore ``OPEN`` and ``CLOSED``.
        """

        if self._node_type in _ANCHORS and node_type in _FRONTIER_MARKS:
            return
        self._node_type = node_type
        self._notify()

    def set_parent(self, parent: Optional[Node]) -> None:
        self._parent = parent

    def _recalculate_f_cost(self) -> None:
        self._f_cost = self._g_cost + self._h_cost
        self._notify()

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self)

    def __repr__(self) -> str:
        return (
            f"Node(x={self._x}, y={self._y}, type={self._node_type.name}, "
            f"g={self._g_cost}, h={self._h_cost}, f={self._f_cost})"
        )


__all__ = ["Coord", "Node", "NodeType", "NodeUpdateListener"]
