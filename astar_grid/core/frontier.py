"""Open set used by the A* search."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Any, Dict, List

from .node import Coord, Node


# Placeholder left in heap entries whose node has been re-keyed
_REMOVED: Any = None


class OpenFrontier:
    """Priority queue of nodes keyed on ``f_cost`` with a membership index.

    Entries are ``[f_cost, sequence, node]`` lists. The sequence number
    breaks ties so nodes with equal ``f_cost`` come out in insertion order.
    Re-keying marks the old entry as removed and pushes a new one; stale
    entries are skipped on :meth:`pop`.
    """

    def __init__(self) -> None:
        self._heap: List[List[Any]] = []
        self._entries: Dict[Coord, List[Any]] = {}
        self._counter = count()

    def push(self, node: Node) -> None:
        if node.coords in self._entries:
            raise ValueError(f"{node!r} is already in the open frontier")
        entry = [node.f_cost, next(self._counter), node]
        self._entries[node.coords] = entry
        heappush(self._heap, entry)

    def update(self, node: Node) -> None:
        """Re-order ``node`` after its ``f_cost`` changed."""

        entry = self._entries.pop(node.coords)
        entry[-1] = _REMOVED
        self.push(node)

    def pop(self) -> Node:
        """Remove and return the node with the lowest ``f_cost``."""

        while self._heap:
            _, _, node = heappop(self._heap)
            if node is not _REMOVED:
                del self._entries[node.coords]
                return node
        raise KeyError("pop from an empty open frontier")

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and node.coords in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["OpenFrontier"]
