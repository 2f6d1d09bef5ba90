"""Renderer for drawing a :class:`Session` to a :class:`Window`."""

from __future__ import annotations

from ..core.node import Node, NodeType
from .session import Session
from .window import Window

# Colours per cell classification
NODE_COLOUR_MAP = {
    NodeType.UNEVALUATED: (211, 211, 211),  # light gray
    NodeType.OPEN: (144, 238, 144),         # light green
    NodeType.CLOSED: (255, 0, 0),
    NodeType.START: (0, 128, 0),
    NodeType.END: (0, 0, 255),
    NodeType.BARRIER: (169, 169, 169),      # dark gray
    NodeType.PATH: (255, 255, 0),
}
COST_TEXT_COLOUR = (0, 0, 0)
BACKGROUND_COLOUR = (0, 0, 0)
PANEL_COLOUR = (0, 0, 0)
PANEL_TEXT_COLOUR = (255, 255, 255)

# Cells whose costs are written on top of the colour
_COSTED_TYPES = (NodeType.OPEN, NodeType.CLOSED, NodeType.PATH)

HELP_LINES = (
    "Click: barrier  S+Click: start  E+Click: end",
    "Right click: clear  Space: start/pause",
    "R: reset  C: clear  D: diagonal  Up/Down: delay",
)


class Renderer:
    """Draw every node of the session grid plus a small control panel."""

    def __init__(self, window: Window, cell_size: int) -> None:
        self.window = window
        self.cell_size = cell_size
        self.show_panel = True

    def cell_at(self, screen_pos: tuple[int, int]) -> tuple[int, int]:
        """Convert a pixel position to grid coordinates."""

        return screen_pos[0] // self.cell_size, screen_pos[1] // self.cell_size

    def update(self, session: Session) -> None:
        self.window.clear(BACKGROUND_COLOUR)
        for node in session.pathfinder.nodes():
            self._draw_node(node)
        if self.show_panel:
            self._draw_panel(session)

    def _draw_node(self, node: Node) -> None:
        size = self.cell_size
        left = node.x * size
        top = node.y * size
        # One pixel gap keeps the grid lines visible
        self.window.draw_rect(left, top, size - 1, size - 1, NODE_COLOUR_MAP[node.node_type])

        if node.node_type not in _COSTED_TYPES or node.f_cost <= 0:
            return
        font_size = max(8, int(size * 0.25))
        pad = 2
        self.window.draw_text(str(node.f_cost), left + pad, top + pad, COST_TEXT_COLOUR, font_size, bold=True)
        self.window.draw_text(
            str(node.g_cost), left + pad, top + size - pad, COST_TEXT_COLOUR, font_size, anchor="bottomleft"
        )
        self.window.draw_text(
            str(node.h_cost), left + size - pad, top + size - pad, COST_TEXT_COLOUR, font_size, anchor="bottomright"
        )

    def _draw_panel(self, session: Session) -> None:
        lines = [
            (f"Status: {session.status.label}", 20, True),
            (f"Delay: {session.update_delay_ms} ms", 14, False),
            (f"Diagonal: {'on' if session.diagonal else 'off'}", 14, True),
        ]
        lines.extend((line, 12, False) for line in HELP_LINES)

        self.window.draw_rect(5, 5, 300, 30 + 20 * len(lines), PANEL_COLOUR, alpha=128)
        y = 12
        for text, size, bold in lines:
            self.window.draw_text(text, 12, y, PANEL_TEXT_COLOUR, size, bold=bold)
            y += size + 8


__all__ = ["NODE_COLOUR_MAP", "Renderer"]
