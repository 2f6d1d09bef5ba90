"""Handle ``pygame`` events and turn them into :class:`Session` operations."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pygame

from ..core.node import NodeType
from .renderer import Renderer
from .session import Session


logger = logging.getLogger(__name__)

DEFAULT_DELAY_STEP_MS = 10


def _edit_at(session: Session, renderer: Renderer, pos: tuple[int, int], button: int, state: Dict[str, Any]) -> None:
    x, y = renderer.cell_at(pos)
    if button == 1:
        pressing = state.get("pressing_key")
        if pressing == pygame.K_s:
            session.edit(x, y, NodeType.START)
        elif pressing == pygame.K_e:
            session.edit(x, y, NodeType.END)
        else:
            session.edit(x, y, NodeType.BARRIER)
    elif button == 3:
        session.edit(x, y, NodeType.UNEVALUATED)


def handle_events(session: Session, renderer: Renderer, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events for the grid editor."""

    step = int(state.get("delay_step_ms", DEFAULT_DELAY_STEP_MS))

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN:
            _edit_at(session, renderer, ev.pos, ev.button, state)

        elif ev.type == pygame.MOUSEMOTION:
            # Dragging paints like repeated clicks
            if ev.buttons[0]:
                _edit_at(session, renderer, ev.pos, 1, state)
            elif len(ev.buttons) > 2 and ev.buttons[2]:
                _edit_at(session, renderer, ev.pos, 3, state)

        elif ev.type == pygame.KEYUP:
            if state.get("pressing_key") == ev.key:
                state["pressing_key"] = None

        elif ev.type == pygame.KEYDOWN:
            state["pressing_key"] = ev.key
            if ev.key == pygame.K_SPACE:
                status = session.toggle()
                logger.info("Status: %s", status.label)
            elif ev.key == pygame.K_r:
                session.reset()
            elif ev.key == pygame.K_c:
                session.clear()
            elif ev.key == pygame.K_d:
                diagonal = session.toggle_diagonal()
                logger.info("Diagonal movement %s", "enabled" if diagonal else "disabled")
            elif ev.key == pygame.K_UP:
                session.adjust_delay(step)
            elif ev.key == pygame.K_DOWN:
                session.adjust_delay(-step)
            elif ev.key == pygame.K_h:
                renderer.show_panel = not renderer.show_panel
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events"]
