import types

import pygame

from astar_grid.core.node import NodeType
from astar_grid.gui import input as gui_input
from astar_grid.gui.renderer import Renderer
from astar_grid.gui.session import Session, Status


def _setup(monkeypatch, events):
    session = Session(5, 5, update_delay_ms=0)
    renderer = Renderer(types.SimpleNamespace(size=(200, 200)), cell_size=40)
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    return session, renderer


def test_left_click_places_barrier(monkeypatch):
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(45, 5))]
    session, renderer = _setup(monkeypatch, events)
    gui_input.handle_events(session, renderer, {})
    assert session.pathfinder.grid[1][0].node_type is NodeType.BARRIER


def test_held_keys_place_start_and_end(monkeypatch):
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_s),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_e),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(165, 165)),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_e),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(85, 85)),
    ]
    session, renderer = _setup(monkeypatch, events)
    state = {}
    gui_input.handle_events(session, renderer, state)

    pf = session.pathfinder
    assert pf.start_node is pf.grid[0][0]
    assert pf.end_node is pf.grid[4][4]
    assert pf.grid[2][2].node_type is NodeType.BARRIER
    assert state["pressing_key"] is None


def test_right_click_and_drag(monkeypatch):
    events = [
        pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 45), rel=(0, 0), buttons=(1, 0, 0)),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 85), rel=(0, 40), buttons=(1, 0, 0)),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 125), rel=(0, 40), buttons=(0, 0, 0)),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(5, 45)),
    ]
    session, renderer = _setup(monkeypatch, events)
    gui_input.handle_events(session, renderer, {})

    grid = session.pathfinder.grid
    assert grid[0][1].node_type is NodeType.UNEVALUATED
    assert grid[0][2].node_type is NodeType.BARRIER
    assert grid[0][3].node_type is NodeType.UNEVALUATED


def test_click_outside_grid_is_ignored(monkeypatch):
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(400, 400))]
    session, renderer = _setup(monkeypatch, events)
    gui_input.handle_events(session, renderer, {})
    assert all(n.node_type is NodeType.UNEVALUATED for n in session.pathfinder.nodes())


def test_hotkeys(monkeypatch):
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h),
    ]
    session, renderer = _setup(monkeypatch, events)
    calls = {}
    monkeypatch.setattr(session, "reset", lambda: calls.setdefault("reset", True))
    gui_input.handle_events(session, renderer, {"delay_step_ms": 25})

    assert session.diagonal is False
    assert session.update_delay_ms == 25
    assert renderer.show_panel is False
    assert calls == {}


def test_space_starts_search_and_r_resets(monkeypatch):
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)]
    session, renderer = _setup(monkeypatch, events)
    session.edit(0, 0, NodeType.START)
    session.edit(4, 4, NodeType.END)

    gui_input.handle_events(session, renderer, {})
    assert session.wait(timeout=5.0)
    assert session.status is Status.COMPLETED

    events[:] = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c),
    ]
    calls = []
    monkeypatch.setattr(session, "clear", lambda: calls.append("clear"))
    gui_input.handle_events(session, renderer, {})
    assert session.status is Status.EDITING
    assert session.pathfinder.start_node.coords == (0, 0)
    assert calls == ["clear"]


def test_quit_and_escape_stop_loop(monkeypatch):
    for event in (
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ):
        session, renderer = _setup(monkeypatch, [event])
        state = {"running": True}
        gui_input.handle_events(session, renderer, state)
        assert state["running"] is False
