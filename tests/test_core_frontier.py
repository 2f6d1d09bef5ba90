import pytest

from astar_grid.core.frontier import OpenFrontier
from astar_grid.core.node import Node


def _node(x: int, y: int, g: int, h: int = 0) -> Node:
    node = Node(x, y)
    node.set_g_cost(g)
    node.set_h_cost(h)
    return node


def test_pop_lowest_f_cost_first():
    frontier = OpenFrontier()
    a, b, c = _node(0, 0, 30), _node(1, 0, 10, 5), _node(2, 0, 20)
    for n in (a, b, c):
        frontier.push(n)
    assert len(frontier) == 3
    assert [frontier.pop() for _ in range(3)] == [b, c, a]
    assert not frontier


def test_equal_f_cost_is_fifo():
    frontier = OpenFrontier()
    nodes = [_node(x, 0, 10, 20) for x in range(5)]
    for n in nodes:
        frontier.push(n)
    assert [frontier.pop() for _ in nodes] == nodes


def test_membership_by_coordinates():
    frontier = OpenFrontier()
    a = _node(0, 0, 1)
    frontier.push(a)
    assert a in frontier
    assert Node(0, 1) not in frontier
    assert "a" not in frontier
    frontier.pop()
    assert a not in frontier


def test_update_reorders_node():
    frontier = OpenFrontier()
    a, b = _node(0, 0, 30), _node(1, 0, 40)
    frontier.push(a)
    frontier.push(b)

    b.set_g_cost(20)
    frontier.update(b)

    assert len(frontier) == 2
    assert frontier.pop() is b
    assert frontier.pop() is a
    with pytest.raises(KeyError):
        frontier.pop()


def test_update_moves_node_behind_equal_keys():
    frontier = OpenFrontier()
    a, b = _node(0, 0, 40), _node(1, 0, 20)
    frontier.push(a)
    frontier.push(b)

    a.set_g_cost(20)
    frontier.update(a)

    assert frontier.pop() is b
    assert frontier.pop() is a


def test_push_twice_rejected():
    frontier = OpenFrontier()
    a = _node(0, 0, 1)
    frontier.push(a)
    with pytest.raises(ValueError):
        frontier.push(a)


def test_pop_empty():
    with pytest.raises(KeyError):
        OpenFrontier().pop()
