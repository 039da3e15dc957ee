import pytest

from laberinto.grid import BOARD, Edge, GridTopology
from laberinto.mapgen.carve import generate_perfect_maze
from laberinto.mapgen.connectivity import (
    add_extra_walls, is_connected, is_spanning_tree, reachable_cells,
)

def test_reachability_open_and_cut():
    assert len(reachable_cells(frozenset())) == 36
    # wall off the corner (0,0)
    cut = {Edge((0, 0), (0, 1)), Edge((0, 0), (1, 0))}
    assert reachable_cells(cut) == {(0, 0)}
    assert not is_connected(cut)

def test_perfect_maze_has_no_removable_passage():
    # every passage of a spanning tree is a cut edge
    walls = generate_perfect_maze("aula1")
    res = add_extra_walls(walls, 10, "aula1")
    assert res.added == 0
    assert res.walls == walls
    assert is_connected(res.walls)

def test_augment_open_board_until_tree():
    res = add_extra_walls(frozenset(), 100, "aula1")
    assert res.added == 60 - 35
    assert is_spanning_tree(res.walls)

def test_augment_partial_request():
    res = add_extra_walls(frozenset(), 10, "aula1")
    assert res.added == 10
    assert len(res.walls) == 10
    assert is_connected(res.walls)

def test_augment_keeps_existing_walls_and_input():
    base = {Edge((2, 2), (2, 3)), Edge((4, 0), (5, 0))}
    snapshot = set(base)
    for extra in (0, 1, 5, 20, 60):
        res = add_extra_walls(base, extra, "seed1")
        assert res.walls >= base
        assert res.added <= extra
        assert len(res.walls) == len(base) + res.added
        assert is_connected(res.walls)
    assert base == snapshot

def test_augment_deterministic():
    a = add_extra_walls(frozenset(), 12, "aula1")
    b = add_extra_walls(frozenset(), 12, "aula1")
    assert a == b

def test_augment_zero_is_identity():
    walls = generate_perfect_maze("seed2")
    assert add_extra_walls(walls, 0, "seed2") == (walls, 0)

def test_augment_other_grid():
    topo = GridTopology(3, 3)
    res = add_extra_walls(frozenset(), 50, "s", topo)
    assert res.added == topo.edge_count() - (topo.size - 1)
    assert is_spanning_tree(res.walls, topo)

def test_negative_extra_rejected():
    with pytest.raises(ValueError):
        add_extra_walls(frozenset(), -1, "aula1")
