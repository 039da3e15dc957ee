from laberinto.grid import BOARD, GridTopology
from laberinto.mapgen.carve import generate_perfect_maze
from laberinto.mapgen.connectivity import is_connected, is_spanning_tree

SEEDS = ["aula1", "", "seed1", "seed2", "soñar", "6ºA lengua", "x" * 64]

def test_aula1_has_25_walls_and_35_passages():
    walls = generate_perfect_maze("aula1")
    assert len(walls) == 25
    assert len(BOARD.passages(walls)) == 35

def test_same_seed_same_walls():
    a = generate_perfect_maze("aula1")
    b = generate_perfect_maze("aula1")
    assert a == b
    assert [e.key() for e in sorted(a)] == [e.key() for e in sorted(b)]

def test_every_seed_gives_a_spanning_tree():
    for s in SEEDS:
        walls = generate_perfect_maze(s)
        assert walls <= BOARD.all_internal_edges()
        assert len(walls) == 60 - 35
        assert is_connected(walls)
        assert is_spanning_tree(walls)

def test_seeds_give_different_mazes():
    mazes = {generate_perfect_maze(s) for s in SEEDS}
    assert len(mazes) > 1

def test_degenerate_and_other_sizes():
    assert generate_perfect_maze("x", GridTopology(1, 1)) == frozenset()
    # A single row has only one spanning tree: no walls at all.
    assert generate_perfect_maze("x", GridTopology(1, 5)) == frozenset()
    topo = GridTopology(9, 4)
    walls = generate_perfect_maze("big", topo)
    assert len(topo.passages(walls)) == 9 * 4 - 1
    assert is_spanning_tree(walls, topo)
