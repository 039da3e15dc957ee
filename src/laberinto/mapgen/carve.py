# src/laberinto/mapgen/carve.py
# Perfect maze by randomized iterative depth-first carving (recursive backtracker).

import logging
from typing import FrozenSet, List, Set

from ..grid import BOARD, Cell, Edge, GridTopology
from ..rng import Mulberry32, seed_to_state

log = logging.getLogger(__name__)

ORIGIN: Cell = (0, 0)


def carve_passages(rng: Mulberry32, topo: GridTopology = BOARD) -> Set[Edge]:
    """
    Walk from (0,0), always stepping to a random unvisited neighbour of the
    stack top and backtracking when there is none. Every step carves one
    edge toward a fresh cell, so the result is a spanning tree.
    """
    carved: Set[Edge] = set()
    visited: Set[Cell] = {ORIGIN}
    stack: List[Cell] = [ORIGIN]

    while stack:
        cur = stack[-1]
        unvisited = [n for n in topo.neighbors(cur) if n not in visited]
        if not unvisited:
            stack.pop()
            continue
        nxt = unvisited[rng.index(len(unvisited))]
        carved.add(Edge.between(cur, nxt))
        visited.add(nxt)
        stack.append(nxt)

    assert len(visited) == topo.size
    assert len(carved) == topo.size - 1
    return carved


def generate_perfect_maze(seed: str, topo: GridTopology = BOARD) -> FrozenSet[Edge]:
    """Return the walls (internal edges not carved) of the maze for `seed`."""
    carved = carve_passages(Mulberry32(seed_to_state(seed)), topo)
    walls = topo.all_internal_edges() - carved
    log.debug("carved %d passages, %d walls for seed %r", len(carved), len(walls), seed)
    return walls
