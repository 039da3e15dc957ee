"""Passage-graph reachability and connectivity-preserving wall addition.

The augmenter re-runs a full traversal for every candidate edge. At 6x6
that is at most 35 traversals over 36 cells, so no incremental structure
(bridge finding, rollback union-find) is kept.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, Dict, FrozenSet, List, NamedTuple, Set

from ..grid import BOARD, Cell, Edge, GridTopology
from ..rng import shuffle_with, walls_rng
from .carve import ORIGIN

log = logging.getLogger(__name__)


class AugmentResult(NamedTuple):
    walls: FrozenSet[Edge]
    added: int


def _adjacency(passages: AbstractSet[Edge], topo: GridTopology) -> Dict[Cell, List[Cell]]:
    adj: Dict[Cell, List[Cell]] = {cell: [] for cell in topo.cells()}
    for e in passages:
        adj[e.a].append(e.b)
        adj[e.b].append(e.a)
    return adj

def reachable_cells(walls: AbstractSet[Edge], topo: GridTopology = BOARD) -> Set[Cell]:
    """Cells reachable from (0,0) through the passages left open by `walls`."""
    adj = _adjacency(topo.passages(walls), topo)
    seen: Set[Cell] = {ORIGIN}
    todo = [ORIGIN]
    while todo:
        cur = todo.pop()
        for nxt in adj[cur]:
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return seen

def is_connected(walls: AbstractSet[Edge], topo: GridTopology = BOARD) -> bool:
    return len(reachable_cells(walls, topo)) == topo.size

def is_spanning_tree(walls: AbstractSet[Edge], topo: GridTopology = BOARD) -> bool:
    # connected + exactly V-1 edges  =>  acyclic
    return len(topo.passages(walls)) == topo.size - 1 and is_connected(walls, topo)

def add_extra_walls(
    walls: AbstractSet[Edge],
    extra: int,
    seed: str,
    topo: GridTopology = BOARD,
) -> AugmentResult:
    """
    Close up to `extra` passages without disconnecting the board.

    Candidates are the current passages in a seeded shuffle (stream
    seed-state XOR WALLS_XOR). Each is tried once, in order; a candidate
    that would cut the board in two is skipped and never revisited.
    The input set is not modified.
    """
    if extra < 0:
        raise ValueError(f"extra must be >= 0, got {extra}")

    current = frozenset(walls)
    candidates = shuffle_with(sorted(topo.passages(current)), walls_rng(seed))

    added = 0
    for edge in candidates:
        if added >= extra:
            break
        trial = current | {edge}
        if is_connected(trial, topo):
            current = trial
            added += 1

    log.debug("added %d of %d requested extra walls (%d candidates)", added, extra, len(candidates))
    return AugmentResult(current, added)
