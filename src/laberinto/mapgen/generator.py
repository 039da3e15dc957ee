# src/laberinto/mapgen/generator.py
# One generation request: maze, then extra walls, then mission targets.

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Optional

from ..board import LabeledCell, first_category
from ..config import DEFAULTS, PlanConfig, clamp_extra_walls
from ..grid import Cell, Edge, GridTopology
from .carve import generate_perfect_maze
from .connectivity import add_extra_walls
from .targets import select_targets

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardPlan:
    seed: str
    walls: FrozenSet[Edge]
    added: int
    category: str
    targets: List[Cell]

    def sorted_walls(self) -> List[Edge]:
        return sorted(self.walls)


def generate_plan(
    cells: Mapping[Cell, LabeledCell],
    cfg: PlanConfig = DEFAULTS,
    category: Optional[str] = None,
) -> BoardPlan:
    topo = GridTopology(cfg.rows, cfg.cols)
    for cell in cells:
        topo.require(cell)

    walls = generate_perfect_maze(cfg.seed, topo)
    added = 0
    extra = clamp_extra_walls(cfg.extra_walls, cfg)
    if extra > 0:
        walls, added = add_extra_walls(walls, extra, cfg.seed, topo)

    cat = category or cfg.target_category or first_category(cells) or ""
    targets = select_targets(cells, cat, cfg.target_count, cfg.seed)
    log.debug("plan seed=%r walls=%d added=%d category=%r targets=%d",
             cfg.seed, len(walls), added, cat, len(targets))
    return BoardPlan(cfg.seed, walls, added, cat.strip().lower(), targets)
