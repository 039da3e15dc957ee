# src/laberinto/mapgen/targets.py
import logging
from typing import List, Mapping

from ..board import LabeledCell
from ..grid import Cell
from ..rng import TARGETS_STREAM, derive_seed, seeded_shuffle

log = logging.getLogger(__name__)


def select_targets(
    labeled_cells: Mapping[Cell, LabeledCell],
    category: str,
    count: int,
    seed: str,
) -> List[Cell]:
    """
    Pick up to `count` cells whose category matches (case-insensitive).
    The pool is taken in mapping order; when it holds more than `count`
    cells it is shuffled on the seed's "targets" stream and truncated.

    `seed` is the base seed ("aula1"), not a derived one: the "|targets"
    suffix is appended here, so passing "aula1|targets" shuffles on
    "aula1|targets|targets".
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    wanted = category.strip().lower()
    pool = [cell for cell, info in labeled_cells.items() if info.category == wanted]
    log.debug("target pool for %r: %d cells, want %d", wanted, len(pool), count)
    if len(pool) <= count:
        return pool
    return seeded_shuffle(pool, derive_seed(seed, TARGETS_STREAM))[:count]
