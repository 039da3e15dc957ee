# src/laberinto/board.py
# Words laid on the 6x6 board: the labeled-cell mapping the engine reads.

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .grid import BOARD, Cell, GridTopology
from .rng import ACTIVE_STREAM, derive_seed, seeded_shuffle


@dataclass(frozen=True)
class LabeledCell:
    text: str
    category: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", self.category.strip().lower())


LabeledBoard = Dict[Cell, LabeledCell]

# Demo board shipped with the classroom tool: (row, col, text, category)
DEFAULT_ROWS: Tuple[Tuple[int, int, str, str], ...] = (
    (0, 0, "árbol", "sustantivo"), (0, 1, "rápido", "adjetivo"), (0, 2, "correr", "verbo"),
    (0, 3, "mesa", "sustantivo"), (0, 4, "verde", "adjetivo"), (0, 5, "leer", "verbo"),
    (1, 0, "niño", "sustantivo"), (1, 1, "azul", "adjetivo"), (1, 2, "escribir", "verbo"),
    (1, 3, "perro", "sustantivo"), (1, 4, "lento", "adjetivo"), (1, 5, "brincar", "verbo"),
    (2, 0, "mar", "sustantivo"), (2, 1, "amable", "adjetivo"), (2, 2, "pintar", "verbo"),
    (2, 3, "flor", "sustantivo"), (2, 4, "gris", "adjetivo"), (2, 5, "cantar", "verbo"),
    (3, 0, "coche", "sustantivo"), (3, 1, "fuerte", "adjetivo"), (3, 2, "volar", "verbo"),
    (3, 3, "sol", "sustantivo"), (3, 4, "dulce", "adjetivo"), (3, 5, "soñar", "verbo"),
    (4, 0, "libro", "sustantivo"), (4, 1, "triste", "adjetivo"), (4, 2, "cortar", "verbo"),
    (4, 3, "pez", "sustantivo"), (4, 4, "feliz", "adjetivo"), (4, 5, "comer", "verbo"),
    (5, 0, "casa", "sustantivo"), (5, 1, "rápida", "adjetivo"), (5, 2, "correr", "verbo"),
    (5, 3, "mano", "sustantivo"), (5, 4, "claro", "adjetivo"), (5, 5, "beber", "verbo"),
)


def board_from_rows(
    rows: Iterable[Tuple[int, int, str, str]],
    topo: GridTopology = BOARD,
) -> LabeledBoard:
    """
    Build a labeled board from already-parsed rows. Later rows for the same
    cell replace earlier ones; out-of-grid coordinates raise ValueError.
    """
    out: LabeledBoard = {}
    for r, c, text, cat in rows:
        out[topo.require((r, c))] = LabeledCell(text, cat)
    return out

def default_board() -> LabeledBoard:
    return board_from_rows(DEFAULT_ROWS)

def categories(cells: Mapping[Cell, LabeledCell]) -> List[str]:
    return sorted({info.category for info in cells.values()})

def first_category(cells: Mapping[Cell, LabeledCell]) -> Optional[str]:
    """Category of the first labeled cell in row-major order, or None."""
    if not cells:
        return None
    return cells[min(cells)].category

def fill_board(
    words: Iterable[Tuple[str, str]],
    seed: str,
    topo: GridTopology = BOARD,
) -> LabeledBoard:
    """
    Lay (text, category) pairs on the board in a seeded order.

    Uses the seed's "active" stream, keeps at most rows*cols words and
    fills row-major from (0,0); with fewer words the trailing cells stay empty.
    """
    items = [LabeledCell(text, cat) for text, cat in words]
    picked = seeded_shuffle(items, derive_seed(seed, ACTIVE_STREAM))[: topo.size]
    return dict(zip(topo.cells(), picked))
