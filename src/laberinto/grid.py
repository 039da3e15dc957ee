from dataclasses import dataclass, field
from functools import lru_cache
from typing import AbstractSet, FrozenSet, List, Tuple

ROWS, COLS = 6, 6

Cell = Tuple[int, int]  # (row, col)


@dataclass(frozen=True, order=True)
class Edge:
    """Unordered pair of grid-adjacent cells, stored smaller cell first."""
    a: Cell
    b: Cell

    def __post_init__(self) -> None:
        if self.b < self.a:
            raise ValueError(f"Edge not canonical: {self.a} > {self.b}; use Edge.between()")
        (r1, c1), (r2, c2) = self.a, self.b
        if abs(r1 - r2) + abs(c1 - c2) != 1:
            raise ValueError(f"Cells {self.a} and {self.b} are not adjacent")

    @classmethod
    def between(cls, p: Cell, q: Cell) -> "Edge":
        return cls(p, q) if p <= q else cls(q, p)

    @property
    def is_vertical(self) -> bool:
        # Same row: the wall segment between them runs vertically.
        return self.a[0] == self.b[0]

    def key(self) -> str:
        return f"{self.a[0]},{self.a[1]}|{self.b[0]},{self.b[1]}"


@dataclass(frozen=True)
class GridTopology:
    rows: int = ROWS
    cols: int = COLS
    _edges: FrozenSet[Edge] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.rows}x{self.cols}")
        object.__setattr__(self, "_edges", _internal_edges(self.rows, self.cols))

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def require(self, cell: Cell) -> Cell:
        if not self.contains(cell):
            raise ValueError(f"Cell {cell} outside {self.rows}x{self.cols} grid")
        return cell

    def cells(self) -> List[Cell]:
        return [(r, c) for r in range(self.rows) for c in range(self.cols)]

    def neighbors(self, cell: Cell) -> List[Cell]:
        """In-bounds neighbours in fixed order: up, down, left, right."""
        r, c = self.require(cell)
        out: List[Cell] = []
        if r > 0:
            out.append((r - 1, c))
        if r < self.rows - 1:
            out.append((r + 1, c))
        if c > 0:
            out.append((r, c - 1))
        if c < self.cols - 1:
            out.append((r, c + 1))
        return out

    def all_internal_edges(self) -> FrozenSet[Edge]:
        return self._edges

    def edge_count(self) -> int:
        # 2RC - R - C
        return len(self._edges)

    def passages(self, walls: AbstractSet[Edge]) -> FrozenSet[Edge]:
        return self._edges - walls


@lru_cache(maxsize=16)
def _internal_edges(rows: int, cols: int) -> FrozenSet[Edge]:
    out = set()
    for r in range(rows):
        for c in range(cols - 1):
            out.add(Edge((r, c), (r, c + 1)))
    for r in range(rows - 1):
        for c in range(cols):
            out.add(Edge((r, c), (r + 1, c)))
    return frozenset(out)


BOARD = GridTopology(ROWS, COLS)
