# src/laberinto/ui/mission.py
from typing import Iterable, List, Mapping

from ..board import LabeledCell
from ..grid import Cell, Edge
from ..mapgen.generator import BoardPlan

def wall_instruction(edge: Edge) -> str:
    """
    Placement line for one wall. Cells in the same row are split by a
    vertical wall; cells in the same column by a horizontal one.
    """
    (r1, c1), (r2, c2) = edge.a, edge.b
    if edge.is_vertical:
        return f"VERTICAL wall between ({r1},{c1}) and ({r2},{c2})"
    return f"HORIZONTAL wall between ({r1},{c1}) and ({r2},{c2})"

def wall_instructions(walls: Iterable[Edge]) -> List[str]:
    # Sorted as text, the order of the printed wall sheet.
    return sorted(wall_instruction(e) for e in walls)

def mission_card(plan: BoardPlan, cells: Mapping[Cell, LabeledCell]) -> List[str]:
    lines = [
        f"Category: {plan.category} · Targets: {len(plan.targets)} · Seed: {plan.seed}"
    ]
    for r, c in plan.targets:
        info = cells.get((r, c))
        text = info.text if info and info.text else "(no text)"
        lines.append(f"Cell ({r},{c}): {text}")
    return lines
