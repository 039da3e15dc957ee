# src/laberinto/render/plan.py
# Schematic wall plan as a Pillow image (plain board, no photo underneath).

import os
from typing import Iterable, Mapping, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..board import LabeledCell
from ..grid import BOARD, Cell, Edge, GridTopology

BACKGROUND = (255, 255, 255, 255)
GRID_COLOR = (170, 170, 170, 255)
WALL_COLOR = (0, 0, 0, 255)
TARGET_COLOR = (255, 220, 0, 255)
TEXT_COLOR = (40, 40, 40, 255)

def wall_segment(edge: Edge, cell_px: int, margin: int = 0) -> Tuple[int, int, int, int]:
    """Pixel line (x1, y1, x2, y2) of the border shared by the edge's two cells."""
    (r1, c1), (r2, c2) = edge.a, edge.b
    if edge.is_vertical:
        x = margin + (min(c1, c2) + 1) * cell_px
        return (x, margin + r1 * cell_px, x, margin + (r1 + 1) * cell_px)
    y = margin + (min(r1, r2) + 1) * cell_px
    return (margin + c1 * cell_px, y, margin + (c1 + 1) * cell_px, y)

def render_plan(
    walls: Iterable[Edge],
    targets: Iterable[Cell] = (),
    cells: Optional[Mapping[Cell, LabeledCell]] = None,
    topo: GridTopology = BOARD,
    cell_px: int = 64,
    margin: int = 8,
    wall_width: int = 6,
    grid_width: int = 1,
) -> Image.Image:
    w = topo.cols * cell_px + 2 * margin
    h = topo.rows * cell_px + 2 * margin
    img = Image.new("RGBA", (w, h), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for r, c in targets:
        x0, y0 = margin + c * cell_px, margin + r * cell_px
        draw.rectangle((x0, y0, x0 + cell_px, y0 + cell_px), fill=TARGET_COLOR)

    for c in range(topo.cols + 1):
        x = margin + c * cell_px
        draw.line((x, margin, x, h - margin), fill=GRID_COLOR, width=grid_width)
    for r in range(topo.rows + 1):
        y = margin + r * cell_px
        draw.line((margin, y, w - margin, y), fill=GRID_COLOR, width=grid_width)

    if cells:
        font = ImageFont.load_default()
        for (r, c), info in cells.items():
            cx = margin + c * cell_px + cell_px / 2
            cy = margin + r * cell_px + cell_px / 2
            tw = draw.textlength(info.text, font=font)
            draw.text((cx - tw / 2, cy - 4), info.text, fill=TEXT_COLOR, font=font)

    for edge in walls:
        draw.line(wall_segment(edge, cell_px, margin), fill=WALL_COLOR, width=wall_width)
    return img

def save_plan(img: Image.Image, out_png: str) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
