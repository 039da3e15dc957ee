# src/laberinto/render/board_view.py
# Draws a BoardPlan onto any pygame surface. No display or font needed.
from __future__ import annotations

from typing import Iterable, Tuple

import pygame

from ..grid import BOARD, Cell, Edge, GridTopology
from .plan import wall_segment

FLOOR = (235, 235, 220)
GRID = (150, 150, 150)
WALL = (20, 20, 20)
TARGET = (255, 210, 40)
ORIGIN_MARK = (90, 160, 255)


def view_size(topo: GridTopology, cell: int, margin: int) -> Tuple[int, int]:
    return topo.cols * cell + 2 * margin, topo.rows * cell + 2 * margin


def draw_board(
    surface: pygame.Surface,
    walls: Iterable[Edge],
    targets: Iterable[Cell] = (),
    topo: GridTopology = BOARD,
    cell: int = 64,
    margin: int = 8,
    wall_width: int = 6,
) -> None:
    surface.fill(FLOOR)
    for r, c in targets:
        pygame.draw.rect(surface, TARGET, pygame.Rect(margin + c * cell, margin + r * cell, cell, cell))
    # start cell of the carve
    pygame.draw.rect(surface, ORIGIN_MARK, pygame.Rect(margin + 2, margin + 2, cell // 4, cell // 4))

    w, h = view_size(topo, cell, margin)
    for c in range(topo.cols + 1):
        x = margin + c * cell
        pygame.draw.line(surface, GRID, (x, margin), (x, h - margin), 1)
    for r in range(topo.rows + 1):
        y = margin + r * cell
        pygame.draw.line(surface, GRID, (margin, y), (w - margin, y), 1)

    for edge in walls:
        x1, y1, x2, y2 = wall_segment(edge, cell, margin)
        pygame.draw.line(surface, WALL, (x1, y1), (x2, y2), wall_width)
