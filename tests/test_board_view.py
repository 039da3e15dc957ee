import pygame

from laberinto.grid import BOARD, Edge
from laberinto.render.board_view import FLOOR, TARGET, WALL, draw_board, view_size

def test_view_size():
    assert view_size(BOARD, 64, 8) == (400, 400)

def test_draw_board_offscreen():
    surf = pygame.Surface(view_size(BOARD, 64, 8))
    draw_board(surf, [Edge((0, 0), (0, 1))], targets=[(5, 5)])
    assert tuple(surf.get_at((72, 40)))[:3] == WALL
    assert tuple(surf.get_at((360, 360)))[:3] == TARGET
    assert tuple(surf.get_at((230, 150)))[:3] == FLOOR
