#!/usr/bin/env python3
# Minimal interactive viewer for generated board plans.
# - New seed suffix: N
# - Extra walls +/-: UP/DOWN (or +/-)
# - Cycle target category: T
# - 60 Hz fixed loop

import argparse, logging
from dataclasses import replace

import pygame

from laberinto.board import categories, default_board, first_category
from laberinto.config import DEFAULTS, clamp_extra_walls
from laberinto.grid import BOARD
from laberinto.mapgen.generator import generate_plan
from laberinto.render.board_view import draw_board, view_size

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, default=DEFAULTS.seed, help="Base seed")
    ap.add_argument("--extra", type=int, default=0, help="Extra walls")
    ap.add_argument("--cell", type=int, default=64, help="Cell size in pixels")
    ap.add_argument("--count", type=int, default=DEFAULTS.target_count, help="Number of targets")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO)

    cells = default_board()
    cats = categories(cells)
    start = DEFAULTS.target_category or first_category(cells)
    cat_idx = cats.index(start) if start in cats else 0
    run = 0
    extra = clamp_extra_walls(args.extra)

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode(view_size(BOARD, args.cell, 8))

    def load_plan():
        seed = args.seed if run == 0 else f"{args.seed}-{run}"
        cfg = replace(DEFAULTS, seed=seed, extra_walls=extra, target_count=args.count)
        return generate_plan(cells, cfg, category=cats[cat_idx])

    plan = load_plan()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_n:
                    run += 1
                    plan = load_plan()
                elif ev.key in (pygame.K_UP, pygame.K_PLUS, pygame.K_EQUALS):
                    extra = clamp_extra_walls(extra + 1)
                    plan = load_plan()
                elif ev.key in (pygame.K_DOWN, pygame.K_MINUS):
                    extra = clamp_extra_walls(extra - 1)
                    plan = load_plan()
                elif ev.key == pygame.K_t:
                    cat_idx = (cat_idx + 1) % len(cats)
                    plan = load_plan()

        draw_board(screen, plan.walls, plan.targets, cell=args.cell)
        pygame.display.set_caption(
            f"Laberinto Viewer — seed {plan.seed}  extra {plan.added}/{extra}  [{plan.category}]"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
