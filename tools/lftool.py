#!/usr/bin/env python3
import argparse, logging
from dataclasses import replace

from laberinto.board import DEFAULT_ROWS, categories, default_board, fill_board, first_category
from laberinto.config import DEFAULTS
from laberinto.mapgen.generator import generate_plan
from laberinto.render.plan import render_plan, save_plan
from laberinto.ui.mission import mission_card, wall_instructions

def load_cells(args):
    if args.fill:
        # Demo words re-laid on the board with the seed's own stream
        return fill_board([(t, cat) for _, _, t, cat in DEFAULT_ROWS], args.seed)
    return default_board()

def build(args):
    cells = load_cells(args)
    cfg = replace(DEFAULTS, seed=args.seed, extra_walls=args.extra, target_count=args.count)
    plan = generate_plan(cells, cfg, category=args.category or first_category(cells))
    return cells, plan

def cmd_emit(args):
    cells, plan = build(args)
    for line in mission_card(plan, cells):
        print(line)
    print(f"Extra walls: {plan.added} of {args.extra} requested")
    print()
    for line in wall_instructions(plan.walls):
        print(line)

def cmd_png(args):
    cells, plan = build(args)
    img = render_plan(plan.walls, plan.targets, cells if args.words else None, cell_px=args.cell)
    save_plan(img, args.out)
    print(f"Wrote {args.out}")

def cmd_categories(args):
    for cat in categories(load_cells(args)):
        print(cat)

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--seed', type=str, default=DEFAULTS.seed)
    p.add_argument('--extra', type=int, default=DEFAULTS.extra_walls, help='Extra walls (clamped to 0..60)')
    p.add_argument('--category', type=str, default=None, help='Target category (default: first on board)')
    p.add_argument('--count', type=int, default=DEFAULTS.target_count)
    p.add_argument('--fill', action='store_true', help='Shuffle the demo words onto the board')
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('png')
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--cell', type=int, default=64, help='Cell size in pixels')
    p2.add_argument('--words', action='store_true', help='Print the words inside the cells')
    p2.set_defaults(func=cmd_png)
    p3 = sub.add_parser('categories')
    p3.set_defaults(func=cmd_categories)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
