# main.py
import argparse
import logging

from config import AppConfig, BOUNDARIES
from runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Fixed-length snake on a grid.")
    p.add_argument("--grid", type=int, default=None, help="cells per side (default 30)")
    p.add_argument("--cell", type=int, default=None, help="pixels per cell (default 30)")
    p.add_argument("--ups", type=int, default=None, help="update ticks per second (default 8)")
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--boundary", choices=BOUNDARIES, default=None,
                   help="what happens at the grid edge (default wrap)")
    p.add_argument("--log-level", default=None)
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {}
    if args.grid is not None:
        overrides.update(grid_w=args.grid, grid_h=args.grid)
    if args.cell is not None:
        overrides["render_cell"] = args.cell
    if args.ups is not None:
        overrides["ups"] = args.ups
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.boundary is not None:
        overrides["boundary"] = args.boundary
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    return cfg.with_(**overrides).validate()

def main(argv=None):
    cfg = build_config(parse_args(argv))
    logging.basicConfig(level=cfg.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    snake(cfg)

if __name__ == "__main__":
    main()
