# hillclimb/app/cli.py
#!/usr/bin/env python3
"""
Hill climbing: fewest steps to the best-signal location.

Prints
    Part 1: fewest steps from the start marker to the end marker
    Part 2: fewest steps from any lowest cell ('a' or the start) to the end

Options (argv wins over environment):
    --input=PATH       puzzle input     (env HILLCLIMB_INPUT, default input.txt)
    --log-level=LEVEL  logging level    (env HILLCLIMB_LOG_LEVEL, default INFO)
    --pgm=PATH         also write the elevation map as a P2 gray map
    --show-path        print the Part 1 path as (x, y, elevation) from end to start
    --view             open the pygame viewer afterwards
"""

import os
import sys
import logging
from pathlib import Path
from typing import List, Optional

from hillclimb.app.logging_config import configure_logging, resolve_level
from hillclimb.app.pgm import save_pgm
from hillclimb.core.dijkstra import (
    fewest_steps_from_lowest,
    fewest_steps_from_start,
    path_with_elevations,
)
from hillclimb.core.grid import GridParseError, HeightGrid, load_grid
from hillclimb.core.types import Reached, SearchOutcome

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "input.txt"


# ---------- config resolution ----------
def _arg_value(argv: List[str], key: str) -> Optional[str]:
    prefix = f"--{key}="
    value = None
    for arg in argv:
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def resolve_input_path(argv: List[str]) -> Path:
    path = os.getenv("HILLCLIMB_INPUT", DEFAULT_INPUT)
    return Path(_arg_value(argv, "input") or path)


def resolve_log_level(argv: List[str]) -> int:
    name = os.getenv("HILLCLIMB_LOG_LEVEL", "INFO")
    return resolve_level(_arg_value(argv, "log-level") or name)


# ---------- output ----------
def format_outcome(outcome: SearchOutcome) -> str:
    if isinstance(outcome, Reached):
        return str(outcome.steps)
    return "unreachable"


def print_path(grid: HeightGrid, outcome: Reached) -> None:
    print("[")
    for x, y, e in reversed(path_with_elevations(grid, outcome.path or [])):
        print(f"  ({x}, {y}, {e}),")
    print("]")


# ---------- main ----------
def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(resolve_log_level(argv))

    path = resolve_input_path(argv)
    try:
        grid = load_grid(path)
    except (OSError, GridParseError) as ex:
        logger.error("Failed to load %s: %s", path, ex)
        return 1
    logger.info("Loaded %dx%d grid from %s", grid.width, grid.height, path)

    pgm_path = _arg_value(argv, "pgm")
    if pgm_path:
        try:
            save_pgm(grid, Path(pgm_path))
        except OSError as ex:
            logger.error("Failed to write %s: %s", pgm_path, ex)
            return 1
        logger.info("Wrote elevation map to %s", pgm_path)

    show_path = "--show-path" in argv
    part1 = fewest_steps_from_start(grid, with_path=show_path)
    if show_path and isinstance(part1, Reached):
        print_path(grid, part1)
    print(f"Part 1: {format_outcome(part1)}")

    part2 = fewest_steps_from_lowest(grid)
    print(f"Part 2: {format_outcome(part2)}")

    if "--view" in argv:
        from hillclimb.app.viewer import Viewer
        Viewer(grid).run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
