# hillclimb/app/pgm.py
#!/usr/bin/env python3
"""Portable Gray Map (ASCII P2) export of a HeightGrid."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from hillclimb.core.grid import MAX_ELEVATION, HeightGrid


def write_pgm(grid: HeightGrid, out: TextIO) -> None:
    out.write("P2\n")
    out.write(f"{grid.width} {grid.height}\n")
    out.write(f"{MAX_ELEVATION}\n")
    for row in grid.rows():
        out.write(" ".join(str(v) for v in row))
        out.write("\n")


def save_pgm(grid: HeightGrid, path: Path) -> None:
    with open(path, "w", encoding="ascii") as f:
        write_pgm(grid, f)
