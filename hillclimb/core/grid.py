# hillclimb/core/grid.py
#!/usr/bin/env python3
"""
HeightGrid: immutable elevation map parsed from a block of letters.

- 'a'..'z' -> elevation 0..25
- start marker ('S') sits at elevation 0, end marker ('E') at 25
- cells are stored row-major in a flat tuple, indexed by y * width + x

Adjacency follows the climbing rule: a 4-connected neighbour is reachable
when its elevation is at most `max_climb` above the current cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from hillclimb.core.types import Cell

MIN_ELEVATION = 0
MAX_ELEVATION = 25
DEFAULT_MAX_CLIMB = 1

START_MARKER = "S"
END_MARKER = "E"


class GridParseError(ValueError):
    """Raised when text cannot be turned into a rectangular elevation grid."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        where = ""
        if line is not None:
            where = f" (line {line}" + (f", column {column})" if column is not None else ")")
        super().__init__(message + where)


def _elevation_of(ch: str) -> Optional[int]:
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    return None


@dataclass(frozen=True)
class HeightGrid:
    width: int
    height: int
    cells: Tuple[int, ...]        # row-major, len == width * height
    start: Cell
    end: Cell

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid must be at least 1x1")
        if len(self.cells) != self.width * self.height:
            raise ValueError("cells size mismatch")
        if not self.in_bounds(self.start):
            raise ValueError(f"start {self.start} out of bounds")
        if not self.in_bounds(self.end):
            raise ValueError(f"end {self.end} out of bounds")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(
        cls,
        text: str,
        start_marker: str = START_MARKER,
        end_marker: str = END_MARKER,
    ) -> "HeightGrid":
        """
        Parse a rectangular block of characters.

        Every row must have the same length as the first one; a short or
        long row (including an empty line inside the block) is an error.
        Trailing blank lines are ignored.
        """
        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise GridParseError("empty grid")

        width = len(lines[0])
        cells: List[int] = []
        start: Optional[Cell] = None
        end: Optional[Cell] = None

        for y, line in enumerate(lines):
            if len(line) != width:
                raise GridParseError(
                    f"ragged row: expected {width} cells, got {len(line)}", line=y + 1
                )
            for x, ch in enumerate(line):
                if ch == start_marker:
                    if start is not None:
                        raise GridParseError("duplicate start marker", line=y + 1, column=x + 1)
                    start = (x, y)
                    cells.append(MIN_ELEVATION)
                elif ch == end_marker:
                    if end is not None:
                        raise GridParseError("duplicate end marker", line=y + 1, column=x + 1)
                    end = (x, y)
                    cells.append(MAX_ELEVATION)
                else:
                    v = _elevation_of(ch)
                    if v is None:
                        raise GridParseError(f"unexpected character {ch!r}", line=y + 1, column=x + 1)
                    cells.append(v)

        if start is None:
            raise GridParseError("missing start marker")
        if end is None:
            raise GridParseError("missing end marker")

        return cls(width, len(lines), tuple(cells), start, end)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def elevation(self, c: Cell) -> int:
        if not self.in_bounds(c):
            raise IndexError(f"cell {c} outside {self.width}x{self.height} grid")
        x, y = c
        return self.cells[y * self.width + x]

    def neighbors(self, c: Cell, max_climb: int = DEFAULT_MAX_CLIMB) -> List[Cell]:
        """In-bounds 4-neighbours of `c` that are at most `max_climb` higher."""
        limit = self.elevation(c) + max_climb
        x, y = c
        out: List[Cell] = []
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if self.in_bounds(n) and self.cells[n[1] * self.width + n[0]] <= limit:
                out.append(n)
        return out

    def cells_at_elevation(self, value: int) -> List[Cell]:
        return [c for c in self.coords() if self.cells[c[1] * self.width + c[0]] == value]

    def coords(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def rows(self) -> List[List[int]]:
        w = self.width
        return [list(self.cells[y * w:(y + 1) * w]) for y in range(self.height)]


def load_grid(path: Path) -> HeightGrid:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as ex:
        raise GridParseError(f"{path.name}: not valid UTF-8 at byte {ex.start}") from ex
    try:
        return HeightGrid.from_text(text)
    except GridParseError as ex:
        err = GridParseError(f"{path.name}: {ex}")
        err.line, err.column = ex.line, ex.column
        raise err from ex
