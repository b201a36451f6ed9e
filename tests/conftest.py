# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path for `import hillclimb` without installing.
PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hillclimb.core.grid import HeightGrid  # noqa: E402

EXAMPLE = (
    "Sabqponm\n"
    "abcryxxl\n"
    "accszExk\n"
    "acctuvwj\n"
    "abdefghi\n"
)


@pytest.fixture
def example_text() -> str:
    return EXAMPLE


@pytest.fixture
def example_grid() -> HeightGrid:
    return HeightGrid.from_text(EXAMPLE)


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    p = tmp_path / "input.txt"
    p.write_text(EXAMPLE, encoding="utf-8")
    return p
