# hillclimb/core/dijkstra.py
#!/usr/bin/env python3
"""
Dijkstra (uniform-cost) search over a HeightGrid, one expansion per step().

Implements the Algorithm API expected by the viewer:
- init(grid, sources, target) - reset() - step() -> StepResult

Every source is seeded at distance 0, so the multi-source query is a single
combined search rather than one search per candidate. Moves cost 1; the
frontier still always expands the closest unexpanded cell, so the search
stays correct if step costs ever stop being uniform.

Run-to-completion helpers wrap the same object:
- single_source_shortest_steps / multi_source_shortest_steps -> Reached | Unreachable
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
from math import inf
import logging

from hillclimb.core.frontier import MinFrontier
from hillclimb.core.grid import DEFAULT_MAX_CLIMB, MIN_ELEVATION, HeightGrid
from hillclimb.core.types import Cell, Reached, SearchOutcome, StepResult, Unreachable

logger = logging.getLogger(__name__)


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"
    max_climb: int = DEFAULT_MAX_CLIMB

    # Internal state
    grid: Optional[HeightGrid] = None
    sources: List[Cell] = field(default_factory=list)
    goal_cell: Optional[Cell] = None
    frontier: MinFrontier = field(default_factory=MinFrontier)
    open_set: set = field(default_factory=set)         # for overlay
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: HeightGrid, sources: Optional[Iterable[Cell]] = None,
             target: Optional[Cell] = None) -> None:
        """Bind to a grid. Defaults: start marker -> end marker."""
        self.grid = grid
        self.sources = list(sources) if sources is not None else [grid.start]
        self.goal_cell = target if target is not None else grid.end
        for c in self.sources + [self.goal_cell]:
            if not grid.in_bounds(c):
                raise ValueError(f"cell {c} outside {grid.width}x{grid.height} grid")
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with every source."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False

        for s in self.sources:
            if s in self.g:
                continue
            self.g[s] = 0
            self.frontier.push(0, s)
            self.open_set.add(s)

    # -------------------- helpers --------------------

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        path: List[Cell] = [end]
        cur = end
        while cur in self.parent:
            cur = self.parent[cur]
            path.append(cur)
        path.reverse()
        return path

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.goal_cell) if self.done else None,
        }

    # -------------------- one expansion --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.goal_cell)
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        g_u, u = self.frontier.pop()
        if g_u != self.g.get(u, inf):
            # stale entry, a shorter route was recorded after this push
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.goal_cell:
            self.done = True
            path = self._reconstruct_path(u)
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        for v in self.grid.neighbors(u, self.max_climb):
            alt = self.g[u] + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                self.frontier.push(alt, v)
                if v not in self.closed_set and v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    # -------------------- run to completion --------------------

    def finished(self) -> bool:
        return self.done or self.no_path

    def run(self) -> None:
        while not self.finished():
            self.step()

    def outcome(self, with_path: bool = False) -> SearchOutcome:
        if self.done:
            path = self._reconstruct_path(self.goal_cell) if with_path else None
            return Reached(steps=self.g[self.goal_cell], path=path, expanded=self.popped_count)
        if self.no_path:
            return Unreachable(expanded=self.popped_count)
        raise RuntimeError("search has not finished")


def shortest_steps(
    grid: HeightGrid,
    sources: Iterable[Cell],
    target: Cell,
    *,
    with_path: bool = False,
    max_climb: int = DEFAULT_MAX_CLIMB,
) -> SearchOutcome:
    """Fewest moves from any of `sources` to `target`."""
    algo = DijkstraAlgo(max_climb=max_climb)
    algo.init(grid, list(sources), target)
    algo.run()
    result = algo.outcome(with_path=with_path)
    logger.debug(
        "search %d source(s) -> %s: %s after %d expansions",
        len(algo.sources), target,
        result.steps if isinstance(result, Reached) else "unreachable",
        result.expanded,
    )
    return result


def single_source_shortest_steps(grid: HeightGrid, source: Cell, target: Cell, *,
                                 with_path: bool = False,
                                 max_climb: int = DEFAULT_MAX_CLIMB) -> SearchOutcome:
    return shortest_steps(grid, [source], target, with_path=with_path, max_climb=max_climb)


def multi_source_shortest_steps(grid: HeightGrid, sources: Iterable[Cell], target: Cell, *,
                                with_path: bool = False,
                                max_climb: int = DEFAULT_MAX_CLIMB) -> SearchOutcome:
    return shortest_steps(grid, sources, target, with_path=with_path, max_climb=max_climb)


def fewest_steps_from_start(grid: HeightGrid, *, with_path: bool = False) -> SearchOutcome:
    return single_source_shortest_steps(grid, grid.start, grid.end, with_path=with_path)


def fewest_steps_from_lowest(grid: HeightGrid, *, with_path: bool = False) -> SearchOutcome:
    lowest = grid.cells_at_elevation(MIN_ELEVATION)
    return multi_source_shortest_steps(grid, lowest, grid.end, with_path=with_path)


def path_with_elevations(grid: HeightGrid, path: List[Cell]) -> List[Tuple[int, int, int]]:
    return [(x, y, grid.elevation((x, y))) for (x, y) in path]
