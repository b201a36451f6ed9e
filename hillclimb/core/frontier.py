# hillclimb/core/frontier.py
#!/usr/bin/env python3
"""
Min-priority frontier for uniform-cost search.

Entries are (priority, seq, cell). The seq counter makes ties resolve FIFO,
so expansions are deterministic for a fixed grid. Re-pushing a cell with a
better priority leaves the old entry behind; callers drop stale pops by
comparing the popped priority with their own distance table.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import heapq

from hillclimb.core.types import Cell


@dataclass
class MinFrontier:
    heap: List[Tuple[int, int, Cell]] = field(default_factory=list)
    seq: int = 0  # monotonic counter for PQ stability

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def push(self, priority: int, cell: Cell) -> None:
        heapq.heappush(self.heap, (priority, self._bump(), cell))

    def pop(self) -> Tuple[int, Cell]:
        priority, _, cell = heapq.heappop(self.heap)
        return priority, cell

    def clear(self) -> None:
        self.heap.clear()
        self.seq = 0

    def __len__(self) -> int:
        return len(self.heap)

    def __bool__(self) -> bool:
        return bool(self.heap)
