# hillclimb/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Union

Cell = Tuple[int, int]  # (col, row)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Reached:
    steps: int
    path: Optional[List[Cell]] = None   # source .. target, only when requested
    expanded: int = 0


@dataclass(frozen=True)
class Unreachable:
    expanded: int = 0


SearchOutcome = Union[Reached, Unreachable]
