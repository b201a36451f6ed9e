# tests/test_frontier.py

from __future__ import annotations

from hillclimb.core.frontier import MinFrontier


def test_pops_smallest_priority_first() -> None:
    f = MinFrontier()
    f.push(3, (3, 0))
    f.push(1, (1, 0))
    f.push(2, (2, 0))
    assert [f.pop() for _ in range(3)] == [(1, (1, 0)), (2, (2, 0)), (3, (3, 0))]
    assert not f


def test_ties_pop_in_insertion_order() -> None:
    f = MinFrontier()
    for cell in [(5, 5), (0, 0), (2, 9)]:
        f.push(4, cell)
    assert [f.pop()[1] for _ in range(3)] == [(5, 5), (0, 0), (2, 9)]


def test_clear_resets_contents_and_counter() -> None:
    f = MinFrontier()
    f.push(0, (0, 0))
    f.push(0, (1, 0))
    assert len(f) == 2
    f.clear()
    assert len(f) == 0
    assert f.seq == 0
