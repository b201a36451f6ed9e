# tests/test_viewer.py
"""
Headless smoke test for the pygame viewer.

Uses SDL's dummy video driver so no window is opened.
"""

from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from hillclimb.core.grid import HeightGrid  # noqa: E402


@pytest.fixture
def viewer(monkeypatch: pytest.MonkeyPatch, example_grid: HeightGrid):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from hillclimb.app.viewer import Viewer

    v = Viewer(example_grid)
    yield v
    pygame.quit()


def _step_until_finished(v, limit: int = 10_000) -> None:
    for _ in range(limit):
        v._do_step()
        if v.state in ("Done", "No path"):
            return
    raise AssertionError("search did not finish")


def test_elevation_to_gray_spans_full_range() -> None:
    from hillclimb.app.viewer import elevation_to_gray

    assert elevation_to_gray(0) == (0, 0, 0)
    assert elevation_to_gray(25) == (255, 255, 255)


def test_viewer_animates_start_search(viewer) -> None:
    assert viewer.mode == "start"
    assert viewer.open_set == {viewer.grid.start}
    _step_until_finished(viewer)
    assert viewer.state == "Done"
    assert len(viewer.path) == 32
    assert viewer._last_metrics["total_cost"] == 31
    viewer._draw()


def test_viewer_switches_to_lowest_mode(viewer) -> None:
    viewer._switch_mode("lowest")
    assert viewer.btn_mode_lowest.active
    assert len(viewer.open_set) == 6
    _step_until_finished(viewer)
    assert viewer._last_metrics["total_cost"] == 29
    assert len(viewer.path) == 30


def test_reset_clears_overlays(viewer) -> None:
    viewer._do_step()
    viewer._do_step()
    viewer._reset()
    assert viewer.state == "Idle"
    assert viewer.path == []
    assert viewer.closed_set == set()
    assert viewer.algo.popped_count == 0


def test_quit_key_stops_loop(viewer) -> None:
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    viewer._handle_events()
    assert not viewer.alive
