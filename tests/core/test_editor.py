import pytest

from lifegrid.core.editor import GridEditor
from lifegrid.core.simulation_engine import SimulationEngine


@pytest.fixture
def editor(engine):
    return GridEditor(engine)


def test_paint_and_erase(engine, editor):
    assert editor.paint(2, 3) is True
    assert engine.grid.is_alive(2, 3)
    assert editor.paint(2, 3) is False  # already alive

    assert editor.erase(2, 3) is True
    assert not engine.grid.is_alive(2, 3)
    assert editor.erase(2, 3) is False


def test_toggle(engine, editor):
    assert editor.toggle(0, 0) is True
    assert engine.grid.is_alive(0, 0)
    assert editor.toggle(0, 0) is True
    assert not engine.grid.is_alive(0, 0)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (8, 0), (0, 8), (100, 100)])
def test_edits_outside_grid_are_ignored(engine, editor, x, y):
    assert editor.paint(x, y) is False
    assert engine.grid.population() == 0


def test_edits_blocked_while_running():
    engine = SimulationEngine(width=5, height=5, tick_interval_seconds=30)
    editor = GridEditor(engine)
    engine.start()
    try:
        assert editor.can_edit is False
        assert editor.paint(1, 1) is False
        assert engine.grid.population() == 0
    finally:
        engine.stop()

    assert editor.can_edit is True
    assert editor.paint(1, 1) is True


def test_overlay_blocks_edits(engine, editor):
    editor.set_overlay_active(True)
    assert editor.overlay_active
    assert editor.paint(1, 1) is False

    editor.set_overlay_active(False)
    assert editor.paint(1, 1) is True


def test_edits_follow_grid_replacement(engine, editor):
    engine.step()
    assert editor.paint(4, 4) is True
    assert engine.grid.is_alive(4, 4)
