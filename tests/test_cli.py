"""Tests for the foreground loop."""
import pytest

from dominion.catalog import define_game
from dominion.cli import run_loop
from dominion.controls import EventKind, InputEvent
from dominion.definition import GameConfig
from dominion.engine import GameEngine
from dominion.state import Menu


class _ScriptedAdapter:
    """Feeds a fixed list of events and records what was drawn."""

    def __init__(self, events):
        self.events = list(events)
        self.frames = []

    def render_snapshot(self, snapshot):
        self.frames.append(snapshot)

    def poll_input_event(self, timeout):
        if not self.events:
            return InputEvent(EventKind.QUIT)
        return self.events.pop(0)


def _make_engine(tmp_path) -> GameEngine:
    cfg = GameConfig(name="Test", save_path=tmp_path / "saves" / "game.save", poll_interval=0.0)
    return GameEngine(define_game(cfg))


def test_run_loop_issues_commands_and_saves(tmp_path):
    engine = _make_engine(tmp_path)
    adapter = _ScriptedAdapter(
        [
            None,
            InputEvent(EventKind.CLICK),
            InputEvent(EventKind.CLICK),
            InputEvent(EventKind.SELECT_MENU, menu=Menu.BUILDINGS),
            InputEvent(EventKind.QUIT),
            InputEvent(EventKind.CLICK),
        ]
    )
    run_loop(engine, adapter)

    assert not engine.is_running()
    assert len(adapter.frames) == 5
    assert adapter.frames[0].points == 0
    assert adapter.frames[-1].current_menu is Menu.BUILDINGS
    assert engine.snapshot().points == 2
    saved = engine.config.save_path.read_text()
    assert saved.startswith("points:2\nlifetime:2\n")


def test_run_loop_saves_on_error(tmp_path):
    engine = _make_engine(tmp_path)

    class _Broken(_ScriptedAdapter):
        def poll_input_event(self, timeout):
            engine.click()
            raise RuntimeError("terminal went away")

    with pytest.raises(RuntimeError):
        run_loop(engine, _Broken([]))
    assert not engine.is_running()
    assert "points:1\n" in engine.config.save_path.read_text()
