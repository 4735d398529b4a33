from __future__ import annotations

import curses
import logging
from typing import Protocol

from dominion.catalog import define_game
from dominion.controls import InputEvent, dispatch
from dominion.engine import GameEngine
from dominion.snapshot import GameSnapshot
from dominion.tui import CursesAdapter

logger = logging.getLogger(__name__)


class PresentationAdapter(Protocol):
    def render_snapshot(self, snapshot: GameSnapshot) -> None: ...

    def poll_input_event(self, timeout: float) -> InputEvent | None: ...


def run_loop(engine: GameEngine, adapter: PresentationAdapter) -> None:
    """Foreground loop: draw, wait for at most one event, issue one command.

    The snapshot is copied out under the engine lock and drawn after it is
    released. The engine is always stopped (with a final save) on exit.
    """
    engine.start()
    try:
        while engine.is_running():
            adapter.render_snapshot(engine.snapshot())
            event = adapter.poll_input_event(engine.config.poll_interval)
            if event is None:
                continue
            if not dispatch(engine, event):
                break
    finally:
        engine.stop(final_save=True)


def main() -> None:
    logging.basicConfig(
        filename="dominion.log",
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    engine = GameEngine(define_game())
    if engine.load():
        logger.info("Resumed saved game from %s", engine.config.save_path)

    def _session(stdscr: curses.window) -> None:
        run_loop(engine, CursesAdapter(stdscr))

    try:
        curses.wrapper(_session)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
