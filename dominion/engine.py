from __future__ import annotations

import logging
import math
import threading
import time
from pathlib import Path
from typing import Callable

from dominion import economy, progression
from dominion.building import BuildingKey
from dominion.definition import GameDefinition
from dominion.persistence import load_game, save_game
from dominion.snapshot import GameSnapshot, take_snapshot
from dominion.state import Direction, GameState, Menu

logger = logging.getLogger(__name__)


class GameEngine:
    """Sole owner of the game state.

    Every command takes the lock for the duration of one short mutation, so
    commands issued from the production ticker, the autosaver and the
    foreground loop never interleave within a single call.
    """

    def __init__(
        self,
        definition: GameDefinition,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        errors = definition.validate()
        if errors:
            raise ValueError(
                "Invalid GameDefinition:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.definition = definition
        self.config = definition.config
        self._state = GameState(definition)
        self._lock = threading.Lock()
        self._clock = clock
        self._running = False
        self._wakeup = threading.Event()
        self._workers: list[threading.Thread] = []

    # ── Commands ─────────────────────────────────────────────────────

    def click(self) -> int:
        """Manual action. Returns the amount earned."""
        with self._lock:
            amount = economy.click_yield(self._state)
            self._state.earn(amount)
            progression.apply_click_power_progression(self._state)
            return amount

    def apply_production_tick(self, elapsed: float) -> int:
        """Accrue *elapsed* seconds of passive production.

        Fractions of a point are carried in the production remainder until
        they add up to whole points. Returns the whole points added.
        """
        if not (math.isfinite(elapsed) and elapsed > 0):
            return 0
        with self._lock:
            state = self._state
            state.production_remainder += economy.production_per_second(state) * elapsed
            whole = math.floor(state.production_remainder)
            if whole < 1:
                return 0
            state.production_remainder -= whole
            state.earn(whole)
            progression.apply_click_power_progression(state)
            return whole

    def buy_building(self, key: BuildingKey) -> bool:
        with self._lock:
            return economy.buy_building(self._state, key)

    def buy_upgrade(self, index: int) -> bool:
        with self._lock:
            return economy.buy_upgrade(self._state, index)

    def navigate(self, direction: Direction) -> None:
        with self._lock:
            state = self._state
            if state.item_count() == 0:
                return
            state.selected_index += int(direction)
            state.clamp_selection()

    def select_menu(self, menu: Menu) -> None:
        with self._lock:
            self._state.current_menu = menu
            self._state.selected_index = 0

    def activate_selection(self) -> bool:
        """Buy whatever the cursor points at in the active menu."""
        with self._lock:
            state = self._state
            index = state.selected_index
            if state.current_menu is Menu.BUILDINGS:
                ordered = economy.buildings_by_cost(state)
                if index < len(ordered):
                    return economy.buy_building(state, ordered[index].key)
                return False
            if state.current_menu is Menu.UPGRADES:
                return economy.buy_upgrade(state, index)
            return False

    def save(self, path: str | Path | None = None) -> bool:
        """Best-effort save. A failure is logged and reported as False."""
        path = path or self.config.save_path
        with self._lock:
            try:
                save_game(self._state, path)
            except OSError:
                logger.warning("Save to %s failed", path, exc_info=True)
                return False
        return True

    def load(self, path: str | Path | None = None) -> bool:
        """Best-effort load. Returns False if nothing was loaded."""
        path = path or self.config.save_path
        with self._lock:
            try:
                return load_game(self._state, path)
            except OSError:
                logger.warning("Load from %s failed", path, exc_info=True)
                return False

    # ── Queries ──────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return take_snapshot(self._state)

    def is_running(self) -> bool:
        with self._lock:
            return self._running

    # ── Background activities ────────────────────────────────────────

    def start(self) -> None:
        """Start the production ticker and the autosaver."""
        with self._lock:
            if self._running:
                return
            self._running = True
        self._wakeup.clear()
        self._workers = [
            threading.Thread(
                target=self._production_loop, name="production-ticker", daemon=True
            ),
            threading.Thread(target=self._autosave_loop, name="autosaver", daemon=True),
        ]
        for worker in self._workers:
            worker.start()
        logger.info("Engine started")

    def stop(self, final_save: bool = True) -> None:
        """Signal the workers to finish, wait for them, then save once."""
        with self._lock:
            self._running = False
        self._wakeup.set()
        for worker in self._workers:
            worker.join()
        self._workers = []
        if final_save:
            self.save()
        logger.info("Engine stopped")

    def _production_loop(self) -> None:
        interval = self.config.tick_interval
        last = self._clock()
        while self.is_running():
            self._wakeup.wait(interval)
            now = self._clock()
            elapsed = now - last
            last = now
            self.apply_production_tick(elapsed)

    def _autosave_loop(self) -> None:
        interval = self.config.autosave_interval
        while self.is_running():
            self._wakeup.wait(interval)
            if self.is_running():
                self.save()
