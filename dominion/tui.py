"""Curses front end. Draws snapshots and reads one key at a time."""
from __future__ import annotations

import curses

from dominion.controls import InputEvent, decode_key
from dominion.snapshot import GameSnapshot
from dominion.state import Menu

_TITLE, _POINTS, _SELECTED, _DIM, _PURCHASED, _FOOTER, _HEADING = range(1, 8)


class CursesAdapter:
    """Presentation adapter over a curses window. Holds no game logic."""

    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr
        curses.raw()
        curses.noecho()
        self.stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(_TITLE, curses.COLOR_BLUE, -1)
            curses.init_pair(_POINTS, curses.COLOR_GREEN, -1)
            curses.init_pair(_SELECTED, curses.COLOR_YELLOW, -1)
            curses.init_pair(_DIM, curses.COLOR_WHITE, -1)
            curses.init_pair(_PURCHASED, curses.COLOR_GREEN, -1)
            curses.init_pair(_FOOTER, curses.COLOR_CYAN, -1)
            curses.init_pair(_HEADING, curses.COLOR_YELLOW, -1)

    def _attr(self, pair: int, extra: int = 0) -> int:
        if curses.has_colors():
            return curses.color_pair(pair) | extra
        return extra

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        height, width = self.stdscr.getmaxyx()
        if y < 0 or y >= height or x >= width:
            return
        try:
            self.stdscr.addnstr(y, x, text, width - x - 1, attr)
        except curses.error:
            pass

    def render_snapshot(self, snapshot: GameSnapshot) -> None:
        self.stdscr.erase()
        if snapshot.current_menu is Menu.BUILDINGS:
            self._draw_buildings(snapshot)
        elif snapshot.current_menu is Menu.UPGRADES:
            self._draw_upgrades(snapshot)
        else:
            self._draw_main(snapshot)
        self.stdscr.refresh()

    def poll_input_event(self, timeout: float) -> InputEvent | None:
        self.stdscr.timeout(int(timeout * 1000))
        key = self.stdscr.getch()
        if key == -1:
            return None
        return decode_key(key)

    # ── Screens ──────────────────────────────────────────────────────

    def _draw_main(self, s: GameSnapshot) -> None:
        height, _ = self.stdscr.getmaxyx()
        self._put(0, 0, s.title, self._attr(_TITLE, curses.A_BOLD))
        self._put(2, 0, f"Followers: {s.points}", self._attr(_POINTS))
        self._put(3, 0, f"Total Converts: {s.lifetime_points}")
        self._put(4, 0, f"Conversion Rate: {s.production_per_second:.1f} followers/sec")
        self._put(5, 0, f"Influence Power: {s.click_power} ({s.click_yield} per ritual)")
        if s.next_milestone is not None:
            self._put(
                6,
                0,
                f"Next Power ({s.next_milestone.value}) at "
                f"{s.next_milestone.lower_bound:,} total converts",
            )
        else:
            self._put(6, 0, "Next Power (Max) at Maximum total converts")
        self._put(7, 0, f"Domination Progress: {s.domination_tier}")

        self._put(9, 0, "Rituals:", self._attr(_HEADING))
        self._put(10, 0, "Press '.' to spread influence and gain followers")
        self._put(11, 0, "Press '1' for Sanctum, '2' for Minions, '3' for Artifacts")
        self._put(12, 0, "Press 's' to record in the Necronomicon")
        self._put(13, 0, "Press Ctrl+C to return to mortal realm")
        self._put(height - 1, 0, "The Sanctum", self._attr(_FOOTER))

    def _draw_buildings(self, s: GameSnapshot) -> None:
        height, _ = self.stdscr.getmaxyx()
        self._put(0, 0, "Minions of Cthulhu", self._attr(_TITLE, curses.A_BOLD))
        self._put(1, 0, f"Followers: {s.points}", self._attr(_POINTS))
        self._put(2, 0, f"Conversion Rate: {s.production_per_second:.1f} followers/sec")

        for i, b in enumerate(s.buildings):
            y = i + 4
            selected = i == s.selected_index
            if selected:
                attr = self._attr(_SELECTED, curses.A_BOLD)
            elif b.affordable:
                attr = curses.A_NORMAL
            else:
                attr = self._attr(_DIM, curses.A_DIM)
            self._put(y, 0, "> " if selected else "  ")
            self._put(y, 2, b.display_name, attr)
            self._put(y, 20, f"x{b.count}")
            self._put(y, 30, f"Souls Required: {b.current_cost}")
            self._put(y, 55, f"Converts: {b.effective_production:.1f}/sec")

        self._put(height - 2, 0, "Use Up/Down to select, Enter to summon")
        self._put(height - 1, 0, "Minions Menu", self._attr(_FOOTER))

    def _draw_upgrades(self, s: GameSnapshot) -> None:
        height, _ = self.stdscr.getmaxyx()
        self._put(0, 0, "Eldritch Artifacts", self._attr(_TITLE, curses.A_BOLD))
        self._put(1, 0, f"Followers: {s.points}", self._attr(_POINTS))

        for u in s.upgrades:
            y = u.index * 3 + 3
            selected = u.index == s.selected_index
            if u.purchased:
                attr = self._attr(_PURCHASED)
            elif selected:
                attr = self._attr(_SELECTED, curses.A_BOLD)
            elif u.affordable:
                attr = curses.A_NORMAL
            else:
                attr = self._attr(_DIM, curses.A_DIM)
            self._put(y, 0, "> " if selected else "  ")
            self._put(y, 2, u.display_name, attr)
            self._put(y, 40, f"Souls Required: {u.cost}")
            if u.purchased:
                self._put(y, 65, "[PURCHASED]")
            self._put(y + 1, 4, u.description)

        self._put(height - 2, 0, "Use Up/Down to select, Enter to acquire")
        self._put(height - 1, 0, "Artifacts Menu", self._attr(_FOOTER))
