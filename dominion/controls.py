"""Key bindings and the mapping from input events to engine commands."""
from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from dominion.state import Direction, Menu

if TYPE_CHECKING:
    from dominion.engine import GameEngine

CTRL_C = 3


class EventKind(Enum):
    CLICK = auto()
    SAVE = auto()
    QUIT = auto()
    SELECT_MENU = auto()
    NAVIGATE = auto()
    ACTIVATE = auto()


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    menu: Menu | None = None
    direction: Direction | None = None


_KEYMAP: dict[int, InputEvent] = {
    ord("."): InputEvent(EventKind.CLICK),
    ord("s"): InputEvent(EventKind.SAVE),
    ord("q"): InputEvent(EventKind.QUIT),
    CTRL_C: InputEvent(EventKind.QUIT),
    ord("1"): InputEvent(EventKind.SELECT_MENU, menu=Menu.MAIN),
    ord("2"): InputEvent(EventKind.SELECT_MENU, menu=Menu.BUILDINGS),
    ord("3"): InputEvent(EventKind.SELECT_MENU, menu=Menu.UPGRADES),
    curses.KEY_UP: InputEvent(EventKind.NAVIGATE, direction=Direction.UP),
    curses.KEY_DOWN: InputEvent(EventKind.NAVIGATE, direction=Direction.DOWN),
    curses.KEY_ENTER: InputEvent(EventKind.ACTIVATE),
    ord("\n"): InputEvent(EventKind.ACTIVATE),
    ord("\r"): InputEvent(EventKind.ACTIVATE),
}


def decode_key(key: int) -> InputEvent | None:
    """Translate a curses key code. Unbound keys give None."""
    return _KEYMAP.get(key)


def dispatch(engine: GameEngine, event: InputEvent) -> bool:
    """Issue exactly one engine command for *event*.

    Returns False when the event asks the session to end.
    """
    if event.kind is EventKind.QUIT:
        return False
    if event.kind is EventKind.CLICK:
        engine.click()
    elif event.kind is EventKind.SAVE:
        engine.save()
    elif event.kind is EventKind.SELECT_MENU and event.menu is not None:
        engine.select_menu(event.menu)
    elif event.kind is EventKind.NAVIGATE and event.direction is not None:
        engine.navigate(event.direction)
    elif event.kind is EventKind.ACTIVATE:
        engine.activate_selection()
    return True
