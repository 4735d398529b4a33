from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from dominion.building import BuildingKey, BuildingState
from dominion.upgrade import UpgradeState

if TYPE_CHECKING:
    from dominion.definition import GameDefinition


class Menu(Enum):
    MAIN = 1
    BUILDINGS = 2
    UPGRADES = 3


class Direction(IntEnum):
    UP = -1
    DOWN = 1


class GameState:
    """Mutable runtime container holding all game state."""

    def __init__(self, definition: GameDefinition) -> None:
        self.definition = definition
        self.points: int = 0
        self.lifetime_points: int = 0
        self.click_power: int = 1
        self.buildings: dict[BuildingKey, BuildingState] = {
            bdef.key: BuildingState() for bdef in definition.buildings
        }
        self.upgrades: list[UpgradeState] = [UpgradeState() for _ in definition.upgrades]
        self.current_menu: Menu = Menu.MAIN
        self.selected_index: int = 0
        self.production_remainder: float = 0.0

    def building_count(self, key: BuildingKey) -> int:
        bs = self.buildings.get(key)
        return bs.count if bs else 0

    def earn(self, amount: int) -> None:
        """Credit currency to both the spendable and lifetime totals."""
        if amount > 0:
            self.points += amount
            self.lifetime_points += amount

    def item_count(self, menu: Menu | None = None) -> int:
        menu = menu or self.current_menu
        if menu is Menu.BUILDINGS:
            return len(self.buildings)
        if menu is Menu.UPGRADES:
            return len(self.upgrades)
        return 0

    def clamp_selection(self) -> None:
        last = self.item_count() - 1
        self.selected_index = max(0, min(self.selected_index, last))
