from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dominion.cost_scaling import CostScaling


class BuildingKey(str, Enum):
    """Stable identifiers of every building in the catalog.

    The values are the tokens written to save files.
    """

    CURSOR = "cursor"
    GRANDMA = "grandma"
    FARM = "farm"
    MINE = "mine"
    TEMPLE = "temple"
    PORTAL = "portal"

    @classmethod
    def parse(cls, token: str) -> BuildingKey | None:
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass
class BuildingDef:
    """Static definition of a purchasable production source."""

    key: BuildingKey
    display_name: str = ""
    description: str = ""
    base_cost: int = 1
    base_production: float = 0.0
    cost_scaling: CostScaling = field(default_factory=CostScaling.exponential)

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.key.value

    @property
    def cost_multiplier(self) -> float:
        return self.cost_scaling.growth_rate


@dataclass
class BuildingState:
    """Mutable runtime state for a building."""

    count: int = 0
