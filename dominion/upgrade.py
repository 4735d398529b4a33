from __future__ import annotations

from dataclasses import dataclass, field

from dominion.effect import EffectDef


@dataclass
class UpgradeDef:
    """Static definition of a one-time purchasable modifier."""

    id: str
    display_name: str = ""
    description: str = ""
    cost: int = 1
    effects: list[EffectDef] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.id


@dataclass
class UpgradeState:
    """Mutable runtime state for an upgrade."""

    purchased: bool = False
