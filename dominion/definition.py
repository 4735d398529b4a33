from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dominion.building import BuildingDef, BuildingKey
from dominion.effect import EffectType
from dominion.upgrade import UpgradeDef


@dataclass
class GameConfig:
    """Top-level game configuration."""

    name: str = "Untitled"
    tick_interval: float = 0.1
    autosave_interval: float = 30.0
    poll_interval: float = 0.1
    save_path: Path = field(default_factory=lambda: Path("saves") / "game.save")


@dataclass
class GameDefinition:
    """Complete static catalog of a game: buildings and upgrades."""

    config: GameConfig = field(default_factory=GameConfig)
    buildings: list[BuildingDef] = field(default_factory=list)
    upgrades: list[UpgradeDef] = field(default_factory=list)

    # Lookup dicts built in __post_init__
    _buildings_by_key: dict[BuildingKey, BuildingDef] = field(
        default_factory=dict, init=False, repr=False
    )
    _upgrade_index_by_id: dict[str, int] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._buildings_by_key = {b.key: b for b in self.buildings}
        self._upgrade_index_by_id = {u.id: i for i, u in enumerate(self.upgrades)}

    def get_building(self, key: BuildingKey) -> BuildingDef | None:
        return self._buildings_by_key.get(key)

    def upgrade_index(self, id: str) -> int | None:
        return self._upgrade_index_by_id.get(id)

    def validate(self) -> list[str]:
        """Check for common catalog errors. Returns list of error messages."""
        errors: list[str] = []

        seen_b: set[BuildingKey] = set()
        for b in self.buildings:
            if b.key in seen_b:
                errors.append(f"Duplicate building key: {b.key.value!r}")
            seen_b.add(b.key)
            if b.base_cost <= 0:
                errors.append(f"Building {b.key.value!r} must have a positive base cost")
            if b.base_production < 0:
                errors.append(
                    f"Building {b.key.value!r} has negative base production"
                )
            if b.cost_multiplier <= 1.0:
                errors.append(
                    f"Building {b.key.value!r} cost multiplier must be greater than 1.0"
                )

        seen_u: set[str] = set()
        for u in self.upgrades:
            if u.id in seen_u:
                errors.append(f"Duplicate upgrade ID: {u.id!r}")
            seen_u.add(u.id)
            if ":" in u.id:
                errors.append(f"Upgrade ID {u.id!r} must not contain ':'")
            if u.cost <= 0:
                errors.append(f"Upgrade {u.id!r} must have a positive cost")
            for eff in u.effects:
                if eff.type is EffectType.BUILDING_MULT and eff.target not in seen_b:
                    target = eff.target.value if eff.target else None
                    errors.append(
                        f"Upgrade {u.id!r} targets unknown building {target!r}"
                    )

        return errors
