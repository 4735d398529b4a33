from __future__ import annotations

from dataclasses import dataclass

from dominion import economy, progression
from dominion.building import BuildingKey
from dominion.progression import Band
from dominion.state import GameState, Menu


@dataclass(frozen=True)
class BuildingStatus:
    """Read-only projection of one building, for display."""

    key: BuildingKey
    display_name: str
    description: str
    count: int
    current_cost: int
    production: float
    effective_production: float
    affordable: bool


@dataclass(frozen=True)
class UpgradeStatus:
    """Read-only projection of one upgrade, for display."""

    index: int
    id: str
    display_name: str
    description: str
    cost: int
    purchased: bool
    affordable: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Consistent copy of the game state taken under the engine lock."""

    title: str
    points: int
    lifetime_points: int
    click_power: int
    click_yield: int
    production_per_second: float
    domination_tier: str
    next_milestone: Band[int] | None
    current_menu: Menu
    selected_index: int
    buildings: tuple[BuildingStatus, ...]
    upgrades: tuple[UpgradeStatus, ...]


def take_snapshot(state: GameState) -> GameSnapshot:
    """Copy out everything an adapter needs. Caller must hold the lock."""
    buildings = []
    for bdef in economy.buildings_by_cost(state):
        count = state.building_count(bdef.key)
        cost = economy.current_cost(bdef, count)
        production = economy.total_production(bdef, count)
        buildings.append(
            BuildingStatus(
                key=bdef.key,
                display_name=bdef.display_name,
                description=bdef.description,
                count=count,
                current_cost=cost,
                production=production,
                effective_production=production
                * economy.building_multiplier(state, bdef.key),
                affordable=state.points >= cost,
            )
        )

    upgrades = []
    for i, (udef, us) in enumerate(zip(state.definition.upgrades, state.upgrades)):
        upgrades.append(
            UpgradeStatus(
                index=i,
                id=udef.id,
                display_name=udef.display_name,
                description=udef.description,
                cost=udef.cost,
                purchased=us.purchased,
                affordable=not us.purchased and state.points >= udef.cost,
            )
        )

    return GameSnapshot(
        title=state.definition.config.name,
        points=state.points,
        lifetime_points=state.lifetime_points,
        click_power=state.click_power,
        click_yield=economy.click_yield(state),
        production_per_second=economy.production_per_second(state),
        domination_tier=progression.domination_tier(state.lifetime_points),
        next_milestone=progression.next_click_power_milestone(state.lifetime_points),
        current_menu=state.current_menu,
        selected_index=state.selected_index,
        buildings=tuple(buildings),
        upgrades=tuple(upgrades),
    )
