"""Pure economic rules: costs, production, click yield and purchases.

Every function takes the state it reads explicitly. Purchases report
rejection by returning False and leave the state untouched.
"""
from __future__ import annotations

import math

from dominion.building import BuildingDef, BuildingKey
from dominion.effect import EffectDef
from dominion.pipeline import ProductionPipeline
from dominion.state import GameState

_pipeline = ProductionPipeline()


def current_cost(building: BuildingDef, count: int) -> int:
    """Cost of the next unit given *count* already owned."""
    return building.cost_scaling.compute(building.base_cost, count)


def total_production(building: BuildingDef, count: int) -> float:
    """Unscaled production of *count* units, per second."""
    return building.base_production * count


def purchased_effects(state: GameState) -> list[EffectDef]:
    effects: list[EffectDef] = []
    for udef, us in zip(state.definition.upgrades, state.upgrades):
        if us.purchased:
            effects.extend(udef.effects)
    return effects


def building_cost(state: GameState, key: BuildingKey) -> int | None:
    bdef = state.definition.get_building(key)
    if bdef is None:
        return None
    return current_cost(bdef, state.building_count(key))


def building_multiplier(state: GameState, key: BuildingKey) -> float:
    effects = purchased_effects(state)
    return _pipeline.building_multiplier(
        key, effects, _pipeline.global_multiplier(effects)
    )


def production_per_second(state: GameState) -> float:
    production = {
        bdef.key: total_production(bdef, state.building_count(bdef.key))
        for bdef in state.definition.buildings
    }
    return _pipeline.compute_rate(production, purchased_effects(state))


def click_yield(state: GameState) -> int:
    value = _pipeline.compute_click_value(state.click_power, purchased_effects(state))
    # Truncate once, after every multiplier has been combined
    return math.floor(value)


def buy_building(state: GameState, key: BuildingKey) -> bool:
    cost = building_cost(state, key)
    if cost is None or state.points < cost:
        return False
    state.points -= cost
    state.buildings[key].count += 1
    return True


def buy_upgrade(state: GameState, index: int) -> bool:
    if not 0 <= index < len(state.upgrades):
        return False
    us = state.upgrades[index]
    cost = state.definition.upgrades[index].cost
    if us.purchased or state.points < cost:
        return False
    state.points -= cost
    us.purchased = True
    return True


def buildings_by_cost(state: GameState) -> list[BuildingDef]:
    """Buildings ordered by current cost, ties broken by key."""
    return sorted(
        state.definition.buildings,
        key=lambda b: (current_cost(b, state.building_count(b.key)), b.key.value),
    )
