"""Tests for pipeline module."""
import pytest

from dominion.building import BuildingKey
from dominion.effect import Effect
from dominion.pipeline import ProductionPipeline


def test_no_effects():
    p = ProductionPipeline()
    production = {BuildingKey.CURSOR: 0.5, BuildingKey.GRANDMA: 2.0}
    assert p.compute_rate(production, []) == pytest.approx(2.5)


def test_building_mult_only_hits_target():
    p = ProductionPipeline()
    production = {BuildingKey.CURSOR: 1.0, BuildingKey.GRANDMA: 10.0}
    effects = [Effect.building(BuildingKey.CURSOR, 2.0)]
    # 1 * 2 + 10
    assert p.compute_rate(production, effects) == pytest.approx(12.0)


def test_global_mult_applies_to_all():
    p = ProductionPipeline()
    production = {BuildingKey.CURSOR: 1.0, BuildingKey.GRANDMA: 10.0}
    effects = [Effect.all_buildings(3.0)]
    assert p.compute_rate(production, effects) == pytest.approx(33.0)


def test_global_and_specific_stack():
    p = ProductionPipeline()
    production = {BuildingKey.CURSOR: 1.0, BuildingKey.GRANDMA: 10.0}
    effects = [
        Effect.building(BuildingKey.CURSOR, 2.0),
        Effect.all_buildings(3.0),
        Effect.building(BuildingKey.CURSOR, 2.0),
    ]
    # cursor: 1 * 3 * 2 * 2 = 12, grandma: 10 * 3 = 30
    assert p.compute_rate(production, effects) == pytest.approx(42.0)


def test_click_effects_do_not_touch_production():
    p = ProductionPipeline()
    production = {BuildingKey.CURSOR: 1.0}
    assert p.compute_rate(production, [Effect.click(5.0)]) == pytest.approx(1.0)


def test_click_value():
    p = ProductionPipeline()
    effects = [Effect.click(2.0), Effect.click(5.0), Effect.all_buildings(2.0)]
    assert p.compute_click_value(3, effects) == pytest.approx(30.0)
