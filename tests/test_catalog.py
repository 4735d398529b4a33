"""Tests for the built-in catalog."""
from dominion.building import BuildingKey
from dominion.catalog import define_game
from dominion.effect import EffectType


def test_catalog_is_valid():
    assert define_game().validate() == []


def test_catalog_contents():
    defn = define_game()
    assert [b.key for b in defn.buildings] == list(BuildingKey)
    assert len(defn.upgrades) == 7
    cursor = defn.get_building(BuildingKey.CURSOR)
    assert cursor.base_cost == 15
    assert cursor.base_production == 0.1
    assert cursor.cost_multiplier == 1.15


def test_final_upgrade_boosts_everything():
    defn = define_game()
    stars = defn.upgrades[-1]
    assert stars.display_name == "The Stars Are Right"
    types = {eff.type for eff in stars.effects}
    assert types == {EffectType.GLOBAL_MULT, EffectType.CLICK_MULT}


def test_upgrade_ids_resolve_to_index():
    defn = define_game()
    for i, udef in enumerate(defn.upgrades):
        assert defn.upgrade_index(udef.id) == i
    assert defn.upgrade_index("missing") is None
