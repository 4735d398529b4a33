"""Tests for state module."""
from dominion.building import BuildingKey
from dominion.catalog import define_game
from dominion.state import GameState, Menu


def test_initialization():
    state = GameState(define_game())
    assert state.points == 0
    assert state.lifetime_points == 0
    assert state.click_power == 1
    assert state.current_menu is Menu.MAIN
    assert state.selected_index == 0
    assert state.production_remainder == 0.0
    assert set(state.buildings) == set(BuildingKey)
    assert len(state.upgrades) == 7
    assert not any(us.purchased for us in state.upgrades)


def test_building_count():
    state = GameState(define_game())
    assert state.building_count(BuildingKey.FARM) == 0
    state.buildings[BuildingKey.FARM].count = 4
    assert state.building_count(BuildingKey.FARM) == 4


def test_earn_updates_both_totals():
    state = GameState(define_game())
    state.earn(12)
    state.earn(0)
    assert state.points == 12
    assert state.lifetime_points == 12


def test_item_count_per_menu():
    state = GameState(define_game())
    assert state.item_count() == 0
    assert state.item_count(Menu.BUILDINGS) == 6
    assert state.item_count(Menu.UPGRADES) == 7


def test_clamp_selection():
    state = GameState(define_game())
    state.current_menu = Menu.UPGRADES
    state.selected_index = 42
    state.clamp_selection()
    assert state.selected_index == 6

    state.current_menu = Menu.MAIN
    state.clamp_selection()
    assert state.selected_index == 0
