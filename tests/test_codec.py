"""Tests for codec module."""
from dominion.building import BuildingKey
from dominion.catalog import define_game
from dominion.codec import decode, encode
from dominion.state import GameState, Menu


def _fresh() -> GameState:
    return GameState(define_game())


def _make_played_state() -> GameState:
    state = _fresh()
    state.points = 40
    state.lifetime_points = 1234
    state.click_power = 2
    state.buildings[BuildingKey.CURSOR].count = 3
    state.buildings[BuildingKey.FARM].count = 1
    state.upgrades[0].purchased = True
    state.upgrades[6].purchased = True
    state.production_remainder = 0.7
    return state


def test_encode_format():
    lines = encode(_make_played_state()).splitlines()
    assert lines[:3] == ["points:40", "lifetime:1234", "click_power:2"]
    assert "building:cursor:3:0.1" in lines
    assert "building:portal:0:1400.0" in lines
    assert "upgrade:0:true:necronomicon_pages" in lines
    assert "upgrade:1:false:eldritch_incantation" in lines
    assert len(lines) == 3 + 6 + 7


def test_encode_is_newline_terminated():
    assert encode(_fresh()).endswith("\n")


def test_round_trip():
    original = _make_played_state()
    restored = _fresh()
    decode(encode(original), restored)
    assert restored.points == original.points
    assert restored.lifetime_points == original.lifetime_points
    assert restored.click_power >= original.click_power
    assert {k: b.count for k, b in restored.buildings.items()} == {
        k: b.count for k, b in original.buildings.items()
    }
    assert [u.purchased for u in restored.upgrades] == [
        u.purchased for u in original.upgrades
    ]
    assert restored.production_remainder == 0.0


def test_round_trip_independent_of_line_order():
    original = _make_played_state()
    lines = encode(original).splitlines()
    restored = _fresh()
    decode("\n".join(reversed(lines)), restored)
    assert encode(restored) == encode(original)


def test_unknown_building_is_ignored():
    state = _fresh()
    decode("building:unknownkey:5:0.1\nbuilding:cursor:2:0.1\n", state)
    assert state.building_count(BuildingKey.CURSOR) == 2
    assert sum(b.count for b in state.buildings.values()) == 2


def test_catalog_production_wins():
    state = _fresh()
    decode("building:cursor:2:999.0\n", state)
    assert state.building_count(BuildingKey.CURSOR) == 2
    assert state.definition.get_building(BuildingKey.CURSOR).base_production == 0.1


def test_bad_field_only_drops_that_fact():
    state = _fresh()
    decode("points:abc\nlifetime:50\nbuilding:farm:x:8\nbuilding:mine:2:nope\n", state)
    assert state.points == 0
    assert state.lifetime_points == 50
    assert state.building_count(BuildingKey.FARM) == 0
    assert state.building_count(BuildingKey.MINE) == 0


def test_short_and_unknown_lines_are_skipped():
    state = _fresh()
    decode("points\nbuilding:cursor:5\nupgrade:0\nversion:2\n\nlifetime:9\n", state)
    assert state.building_count(BuildingKey.CURSOR) == 0
    assert not state.upgrades[0].purchased
    assert state.lifetime_points == 9


def test_negative_numbers_rejected():
    state = _fresh()
    decode("points:-5\nlifetime:-5\n", state)
    assert state.points == 0
    assert state.lifetime_points == 0


def test_upgrade_out_of_range_is_ignored():
    state = _fresh()
    decode("upgrade:99:true\nupgrade:2:true\n", state)
    assert [u.purchased for u in state.upgrades] == [
        False, False, True, False, False, False, False,
    ]


def test_upgrade_boolean_is_strict():
    state = _fresh()
    decode("upgrade:0:True\nupgrade:1:1\n", state)
    assert not any(u.purchased for u in state.upgrades)


def test_upgrade_stable_id_wins_over_index():
    state = _fresh()
    decode("upgrade:0:true:the_stars_are_right\n", state)
    assert state.upgrades[6].purchased
    assert not state.upgrades[0].purchased


def test_upgrade_unknown_id_falls_back_to_index():
    state = _fresh()
    decode("upgrade:3:true:renamed_upgrade\n", state)
    assert state.upgrades[3].purchased


def test_click_power_reapplied_upwards():
    state = _fresh()
    decode("lifetime:20000\nclick_power:1\n", state)
    assert state.click_power == 5


def test_click_power_never_lowered_on_load():
    state = _fresh()
    decode("lifetime:0\nclick_power:50\n", state)
    assert state.click_power == 50


def test_points_above_lifetime_are_repaired():
    state = _fresh()
    decode("points:500\nlifetime:100\n", state)
    assert state.points == 500
    assert state.lifetime_points == 500


def test_decode_replaces_previous_progress():
    state = _make_played_state()
    decode("points:3\nlifetime:3\n", state)
    assert state.points == 3
    assert state.building_count(BuildingKey.CURSOR) == 0
    assert not state.upgrades[0].purchased
    assert state.production_remainder == 0.0


def test_decode_bytes_with_garbage():
    state = _fresh()
    decode(b"points:7\r\n\xff\xfe:\x00\r\nlifetime:9\r\n", state)
    assert state.points == 7
    assert state.lifetime_points == 9


def test_decode_keeps_menu_and_clamps_selection():
    state = _fresh()
    state.current_menu = Menu.UPGRADES
    state.selected_index = 6
    decode("", state)
    assert state.current_menu is Menu.UPGRADES
    assert state.selected_index == 6
