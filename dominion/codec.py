"""Line-oriented text encoding of a GameState.

One fact per line, ``tag:field:field...``::

    points:<int>
    lifetime:<int>
    click_power:<int>
    building:<key>:<count>:<base_production>
    upgrade:<index>:<true|false>:<id>

Decoding never fails as a whole: unknown tags, short lines and fields that
do not parse are skipped one line at a time.
"""
from __future__ import annotations

import logging

from dominion import progression
from dominion.building import BuildingKey
from dominion.state import GameState

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1


def _parse_u64(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise ValueError(f"out of range: {text!r}")
    return value


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def encode(state: GameState) -> str:
    """Serialise every persisted fact of *state*. Always writes every field."""
    definition = state.definition
    lines = [
        f"points:{state.points}",
        f"lifetime:{state.lifetime_points}",
        f"click_power:{state.click_power}",
    ]
    for bdef in definition.buildings:
        count = state.building_count(bdef.key)
        lines.append(f"building:{bdef.key.value}:{count}:{bdef.base_production!r}")
    for i, (udef, us) in enumerate(zip(definition.upgrades, state.upgrades)):
        lines.append(f"upgrade:{i}:{_format_bool(us.purchased)}:{udef.id}")
    return "".join(line + "\n" for line in lines)


def decode(data: str | bytes, state: GameState) -> None:
    """Replace the persisted facts of *state* with those found in *data*.

    Facts missing from *data* fall back to a fresh game. Menu and selection
    are kept. Afterwards the production remainder is zero and click power has
    been re-derived from lifetime points (upwards only).
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    fresh = GameState(state.definition)
    for line_no, line in enumerate(data.splitlines(), start=1):
        try:
            _apply_line(fresh, line)
        except ValueError as exc:
            logger.debug("Skipping save line %d %r: %s", line_no, line, exc)

    state.points = fresh.points
    state.lifetime_points = max(fresh.lifetime_points, fresh.points)
    state.click_power = fresh.click_power
    state.buildings = fresh.buildings
    state.upgrades = fresh.upgrades
    state.production_remainder = 0.0
    progression.apply_click_power_progression(state)
    state.clamp_selection()


def _apply_line(state: GameState, line: str) -> None:
    parts = line.split(":")
    if len(parts) < 2:
        return

    tag = parts[0]
    if tag == "points":
        state.points = _parse_u64(parts[1])
    elif tag == "lifetime":
        state.lifetime_points = _parse_u64(parts[1])
    elif tag == "click_power":
        state.click_power = _parse_u64(parts[1])
    elif tag == "building":
        if len(parts) < 4:
            return
        count = _parse_u64(parts[2])
        # Stored production is informational only; the catalog value wins.
        float(parts[3])
        key = BuildingKey.parse(parts[1])
        if key is not None and key in state.buildings:
            state.buildings[key].count = count
    elif tag == "upgrade":
        if len(parts) < 3:
            return
        index = _parse_u64(parts[1])
        purchased = _parse_bool(parts[2])
        if len(parts) >= 4:
            by_id = state.definition.upgrade_index(parts[3])
            if by_id is not None:
                index = by_id
        if index < len(state.upgrades):
            state.upgrades[index].purchased = purchased
