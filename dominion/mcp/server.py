"""MCP server wrapping GameEngine for interactive AI playtesting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from dominion.building import BuildingKey
from dominion.definition import GameDefinition
from dominion.engine import GameEngine

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum clicks per click() call
_MAX_CLICKS = 1000


@dataclass
class _GameHolder:
    """Holds the game definition and the engine currently being played."""

    definition: GameDefinition
    engine: GameEngine


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    defn = holder.definition
    return {
        "name": defn.config.name,
        "buildings": [
            {
                "key": b.key.value,
                "display_name": b.display_name,
                "description": b.description,
                "base_cost": b.base_cost,
                "base_production": b.base_production,
                "cost_multiplier": b.cost_multiplier,
            }
            for b in defn.buildings
        ],
        "upgrades": [
            {
                "index": i,
                "id": u.id,
                "display_name": u.display_name,
                "description": u.description,
                "cost": u.cost,
            }
            for i, u in enumerate(defn.upgrades)
        ],
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    snap = holder.engine.snapshot()
    next_milestone = None
    if snap.next_milestone is not None:
        next_milestone = {
            "lifetime_points": snap.next_milestone.lower_bound,
            "click_power": snap.next_milestone.value,
        }
    return {
        "points": snap.points,
        "lifetime_points": snap.lifetime_points,
        "click_power": snap.click_power,
        "click_yield": snap.click_yield,
        "production_per_second": round(snap.production_per_second, 4),
        "domination_tier": snap.domination_tier,
        "next_milestone": next_milestone,
        "buildings": {
            b.key.value: {
                "display_name": b.display_name,
                "count": b.count,
                "current_cost": b.current_cost,
                "affordable": b.affordable,
            }
            for b in snap.buildings
        },
        "upgrades": [
            {
                "index": u.index,
                "id": u.id,
                "purchased": u.purchased,
                "affordable": u.affordable,
            }
            for u in snap.upgrades
        ],
    }


def _tool_click(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    total = 0
    for _ in range(count):
        total += holder.engine.click()
    snap = holder.engine.snapshot()
    return {
        "clicks": count,
        "total_earned": total,
        "new_balance": snap.points,
        "click_power": snap.click_power,
    }


def _tool_buy_building(holder: _GameHolder, key: str) -> dict[str, Any]:
    building_key = BuildingKey.parse(key)
    if building_key is None or holder.definition.get_building(building_key) is None:
        return {"error": f"Unknown building: {key!r}"}

    if holder.engine.buy_building(building_key):
        snap = holder.engine.snapshot()
        status = next(b for b in snap.buildings if b.key is building_key)
        return {
            "success": True,
            "key": key,
            "new_count": status.count,
            "next_cost": status.current_cost,
            "points": snap.points,
        }
    return {"success": False, "reason": "Cannot afford"}


def _tool_buy_upgrade(holder: _GameHolder, index: int) -> dict[str, Any]:
    if not 0 <= index < len(holder.definition.upgrades):
        return {"error": f"Unknown upgrade index: {index}"}

    if holder.engine.buy_upgrade(index):
        return {
            "success": True,
            "id": holder.definition.upgrades[index].id,
            "points": holder.engine.snapshot().points,
        }
    if holder.engine.snapshot().upgrades[index].purchased:
        return {"success": False, "reason": "Already purchased"}
    return {"success": False, "reason": "Cannot afford"}


def _tool_wait(holder: _GameHolder, seconds: float) -> dict[str, Any]:
    if not math.isfinite(seconds):
        return {"error": "Seconds must be a finite number"}
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    earned = holder.engine.apply_production_tick(seconds)
    snap = holder.engine.snapshot()
    return {
        "waited": seconds,
        "earned": earned,
        "points": snap.points,
        "production_per_second": round(snap.production_per_second, 4),
    }


def _tool_save_game(holder: _GameHolder) -> dict[str, Any]:
    return {
        "success": holder.engine.save(),
        "path": str(holder.definition.config.save_path),
    }


def _tool_load_game(holder: _GameHolder) -> dict[str, Any]:
    return {
        "success": holder.engine.load(),
        "path": str(holder.definition.config.save_path),
    }


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.engine = GameEngine(holder.definition)
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(definition: GameDefinition) -> FastMCP:
    """Create an MCP server wrapping a GameEngine for the given catalog.

    Time only advances through wait(); no background threads are started.
    """
    holder = _GameHolder(
        definition=definition,
        engine=GameEngine(definition),
    )

    mcp = FastMCP(
        name=f"Dominion: {definition.config.name}",
    )

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get the static catalog: buildings and upgrades with their costs."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current state: points, production/sec, click power, counts, upgrades."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def click(count: int = 1) -> dict[str, Any]:
        """Perform the manual action N times (max 1000). Returns total earned."""
        return _tool_click(holder, count)

    @mcp.tool()
    def buy_building(key: str) -> dict[str, Any]:
        """Buy one unit of a building by key. Returns success/failure with reason."""
        return _tool_buy_building(holder, key)

    @mcp.tool()
    def buy_upgrade(index: int) -> dict[str, Any]:
        """Buy the upgrade at a catalog index. Returns success/failure with reason."""
        return _tool_buy_upgrade(holder, index)

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance game time by the given seconds (max 86400)."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def save_game() -> dict[str, Any]:
        """Write the current game to the save file."""
        return _tool_save_game(holder)

    @mcp.tool()
    def load_game() -> dict[str, Any]:
        """Replace the current game with the contents of the save file."""
        return _tool_load_game(holder)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
