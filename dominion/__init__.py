# dominion — Cthulhu's Dominion, an incremental game for the terminal

from dominion.cost_scaling import CostScaling
from dominion.effect import EffectType, EffectDef, Effect
from dominion.building import BuildingKey, BuildingDef, BuildingState
from dominion.upgrade import UpgradeDef, UpgradeState
from dominion.definition import GameDefinition, GameConfig
from dominion.catalog import define_game
from dominion.state import GameState, Menu, Direction
from dominion.pipeline import ProductionPipeline
from dominion.progression import (
    Band,
    CLICK_POWER_BANDS,
    DOMINATION_BANDS,
    click_power_tier,
    domination_tier,
    next_click_power_milestone,
    apply_click_power_progression,
)
from dominion.snapshot import GameSnapshot, BuildingStatus, UpgradeStatus, take_snapshot
from dominion.codec import encode, decode
from dominion.persistence import save_game, load_game
from dominion.engine import GameEngine

__all__ = [
    # Cost
    "CostScaling",
    # Effects
    "EffectType",
    "EffectDef",
    "Effect",
    # Data model
    "BuildingKey",
    "BuildingDef",
    "BuildingState",
    "UpgradeDef",
    "UpgradeState",
    # Definition
    "GameDefinition",
    "GameConfig",
    "define_game",
    # State
    "GameState",
    "Menu",
    "Direction",
    # Pipeline
    "ProductionPipeline",
    # Progression
    "Band",
    "CLICK_POWER_BANDS",
    "DOMINATION_BANDS",
    "click_power_tier",
    "domination_tier",
    "next_click_power_milestone",
    "apply_click_power_progression",
    # Snapshots
    "GameSnapshot",
    "BuildingStatus",
    "UpgradeStatus",
    "take_snapshot",
    # Persistence
    "encode",
    "decode",
    "save_game",
    "load_game",
    # Engine
    "GameEngine",
]
